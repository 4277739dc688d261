# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plain-text concatenation of every prompt for LLM ingestion."""

from __future__ import annotations

from collections.abc import Sequence

from promptshelf.core.constants import CORPUS_TITLE
from promptshelf.models.content import PromptContent


def _attr(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def build_prompt_corpus(prompts: Sequence[PromptContent]) -> str:
    """Wrap each prompt in a ``<source url=.. category=.. slug=..>`` block."""
    lines = [
        CORPUS_TITLE,
        "",
        "> All prompts concatenated for LLM ingestion.",
        "> See /api/prompts for the JSON catalog.",
        "",
    ]
    for prompt in prompts:
        lines.extend(
            [
                f'<source url="{_attr(prompt.url)}" category="{_attr(prompt.category)}"'
                f' slug="{_attr(prompt.slug)}">',
                prompt.content.strip(),
                "</source>",
                "",
            ]
        )
    return "\n".join(lines)
