# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse the ``---``-delimited header of SKILL.md and prompt files.

Parsing is permissive: a missing, empty or unterminated header block is
treated as "no header" and the whole input becomes the body.
"""

from __future__ import annotations

from dataclasses import dataclass

import yaml

from promptshelf.core.constants import FRONTMATTER_DELIMITER, SECTION_SEPARATOR

_KNOWN_KEYS = ("name", "description")


@dataclass(frozen=True, slots=True)
class Frontmatter:
    name: str
    description: str
    body: str
    raw_header: dict[str, object] | None = None


@dataclass(frozen=True, slots=True)
class Header:
    title: str
    description: str


def _find_header_end(lines: list[str]) -> int | None:
    """Return the index of the closing delimiter line, if the text has a header.

    The closing delimiter must end with a newline; a ``---`` on the very last
    line of the input does not close the block.
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return None
    for idx in range(1, len(lines) - 1):
        if lines[idx].rstrip() == FRONTMATTER_DELIMITER:
            return idx
    return None


def _scan_keys(header_lines: list[str]) -> tuple[dict[str, str], dict[str, str]]:
    """Line-wise ``key: value`` scan.

    Returns the known keys and every ``key: value`` pair seen. Later lines
    override earlier ones.
    """
    known: dict[str, str] = {}
    pairs: dict[str, str] = {}
    for line in header_lines:
        for key in _KNOWN_KEYS:
            if line.startswith(f"{key}:"):
                known[key] = line[len(key) + 1 :].strip()
        key, sep, value = line.partition(":")
        if sep and key.strip() and not line[0].isspace():
            pairs[key.strip()] = value.strip()
    return known, pairs


def _load_raw_header(block: str, fallback: dict[str, str]) -> dict[str, object]:
    try:
        loaded = yaml.safe_load(block)
    except yaml.YAMLError:
        return dict(fallback)
    if isinstance(loaded, dict):
        return {str(k): v for k, v in loaded.items()}
    return dict(fallback)


def parse_frontmatter(text: str) -> Frontmatter:
    """Split *text* into its ``name``/``description`` header and body.

    Without a complete delimiter block ``name`` and ``description`` are empty
    and ``body`` is *text* unchanged.
    """
    lines = text.split("\n")
    end = _find_header_end(lines)
    if end is None:
        return Frontmatter(name="", description="", body=text)

    header_lines = lines[1:end]
    known, pairs = _scan_keys(header_lines)
    body = "\n".join(lines[end + 1 :]).strip()

    return Frontmatter(
        name=known.get("name", ""),
        description=known.get("description", ""),
        body=body,
        raw_header=_load_raw_header("\n".join(header_lines), pairs),
    )


def extract_header(body: str) -> Header:
    """Find the first ``# `` title and the first plain line after it."""
    title = ""
    description = ""
    for raw_line in body.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if not title:
            if line.startswith("# "):
                title = line[2:].strip()
            continue
        if line.startswith("#") or line.startswith(SECTION_SEPARATOR):
            continue
        description = line
        break
    return Header(title=title, description=description)
