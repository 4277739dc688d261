# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Combine a skill body and its reference files into one document."""

from __future__ import annotations

from collections.abc import Sequence

from promptshelf.core.constants import REFERENCE_HEADING, SECTION_SEPARATOR
from promptshelf.models.content import ReferenceFile


def assemble(body: str, references: Sequence[ReferenceFile]) -> str:
    """Append each reference, in order, under a ``## Reference: <name>`` heading.

    With no references the trimmed body is returned as is.
    """
    if not references:
        return body.strip()

    sections = [body.strip(), ""]
    for ref in references:
        sections.extend(
            [
                SECTION_SEPARATOR,
                "",
                REFERENCE_HEADING.format(name=ref.section_name),
                "",
                ref.content.strip(),
                "",
            ]
        )
    return "\n".join(sections).strip()
