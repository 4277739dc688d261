# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for skill document assembly."""

from __future__ import annotations

from promptshelf.content.assembler import assemble
from promptshelf.models.content import ReferenceFile

BODY = "# Example\nDoes X"


class TestAssemble:
    def test_no_references_returns_trimmed_body(self) -> None:
        assert assemble("\n  # Example\nDoes X\n\n", []) == "# Example\nDoes X"

    def test_references_in_order_with_separators(self) -> None:
        refs = [
            ReferenceFile(relative_path="a.md", content="Hello\n"),
            ReferenceFile(relative_path="b/c.md", content="\n  World  \n"),
        ]

        result = assemble(BODY, refs)

        assert result == (
            "# Example\nDoes X\n"
            "\n"
            "---\n\n## Reference: a\n\nHello\n"
            "\n"
            "---\n\n## Reference: b/c\n\nWorld"
        )

    def test_idempotent(self) -> None:
        refs = [ReferenceFile(relative_path="guide.md", content="Guide")]

        assert assemble(BODY, refs) == assemble(BODY, refs)

    def test_body_whitespace_does_not_leak_between_sections(self) -> None:
        refs = [ReferenceFile(relative_path="a.md", content="Hello")]

        result = assemble(BODY + "\n\n\n", refs)

        assert "Does X\n\n---" in result
        assert "\n\n\n" not in result

    def test_only_trailing_extension_is_removed(self) -> None:
        refs = [ReferenceFile(relative_path="v1.2/notes.draft.md", content="N")]

        assert "## Reference: v1.2/notes.draft" in assemble(BODY, refs)


class TestReferenceFile:
    def test_section_name_without_extension(self) -> None:
        ref = ReferenceFile(relative_path="dir.v2/README", content="")
        assert ref.section_name == "dir.v2/README"

    def test_section_name_strips_md(self) -> None:
        ref = ReferenceFile(relative_path="b/c.md", content="")
        assert ref.section_name == "b/c"
