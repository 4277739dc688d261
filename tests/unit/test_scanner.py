# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for skill/prompt discovery and reference collection."""

from __future__ import annotations

from pathlib import Path

from promptshelf.content.scanner import (
    UnitPath,
    collect_reference_paths,
    scan_unit_dirs,
    scan_unit_files,
)


def _touch(path: Path, text: str = "x") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


class TestScanUnitDirs:
    def test_missing_root_is_empty(self, tmp_path: Path) -> None:
        assert scan_unit_dirs(tmp_path / "nope") == []

    def test_only_dirs_with_entry_file(self, content_root: Path) -> None:
        assert scan_unit_dirs(content_root / "skills") == ["example", "referenced"]

    def test_sorted_and_ignores_loose_files(self, tmp_path: Path) -> None:
        for name in ("zeta", "alpha", "Mid"):
            _touch(tmp_path / name / "SKILL.md")
        _touch(tmp_path / "SKILL.md")

        assert scan_unit_dirs(tmp_path) == ["Mid", "alpha", "zeta"]

    def test_custom_entry_name(self, tmp_path: Path) -> None:
        _touch(tmp_path / "one" / "ENTRY.md")
        _touch(tmp_path / "two" / "SKILL.md")

        assert scan_unit_dirs(tmp_path, entry="ENTRY.md") == ["one"]


class TestScanUnitFiles:
    def test_missing_root_is_empty(self, tmp_path: Path) -> None:
        assert scan_unit_files(tmp_path / "nope") == []

    def test_excludes_index_and_reserved_dir(self, content_root: Path) -> None:
        units = scan_unit_files(content_root / "docs")

        assert units == [
            UnitPath(category="", slug="getting-started"),
            UnitPath(category="review", slug="pr-review"),
            UnitPath(category="testing", slug="unit-tests"),
        ]

    def test_nested_categories(self, tmp_path: Path) -> None:
        _touch(tmp_path / "a" / "b" / "deep.mdx")
        _touch(tmp_path / "a" / "shallow.mdx")

        units = scan_unit_files(tmp_path)

        assert [u.slug_path for u in units] == ["a/shallow", "a/b/deep"]
        assert units[1].category == "a/b"

    def test_reserved_dir_only_at_top_level(self, tmp_path: Path) -> None:
        _touch(tmp_path / "skills" / "top.mdx")
        _touch(tmp_path / "guides" / "skills" / "nested.mdx")

        units = scan_unit_files(tmp_path)

        assert units == [UnitPath(category="guides/skills", slug="nested")]

    def test_other_extensions_ignored(self, tmp_path: Path) -> None:
        _touch(tmp_path / "cat" / "one.mdx")
        _touch(tmp_path / "cat" / "two.md")
        _touch(tmp_path / "cat" / "three.mdx.bak")

        assert [u.slug for u in scan_unit_files(tmp_path)] == ["one"]

    def test_sort_is_by_category_then_slug(self, tmp_path: Path) -> None:
        _touch(tmp_path / "b" / "a.mdx")
        _touch(tmp_path / "a" / "z.mdx")
        _touch(tmp_path / "a" / "b.mdx")

        units = scan_unit_files(tmp_path)

        assert [u.slug_path for u in units] == ["a/b", "a/z", "b/a"]
        assert units == sorted(units)


class TestCollectReferencePaths:
    def test_missing_dir_is_empty(self, tmp_path: Path) -> None:
        assert collect_reference_paths(tmp_path / "references") == []

    def test_recursive_sorted_forward_slashes(self, content_root: Path) -> None:
        refs_dir = content_root / "skills" / "referenced" / "references"
        found = collect_reference_paths(refs_dir)

        assert [rel for rel, _ in found] == ["a.md", "b/c.md"]
        assert found[1][1] == refs_dir / "b" / "c.md"

    def test_plain_string_ordering(self, tmp_path: Path) -> None:
        for rel in ("b.md", "a/z.md", "C.md", "a.md"):
            _touch(tmp_path / rel)

        rels = [rel for rel, _ in collect_reference_paths(tmp_path)]

        assert rels == ["C.md", "a.md", "a/z.md", "b.md"]
