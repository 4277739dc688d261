# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from pathlib import Path

import pytest

EXAMPLE_SKILL = """\
---
name: example
description: Does X
---
# Example
Does X
"""

REFERENCED_SKILL = """\
---
name: referenced
description: Has references
---
# Referenced
Uses reference files.
"""

PR_REVIEW_PROMPT = "# PR Review\nReview pull requests.\n"

UNIT_TESTS_PROMPT = """\
---
name: Unit Tests
description: Write unit tests.
---
Body text without a heading.
"""


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A content tree with two skills and three listable prompts."""
    root = tmp_path / "content"

    write_file(root / "skills" / "example" / "SKILL.md", EXAMPLE_SKILL)
    write_file(root / "skills" / "referenced" / "SKILL.md", REFERENCED_SKILL)
    write_file(root / "skills" / "referenced" / "references" / "a.md", "Hello\n")
    write_file(root / "skills" / "referenced" / "references" / "b" / "c.md", "World\n")
    write_file(root / "skills" / "referenced" / "references" / "notes.txt", "not markdown")
    write_file(root / "skills" / "draft" / "README.md", "no SKILL.md here")

    docs = root / "docs"
    write_file(docs / "review" / "pr-review.mdx", PR_REVIEW_PROMPT)
    write_file(docs / "review" / "index.mdx", "# Review\n")
    write_file(docs / "testing" / "unit-tests.mdx", UNIT_TESTS_PROMPT)
    write_file(docs / "getting-started.mdx", "# Getting Started\n\nStart here.\n")
    write_file(docs / "index.mdx", "# Home\n")
    write_file(docs / "skills" / "hidden.mdx", "# Hidden\n")
    return root


@pytest.fixture
def archives_dir(tmp_path: Path) -> Path:
    return tmp_path / "archives"


@pytest.fixture
def env_settings(content_root: Path, archives_dir: Path, monkeypatch) -> Path:
    """Point PROMPTSHELF_* settings at the temporary content tree."""
    monkeypatch.setenv("PROMPTSHELF_CONTENT_ROOT", str(content_root))
    monkeypatch.setenv("PROMPTSHELF_ARCHIVES_DIR", str(archives_dir))
    return content_root


@pytest.fixture(autouse=True)
def _clear_cache():
    """Reset the catalog cache singleton between tests."""
    from promptshelf.cache.manager import reset_catalog_cache

    reset_catalog_cache()
    yield
    reset_catalog_cache()
