# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Discover skills, prompts and reference files on disk.

Relative paths are built with ``/`` separators regardless of the host OS so
that sort order and generated names are platform independent. A missing
root is never an error.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Collection
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("promptshelf.content.scanner")


@dataclass(frozen=True, slots=True, order=True)
class UnitPath:
    """A file-mode content unit: ``<category>/<slug>`` relative to the root."""

    category: str
    slug: str

    @property
    def slug_path(self) -> str:
        return f"{self.category}/{self.slug}" if self.category else self.slug


def scan_unit_dirs(root: Path, entry: str = "SKILL.md") -> list[str]:
    """Directory mode: names of child directories that directly contain *entry*."""
    if not root.is_dir():
        logger.debug("Content root %s does not exist", root)
        return []
    return sorted(
        child.name
        for child in root.iterdir()
        if child.is_dir() and (child / entry).is_file()
    )


def _walk_files(root: Path) -> list[tuple[str, Path]]:
    """Every file under *root* as ``(relative/posix/path, absolute path)``."""
    found: list[tuple[str, Path]] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        rel_dir = base.relative_to(root).as_posix()
        for filename in filenames:
            rel = filename if rel_dir == "." else f"{rel_dir}/{filename}"
            found.append((rel, base / filename))
    return found


def scan_unit_files(
    root: Path,
    suffix: str = ".mdx",
    reserved_names: Collection[str] = ("index.mdx",),
    reserved_dirs: Collection[str] = ("skills",),
) -> list[UnitPath]:
    """File mode: every ``*<suffix>`` file below *root*, sorted by (category, slug).

    Files named in *reserved_names* and anything under a top-level directory
    named in *reserved_dirs* are skipped.
    """
    if not root.is_dir():
        logger.debug("Content root %s does not exist", root)
        return []

    units: set[UnitPath] = set()
    for rel, path in _walk_files(root):
        if not rel.endswith(suffix) or path.name in reserved_names:
            continue
        segments = rel[: -len(suffix)].split("/")
        if len(segments) > 1 and segments[0] in reserved_dirs:
            continue
        units.add(UnitPath(category="/".join(segments[:-1]), slug=segments[-1]))
    return sorted(units)


def collect_reference_paths(refs_dir: Path, suffix: str = ".md") -> list[tuple[str, Path]]:
    """Every ``*<suffix>`` file below *refs_dir*, sorted by relative path."""
    if not refs_dir.is_dir():
        return []
    return sorted(
        (rel, path) for rel, path in _walk_files(refs_dir) if rel.endswith(suffix)
    )
