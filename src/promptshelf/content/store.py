# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Content stores: where skill and prompt text comes from.

:class:`FilesystemStore` reads the source-controlled content tree rooted at
an explicit path; :class:`MemoryStore` serves the same interface from dicts
and is used by tests and ad-hoc tooling.
"""

from __future__ import annotations

import abc
import hashlib
import logging
import os
from collections.abc import Mapping
from pathlib import Path

import aiofiles

from promptshelf.content.scanner import (
    UnitPath,
    collect_reference_paths,
    scan_unit_dirs,
    scan_unit_files,
)
from promptshelf.core.config import Settings
from promptshelf.models.content import ReferenceFile

logger = logging.getLogger("promptshelf.content.store")


def is_safe_identifier(value: str, *, allow_slash: bool = False) -> bool:
    """Reject identifiers that could escape the content root."""
    if not value or "\\" in value or "\x00" in value or value.startswith("/"):
        return False
    segments = value.split("/")
    if len(segments) > 1 and not allow_slash:
        return False
    return all(seg and seg not in (".", "..") for seg in segments)


def split_slug_path(slug_path: str) -> UnitPath:
    category, _, slug = slug_path.rpartition("/")
    return UnitPath(category=category, slug=slug)


async def _read_text(path: Path) -> str | None:
    try:
        async with aiofiles.open(path, encoding="utf-8") as fh:
            return await fh.read()
    except FileNotFoundError:
        logger.debug("File vanished before it could be read: %s", path)
        return None


class ContentStore(abc.ABC):
    """Read-only access to skills, their references, and prompts."""

    @abc.abstractmethod
    def list_skill_slugs(self) -> list[str]:
        """Sorted slugs of every skill."""

    @abc.abstractmethod
    async def read_skill(self, slug: str) -> str | None:
        """Raw SKILL.md text, or ``None`` if the skill does not exist."""

    @abc.abstractmethod
    async def list_references(self, slug: str) -> list[ReferenceFile]:
        """Reference files of a skill, sorted by relative path."""

    @abc.abstractmethod
    def list_prompt_paths(self) -> list[UnitPath]:
        """Every prompt, sorted by (category, slug)."""

    @abc.abstractmethod
    async def read_prompt(self, slug_path: str) -> str | None:
        """Raw prompt text, or ``None`` if the prompt does not exist."""

    @abc.abstractmethod
    def skill_dir(self, slug: str) -> Path | None:
        """On-disk directory of a skill, when the store has one."""

    @abc.abstractmethod
    def fingerprint(self) -> str:
        """A digest that changes whenever any skill file changes."""


class FilesystemStore(ContentStore):
    """Serve content from a directory tree.

    Args:
        skills_dir: Directory holding one sub-directory per skill.
        prompts_dir: Directory scanned recursively for prompt files.
    """

    def __init__(
        self,
        skills_dir: Path,
        prompts_dir: Path,
        *,
        skill_entry: str = "SKILL.md",
        references_subdir: str = "references",
        reference_suffix: str = ".md",
        prompt_suffix: str = ".mdx",
        reserved_prompt_names: tuple[str, ...] = ("index.mdx",),
        reserved_prompt_dirs: tuple[str, ...] = ("skills",),
    ) -> None:
        self.skills_dir = skills_dir
        self.prompts_dir = prompts_dir
        self.skill_entry = skill_entry
        self.references_subdir = references_subdir
        self.reference_suffix = reference_suffix
        self.prompt_suffix = prompt_suffix
        self.reserved_prompt_names = reserved_prompt_names
        self.reserved_prompt_dirs = reserved_prompt_dirs

    @classmethod
    def from_settings(cls, settings: Settings) -> FilesystemStore:
        return cls(
            settings.skills_dir,
            settings.prompts_dir,
            skill_entry=settings.skill_entry,
            references_subdir=settings.references_subdir,
            reference_suffix=settings.reference_suffix,
            prompt_suffix=settings.prompt_suffix,
            reserved_prompt_names=tuple(settings.reserved_prompt_names),
            reserved_prompt_dirs=tuple(settings.reserved_prompt_dirs),
        )

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def list_skill_slugs(self) -> list[str]:
        return scan_unit_dirs(self.skills_dir, self.skill_entry)

    def skill_dir(self, slug: str) -> Path | None:
        if not is_safe_identifier(slug):
            return None
        path = self.skills_dir / slug
        if not (path / self.skill_entry).is_file():
            return None
        return path

    async def read_skill(self, slug: str) -> str | None:
        path = self.skill_dir(slug)
        if path is None:
            return None
        return await _read_text(path / self.skill_entry)

    async def list_references(self, slug: str) -> list[ReferenceFile]:
        path = self.skill_dir(slug)
        if path is None:
            return []
        refs: list[ReferenceFile] = []
        for rel, ref_path in collect_reference_paths(
            path / self.references_subdir, self.reference_suffix
        ):
            text = await _read_text(ref_path)
            if text is not None:
                refs.append(ReferenceFile(relative_path=rel, content=text))
        return refs

    def fingerprint(self) -> str:
        digest = hashlib.sha256()
        if self.skills_dir.is_dir():
            entries = []
            for dirpath, _dirnames, filenames in os.walk(self.skills_dir):
                for filename in filenames:
                    path = Path(dirpath) / filename
                    try:
                        st = path.stat()
                    except FileNotFoundError:
                        continue
                    rel = path.relative_to(self.skills_dir).as_posix()
                    entries.append(f"{rel}\0{st.st_mtime_ns}\0{st.st_size}")
            for entry in sorted(entries):
                digest.update(entry.encode("utf-8"))
                digest.update(b"\n")
        return digest.hexdigest()

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def list_prompt_paths(self) -> list[UnitPath]:
        return scan_unit_files(
            self.prompts_dir,
            self.prompt_suffix,
            self.reserved_prompt_names,
            self.reserved_prompt_dirs,
        )

    async def read_prompt(self, slug_path: str) -> str | None:
        if not is_safe_identifier(slug_path, allow_slash=True):
            return None
        unit = split_slug_path(slug_path)
        filename = f"{unit.slug}{self.prompt_suffix}"
        top = slug_path.split("/", 1)[0]
        if filename in self.reserved_prompt_names or (
            unit.category and top in self.reserved_prompt_dirs
        ):
            return None
        path = self.prompts_dir / f"{slug_path}{self.prompt_suffix}"
        if not path.is_file():
            return None
        return await _read_text(path)


class MemoryStore(ContentStore):
    """Serve content from in-memory mappings.

    Args:
        skills: ``slug -> SKILL.md text``.
        references: ``slug -> {relative path -> text}``.
        prompts: ``"category/slug" -> prompt text``.
    """

    def __init__(
        self,
        skills: Mapping[str, str] | None = None,
        references: Mapping[str, Mapping[str, str]] | None = None,
        prompts: Mapping[str, str] | None = None,
    ) -> None:
        self._skills = dict(skills or {})
        self._references = {k: dict(v) for k, v in (references or {}).items()}
        self._prompts = dict(prompts or {})

    def list_skill_slugs(self) -> list[str]:
        return sorted(self._skills)

    async def read_skill(self, slug: str) -> str | None:
        return self._skills.get(slug)

    async def list_references(self, slug: str) -> list[ReferenceFile]:
        if slug not in self._skills:
            return []
        refs = self._references.get(slug, {})
        return [
            ReferenceFile(relative_path=rel.replace("\\", "/"), content=refs[rel])
            for rel in sorted(refs, key=lambda r: r.replace("\\", "/"))
        ]

    def list_prompt_paths(self) -> list[UnitPath]:
        return sorted(split_slug_path(p) for p in self._prompts)

    async def read_prompt(self, slug_path: str) -> str | None:
        return self._prompts.get(slug_path)

    def skill_dir(self, slug: str) -> Path | None:
        return None

    def fingerprint(self) -> str:
        digest = hashlib.sha256()
        for slug in sorted(self._skills):
            digest.update(f"{slug}\0{self._skills[slug]}\0".encode())
            for ref in sorted(self._references.get(slug, {}).items()):
                digest.update(f"{ref[0]}\0{ref[1]}\0".encode())
        return digest.hexdigest()
