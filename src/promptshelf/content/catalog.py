# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public read API over skills and prompts.

Every operation re-reads the content store, so results always reflect the
files on disk at call time. Lookups of unknown identifiers return ``None``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from promptshelf.cache.manager import CatalogCache
from promptshelf.content.assembler import assemble
from promptshelf.content.store import ContentStore, FilesystemStore
from promptshelf.core.config import Settings
from promptshelf.core.constants import ARCHIVE_SUFFIX
from promptshelf.models.content import PromptContent, PromptInfo, SkillContent, SkillInfo
from promptshelf.parsers.frontmatter import Frontmatter, extract_header, parse_frontmatter

logger = logging.getLogger("promptshelf.content.catalog")


def describe(fallback: str, fm: Frontmatter) -> tuple[str, str]:
    """Title and description shared by every listing and lookup.

    Title: first ``# `` heading, else frontmatter ``name``, else *fallback*.
    Description: frontmatter ``description``, else the line after the title.
    """
    header = extract_header(fm.body)
    title = header.title or fm.name or fallback
    description = fm.description or header.description
    return title, description


class Catalog:
    """Skill and prompt queries composed from the store, parser and assembler.

    Args:
        store: Where content is read from.
        docs_url_prefix: Prefix of browsable page URLs.
        archives_dir: Directory of prebuilt ``<slug>.zip`` archives.
        cache: Optional cache for :meth:`list_skills_with_content`.
    """

    def __init__(
        self,
        store: ContentStore,
        *,
        docs_url_prefix: str = "/docs",
        archives_dir: Path | None = None,
        cache: CatalogCache | None = None,
    ) -> None:
        self.store = store
        self.docs_url_prefix = docs_url_prefix.rstrip("/")
        self.archives_dir = archives_dir
        self._cache = cache

    @classmethod
    def from_settings(cls, settings: Settings, cache: CatalogCache | None = None) -> Catalog:
        return cls(
            FilesystemStore.from_settings(settings),
            docs_url_prefix=settings.docs_url_prefix,
            archives_dir=settings.archives_dir,
            cache=cache,
        )

    # ------------------------------------------------------------------
    # Skills
    # ------------------------------------------------------------------

    def _skill_info(self, slug: str, fm: Frontmatter) -> dict[str, str]:
        title, description = describe(slug, fm)
        return {
            "slug": slug,
            "name": fm.name or slug,
            "title": title,
            "description": description,
            "url": f"{self.docs_url_prefix}/skills/{slug}",
            "api_url": f"/api/skills/{slug}",
            "download_url": f"/api/skills/{slug}/download",
        }

    async def _read_skill(self, slug: str) -> Frontmatter | None:
        raw = await self.store.read_skill(slug)
        if raw is None:
            return None
        return parse_frontmatter(raw)

    async def _build_skill(self, slug: str) -> SkillContent | None:
        fm = await self._read_skill(slug)
        if fm is None:
            return None
        references = await self.store.list_references(slug)
        return SkillContent(**self._skill_info(slug, fm), content=assemble(fm.body, references))

    async def list_skills(self) -> list[SkillInfo]:
        """Metadata for every skill; reference files are not read."""
        skills: list[SkillInfo] = []
        for slug in self.store.list_skill_slugs():
            fm = await self._read_skill(slug)
            if fm is not None:
                skills.append(SkillInfo(**self._skill_info(slug, fm)))
        return skills

    async def list_skills_with_content(self) -> list[SkillContent]:
        """Every skill with its assembled document."""
        fingerprint = ""
        if self._cache is not None:
            fingerprint = self.store.fingerprint()
            cached = await self._cache.get_skills(fingerprint)
            if cached is not None:
                return cached

        skills: list[SkillContent] = []
        for slug in self.store.list_skill_slugs():
            skill = await self._build_skill(slug)
            if skill is not None:
                skills.append(skill)

        if self._cache is not None:
            await self._cache.store_skills(fingerprint, skills)
        return skills

    async def get_skill(self, slug: str) -> SkillContent | None:
        skill = await self._build_skill(slug)
        if skill is None:
            logger.debug("Skill not found: %s", slug)
        return skill

    def skill_dir(self, slug: str) -> Path | None:
        return self.store.skill_dir(slug)

    def skill_archive_sources(self) -> list[tuple[str, Path]]:
        """``(slug, prebuilt archive path)`` for every skill with an archive on disk."""
        if self.archives_dir is None:
            return []
        sources = []
        for slug in self.store.list_skill_slugs():
            path = self.archives_dir / f"{slug}{ARCHIVE_SUFFIX}"
            if path.is_file():
                sources.append((slug, path))
        return sources

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def _prompt_info(self, slug_path: str, category: str, slug: str, fm: Frontmatter) -> dict[str, str]:
        title, description = describe(slug, fm)
        return {
            "slug": slug,
            "category": category,
            "title": title,
            "description": description,
            "url": f"{self.docs_url_prefix}/{slug_path}",
            "api_url": f"/api/prompts/{slug_path}",
        }

    async def _build_prompts(self) -> list[PromptContent]:
        prompts: list[PromptContent] = []
        for unit in self.store.list_prompt_paths():
            raw = await self.store.read_prompt(unit.slug_path)
            if raw is None:
                continue
            fm = parse_frontmatter(raw)
            info = self._prompt_info(unit.slug_path, unit.category, unit.slug, fm)
            prompts.append(PromptContent(**info, content=fm.body.strip()))
        return prompts

    async def list_prompts(self) -> list[PromptInfo]:
        """Metadata for every prompt, sorted by (category, slug)."""
        return [
            PromptInfo.model_validate(p.model_dump(exclude={"content"}))
            for p in await self._build_prompts()
        ]

    async def list_prompts_with_content(self) -> list[PromptContent]:
        return await self._build_prompts()

    async def get_prompt(self, slug_path: str) -> PromptContent | None:
        slug_path = slug_path.strip("/")
        raw = await self.store.read_prompt(slug_path)
        if raw is None:
            logger.debug("Prompt not found: %s", slug_path)
            return None
        category, _, slug = slug_path.rpartition("/")
        fm = parse_frontmatter(raw)
        info = self._prompt_info(slug_path, category, slug, fm)
        return PromptContent(**info, content=fm.body.strip())
