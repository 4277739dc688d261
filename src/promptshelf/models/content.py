# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Skill, prompt and reference file models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Serialises with camelCase keys (``apiUrl``) and accepts either form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReferenceFile(_CamelModel):
    """An auxiliary markdown file bundled under a skill's ``references/``."""

    relative_path: str
    content: str

    @property
    def section_name(self) -> str:
        """Heading name: the relative path without its extension."""
        stem, dot, ext = self.relative_path.rpartition(".")
        if not dot or not stem or "/" in ext:
            return self.relative_path
        return stem


class SkillInfo(_CamelModel):
    """Skill metadata, cheap to compute (no reference files read)."""

    slug: str
    name: str
    title: str
    description: str = ""
    url: str
    api_url: str
    download_url: str


class SkillContent(SkillInfo):
    """A skill with its fully assembled document."""

    content: str = ""


class PromptInfo(_CamelModel):
    """Prompt metadata."""

    slug: str
    category: str = ""
    title: str
    description: str = ""
    url: str
    api_url: str

    @property
    def slug_path(self) -> str:
        return f"{self.category}/{self.slug}" if self.category else self.slug


class PromptContent(PromptInfo):
    """A prompt with its header-stripped body."""

    content: str = ""


class SkillListing(_CamelModel):
    total: int
    skills: list[SkillInfo] = Field(default_factory=list)


class SkillContentListing(_CamelModel):
    total: int
    skills: list[SkillContent] = Field(default_factory=list)


class PromptListing(_CamelModel):
    total: int
    categories: list[str] = Field(default_factory=list)
    prompts: list[PromptInfo] = Field(default_factory=list)
