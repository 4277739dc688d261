# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for skills, prompts and listings."""

from promptshelf.models.content import (
    PromptContent,
    PromptInfo,
    PromptListing,
    ReferenceFile,
    SkillContent,
    SkillContentListing,
    SkillInfo,
    SkillListing,
)

__all__ = [
    "PromptContent",
    "PromptInfo",
    "PromptListing",
    "ReferenceFile",
    "SkillContent",
    "SkillContentListing",
    "SkillInfo",
    "SkillListing",
]
