# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(v: object) -> list[str]:
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    return v if isinstance(v, list) else []


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROMPTSHELF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Content tree
    content_root: Path = Path("content")
    skills_subdir: str = "skills"
    prompts_subdir: str = "docs"  # "" scans content_root itself
    skill_entry: str = "SKILL.md"
    references_subdir: str = "references"
    reference_suffix: str = ".md"
    prompt_suffix: str = ".mdx"
    reserved_prompt_names: list[str] = ["index.mdx"]
    reserved_prompt_dirs: list[str] = ["skills"]

    @field_validator("reserved_prompt_names", mode="before")
    @classmethod
    def _parse_reserved_prompt_names(cls, v: object) -> list[str]:
        return _split_csv(v)

    @field_validator("reserved_prompt_dirs", mode="before")
    @classmethod
    def _parse_reserved_prompt_dirs(cls, v: object) -> list[str]:
        return _split_csv(v)

    # Prebuilt per-skill archives for the bulk download
    archives_dir: Path = Path("skills")

    # Public URLs
    docs_url_prefix: str = "/docs"

    # Cache for the assembled skill listing (seconds, 0 disables)
    cache_ttl: int = 60

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_workers: int = 1
    cors_origins: list[str] = ["*"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        return _split_csv(v)

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def skills_dir(self) -> Path:
        return self.content_root / self.skills_subdir

    @property
    def prompts_dir(self) -> Path:
        if not self.prompts_subdir:
            return self.content_root
        return self.content_root / self.prompts_subdir


def get_settings() -> Settings:
    return Settings()
