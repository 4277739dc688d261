# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for settings parsing and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from promptshelf.core.config import Settings
from promptshelf.core.logging import JsonFormatter, TextFormatter, setup_logging


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.skills_dir == Path("content") / "skills"
        assert settings.prompts_dir == Path("content") / "docs"
        assert settings.reserved_prompt_names == ["index.mdx"]
        assert settings.cache_ttl == 60

    def test_csv_lists_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("PROMPTSHELF_RESERVED_PROMPT_DIRS", "skills, drafts,")
        monkeypatch.setenv("PROMPTSHELF_CORS_ORIGINS", "https://a.example,https://b.example")

        settings = Settings(_env_file=None)

        assert settings.reserved_prompt_dirs == ["skills", "drafts"]
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_empty_prompts_subdir_scans_root(self, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, content_root=tmp_path, prompts_subdir="")
        assert settings.prompts_dir == tmp_path


class TestLogging:
    def _record(self, msg: str = "hello %s", args: tuple = ("world",)) -> logging.LogRecord:
        return logging.LogRecord("promptshelf.test", logging.INFO, __file__, 1, msg, args, None)

    def test_json_formatter(self) -> None:
        entry = json.loads(JsonFormatter().format(self._record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "promptshelf.test"
        assert entry["message"] == "hello world"

    def test_text_formatter(self) -> None:
        line = TextFormatter().format(self._record())
        assert "[INFO] promptshelf.test: hello world" in line

    def test_setup_replaces_handlers(self) -> None:
        setup_logging("debug", "text")
        setup_logging("warning", "json")

        root = logging.getLogger("promptshelf")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
