# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Download and export formats: zip archives and the LLM text corpus."""

from promptshelf.export.archive import (
    build_bundle_archive,
    build_directory_archive,
    write_prebuilt_archives,
)
from promptshelf.export.corpus import build_prompt_corpus

__all__ = [
    "build_bundle_archive",
    "build_directory_archive",
    "build_prompt_corpus",
    "write_prebuilt_archives",
]
