# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""FastAPI dependencies."""

from __future__ import annotations

from promptshelf.cache.manager import get_catalog_cache
from promptshelf.content.catalog import Catalog
from promptshelf.core.config import get_settings


def get_catalog() -> Catalog:
    """A catalog over the configured content root (overridable in tests)."""
    return Catalog.from_settings(get_settings(), cache=get_catalog_cache())
