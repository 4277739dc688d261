# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Caching layer for assembled skill listings."""

from promptshelf.cache.manager import CatalogCache, get_catalog_cache

__all__ = ["CatalogCache", "get_catalog_cache"]
