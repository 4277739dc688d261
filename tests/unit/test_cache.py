# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the caching layer: backend, TTL expiry, key generation, and the singleton."""

from __future__ import annotations

import hashlib
import time

import pytest

from promptshelf.cache.base import CacheBackend
from promptshelf.cache.manager import CatalogCache, get_catalog_cache
from promptshelf.cache.memory import MemoryCacheBackend
from promptshelf.models.content import SkillContent

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def memory_backend() -> MemoryCacheBackend:
    return MemoryCacheBackend(max_size=4)


@pytest.fixture
def catalog_cache(memory_backend: MemoryCacheBackend) -> CatalogCache:
    return CatalogCache(backend=memory_backend, default_ttl=3600)


def _skill(slug: str) -> SkillContent:
    return SkillContent(
        slug=slug,
        name=slug,
        title=slug.title(),
        description="",
        url=f"/docs/skills/{slug}",
        api_url=f"/api/skills/{slug}",
        download_url=f"/api/skills/{slug}/download",
        content=f"# {slug.title()}",
    )


# ---------------------------------------------------------------------------
# MemoryCacheBackend
# ---------------------------------------------------------------------------


class TestMemoryCacheBackend:
    def test_is_subclass(self) -> None:
        assert issubclass(MemoryCacheBackend, CacheBackend)

    async def test_get_set(self, memory_backend: MemoryCacheBackend) -> None:
        await memory_backend.set("k1", "v1")
        assert await memory_backend.get("k1") == "v1"

    async def test_get_missing(self, memory_backend: MemoryCacheBackend) -> None:
        assert await memory_backend.get("nonexistent") is None

    async def test_overwrite(self, memory_backend: MemoryCacheBackend) -> None:
        await memory_backend.set("k1", "old")
        await memory_backend.set("k1", "new")
        assert await memory_backend.get("k1") == "new"

    async def test_lru_eviction(self, memory_backend: MemoryCacheBackend) -> None:
        for i in range(4):
            await memory_backend.set(f"k{i}", str(i))
        await memory_backend.get("k0")  # k1 is now least recently used
        await memory_backend.set("k4", "4")

        assert await memory_backend.get("k1") is None
        for key in ("k0", "k2", "k3", "k4"):
            assert await memory_backend.get(key) is not None

    async def test_expired_entry_is_dropped(self, memory_backend: MemoryCacheBackend) -> None:
        await memory_backend.set("old", "v", ttl=60)
        memory_backend._entries["old"] = ("v", time.monotonic() - 1)

        assert await memory_backend.get("old") is None
        assert "old" not in memory_backend._entries

    async def test_no_ttl_never_expires(self, memory_backend: MemoryCacheBackend) -> None:
        await memory_backend.set("k", "v", ttl=None)
        assert memory_backend._entries["k"] == ("v", None)

    async def test_close_drops_entries(self, memory_backend: MemoryCacheBackend) -> None:
        await memory_backend.set("k", "v")
        await memory_backend.close()
        assert await memory_backend.get("k") is None


# ---------------------------------------------------------------------------
# CatalogCache
# ---------------------------------------------------------------------------


class TestCatalogCache:
    def test_key_is_sha256_of_kind_and_fingerprint(self) -> None:
        expected = hashlib.sha256(b"skills:abc").hexdigest()
        assert CatalogCache.make_cache_key("skills", "abc") == expected

    def test_key_differs_by_fingerprint(self) -> None:
        assert CatalogCache.make_cache_key("skills", "a") != CatalogCache.make_cache_key("skills", "b")

    async def test_round_trip(self, catalog_cache: CatalogCache) -> None:
        skills = [_skill("alpha"), _skill("beta")]

        assert await catalog_cache.get_skills("fp") is None
        await catalog_cache.store_skills("fp", skills)

        assert await catalog_cache.get_skills("fp") == skills

    async def test_new_fingerprint_misses(self, catalog_cache: CatalogCache) -> None:
        await catalog_cache.store_skills("old", [_skill("alpha")])
        assert await catalog_cache.get_skills("new") is None

    async def test_entries_use_default_ttl(
        self, catalog_cache: CatalogCache, memory_backend: MemoryCacheBackend
    ) -> None:
        await catalog_cache.store_skills("fp", [])

        (_, deadline), = memory_backend._entries.values()
        assert deadline is not None
        assert deadline > time.monotonic() + 3000


class TestSingleton:
    def test_same_instance(self) -> None:
        assert get_catalog_cache() is get_catalog_cache()

    def test_disabled_with_zero_ttl(self, monkeypatch) -> None:
        monkeypatch.setenv("PROMPTSHELF_CACHE_TTL", "0")
        assert get_catalog_cache() is None

    def test_ttl_from_settings(self, monkeypatch) -> None:
        monkeypatch.setenv("PROMPTSHELF_CACHE_TTL", "5")
        cache = get_catalog_cache()
        assert cache is not None
        assert cache._default_ttl == 5
