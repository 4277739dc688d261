# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Cache for the assembled skill listing.

Entries are keyed by the content store's fingerprint, so any change to a
skill or reference file on disk produces a different key and the stale
entry is simply never read again. A short TTL bounds memory held by old
fingerprints.
"""

from __future__ import annotations

import hashlib
import logging

from pydantic import TypeAdapter

from promptshelf.cache.base import CacheBackend
from promptshelf.cache.memory import MemoryCacheBackend
from promptshelf.models.content import SkillContent

logger = logging.getLogger("promptshelf.cache.manager")

_SKILL_LIST = TypeAdapter(list[SkillContent])
_SKILLS_KIND = "skills"

# Module-level singleton
_cache: CatalogCache | None = None


class CatalogCache:
    """Content-addressed cache of assembled skill listings.

    Args:
        backend: Where serialised listings are kept.
        default_ttl: Lifetime of an entry in seconds.
    """

    def __init__(self, backend: CacheBackend | None = None, default_ttl: int = 60) -> None:
        self._backend = backend or MemoryCacheBackend()
        self._default_ttl = default_ttl

    @staticmethod
    def make_cache_key(kind: str, fingerprint: str) -> str:
        """Hex SHA-256 of ``kind`` and the store fingerprint."""
        return hashlib.sha256(f"{kind}:{fingerprint}".encode()).hexdigest()

    async def get_skills(self, fingerprint: str) -> list[SkillContent] | None:
        key = self.make_cache_key(_SKILLS_KIND, fingerprint)
        raw = await self._backend.get(key)
        if raw is None:
            logger.debug("Cache MISS for key %s", key[:12])
            return None
        logger.debug("Cache HIT for key %s", key[:12])
        return _SKILL_LIST.validate_json(raw)

    async def store_skills(self, fingerprint: str, skills: list[SkillContent]) -> None:
        key = self.make_cache_key(_SKILLS_KIND, fingerprint)
        await self._backend.set(key, _SKILL_LIST.dump_json(skills).decode(), ttl=self._default_ttl)
        logger.debug("Cached %d skills for key %s", len(skills), key[:12])

    async def close(self) -> None:
        await self._backend.close()


def get_catalog_cache() -> CatalogCache | None:
    """Return the module-level cache, or ``None`` when caching is disabled."""
    global _cache
    from promptshelf.core.config import get_settings

    settings = get_settings()
    if settings.cache_ttl <= 0:
        return None
    if _cache is None:
        _cache = CatalogCache(default_ttl=settings.cache_ttl)
    return _cache


def reset_catalog_cache() -> None:
    """Reset the singleton (useful for testing)."""
    global _cache
    _cache = None
