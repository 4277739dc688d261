# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Backend interface for the catalog cache."""

from __future__ import annotations

import abc


class CacheBackend(abc.ABC):
    """String key/value store with per-entry expiry in seconds."""

    @abc.abstractmethod
    async def get(self, key: str) -> str | None:
        """The stored value, or ``None`` when absent or expired."""

    @abc.abstractmethod
    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store *value*; ``ttl=None`` keeps it until evicted."""

    @abc.abstractmethod
    async def close(self) -> None:
        """Drop everything held by the backend."""
