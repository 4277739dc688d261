# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Process-local cache backend: bounded LRU with expiry."""

from __future__ import annotations

import time
from collections import OrderedDict

from promptshelf.cache.base import CacheBackend

# Assembled listings are large; a handful of fingerprints is plenty.
_DEFAULT_MAX_SIZE = 16


class MemoryCacheBackend(CacheBackend):
    """Keeps at most *max_size* entries, evicting the least recently read.

    Values are stored as ``(value, deadline)`` where the deadline is a
    ``time.monotonic()`` reading, or ``None`` for no expiry.
    """

    def __init__(self, max_size: int = _DEFAULT_MAX_SIZE) -> None:
        self._entries: OrderedDict[str, tuple[str, float | None]] = OrderedDict()
        self._max_size = max_size

    async def get(self, key: str) -> str | None:
        item = self._entries.get(key)
        if item is None:
            return None
        value, deadline = item
        if deadline is not None and time.monotonic() > deadline:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        deadline = None if ttl is None else time.monotonic() + ttl
        self._entries[key] = (value, deadline)
        self._entries.move_to_end(key)
        if len(self._entries) > self._max_size:
            self._entries.popitem(last=False)

    async def close(self) -> None:
        self._entries.clear()
