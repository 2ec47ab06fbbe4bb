"""In-memory TTL cache for proxied upstream responses."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """One cached payload. Replaced wholesale when refreshed, never mutated."""

    key: str
    payload: Any
    created_at: float  # time.monotonic()


def cache_key(*parts: object) -> str:
    """Composite key, e.g. ``cache_key("bitcoin", "relevancy", 5)``."""
    return "|".join(str(p) for p in parts)


class TTLCache:
    """Dict + monotonic clock TTL cache with per-key single-flight fetches.

    Staleness is detected lazily on read; nothing evicts in the background.
    Each key gets its own asyncio.Lock so concurrent misses on the same key
    share one upstream fetch while other keys proceed independently.
    """

    def __init__(self, ttl_seconds: float = 3600.0) -> None:
        self._ttl = ttl_seconds
        self._store: dict[str, CacheEntry] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._waiters: dict[str, int] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def __len__(self) -> int:
        return len(self._store)

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return time.monotonic() - entry.created_at < self._ttl

    def get(self, key: str) -> Any | None:
        """Return the cached payload or ``None`` if missing / stale."""
        entry = self._store.get(key)
        if entry is None or not self._is_fresh(entry):
            return None
        return entry.payload

    def set(self, key: str, payload: Any) -> None:
        """Store *payload* under *key* with the current timestamp."""
        self._store[key] = CacheEntry(key=key, payload=payload, created_at=time.monotonic())

    async def get_or_fetch(self, key: str, fetcher: Callable[[], Awaitable[Any]]) -> Any:
        """Return the fresh payload for *key*, calling *fetcher* on a miss.

        Exceptions from *fetcher* propagate and nothing is stored. A key's
        lock lives only while some caller is waiting on or holding it.
        """
        entry = self._store.get(key)
        if entry is not None and self._is_fresh(entry):
            return entry.payload

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                # Another waiter may have refreshed the key while we queued.
                entry = self._store.get(key)
                if entry is not None and self._is_fresh(entry):
                    return entry.payload
                payload = await fetcher()
                self.set(key, payload)
                return payload
        finally:
            self._waiters[key] -= 1
            if not self._waiters[key]:
                del self._waiters[key]
                del self._locks[key]

    def invalidate(self, key: str) -> None:
        """Remove a single key (no-op if absent)."""
        self._store.pop(key, None)

    def clear(self) -> None:
        """Drop all entries."""
        self._store.clear()
