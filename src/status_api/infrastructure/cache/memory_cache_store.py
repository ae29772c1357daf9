"""In-process cache store keeping entries with individual expirations."""
from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Any, Callable, Tuple

from cachetools import TLRUCache

from status_api.domain.repositories.cache_store import (
    CachedValue,
    CacheStore,
    CacheStoreError,
)

_Entry = Tuple[Any, float]


def _entry_expiration(_key: str, entry: _Entry, _now: float) -> float:
    """Return the absolute expiration time recorded alongside the value."""

    return entry[1]


class MemoryCacheStore(CacheStore):
    """Keep cached payloads in memory until their own TTL elapses."""

    def __init__(
        self,
        max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize an empty store holding at most ``max_entries`` items."""

        self._clock = clock
        self._entries: TLRUCache = TLRUCache(
            maxsize=max_entries, ttu=_entry_expiration, timer=clock
        )
        self._lock = threading.Lock()

    def get_string(self, key: str) -> CachedValue[str] | None:
        """Return the string stored under ``key`` when it has not expired."""

        return self._get(key, str)

    def get_bytes(self, key: str) -> CachedValue[bytes] | None:
        """Return the bytes stored under ``key`` when they have not expired."""

        return self._get(key, bytes)

    def set(self, key: str, value: str | bytes, ttl: timedelta) -> None:
        """Store ``value`` under ``key`` until ``ttl`` has elapsed."""

        if not isinstance(value, (str, bytes)):
            raise CacheStoreError(f"Unsupported cache value type: {type(value).__name__}.")
        if ttl <= timedelta(0):
            raise CacheStoreError("Cache entries require a positive TTL.")

        expires_at = self._clock() + ttl.total_seconds()
        with self._lock:
            self._entries[key] = (value, expires_at)

    def _get(self, key: str, expected_type: type) -> CachedValue | None:
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if not isinstance(value, expected_type):
            raise CacheStoreError(
                f"Cache entry {key!r} holds {type(value).__name__}, "
                f"expected {expected_type.__name__}."
            )
        remaining = max(expires_at - self._clock(), 0.0)
        return CachedValue(value=value, ttl=timedelta(seconds=remaining))
