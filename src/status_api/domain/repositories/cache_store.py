"""Abstract contract of the key/value store sitting in front of every query."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

_ValueT = TypeVar("_ValueT", str, bytes)


class CacheStoreError(Exception):
    """Signal that the cache store could not complete a read or a write."""


@dataclass(frozen=True)
class CachedValue(Generic[_ValueT]):
    """Value found in the cache along with its remaining time to live."""

    value: _ValueT
    ttl: timedelta


class CacheStore(ABC):
    """Define the string and byte accessors required by the resolution pipeline.

    A miss is reported by returning ``None``; failures of the store itself are
    raised as :class:`CacheStoreError` so callers can tell them apart.
    """

    @abstractmethod
    def get_string(self, key: str) -> CachedValue[str] | None:
        """Return the string stored under ``key`` when present."""

    @abstractmethod
    def get_bytes(self, key: str) -> CachedValue[bytes] | None:
        """Return the bytes stored under ``key`` when present."""

    @abstractmethod
    def set(self, key: str, value: str | bytes, ttl: timedelta) -> None:
        """Store ``value`` under ``key`` for ``ttl``."""
