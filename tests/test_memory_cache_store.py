"""Tests for the in-memory cache store implementation."""
from __future__ import annotations

from datetime import timedelta

import pytest

from status_api.domain.repositories.cache_store import CachedValue, CacheStoreError
from status_api.infrastructure.cache.memory_cache_store import MemoryCacheStore


def test_missing_key_returns_none(clock) -> None:
    store = MemoryCacheStore(clock=clock)

    assert store.get_string("primary:missing-25565") is None
    assert store.get_bytes("icon:missing-25565") is None


def test_string_entry_reports_remaining_ttl(clock) -> None:
    """Each entry keeps its own TTL which shrinks as time passes."""

    store = MemoryCacheStore(clock=clock)
    store.set("primary:a-1", '{"online": false}', timedelta(seconds=60))
    store.set("second:a-1", "{}", timedelta(seconds=10))

    clock.advance(5)

    assert store.get_string("primary:a-1") == CachedValue(
        value='{"online": false}', ttl=timedelta(seconds=55)
    )
    assert store.get_string("second:a-1") == CachedValue(value="{}", ttl=timedelta(seconds=5))


def test_entries_expire_after_their_ttl(clock) -> None:
    store = MemoryCacheStore(clock=clock)
    store.set("icon:a-1", b"png", timedelta(seconds=30))

    clock.advance(30)

    assert store.get_bytes("icon:a-1") is None


def test_overwriting_an_entry_resets_its_ttl(clock) -> None:
    """The last writer wins, including its expiration."""

    store = MemoryCacheStore(clock=clock)
    store.set("primary:a-1", "first", timedelta(seconds=10))
    clock.advance(8)
    store.set("primary:a-1", "second", timedelta(seconds=10))
    clock.advance(8)

    cached = store.get_string("primary:a-1")

    assert cached is not None
    assert cached.value == "second"
    assert cached.ttl == timedelta(seconds=2)


def test_reading_bytes_as_string_is_an_error(clock) -> None:
    store = MemoryCacheStore(clock=clock)
    store.set("icon:a-1", b"png", timedelta(seconds=30))

    with pytest.raises(CacheStoreError):
        store.get_string("icon:a-1")


def test_non_positive_ttl_is_rejected(clock) -> None:
    store = MemoryCacheStore(clock=clock)

    with pytest.raises(CacheStoreError):
        store.set("primary:a-1", "value", timedelta(0))


def test_capacity_evicts_the_oldest_entry(clock) -> None:
    store = MemoryCacheStore(max_entries=2, clock=clock)
    store.set("primary:b-1", "b", timedelta(seconds=30))
    store.set("primary:a-1", "a", timedelta(seconds=60))
    store.get_string("primary:a-1")
    store.set("primary:c-1", "c", timedelta(seconds=60))

    assert store.get_string("primary:b-1") is None
    assert store.get_string("primary:a-1") is not None
    assert store.get_string("primary:c-1") is not None
