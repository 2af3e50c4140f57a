"""
Unit tests for the storefront session cache.
"""

import asyncio
import time

import pytest

from tripgo.client import ApiError, SessionCache
from tripgo.client.session_cache import NAVBAR_HOTELS, STATIC_HOTELS


class TestGetOrFetch:
    """Test cache misses, hits and fallbacks."""

    async def test_fetches_once_then_hits(self):
        cache = SessionCache()
        calls = []

        async def fetch():
            calls.append(1)
            return [{"name": "Seaside Paradise"}]

        first = await cache.get_or_fetch(NAVBAR_HOTELS, fetch)
        second = await cache.get_or_fetch(NAVBAR_HOTELS, fetch)

        assert first == second == [{"name": "Seaside Paradise"}]
        assert len(calls) == 1
        assert cache.stats() == {"entries": 1, "hits": 1, "misses": 1, "pending": 0}

    async def test_concurrent_misses_share_fetch(self):
        cache = SessionCache()
        calls = []

        async def fetch():
            calls.append(1)
            await asyncio.sleep(0.01)
            return ["luxury"]

        results = await asyncio.gather(*(cache.get_or_fetch("categories", fetch) for _ in range(3)))

        assert results == [["luxury"]] * 3
        assert len(calls) == 1

    async def test_fallback_returned_but_not_cached(self):
        cache = SessionCache()

        async def failing():
            raise ApiError(500, "Network error: unreachable")

        result = await cache.get_or_fetch(NAVBAR_HOTELS, failing, fallback=STATIC_HOTELS)

        assert result == STATIC_HOTELS
        assert NAVBAR_HOTELS not in cache

    async def test_error_without_fallback_propagates(self):
        cache = SessionCache()

        async def failing():
            raise ApiError(404, "Not found")

        with pytest.raises(ApiError):
            await cache.get_or_fetch("missing", failing)
        assert cache.stats()["pending"] == 0

    async def test_falsy_values_are_cached(self):
        cache = SessionCache()
        calls = []

        async def fetch():
            calls.append(1)
            return []

        await cache.get_or_fetch("empty", fetch)
        await cache.get_or_fetch("empty", fetch)
        assert len(calls) == 1


class TestExpiry:
    """Test TTL handling and invalidation."""

    def test_entries_expire_after_ttl(self):
        cache = SessionCache(ttl=60)
        cache.set("key", "value")
        assert cache.get("key") == "value"

        # Backdate the entry past its TTL
        cache._entries["key"] = ("value", time.monotonic() - 61)
        assert cache.get("key") is None
        assert "key" not in cache

    def test_no_ttl_keeps_entries(self):
        cache = SessionCache()
        cache.set("key", "value")
        assert "key" in cache

    def test_invalidate_and_clear(self):
        cache = SessionCache()
        cache.set("a", 1)
        cache.set("b", 2)

        cache.invalidate("a")
        assert "a" not in cache
        assert cache.get("b") == 2

        cache.clear()
        assert cache.stats()["entries"] == 0
