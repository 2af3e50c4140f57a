"""
Session Cache

Process-local cache for storefront data that rarely changes during a
session (navbar menus, category lists). Entries never expire unless a
TTL is given.

Concurrent misses on the same key share one fetch. When a fetch fails
with ApiError and a fallback is supplied, the fallback is returned but
not cached, so the next call tries the API again.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from tripgo.client.api_client import ApiError

logger = logging.getLogger(__name__)

# Known keys
NAVBAR_CRUISE_CATEGORIES = "navbar-cruise-categories"
NAVBAR_CRUISES = "navbar-cruises"
NAVBAR_HOTELS = "navbar-hotels"
NAVBAR_PACKAGES = "navbar-packages"

STATIC_CRUISES = [
    {"name": "Ocean Pearl", "href": "/cruises"},
    {"name": "Caribbean Queen", "href": "/cruises"},
    {"name": "Sunset Voyager", "href": "/cruises"},
    {"name": "Atlantic Dream", "href": "/cruises"},
    {"name": "Tropical Breeze", "href": "/cruises"},
    {"name": "Pacific Jewel", "href": "/cruises"},
]

STATIC_HOTELS = [
    {"name": "Luxury Beach Resort", "href": "/hotels"},
    {"name": "Mountain Retreat", "href": "/hotels"},
    {"name": "Urban Boutique", "href": "/hotels"},
    {"name": "Seaside Paradise", "href": "/hotels"},
    {"name": "Desert Oasis", "href": "/hotels"},
    {"name": "City Center Suites", "href": "/hotels"},
]

STATIC_PACKAGES = [
    {"name": "European Adventure", "href": "/packages"},
    {"name": "Asian Explorer", "href": "/packages"},
    {"name": "African Safari", "href": "/packages"},
    {"name": "South American Discovery", "href": "/packages"},
    {"name": "Pacific Islands", "href": "/packages"},
    {"name": "USA National Parks", "href": "/packages"},
]


class SessionCache:
    """Key/value cache with optional TTL and coalesced fetches"""

    def __init__(self, ttl: float | None = None):
        """
        Args:
            ttl: Seconds an entry stays valid (None keeps entries until cleared)
        """
        self.ttl = ttl
        self._entries: dict[str, tuple[Any, float]] = {}
        self._pending: dict[str, asyncio.Future] = {}
        self._hits = 0
        self._misses = 0

    def _expired(self, stored_at: float) -> bool:
        return self.ttl is not None and time.monotonic() - stored_at > self.ttl

    def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return default
        value, stored_at = entry
        if self._expired(stored_at):
            del self._entries[key]
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, time.monotonic())

    def __contains__(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    async def get_or_fetch(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        fallback: Any = None,
    ) -> Any:
        """
        Return the cached value, fetching and storing it on a miss.

        Args:
            key: Cache key (e.g., NAVBAR_HOTELS)
            fetch: Coroutine function producing the value
            fallback: Returned uncached when fetch raises ApiError

        Raises:
            ApiError: Fetch failed and no fallback was given
        """
        cached = self.get(key, _MISSING)
        if cached is not _MISSING:
            self._hits += 1
            return cached
        self._misses += 1

        pending = self._pending.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(key, fetch))
            self._pending[key] = pending

        try:
            return await asyncio.shield(pending)
        except ApiError as exc:
            if fallback is None:
                raise
            logger.warning(f"Using fallback for '{key}': {exc.message}")
            return fallback

    async def _fetch(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        try:
            value = await fetch()
            self.set(key, value)
            return value
        finally:
            self._pending.pop(key, None)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> dict[str, int]:
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "pending": len(self._pending),
        }


_MISSING = object()
