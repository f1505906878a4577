"""In-memory cache backend implementation."""

import fnmatch
import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from vetbooking.core.entities.cache_entry import CacheEntry

logger = logging.getLogger(__name__)


def _entry_expiry(_key: str, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at


class InMemoryCacheBackend:
    """In-memory cache backend with per-entry TTL and an LRU size bound.

    Suitable for single-process deployments; each process holds its own
    cache. Uses cachetools' TLRUCache so every entry carries its own
    expiry time. Expired entries are served as absent and purged on
    writes; when ``maxsize`` is reached the least recently used entry
    is evicted.

    None of the methods await, so under asyncio each call is atomic with
    respect to other tasks.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 60.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache.
            default_ttl: Default TTL in seconds for items.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=_entry_expiry,
            timer=timer,
        )

    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        entry = self._cache.get(key)
        if entry is None:
            return None
        return entry.value

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value, overwriting any existing entry.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses default.
        """
        ttl_seconds = ttl.total_seconds() if ttl is not None else self._default_ttl
        if ttl_seconds <= 0:
            # TLRUCache skips already-expired items; drop the old value too
            self._cache.pop(key, None)
            return
        entry = CacheEntry.create(value, ttl_seconds, now=self._cache.timer())
        self._cache[key] = entry

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        existed = key in self._cache
        try:
            del self._cache[key]
        except KeyError:
            pass
        return existed

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if an unexpired entry exists, False otherwise.
        """
        return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        self._cache.expire()
        keys_to_delete = [
            key for key in list(self._cache.keys())
            if fnmatch.fnmatchcase(key, pattern)
        ]

        count = 0
        for key in keys_to_delete:
            try:
                del self._cache[key]
                count += 1
            except KeyError:
                pass

        logger.debug("Deleted %d cache keys matching %s", count, pattern)
        return count

    def __len__(self) -> int:
        """Return the number of items in the cache."""
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
