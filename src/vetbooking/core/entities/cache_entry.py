"""Cache entry entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Pairs a cached value with the monotonic time at which it stops
    being served. Entries never leave the cache backend.
    """

    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired at ``now``.

        Args:
            now: Current reading of the backend's timer.

        Returns:
            True once ``now`` has reached ``expires_at``.
        """
        return not now < self.expires_at

    @classmethod
    def create(cls, value: Any, ttl_seconds: float, now: float) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            value: The value to cache.
            ttl_seconds: Time-to-live in seconds.
            now: Current reading of the backend's timer.

        Returns:
            A new CacheEntry instance.
        """
        return cls(value=value, expires_at=now + ttl_seconds)
