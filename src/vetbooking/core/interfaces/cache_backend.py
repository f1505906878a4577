"""Cache backend interface."""

from datetime import timedelta
from typing import Any, Protocol


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    Cached repositories share one backend instance. Methods are async
    so that in-memory and distributed implementations are
    interchangeable.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL, replacing any existing entry.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, uses backend default.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists for key.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        ...

    async def clear(self) -> None:
        """Clear all cached values."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching pattern.

        Args:
            pattern: Glob-style pattern to match keys.

        Returns:
            Number of keys deleted.
        """
        ...
