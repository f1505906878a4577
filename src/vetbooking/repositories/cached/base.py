"""Base class for cached repository decorators."""

import asyncio
import copy
import logging
from collections.abc import Awaitable, Callable, Sequence
from datetime import timedelta
from typing import Any, Generic, TypeVar

from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.interfaces.cache_backend import ICacheBackend
from vetbooking.core.interfaces.key_builder import IKeyBuilder
from vetbooking.decorators import ANY_ARG, KeySpec
from vetbooking.infrastructure.key_builders.default import DefaultKeyBuilder

logger = logging.getLogger(__name__)

R = TypeVar("R")


class CachedRepository(Generic[R]):
    """Wraps a repository and caches its lookups.

    Subclasses expose the same methods as the repository they wrap and
    mark them with ``@cached`` or ``@invalidates``. Methods left
    undecorated simply delegate.

    Results that are None are returned but never stored. Store errors
    propagate and leave the cache untouched. Concurrent misses for the
    same key share one backing fetch unless ``single_flight`` is off.
    Every caller receives its own copy of a cached result, just as the
    store hands out fresh documents.
    """

    namespace: str

    def __init__(
        self,
        repo: R,
        backend: ICacheBackend,
        key_builder: IKeyBuilder | None = None,
        config: CacheConfig | None = None,
        ttl: timedelta | None = None,
    ) -> None:
        """Initialize the cached repository.

        Args:
            repo: The repository to wrap.
            backend: Cache backend shared with other repositories.
            key_builder: Builds cache keys. Defaults to DefaultKeyBuilder.
            config: Cache configuration. Uses defaults if not provided.
            ttl: TTL for this repository. Defaults to the matching
                setting in ``config``.
        """
        self._repo = repo
        self._backend = backend
        self._key_builder = key_builder or DefaultKeyBuilder()
        self._config = config or CacheConfig()
        self._ttl = ttl or self._config_ttl(self._config)
        self._inflight: dict[str, asyncio.Future[Any]] = {}

        # Statistics
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _config_ttl(config: CacheConfig) -> timedelta | None:
        return config.default_ttl

    @property
    def ttl(self) -> timedelta | None:
        """Get the TTL applied to this repository's entries."""
        return self._ttl

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    def key(self, operation: str, *args: Any) -> str:
        """Build the cache key of one call of this repository."""
        return self._key_builder.build(self.namespace, operation, args)

    async def clear(self) -> int:
        """Delete every entry of this repository's namespace.

        Returns:
            Number of entries deleted.
        """
        pattern = self._key_builder.namespace_pattern(self.namespace)
        return await self._backend.delete_pattern(pattern)

    async def _read_through(
        self,
        operation: str,
        args: Sequence[Any],
        loader: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Serve a lookup from cache, loading and storing it on a miss.

        Args:
            operation: Operation name used in the key.
            args: Call arguments used in the key.
            loader: Performs the uncached lookup.

        Returns:
            The cached or freshly loaded result.
        """
        if not self._config.enabled:
            return await loader()

        key = self._key_builder.build(self.namespace, operation, args)

        cached = await self._backend.get(key)
        if cached is not None:
            self._hits += 1
            logger.debug("Cache hit for %s", key)
            return copy.deepcopy(cached)

        self._misses += 1
        logger.debug("Cache miss for %s", key)

        if not self._config.single_flight:
            return await self._load(key, loader)

        inflight = self._inflight.get(key)
        if inflight is not None:
            # Cancelling one waiter must not cancel the shared fetch
            return copy.deepcopy(await asyncio.shield(inflight))

        future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()
        self._inflight[key] = future
        try:
            result = await self._load(key, loader)
        except asyncio.CancelledError:
            future.cancel()
            raise
        except BaseException as e:
            if not future.done():
                future.set_exception(e)
                # Mark retrieved so an unawaited future does not log the error
                future.exception()
            raise
        else:
            if not future.done():
                future.set_result(result)
            return result
        finally:
            del self._inflight[key]

    async def _load(self, key: str, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Run the loader and store a private copy of a non-None result."""
        result = await loader()
        if result is not None:
            await self._backend.set(key, copy.deepcopy(result), self._ttl)
        return result

    async def _invalidate(self, keys: KeySpec) -> int:
        """Delete the cache entries named by ``(operation, args)`` pairs.

        A pair whose args contain ``ANY_ARG`` deletes every key matching
        it in that position.

        Returns:
            Number of entries that existed and were deleted.
        """
        count = 0
        for operation, args in keys:
            key = self._key_builder.build(self.namespace, operation, args)
            if ANY_ARG in args:
                count += await self._backend.delete_pattern(key)
            elif await self._backend.delete(key):
                count += 1
            logger.debug("Invalidated %s", key)
        return count
