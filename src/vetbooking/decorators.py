"""Cache decorators for repository methods.

``cached`` turns a repository method into a read-through lookup and
``invalidates`` deletes the cache keys a mutation makes stale. Both are
applied to methods of a ``CachedRepository`` subclass and use that
instance's backend, key builder and TTL, so no module-level state is
involved.

Example:
    class CachedPetRepository(CachedRepository[PetRepository]):
        namespace = "petRepo"

        @cached("listByOwner")
        async def list_by_owner(self, owner_id: str) -> list[Document]:
            return await self._repo.list_by_owner(owner_id)

        @invalidates(lambda pet: [("listByOwner", [pet["owner"]])])
        async def create(self, data: Document) -> Document:
            return await self._repo.create(data)
"""

import functools
import inspect
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from vetbooking.repositories.cached.base import CachedRepository

F = TypeVar("F", bound=Callable[..., Any])

# (operation, args) pairs naming the cache keys to delete
KeySpec = Iterable[tuple[str, Sequence[Any]]]

# Stands for any value of an argument whose value is unknown
ANY_ARG = "*"


def cached(operation: str) -> Callable[[F], F]:
    """Decorator for caching the result of an async repository method.

    The cache key is built from the repository namespace, ``operation``
    and the call arguments in signature order with defaults applied, so
    ``list()`` and ``list(limit=50)`` share a key.

    Args:
        operation: Operation name used in the cache key.

    Returns:
        Decorated method.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(self: "CachedRepository[Any]", *args: Any, **kwargs: Any) -> Any:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            call_args = list(bound.arguments.values())[1:]

            return await self._read_through(
                operation,
                call_args,
                lambda: func(self, *args, **kwargs),
            )

        return wrapper  # type: ignore

    return decorator


def invalidates(keys: Callable[[Any], KeySpec]) -> Callable[[F], F]:
    """Decorator for invalidating cache entries on mutation.

    Executes the decorated method first, then deletes the keys that
    ``keys`` derives from its result. Nothing is invalidated when the
    method raises or returns None.

    Args:
        keys: Maps the method result to ``(operation, args)`` pairs.

    Returns:
        Decorated method.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(self: "CachedRepository[Any]", *args: Any, **kwargs: Any) -> Any:
            result = await func(self, *args, **kwargs)

            if result is not None:
                await self._invalidate(keys(result))

            return result

        return wrapper  # type: ignore

    return decorator
