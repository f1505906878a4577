"""Default key builder implementation."""

from collections.abc import Sequence
from typing import Any

from vetbooking.core.entities.cache_key import CacheKey


class DefaultKeyBuilder:
    """Default key builder joining components with ``:``.

    Produces readable keys such as ``aptRepo:findByUser:<user id>`` so
    that mutations can rebuild, and delete, the exact keys of the list
    lookups they affect.
    """

    def __init__(self, prefix: str | None = None) -> None:
        """Initialize the key builder.

        Args:
            prefix: Optional prefix placed before the namespace, for
                sharing one backend between applications.
        """
        self._prefix = prefix

    def build(
        self,
        namespace: str,
        operation: str,
        args: Sequence[Any] = (),
    ) -> str:
        """Build the cache key for a repository call.

        Args:
            namespace: Repository namespace tag.
            operation: Name of the repository operation.
            args: Positional arguments of the call, in call order.

        Returns:
            ``[prefix:]namespace:operation:arg1:arg2...``
        """
        key = str(CacheKey.from_call(namespace, operation, args))
        if self._prefix:
            return f"{self._prefix}:{key}"
        return key

    def namespace_pattern(self, namespace: str) -> str:
        """Build a glob pattern matching every key of a namespace.

        Args:
            namespace: Repository namespace tag.

        Returns:
            A pattern usable with ``delete_pattern``.
        """
        if self._prefix:
            return f"{self._prefix}:{namespace}:*"
        return f"{namespace}:*"
