"""Key builder interface."""

from collections.abc import Sequence
from typing import Any, Protocol


class IKeyBuilder(Protocol):
    """Contract for building cache keys from repository calls.

    Key builders must be deterministic: the same namespace, operation
    and arguments always produce the same key, and calls that differ in
    any argument never share one.
    """

    def build(
        self,
        namespace: str,
        operation: str,
        args: Sequence[Any] = (),
    ) -> str:
        """Build the cache key for a repository call.

        Args:
            namespace: Repository namespace tag (e.g. ``aptRepo``).
            operation: Name of the repository operation.
            args: Positional arguments of the call, in call order.

        Returns:
            A string key for caching the call result.
        """
        ...

    def namespace_pattern(self, namespace: str) -> str:
        """Build a glob pattern matching every key of a namespace.

        Args:
            namespace: Repository namespace tag.

        Returns:
            A pattern usable with ``ICacheBackend.delete_pattern``.
        """
        ...
