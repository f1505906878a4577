"""Cache key value object."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

KEY_DELIMITER = ":"


def stringify_part(value: Any) -> str:
    """Render one key component.

    Args:
        value: An argument of a repository call.

    Returns:
        The component as it appears in the key. ``None`` renders empty.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class CacheKey:
    """Immutable cache key value object.

    Encapsulates the components of a repository cache key: the
    repository namespace, the operation name, and the call arguments
    in call order.
    """

    namespace: str
    operation: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the full cache key string.

        Returns:
            ``namespace:operation:arg1:arg2...``
        """
        return KEY_DELIMITER.join([self.namespace, self.operation, *self.args])

    @classmethod
    def from_call(
        cls,
        namespace: str,
        operation: str,
        args: Iterable[Any] = (),
    ) -> "CacheKey":
        """Create a CacheKey from raw call arguments.

        Args:
            namespace: Repository namespace tag.
            operation: Operation name.
            args: Positional arguments of the call, in order.

        Returns:
            A new CacheKey instance.
        """
        return cls(
            namespace=namespace,
            operation=operation,
            args=tuple(stringify_part(arg) for arg in args),
        )
