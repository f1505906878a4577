"""Validator interface."""

from typing import Protocol

from vetbooking.core.types import ValidationContext


class IValidator(Protocol):
    """Contract for a single-responsibility request check."""

    async def validate(self, ctx: ValidationContext) -> None:
        """Check the context.

        Args:
            ctx: Request fields, keyed by name.

        Raises:
            ValidationError: If the check fails.
        """
        ...
