"""Validator chain runner."""

import logging
from collections.abc import Iterable, Iterator

from vetbooking.core.exceptions import ValidationError
from vetbooking.core.interfaces.validator import IValidator
from vetbooking.core.types import ValidationContext, ValidationValue

logger = logging.getLogger(__name__)


def resolve_path(ctx: ValidationContext, path: str) -> ValidationValue:
    """Look up a dotted path such as ``timeSlot.startTime``.

    Args:
        ctx: The validation context.
        path: Field names separated by ``.``.

    Returns:
        The value at the path, or None if any step along it is absent.
    """
    value: ValidationValue = ctx
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class ValidatorChain:
    """Immutable, ordered sequence of validators.

    ``handle`` runs the validators in order and stops at the first
    failure, whose ``ValidationError`` propagates unchanged. Chains are
    extended with ``then``, which returns a new chain, so a chain can be
    built once per route and shared between requests.

    Example:
        chain = ValidatorChain([
            RequireFieldsValidator(["date"]),
            FutureDateValidator(),
        ]).then(TimeFormatValidator("timeSlot.startTime"))
        await chain.handle({"date": "2030-01-01", ...})
    """

    def __init__(self, validators: Iterable[IValidator] = ()) -> None:
        self._validators: tuple[IValidator, ...] = tuple(validators)

    def then(self, validator: IValidator) -> "ValidatorChain":
        """Return a new chain with ``validator`` appended."""
        return ValidatorChain((*self._validators, validator))

    async def handle(self, ctx: ValidationContext) -> None:
        """Run every validator against ``ctx``.

        Raises:
            ValidationError: From the first validator that fails.
        """
        for validator in self._validators:
            try:
                await validator.validate(ctx)
            except ValidationError as e:
                logger.debug(
                    "Validation failed in %s: %s", type(validator).__name__, e.message
                )
                raise

    async def validate(self, ctx: ValidationContext) -> None:
        """Run the chain as a single validator, so chains can nest."""
        await self.handle(ctx)

    def __iter__(self) -> Iterator[IValidator]:
        return iter(self._validators)

    def __len__(self) -> int:
        return len(self._validators)
