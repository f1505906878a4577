"""Concrete request validators.

Each validator performs one check and raises ``ValidationError`` with a
client-facing message when it fails.
"""

import re
from collections.abc import Callable, Sequence
from datetime import datetime

from vetbooking.core.exceptions import ValidationError
from vetbooking.core.interfaces.repositories import (
    IPetRepository,
    IVeterinarianRepository,
)
from vetbooking.core.types import ValidationContext
from vetbooking.utils.dates import parse_datetime, utcnow
from vetbooking.utils.ids import is_object_id
from vetbooking.validation.chain import resolve_path

TIME_RE = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]")


class RequireFieldsValidator:
    """Fail when any listed field is absent, None or an empty string."""

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields = tuple(fields)

    async def validate(self, ctx: ValidationContext) -> None:
        missing = [
            field for field in self._fields
            if ctx.get(field) is None or ctx.get(field) == ""
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")


class ObjectIdValidator:
    """Fail when a listed field is not a well-formed document id."""

    def __init__(self, fields: Sequence[str]) -> None:
        self._fields = tuple(fields)

    async def validate(self, ctx: ValidationContext) -> None:
        for field in self._fields:
            if not is_object_id(ctx.get(field)):
                raise ValidationError(f"Invalid id for {field}")


class PetOwnershipValidator:
    """Fail unless ``petId`` names an active pet owned by the acting user."""

    def __init__(self, pets: IPetRepository, user_id: str) -> None:
        self._pets = pets
        self._user_id = user_id

    async def validate(self, ctx: ValidationContext) -> None:
        pet_id = ctx.get("petId")
        pet = None
        if isinstance(pet_id, str):
            pet = await self._pets.find_owned(pet_id, self._user_id)
        if pet is None:
            raise ValidationError("Pet not found or does not belong to you")


class VetApprovalValidator:
    """Fail unless ``veterinarianId`` names an approved veterinarian."""

    def __init__(self, vets: IVeterinarianRepository) -> None:
        self._vets = vets

    async def validate(self, ctx: ValidationContext) -> None:
        vet_id = ctx.get("veterinarianId")
        vet = None
        if isinstance(vet_id, str):
            vet = await self._vets.find_approved(vet_id)
        if vet is None:
            raise ValidationError("Veterinarian not found or not available")


class FutureDateValidator:
    """Fail unless a date field parses and lies strictly after now."""

    def __init__(
        self,
        field: str = "date",
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._field = field
        self._clock = clock

    async def validate(self, ctx: ValidationContext) -> None:
        parsed = parse_datetime(ctx.get(self._field))
        if parsed is None or parsed <= self._clock():
            raise ValidationError("Appointment date must be in the future")


class TimeFormatValidator:
    """Fail unless the value at a dotted path is an ``HH:MM`` time.

    Hours run 0-23 (a single leading digit is allowed), minutes 00-59.
    """

    def __init__(self, field_path: str) -> None:
        self._field_path = field_path

    async def validate(self, ctx: ValidationContext) -> None:
        value = resolve_path(ctx, self._field_path)
        if not isinstance(value, str) or TIME_RE.fullmatch(value) is None:
            raise ValidationError("Please enter a valid time in HH:MM format")
