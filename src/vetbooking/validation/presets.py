"""Validator chains for the appointment endpoints."""

from collections.abc import Callable
from datetime import datetime

from vetbooking.core.interfaces.repositories import (
    IPetRepository,
    IVeterinarianRepository,
)
from vetbooking.utils.dates import utcnow
from vetbooking.validation.chain import ValidatorChain
from vetbooking.validation.validators import (
    FutureDateValidator,
    ObjectIdValidator,
    PetOwnershipValidator,
    RequireFieldsValidator,
    TimeFormatValidator,
    VetApprovalValidator,
)

BOOKING_FIELDS = ("petId", "veterinarianId", "date", "timeSlot", "reason")
SLOT_TIME_PATH = "timeSlot.startTime"


def booking_chain(
    pets: IPetRepository,
    vets: IVeterinarianRepository,
    user_id: str,
    clock: Callable[[], datetime] = utcnow,
) -> ValidatorChain:
    """Build the chain that guards a new booking.

    Cheap shape checks run before the checks that hit the store.
    """
    return ValidatorChain(
        [
            RequireFieldsValidator(BOOKING_FIELDS),
            ObjectIdValidator(["petId", "veterinarianId"]),
            PetOwnershipValidator(pets, user_id),
            VetApprovalValidator(vets),
            FutureDateValidator(clock=clock),
            TimeFormatValidator(SLOT_TIME_PATH),
        ]
    )


def reschedule_chain(clock: Callable[[], datetime] = utcnow) -> ValidatorChain:
    """Build the chain that guards moving a booking to a new slot."""
    return ValidatorChain(
        [
            RequireFieldsValidator(["date"]),
            FutureDateValidator(clock=clock),
            TimeFormatValidator(SLOT_TIME_PATH),
        ]
    )
