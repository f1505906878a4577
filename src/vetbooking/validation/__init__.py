"""Request validation: single-purpose validators and the chain runner."""

from vetbooking.validation.chain import ValidatorChain, resolve_path
from vetbooking.validation.presets import booking_chain, reschedule_chain
from vetbooking.validation.validators import (
    FutureDateValidator,
    ObjectIdValidator,
    PetOwnershipValidator,
    RequireFieldsValidator,
    TimeFormatValidator,
    VetApprovalValidator,
)

__all__ = [
    "ValidatorChain",
    "resolve_path",
    "RequireFieldsValidator",
    "ObjectIdValidator",
    "PetOwnershipValidator",
    "VetApprovalValidator",
    "FutureDateValidator",
    "TimeFormatValidator",
    "booking_chain",
    "reschedule_chain",
]
