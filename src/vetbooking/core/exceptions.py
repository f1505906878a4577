"""Exception hierarchy for vetbooking."""


class VetBookingError(Exception):
    """Base class for all vetbooking errors."""

    pass


class ValidationError(VetBookingError):
    """Raised by a validator when a request fails one of its checks.

    The message is meant to be shown to the client as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreError(VetBookingError):
    """Raised by document store implementations when a query fails."""

    pass


class AppointmentNotFoundError(VetBookingError):
    """Raised when an appointment is missing or not visible to the caller."""

    pass


class BookingConflictError(VetBookingError):
    """Raised when a veterinarian already has a live booking for a slot."""

    pass


class InvalidTransitionError(VetBookingError):
    """Raised when an appointment cannot move to the requested status."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot change appointment from {current} to {target}")
        self.current = current
        self.target = target
