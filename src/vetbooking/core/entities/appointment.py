"""Appointment status and access role entities."""

from enum import Enum


class AppointmentStatus(str, Enum):
    """Lifecycle states of an appointment."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    REJECTED = "REJECTED"


class Role(str, Enum):
    """Who is asking for an appointment."""

    USER = "user"
    VETERINARIAN = "veterinarian"


# Appointments in these states no longer hold their slot
TERMINAL_STATUSES: frozenset[AppointmentStatus] = frozenset(
    {AppointmentStatus.CANCELLED, AppointmentStatus.REJECTED}
)

TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.PENDING: frozenset(
        {
            AppointmentStatus.APPROVED,
            AppointmentStatus.CANCELLED,
            AppointmentStatus.REJECTED,
        }
    ),
    AppointmentStatus.APPROVED: frozenset(
        {
            AppointmentStatus.CONFIRMED,
            AppointmentStatus.COMPLETED,
            AppointmentStatus.CANCELLED,
            AppointmentStatus.REJECTED,
        }
    ),
    AppointmentStatus.CONFIRMED: frozenset(
        {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED}
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.REJECTED: frozenset(),
}

RESCHEDULABLE_STATUSES: frozenset[AppointmentStatus] = frozenset(
    {
        AppointmentStatus.PENDING,
        AppointmentStatus.APPROVED,
        AppointmentStatus.CONFIRMED,
    }
)


def can_transition(current: AppointmentStatus, target: AppointmentStatus) -> bool:
    """Check whether ``current`` may move to ``target``."""
    return target in TRANSITIONS[current]
