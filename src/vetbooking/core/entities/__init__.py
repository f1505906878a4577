"""Domain entities for vetbooking."""

from vetbooking.core.entities.appointment import (
    RESCHEDULABLE_STATUSES,
    TERMINAL_STATUSES,
    TRANSITIONS,
    AppointmentStatus,
    Role,
    can_transition,
)
from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.entities.cache_entry import CacheEntry
from vetbooking.core.entities.cache_key import CacheKey

__all__ = [
    "CacheEntry",
    "CacheKey",
    "CacheConfig",
    "AppointmentStatus",
    "Role",
    "TERMINAL_STATUSES",
    "RESCHEDULABLE_STATUSES",
    "TRANSITIONS",
    "can_transition",
]
