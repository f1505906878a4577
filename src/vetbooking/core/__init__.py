"""Core domain layer for vetbooking."""

from vetbooking.core.entities import (
    AppointmentStatus,
    CacheConfig,
    CacheEntry,
    CacheKey,
    Role,
)
from vetbooking.core.exceptions import (
    AppointmentNotFoundError,
    BookingConflictError,
    InvalidTransitionError,
    StoreError,
    ValidationError,
    VetBookingError,
)
from vetbooking.core.interfaces import (
    IAppointmentRepository,
    ICacheBackend,
    IDocumentStore,
    IKeyBuilder,
    IPetRepository,
    IUserRepository,
    IValidator,
    IVeterinarianRepository,
)

__all__ = [
    # Entities
    "CacheConfig",
    "CacheEntry",
    "CacheKey",
    "AppointmentStatus",
    "Role",
    # Exceptions
    "VetBookingError",
    "ValidationError",
    "StoreError",
    "AppointmentNotFoundError",
    "BookingConflictError",
    "InvalidTransitionError",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IDocumentStore",
    "IValidator",
    "IUserRepository",
    "IPetRepository",
    "IVeterinarianRepository",
    "IAppointmentRepository",
]
