"""vetbooking - data-access core of a pet-hospital booking backend.

Provides a TTL cache, read-through cached repositories over a document
store, and validator chains for booking requests. One cache instance is
built at startup and shared by every cached repository.

Example:
    from vetbooking import (
        CacheConfig,
        InMemoryDocumentStore,
        Role,
        build_repositories,
    )

    repos = build_repositories(
        InMemoryDocumentStore(),
        config=CacheConfig(appointment_ttl=timedelta(seconds=30)),
    )

    # Validated, conflict-checked booking
    appointment = await repos.booking.book(
        user_id,
        {
            "petId": pet_id,
            "veterinarianId": vet_id,
            "date": "2030-05-01T00:00:00Z",
            "timeSlot": {"startTime": "10:30"},
            "reason": "Annual checkup",
        },
    )

    # Served from cache for 30 seconds, cleared by the booking above
    mine = await repos.appointments.find_by_user(user_id)

Building a chain by hand:
    from vetbooking.validation import (
        FutureDateValidator,
        RequireFieldsValidator,
        ValidatorChain,
    )

    chain = ValidatorChain([
        RequireFieldsValidator(["date"]),
        FutureDateValidator(),
    ])
    await chain.handle({"date": "2020-05-01"})  # raises ValidationError
"""

from vetbooking.container import Repositories, build_repositories
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
from vetbooking.decorators import cached, invalidates
from vetbooking.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    InMemoryDocumentStore,
)
from vetbooking.repositories import (
    AppointmentRepository,
    CachedAppointmentRepository,
    CachedPetRepository,
    CachedRepository,
    CachedUserRepository,
    PetRepository,
    UserRepository,
    VeterinarianRepository,
)
from vetbooking.services import BookingService
from vetbooking.validation import ValidatorChain

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
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
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    "IDocumentStore",
    "IValidator",
    "IUserRepository",
    "IPetRepository",
    "IVeterinarianRepository",
    "IAppointmentRepository",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "InMemoryDocumentStore",
    # Repositories
    "UserRepository",
    "PetRepository",
    "VeterinarianRepository",
    "AppointmentRepository",
    "CachedRepository",
    "CachedUserRepository",
    "CachedPetRepository",
    "CachedAppointmentRepository",
    # Services
    "BookingService",
    "ValidatorChain",
    "Repositories",
    "build_repositories",
    # Decorators
    "cached",
    "invalidates",
]
