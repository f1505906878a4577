"""Composition root wiring repositories, cache and services."""

from dataclasses import dataclass

from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.interfaces.cache_backend import ICacheBackend
from vetbooking.core.interfaces.document_store import IDocumentStore
from vetbooking.core.interfaces.key_builder import IKeyBuilder
from vetbooking.infrastructure.backends.memory import InMemoryCacheBackend
from vetbooking.infrastructure.key_builders.default import DefaultKeyBuilder
from vetbooking.repositories.appointment import AppointmentRepository
from vetbooking.repositories.cached.appointment import CachedAppointmentRepository
from vetbooking.repositories.cached.pet import CachedPetRepository
from vetbooking.repositories.cached.user import CachedUserRepository
from vetbooking.repositories.pet import PetRepository
from vetbooking.repositories.user import UserRepository
from vetbooking.repositories.veterinarian import VeterinarianRepository
from vetbooking.services.booking_service import BookingService


@dataclass
class Repositories:
    """Everything a request handler needs, sharing one cache."""

    cache: ICacheBackend
    users: CachedUserRepository
    pets: CachedPetRepository
    veterinarians: VeterinarianRepository
    appointments: CachedAppointmentRepository
    booking: BookingService


def build_repositories(
    store: IDocumentStore,
    config: CacheConfig | None = None,
    backend: ICacheBackend | None = None,
    key_builder: IKeyBuilder | None = None,
) -> Repositories:
    """Build the repositories for one application instance.

    The returned cache lives as long as the returned object; build this
    once at startup and hand its members to the request handlers.

    Args:
        store: Document store the repositories query.
        config: Cache configuration. Uses defaults if not provided.
        backend: Cache backend. Defaults to an in-memory backend sized
            by ``config.max_size``.
        key_builder: Key builder. Defaults to DefaultKeyBuilder.

    Returns:
        The wired repositories and booking service.

    Example:
        repos = build_repositories(InMemoryDocumentStore())
        appointment = await repos.booking.book(user_id, payload)
    """
    config = config or CacheConfig()
    if backend is None:
        default_ttl = config.default_ttl.total_seconds() if config.default_ttl else 60.0
        backend = InMemoryCacheBackend(maxsize=config.max_size, default_ttl=default_ttl)
    key_builder = key_builder or DefaultKeyBuilder()

    users = CachedUserRepository(UserRepository(store), backend, key_builder, config)
    pets = CachedPetRepository(PetRepository(store), backend, key_builder, config)
    appointments = CachedAppointmentRepository(
        AppointmentRepository(store), backend, key_builder, config
    )
    veterinarians = VeterinarianRepository(store)

    return Repositories(
        cache=backend,
        users=users,
        pets=pets,
        veterinarians=veterinarians,
        appointments=appointments,
        booking=BookingService(appointments, pets, veterinarians),
    )
