"""Core interfaces (Protocol classes) for vetbooking."""

from vetbooking.core.interfaces.cache_backend import ICacheBackend
from vetbooking.core.interfaces.document_store import IDocumentStore
from vetbooking.core.interfaces.key_builder import IKeyBuilder
from vetbooking.core.interfaces.repositories import (
    IAppointmentRepository,
    IPetRepository,
    IUserRepository,
    IVeterinarianRepository,
)
from vetbooking.core.interfaces.validator import IValidator

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
    "IDocumentStore",
    "IValidator",
    "IUserRepository",
    "IPetRepository",
    "IVeterinarianRepository",
    "IAppointmentRepository",
]
