"""Cached repository decorators."""

from vetbooking.repositories.cached.appointment import CachedAppointmentRepository
from vetbooking.repositories.cached.base import CachedRepository
from vetbooking.repositories.cached.pet import CachedPetRepository
from vetbooking.repositories.cached.user import CachedUserRepository

__all__ = [
    "CachedRepository",
    "CachedAppointmentRepository",
    "CachedPetRepository",
    "CachedUserRepository",
]
