"""Document-store repositories and their cached decorators."""

from vetbooking.repositories.appointment import AppointmentRepository
from vetbooking.repositories.cached import (
    CachedAppointmentRepository,
    CachedPetRepository,
    CachedRepository,
    CachedUserRepository,
)
from vetbooking.repositories.pet import PetRepository
from vetbooking.repositories.user import UserRepository
from vetbooking.repositories.veterinarian import VeterinarianRepository

__all__ = [
    "UserRepository",
    "PetRepository",
    "VeterinarianRepository",
    "AppointmentRepository",
    "CachedRepository",
    "CachedUserRepository",
    "CachedPetRepository",
    "CachedAppointmentRepository",
]
