"""Cached appointment repository."""

from datetime import datetime, timedelta

from vetbooking.core.entities.appointment import Role
from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.types import Document
from vetbooking.decorators import ANY_ARG, KeySpec, cached, invalidates
from vetbooking.repositories.appointment import AppointmentRepository
from vetbooking.repositories.cached.base import CachedRepository
from vetbooking.utils.ids import ref_id


def _party(appointment: Document, field: str) -> str:
    # An expanded reference whose document is gone comes back as None
    return ref_id(appointment.get(field)) or ANY_ARG


def _list_keys(appointment: Document) -> KeySpec:
    return [
        ("findByUser", [_party(appointment, "user")]),
        ("findByVeterinarian", [_party(appointment, "veterinarian")]),
    ]


def _update_keys(appointment: Document) -> KeySpec:
    appointment_id = appointment["_id"]
    return [
        *_list_keys(appointment),
        (
            "findByIdForRole",
            [appointment_id, _party(appointment, "user"), Role.USER],
        ),
        (
            "findByIdForRole",
            [appointment_id, _party(appointment, "veterinarian"), Role.VETERINARIAN],
        ),
    ]


class CachedAppointmentRepository(CachedRepository[AppointmentRepository]):
    """Appointment repository with a short-lived read-through cache.

    Conflict lookups always reach the store: a stale answer there could
    double-book a veterinarian. Mutations clear the owner's and the
    veterinarian's listings; updates also clear both by-id views of the
    updated appointment.
    """

    namespace = "aptRepo"

    @staticmethod
    def _config_ttl(config: CacheConfig) -> timedelta | None:
        return config.appointment_ttl

    @cached("findByUser")
    async def find_by_user(self, user_id: str) -> list[Document]:
        return await self._repo.find_by_user(user_id)

    @cached("findByVeterinarian")
    async def find_by_veterinarian(self, vet_id: str) -> list[Document]:
        return await self._repo.find_by_veterinarian(vet_id)

    @cached("findByIdForRole")
    async def find_by_id_for_role(
        self,
        appointment_id: str,
        user_id: str,
        role: Role,
    ) -> Document | None:
        return await self._repo.find_by_id_for_role(appointment_id, user_id, role)

    async def find_conflict(
        self,
        vet_id: str,
        date: datetime,
        time: str,
        exclude_id: str | None = None,
    ) -> Document | None:
        return await self._repo.find_conflict(vet_id, date, time, exclude_id)

    @invalidates(_list_keys)
    async def create(self, data: Document) -> Document:
        return await self._repo.create(data)

    @invalidates(_update_keys)
    async def update_by_id(
        self,
        appointment_id: str,
        patch: Document,
    ) -> Document | None:
        return await self._repo.update_by_id(appointment_id, patch)
