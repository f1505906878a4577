"""Appointment repository."""

from datetime import datetime

from vetbooking.core.entities.appointment import (
    TERMINAL_STATUSES,
    AppointmentStatus,
    Role,
)
from vetbooking.core.types import Document, Filter
from vetbooking.repositories.base import (
    APPOINTMENT_COLLECTION,
    PET_COLLECTION,
    USER_COLLECTION,
    VETERINARIAN_COLLECTION,
    BaseRepository,
)
from vetbooking.utils.ids import is_object_id

USER_SUMMARY = ("name", "email", "contact")
PET_SUMMARY = ("name", "type", "breed", "age", "weight")
VET_SUMMARY = ("name", "email", "specialization")

# Single-appointment views carry more of the pet and veterinarian
PET_DETAIL = (*PET_SUMMARY, "color", "medicalHistory")
VET_DETAIL = (*VET_SUMMARY, "experience", "consultationFeeRange")

LATEST_DATE_FIRST = [("date", -1)]


class AppointmentRepository(BaseRepository):
    """Data access for appointments.

    Listings and single lookups are scoped to the owning user or the
    assigned veterinarian, and come back with the linked user, pet and
    veterinarian expanded into summaries.
    """

    collection = APPOINTMENT_COLLECTION

    async def find_by_user(self, user_id: str) -> list[Document]:
        return await self._list({"user": user_id})

    async def find_by_veterinarian(self, vet_id: str) -> list[Document]:
        return await self._list({"veterinarian": vet_id})

    async def find_by_id_for_role(
        self,
        appointment_id: str,
        user_id: str,
        role: Role,
    ) -> Document | None:
        """Find an appointment visible to the given user or veterinarian.

        Args:
            appointment_id: The appointment id.
            user_id: Id of the acting user or veterinarian.
            role: Which side of the appointment ``user_id`` is on.

        Returns:
            The expanded appointment, or None if it does not exist or
            belongs to someone else.
        """
        owner_field = "user" if Role(role) is Role.USER else "veterinarian"
        appointment = await self._store.find_one(
            self.collection, {"_id": appointment_id, owner_field: user_id}
        )
        if appointment is None:
            return None

        await self._expand([appointment], "user", USER_COLLECTION, USER_SUMMARY)
        await self._expand([appointment], "pet", PET_COLLECTION, PET_DETAIL)
        await self._expand(
            [appointment], "veterinarian", VETERINARIAN_COLLECTION, VET_DETAIL
        )
        return appointment

    async def find_conflict(
        self,
        vet_id: str,
        date: datetime,
        time: str,
        exclude_id: str | None = None,
    ) -> Document | None:
        """Find a live booking holding the veterinarian's slot.

        Cancelled and rejected appointments do not hold a slot.

        Args:
            vet_id: The veterinarian id.
            date: Appointment date.
            time: Appointment time, ``HH:MM``.
            exclude_id: An appointment to ignore, e.g. the one being
                rescheduled. Ignored unless it is a well-formed id.

        Returns:
            The conflicting appointment, or None if the slot is free.
        """
        query: Filter = {
            "veterinarian": vet_id,
            "date": date,
            "time": time,
            "status": {"$nin": sorted(status.value for status in TERMINAL_STATUSES)},
        }
        if exclude_id and is_object_id(exclude_id):
            query["_id"] = {"$ne": exclude_id}
        return await self._store.find_one(self.collection, query)

    async def create(self, data: Document) -> Document:
        """Insert an appointment; new appointments start out PENDING."""
        return await self._store.insert_one(
            self.collection, {"status": AppointmentStatus.PENDING.value, **data}
        )

    async def update_by_id(
        self,
        appointment_id: str,
        patch: Document,
    ) -> Document | None:
        appointment = await self._store.update_one(
            self.collection, {"_id": appointment_id}, patch
        )
        if appointment is None:
            return None
        await self._expand_summaries([appointment])
        return appointment

    async def _list(self, query: Filter) -> list[Document]:
        appointments = await self._store.find(
            self.collection, query, sort=LATEST_DATE_FIRST
        )
        await self._expand_summaries(appointments)
        return appointments

    async def _expand_summaries(self, appointments: list[Document]) -> None:
        await self._expand(appointments, "user", USER_COLLECTION, USER_SUMMARY)
        await self._expand(appointments, "pet", PET_COLLECTION, PET_SUMMARY)
        await self._expand(
            appointments, "veterinarian", VETERINARIAN_COLLECTION, VET_SUMMARY
        )
