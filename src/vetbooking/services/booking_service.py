"""Booking service - orchestrates validation and appointment persistence."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from vetbooking.core.entities.appointment import (
    RESCHEDULABLE_STATUSES,
    AppointmentStatus,
    Role,
    can_transition,
)
from vetbooking.core.exceptions import (
    AppointmentNotFoundError,
    BookingConflictError,
    InvalidTransitionError,
    ValidationError,
)
from vetbooking.core.interfaces.repositories import (
    IAppointmentRepository,
    IPetRepository,
    IVeterinarianRepository,
)
from vetbooking.core.types import Document, ValidationContext
from vetbooking.utils.dates import parse_datetime, utcnow
from vetbooking.utils.ids import ref_id
from vetbooking.validation.chain import resolve_path
from vetbooking.validation.presets import (
    SLOT_TIME_PATH,
    booking_chain,
    reschedule_chain,
)

logger = logging.getLogger(__name__)


class BookingService:
    """Books, reschedules and advances appointments.

    This is the entry point a request handler calls. Request payloads
    are checked by a validator chain before the store is touched, and a
    veterinarian's slot is checked for live bookings before it is
    taken. ``ValidationError`` and the booking errors propagate for the
    caller to turn into responses.
    """

    def __init__(
        self,
        appointments: IAppointmentRepository,
        pets: IPetRepository,
        vets: IVeterinarianRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the booking service.

        Args:
            appointments: Appointment repository, usually the cached one.
            pets: Pet repository used for ownership checks.
            vets: Veterinarian repository used for approval checks.
            clock: Source of the current time.
        """
        self._appointments = appointments
        self._pets = pets
        self._vets = vets
        self._clock = clock

    async def book(self, user_id: str, payload: ValidationContext) -> Document:
        """Book an appointment for a user's pet.

        Args:
            user_id: The acting user.
            payload: Request fields: ``petId``, ``veterinarianId``,
                ``date``, ``timeSlot.startTime``, ``reason`` and
                optionally ``userNotes``.

        Returns:
            The created appointment, in PENDING state.

        Raises:
            ValidationError: If the payload fails the booking checks.
            BookingConflictError: If the slot is already taken.
        """
        await booking_chain(self._pets, self._vets, user_id, self._clock).handle(payload)

        vet_id = str(payload["veterinarianId"])
        date, time = self._slot(payload)

        conflict = await self._appointments.find_conflict(vet_id, date, time)
        if conflict is not None:
            logger.info("Slot %s %s of veterinarian %s already booked", date, time, vet_id)
            raise BookingConflictError(
                "Time slot is already booked. Please choose another time."
            )

        data: Document = {
            "user": user_id,
            "pet": str(payload["petId"]),
            "veterinarian": vet_id,
            "date": date,
            "time": time,
            "reason": str(payload["reason"]).strip(),
            "status": AppointmentStatus.PENDING.value,
        }
        notes = payload.get("userNotes")
        if isinstance(notes, str) and notes.strip():
            data["comments"] = notes.strip()

        return await self._appointments.create(data)

    async def reschedule(
        self,
        appointment_id: str,
        user_id: str,
        role: Role,
        payload: ValidationContext,
    ) -> Document:
        """Move an appointment to a new slot.

        The appointment goes back to PENDING for the veterinarian to
        review again.

        Args:
            appointment_id: The appointment to move.
            user_id: The acting user or veterinarian.
            role: Which side of the appointment ``user_id`` is on.
            payload: Request fields: ``date``, ``timeSlot.startTime`` and
                optionally ``reason``.

        Returns:
            The updated appointment.

        Raises:
            AppointmentNotFoundError: If the caller cannot see it.
            InvalidTransitionError: If it is completed, cancelled or rejected.
            ValidationError: If the new slot is malformed or in the past.
            BookingConflictError: If the new slot is taken.
        """
        appointment = await self._load(appointment_id, user_id, role)
        current = AppointmentStatus(appointment["status"])
        if current not in RESCHEDULABLE_STATUSES:
            logger.info("Refusing to reschedule %s appointment %s", current.value, appointment_id)
            raise InvalidTransitionError(current.value, AppointmentStatus.PENDING.value)

        await reschedule_chain(self._clock).handle(payload)

        date, time = self._slot(payload)
        vet_id = ref_id(appointment.get("veterinarian"))
        if vet_id is None:
            raise AppointmentNotFoundError(f"Appointment {appointment_id} has no veterinarian")

        conflict = await self._appointments.find_conflict(vet_id, date, time, appointment_id)
        if conflict is not None:
            logger.info("Slot %s %s of veterinarian %s already booked", date, time, vet_id)
            raise BookingConflictError(
                "Selected time slot is not available. Please choose another time."
            )

        patch: Document = {
            "date": date,
            "time": time,
            "status": AppointmentStatus.PENDING.value,
        }
        reason = payload.get("reason")
        if isinstance(reason, str) and reason.strip():
            patch["veterinarianNotes"] = f"Rescheduled: {reason.strip()}"

        return await self._update(appointment_id, patch)

    async def transition(
        self,
        appointment_id: str,
        user_id: str,
        role: Role,
        target: AppointmentStatus,
        **fields: Any,
    ) -> Document:
        """Move an appointment to another status.

        Args:
            appointment_id: The appointment to change.
            user_id: The acting user or veterinarian.
            role: Which side of the appointment ``user_id`` is on.
            target: The status to move to.
            **fields: Extra fields to set, e.g. ``consultationFee`` on
                approval or ``diagnosis`` on completion.

        Returns:
            The updated appointment.

        Raises:
            AppointmentNotFoundError: If the caller cannot see it.
            InvalidTransitionError: If the status graph forbids the move.
        """
        appointment = await self._load(appointment_id, user_id, role)
        current = AppointmentStatus(appointment["status"])
        target = AppointmentStatus(target)
        if not can_transition(current, target):
            logger.info(
                "Rejected transition %s -> %s for appointment %s",
                current.value,
                target.value,
                appointment_id,
            )
            raise InvalidTransitionError(current.value, target.value)

        patch: Document = {**fields, "status": target.value}
        if target is AppointmentStatus.APPROVED:
            patch.setdefault("consultationFee", 0)
        if target is AppointmentStatus.COMPLETED:
            patch["completedAt"] = self._clock()

        return await self._update(appointment_id, patch)

    async def _load(self, appointment_id: str, user_id: str, role: Role) -> Document:
        appointment = await self._appointments.find_by_id_for_role(
            appointment_id, user_id, role
        )
        if appointment is None:
            raise AppointmentNotFoundError(f"Appointment {appointment_id} not found")
        return appointment

    async def _update(self, appointment_id: str, patch: Document) -> Document:
        updated = await self._appointments.update_by_id(appointment_id, patch)
        if updated is None:
            raise AppointmentNotFoundError(f"Appointment {appointment_id} not found")
        return updated

    @staticmethod
    def _slot(payload: ValidationContext) -> tuple[datetime, str]:
        date = parse_datetime(payload["date"])
        time = resolve_path(payload, SLOT_TIME_PATH)
        if date is None or not isinstance(time, str):
            raise ValidationError("Please enter a valid appointment date and time")
        return date, time
