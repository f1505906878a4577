"""Repository interfaces.

Base repositories and their cached decorators both satisfy these
protocols, so callers cannot tell one from the other.
"""

from datetime import datetime
from typing import Protocol

from vetbooking.core.entities.appointment import Role
from vetbooking.core.types import Document


class IUserRepository(Protocol):
    """Data access for pet owners."""

    async def find_by_id(self, user_id: str) -> Document | None: ...

    async def find_by_email(self, email: str) -> Document | None: ...

    async def list(self, limit: int = 50) -> list[Document]: ...


class IPetRepository(Protocol):
    """Data access for pets."""

    async def list_by_owner(self, owner_id: str) -> list[Document]: ...

    async def find_owned(self, pet_id: str, owner_id: str) -> Document | None: ...

    async def create(self, data: Document) -> Document: ...

    async def update_by_id(self, pet_id: str, patch: Document) -> Document | None: ...


class IVeterinarianRepository(Protocol):
    """Data access for veterinarians."""

    async def find_by_id(self, vet_id: str) -> Document | None: ...

    async def find_approved(self, vet_id: str) -> Document | None: ...

    async def list_approved(self) -> list[Document]: ...


class IAppointmentRepository(Protocol):
    """Data access for appointments."""

    async def find_by_user(self, user_id: str) -> list[Document]: ...

    async def find_by_veterinarian(self, vet_id: str) -> list[Document]: ...

    async def find_by_id_for_role(
        self,
        appointment_id: str,
        user_id: str,
        role: Role,
    ) -> Document | None: ...

    async def find_conflict(
        self,
        vet_id: str,
        date: datetime,
        time: str,
        exclude_id: str | None = None,
    ) -> Document | None: ...

    async def create(self, data: Document) -> Document: ...

    async def update_by_id(
        self,
        appointment_id: str,
        patch: Document,
    ) -> Document | None: ...
