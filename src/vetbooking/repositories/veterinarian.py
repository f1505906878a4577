"""Veterinarian repository."""

from vetbooking.core.types import Document
from vetbooking.repositories.base import (
    NEWEST_FIRST,
    VETERINARIAN_COLLECTION,
    WITHOUT_PASSWORD,
    BaseRepository,
)


class VeterinarianRepository(BaseRepository):
    """Data access for veterinarians."""

    collection = VETERINARIAN_COLLECTION

    async def find_by_id(self, vet_id: str) -> Document | None:
        return await self._store.find_one(
            self.collection, {"_id": vet_id}, projection=WITHOUT_PASSWORD
        )

    async def find_approved(self, vet_id: str) -> Document | None:
        """Find a veterinarian that may take bookings."""
        return await self._store.find_one(
            self.collection,
            {"_id": vet_id, "isApproved": True},
            projection=WITHOUT_PASSWORD,
        )

    async def list_approved(self) -> list[Document]:
        """List approved, unblocked veterinarians, newest first."""
        return await self._store.find(
            self.collection,
            {"approvalStatus": "approved", "isBlocked": False},
            projection=WITHOUT_PASSWORD,
            sort=NEWEST_FIRST,
        )
