"""Pet repository."""

from vetbooking.core.types import Document
from vetbooking.repositories.base import NEWEST_FIRST, PET_COLLECTION, BaseRepository


class PetRepository(BaseRepository):
    """Data access for pets.

    Pets are soft deleted by clearing ``isActive``; inactive pets are
    left out of listings and ownership checks.
    """

    collection = PET_COLLECTION

    async def list_by_owner(self, owner_id: str) -> list[Document]:
        return await self._store.find(
            self.collection,
            {"owner": owner_id, "isActive": True},
            sort=NEWEST_FIRST,
        )

    async def find_owned(self, pet_id: str, owner_id: str) -> Document | None:
        return await self._store.find_one(
            self.collection,
            {"_id": pet_id, "owner": owner_id, "isActive": True},
        )

    async def create(self, data: Document) -> Document:
        return await self._store.insert_one(
            self.collection, {"isActive": True, **data}
        )

    async def update_by_id(self, pet_id: str, patch: Document) -> Document | None:
        return await self._store.update_one(self.collection, {"_id": pet_id}, patch)
