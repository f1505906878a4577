"""User repository."""

from vetbooking.core.types import Document
from vetbooking.repositories.base import (
    NEWEST_FIRST,
    USER_COLLECTION,
    WITHOUT_PASSWORD,
    BaseRepository,
)


class UserRepository(BaseRepository):
    """Data access for pet owners."""

    collection = USER_COLLECTION

    async def find_by_id(self, user_id: str) -> Document | None:
        return await self._store.find_one(
            self.collection, {"_id": user_id}, projection=WITHOUT_PASSWORD
        )

    async def find_by_email(self, email: str) -> Document | None:
        """Find a user by email; addresses are stored lowercased."""
        return await self._store.find_one(
            self.collection, {"email": email.lower()}, projection=WITHOUT_PASSWORD
        )

    async def list(self, limit: int = 50) -> list[Document]:
        return await self._store.find(
            self.collection,
            {},
            projection=WITHOUT_PASSWORD,
            sort=NEWEST_FIRST,
            limit=limit,
        )
