"""Cached pet repository."""

from datetime import timedelta

from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.types import Document
from vetbooking.decorators import KeySpec, cached, invalidates
from vetbooking.repositories.cached.base import CachedRepository
from vetbooking.repositories.pet import PetRepository
from vetbooking.utils.ids import ref_id


def _owner_keys(pet: Document) -> KeySpec:
    return [("listByOwner", [ref_id(pet.get("owner"))])]


class CachedPetRepository(CachedRepository[PetRepository]):
    """Pet repository with a read-through cache on owner listings.

    Ownership checks are not cached so a soft-deleted pet stops passing
    them immediately.
    """

    namespace = "petRepo"

    @staticmethod
    def _config_ttl(config: CacheConfig) -> timedelta | None:
        return config.pet_ttl

    @cached("listByOwner")
    async def list_by_owner(self, owner_id: str) -> list[Document]:
        return await self._repo.list_by_owner(owner_id)

    async def find_owned(self, pet_id: str, owner_id: str) -> Document | None:
        return await self._repo.find_owned(pet_id, owner_id)

    @invalidates(_owner_keys)
    async def create(self, data: Document) -> Document:
        return await self._repo.create(data)

    @invalidates(_owner_keys)
    async def update_by_id(self, pet_id: str, patch: Document) -> Document | None:
        return await self._repo.update_by_id(pet_id, patch)
