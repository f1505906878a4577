"""Cached user repository."""

from datetime import timedelta

from vetbooking.core.entities.cache_config import CacheConfig
from vetbooking.core.types import Document
from vetbooking.decorators import cached
from vetbooking.repositories.cached.base import CachedRepository
from vetbooking.repositories.user import UserRepository


class CachedUserRepository(CachedRepository[UserRepository]):
    """User repository caching lookups by id."""

    namespace = "userRepo"

    @staticmethod
    def _config_ttl(config: CacheConfig) -> timedelta | None:
        return config.user_ttl

    @cached("findById")
    async def find_by_id(self, user_id: str) -> Document | None:
        return await self._repo.find_by_id(user_id)

    async def find_by_email(self, email: str) -> Document | None:
        return await self._repo.find_by_email(email)

    async def list(self, limit: int = 50) -> list[Document]:
        return await self._repo.list(limit)
