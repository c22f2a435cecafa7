"""Platform-wide counts for the admin dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storerate.application.dtos import PlatformStatsDTO
from storerate.domain.rating import RatingRepository
from storerate.domain.store import StoreRepository
from storerate.domain.user import UserRepository

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


class PlatformStatsQuery:
    def __init__(
        self,
        user_repository: UserRepository,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
    ):
        self._user_repo = user_repository
        self._store_repo = store_repository
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PlatformStatsQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self) -> PlatformStatsDTO:
        return PlatformStatsDTO(
            total_users=await self._user_repo.count(),
            total_stores=await self._store_repo.count(),
            total_ratings=await self._rating_repo.count(),
        )
