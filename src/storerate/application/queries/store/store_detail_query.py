"""Single-store views: by id for any user, and the owner's own store."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import RatingWithRaterDTO, StoreDetailDTO
from storerate.domain.rating import Rating, RatingRepository
from storerate.domain.store import (
    NoOwnedStoreError,
    Store,
    StoreNotFoundError,
    StoreRepository,
)
from storerate.domain.user import UserRepository

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


async def attach_raters(
    ratings: list[Rating],
    user_repo: UserRepository,
) -> list[RatingWithRaterDTO]:
    raters = await user_repo.find_by_ids(rating.user_id for rating in ratings)
    return [
        RatingWithRaterDTO(rating=rating, rater=raters.get(rating.user_id))
        for rating in ratings
    ]


class _StoreDetailBuilder:
    def __init__(
        self,
        store_repository: StoreRepository,
        user_repository: UserRepository,
        rating_repository: RatingRepository,
    ):
        self._store_repo = store_repository
        self._user_repo = user_repository
        self._rating_repo = rating_repository

    async def _build(self, store: Store) -> StoreDetailDTO:
        owner = None
        if store.owner_id is not None:
            owner = await self._user_repo.find_by_id(store.owner_id)

        ratings = await self._rating_repo.list_for_store(store.id)
        statistics = await self._rating_repo.statistics_for_store(store.id)

        return StoreDetailDTO(
            store=store,
            owner=owner,
            statistics=statistics,
            ratings=await attach_raters(ratings, self._user_repo),
        )


class GetStoreQuery(_StoreDetailBuilder):
    """Store with owner summary and every rating, newest first."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetStoreQuery:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, store_id: UUID) -> StoreDetailDTO:
        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        return await self._build(store)


class GetOwnedStoreQuery(_StoreDetailBuilder):
    """The store owned by the acting STORE_OWNER."""

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetOwnedStoreQuery:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, owner_id: UUID) -> StoreDetailDTO:
        store = await self._store_repo.find_by_owner_id(owner_id)
        if store is None:
            raise NoOwnedStoreError(owner_id)
        return await self._build(store)
