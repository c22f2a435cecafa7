"""Rating read paths for store owners and raters."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import StoreRatingsDTO, UserRatingDTO
from storerate.application.queries.store.store_detail_query import attach_raters
from storerate.domain.rating import RatingRepository
from storerate.domain.shared.exceptions import AccessDeniedError
from storerate.domain.store import StoreNotFoundError, StoreRepository
from storerate.domain.user import UserRepository

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


class ListStoreRatingsQuery:
    """All ratings of a store, visible only to the store's owner."""

    def __init__(
        self,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
        user_repository: UserRepository,
    ):
        self._store_repo = store_repository
        self._rating_repo = rating_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListStoreRatingsQuery:
        return cls(
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(
        self, store_id: UUID, requesting_owner_id: UUID
    ) -> StoreRatingsDTO:
        """
        Raises
        ------
        StoreNotFoundError
            If the store does not exist
        AccessDeniedError
            If the requester does not own the store
        """
        store = await self._store_repo.find_by_id(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        if not store.is_owned_by(requesting_owner_id):
            raise AccessDeniedError(
                details={
                    "store_id": str(store_id),
                    "user_id": str(requesting_owner_id),
                },
            )

        ratings = await self._rating_repo.list_for_store(store_id)
        return StoreRatingsDTO(
            store=store,
            ratings=await attach_raters(ratings, self._user_repo),
            statistics=await self._rating_repo.statistics_for_store(store_id),
        )


class ListUserRatingsQuery:
    """The acting user's ratings, newest first, with store summaries."""

    def __init__(
        self,
        rating_repository: RatingRepository,
        store_repository: StoreRepository,
    ):
        self._rating_repo = rating_repository
        self._store_repo = store_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListUserRatingsQuery:
        return cls(
            rating_repository=factory.rating_repository(),
            store_repository=factory.store_repository(),
        )

    async def execute(self, user_id: UUID) -> list[UserRatingDTO]:
        ratings = await self._rating_repo.list_for_user(user_id)
        stores = await self._store_repo.find_by_ids(r.store_id for r in ratings)
        return [
            UserRatingDTO(rating=rating, store=stores.get(rating.store_id))
            for rating in ratings
        ]
