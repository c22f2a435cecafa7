"""Store directory listing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from storerate.application.dtos import StoreListItemDTO
from storerate.domain.rating import RatingRepository, RatingStatistics
from storerate.domain.shared.pagination import Page, PageRequest
from storerate.domain.store import StoreFilter, StoreRepository, StoreSort

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


class ListStoresQuery:
    """Search, sort and paginate stores with their derived rating data.

    When a requesting user is given, each entry also carries that user's
    own rating of the store.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        rating_repository: RatingRepository,
    ):
        self._store_repo = store_repository
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListStoresQuery:
        return cls(
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(
        self,
        store_filter: StoreFilter,
        sort: StoreSort,
        page: PageRequest,
        requesting_user_id: Optional[UUID] = None,
    ) -> Page[StoreListItemDTO]:
        stores, total = await self._store_repo.search(store_filter, sort, page)
        store_ids = [store.id for store in stores]

        stats = await self._rating_repo.statistics_for_stores(store_ids)
        own_ratings = {}
        if requesting_user_id is not None:
            own_ratings = await self._rating_repo.find_by_user_for_stores(
                requesting_user_id,
                store_ids,
            )

        items = [
            StoreListItemDTO(
                store=store,
                statistics=stats.get(store.id, RatingStatistics.empty()),
                user_rating=own_ratings.get(store.id),
            )
            for store in stores
        ]
        return Page.of(items, total, page)
