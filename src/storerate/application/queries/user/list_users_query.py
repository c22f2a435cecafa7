"""Admin user directory queries."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from storerate.application.dtos import OwnedStoreSummaryDTO, UserWithStoreDTO
from storerate.domain.rating import RatingRepository, RatingStatistics
from storerate.domain.shared.pagination import Page, PageRequest
from storerate.domain.store import StoreRepository
from storerate.domain.user import (
    User,
    UserFilter,
    UserNotFoundError,
    UserRepository,
    UserSort,
)

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


async def _attach_owned_stores(
    users: list[User],
    store_repo: StoreRepository,
    rating_repo: RatingRepository,
) -> list[UserWithStoreDTO]:
    stores_by_owner = await store_repo.find_by_owner_ids(user.id for user in users)
    stats = await rating_repo.statistics_for_stores(
        store.id for store in stores_by_owner.values()
    )

    items = []
    for user in users:
        store = stores_by_owner.get(user.id)
        summary = None
        if store is not None:
            summary = OwnedStoreSummaryDTO(
                id=store.id,
                name=store.name,
                average_rating=stats.get(
                    store.id,
                    RatingStatistics.empty(),
                ).average_rating,
            )
        items.append(UserWithStoreDTO(user=user, store=summary))
    return items


class ListUsersQuery:
    """Search, sort and paginate the user directory."""

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
    def from_factory(cls, factory: RepositoryFactory) -> ListUsersQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(
        self,
        user_filter: UserFilter,
        sort: UserSort,
        page: PageRequest,
    ) -> Page[UserWithStoreDTO]:
        users, total = await self._user_repo.search(user_filter, sort, page)
        items = await _attach_owned_stores(users, self._store_repo, self._rating_repo)
        return Page.of(items, total, page)


class GetUserQuery:
    """Fetch one user with the summary of the store they own."""

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
    def from_factory(cls, factory: RepositoryFactory) -> GetUserQuery:
        return cls(
            user_repository=factory.user_repository(),
            store_repository=factory.store_repository(),
            rating_repository=factory.rating_repository(),
        )

    async def execute(self, user_id: UUID) -> UserWithStoreDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        [item] = await _attach_owned_stores([user], self._store_repo, self._rating_repo)
        return item
