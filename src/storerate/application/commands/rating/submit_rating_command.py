from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from storerate.domain.rating import (
    DuplicateRatingError,
    Rating,
    RatingRepository,
    RatingScore,
)
from storerate.domain.store import StoreNotFoundError, StoreRepository

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


class SubmitRatingCommand:
    """Create the acting user's first rating for a store."""

    def __init__(
        self,
        rating_repository: RatingRepository,
        store_repository: StoreRepository,
    ):
        self._rating_repo = rating_repository
        self._store_repo = store_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SubmitRatingCommand:
        return cls(
            rating_repository=factory.rating_repository(),
            store_repository=factory.store_repository(),
        )

    async def execute(self, user_id: UUID, store_id: UUID, score: Any) -> Rating:
        """
        Raises
        ------
        InvalidRatingError
            If score is not an integer from 1 to 5 (checked first)
        StoreNotFoundError
            If the store does not exist
        DuplicateRatingError
            If the user already rated the store
        """
        rating_score = RatingScore(score)

        if await self._store_repo.find_by_id(store_id) is None:
            raise StoreNotFoundError(store_id)

        if await self._rating_repo.find_by_user_and_store(user_id, store_id):
            raise DuplicateRatingError(user_id, store_id)

        rating = Rating.create(user_id=user_id, store_id=store_id, score=rating_score)
        await self._rating_repo.save(rating)
        return rating
