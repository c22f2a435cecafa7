from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import UUID

from storerate.domain.rating import (
    Rating,
    RatingNotFoundError,
    RatingRepository,
    RatingScore,
)

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory


class UpdateRatingCommand:
    """Overwrite the score of the acting user's existing rating for a store."""

    def __init__(self, rating_repository: RatingRepository):
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateRatingCommand:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, user_id: UUID, store_id: UUID, score: Any) -> Rating:
        rating_score = RatingScore(score)

        rating = await self._rating_repo.find_by_user_and_store(user_id, store_id)
        if rating is None:
            raise RatingNotFoundError(user_id, store_id)

        rating.change_score(rating_score)
        await self._rating_repo.save(rating)
        return rating
