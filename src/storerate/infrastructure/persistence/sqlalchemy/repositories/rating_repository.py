"""SQLAlchemy implementation of RatingRepository."""

import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.domain.rating import (
    DuplicateRatingError,
    Rating,
    RatingRepository,
    RatingStatistics,
)
from storerate.domain.shared.time import ensure_tz_aware
from storerate.infrastructure.persistence.sqlalchemy.models import RatingModel

logger = logging.getLogger(__name__)


class RatingRepositorySQLAlchemy(RatingRepository):
    """SQLAlchemy implementation of the RatingRepository interface.

    The (user_id, store_id) unique constraint backs the one-rating-per-store
    rule when two submissions race past the application-level check.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_and_store(
        self,
        user_id: UUID,
        store_id: UUID,
    ) -> Rating | None:
        stmt = select(RatingModel).where(
            RatingModel.user_id == user_id,
            RatingModel.store_id == store_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def find_by_user_for_stores(
        self,
        user_id: UUID,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, Rating]:
        ids = set(store_ids)
        if not ids:
            return {}

        stmt = select(RatingModel).where(
            RatingModel.user_id == user_id,
            RatingModel.store_id.in_(ids),
        )
        result = await self._session.execute(stmt)
        return {
            model.store_id: self._map_to_domain(model) for model in result.scalars()
        }

    async def list_for_store(self, store_id: UUID) -> list[Rating]:
        stmt = (
            select(RatingModel)
            .where(RatingModel.store_id == store_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars()]

    async def list_for_user(self, user_id: UUID) -> list[Rating]:
        stmt = (
            select(RatingModel)
            .where(RatingModel.user_id == user_id)
            .order_by(RatingModel.created_at.desc(), RatingModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars()]

    async def statistics_for_store(self, store_id: UUID) -> RatingStatistics:
        stats = await self.statistics_for_stores([store_id])
        return stats[store_id]

    async def statistics_for_stores(
        self,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, RatingStatistics]:
        ids = set(store_ids)
        if not ids:
            return {}

        stmt = (
            select(
                RatingModel.store_id,
                func.count(RatingModel.id),
                func.coalesce(func.sum(RatingModel.rating), 0),
            )
            .where(RatingModel.store_id.in_(ids))
            .group_by(RatingModel.store_id)
        )
        result = await self._session.execute(stmt)

        stats = {store_id: RatingStatistics.empty() for store_id in ids}
        for store_id, total, score_sum in result.all():
            stats[store_id] = RatingStatistics(
                total_ratings=int(total),
                score_sum=int(score_sum),
            )
        return stats

    async def save(self, rating: Rating) -> None:
        existing = await self._find_model_by_id(rating.id)

        try:
            if existing:
                existing.rating = rating.score
                existing.updated_at = rating.updated_at
                logger.info(
                    "Updated rating %s for store %s to %d",
                    rating.id,
                    rating.store_id,
                    rating.score,
                )
            else:
                self._session.add(self._map_to_model(rating))
                logger.info(
                    "Created rating %s: user %s rated store %s with %d",
                    rating.id,
                    rating.user_id,
                    rating.store_id,
                    rating.score,
                )

            await self._session.flush()
        except IntegrityError as e:
            message = str(e).lower()
            if "unique" in message or "duplicate" in message:
                raise DuplicateRatingError(rating.user_id, rating.store_id) from e
            raise

    async def count(self) -> int:
        stmt = select(func.count()).select_from(RatingModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, rating_id: UUID) -> RatingModel | None:
        stmt = select(RatingModel).where(RatingModel.id == rating_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: RatingModel) -> Rating:
        return Rating.reconstitute(
            id=model.id,
            user_id=model.user_id,
            store_id=model.store_id,
            score=model.rating,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, rating: Rating) -> RatingModel:
        return RatingModel(
            id=rating.id,
            user_id=rating.user_id,
            store_id=rating.store_id,
            rating=rating.score,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )
