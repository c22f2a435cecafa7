"""SQLAlchemy model for Rating aggregate."""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

RATING_UNIQUE_CONSTRAINT = "uq_ratings_user_store"


class RatingModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Rating aggregates."""

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name=RATING_UNIQUE_CONSTRAINT),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_ratings_range"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    store_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("stores.id"),
        nullable=False,
        index=True,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RatingModel(id={self.id}, user_id={self.user_id}, "
            f"store_id={self.store_id}, rating={self.rating})>"
        )
