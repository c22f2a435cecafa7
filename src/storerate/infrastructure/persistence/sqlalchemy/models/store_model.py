"""SQLAlchemy model for Store aggregate."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class StoreModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Store aggregates."""

    __tablename__ = "stores"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    address: Mapped[str] = mapped_column(String(400), nullable=False)
    # A user owns at most one store
    owner_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        unique=True,
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<StoreModel(id={self.id}, name={self.name}, owner_id={self.owner_id})>"
