"""SQLAlchemy models (importing this module registers them on Base.metadata)."""

from storerate.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from storerate.infrastructure.persistence.sqlalchemy.models.rating_model import (
    RATING_UNIQUE_CONSTRAINT,
    RatingModel,
)
from storerate.infrastructure.persistence.sqlalchemy.models.store_model import (
    StoreModel,
)
from storerate.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "RATING_UNIQUE_CONSTRAINT",
    "RatingModel",
    "StoreModel",
    "TimestampMixin",
    "UserModel",
]
