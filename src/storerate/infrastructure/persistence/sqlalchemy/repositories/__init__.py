"""SQLAlchemy repository implementations."""

from storerate.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # noqa: E501
    RatingRepositorySQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.store_repository import (  # noqa: E501
    StoreRepositorySQLAlchemy,
)
from storerate.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "RatingRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "StoreRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
