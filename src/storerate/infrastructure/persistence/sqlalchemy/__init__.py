"""SQLAlchemy persistence: models, repositories and the Database handle."""

from storerate.infrastructure.persistence.sqlalchemy.database import Database
from storerate.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

__all__ = ["Database", "SQLAlchemyRepositoryFactory"]
