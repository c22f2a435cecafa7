"""Fixtures for repository tests against a real database."""

import pytest_asyncio

from storerate.infrastructure.persistence.sqlalchemy import SQLAlchemyRepositoryFactory
from tests.shared.fixtures.database import (  # noqa: F401
    postgres_container,
    postgres_database,
    sqlite_database,
)


@pytest_asyncio.fixture
async def db_session(sqlite_database):
    async with sqlite_database.session() as session:
        yield session


@pytest_asyncio.fixture
async def factory(db_session):
    return SQLAlchemyRepositoryFactory(db_session)
