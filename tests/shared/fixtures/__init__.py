"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    TEST_JWT_SECRET,
    make_settings,
    postgres_container,
    postgres_database,
    sqlite_database,
)
from tests.shared.fixtures.factories import (
    make_rating,
    make_store,
    make_user,
)

__all__ = [
    "TEST_JWT_SECRET",
    "make_rating",
    "make_settings",
    "make_store",
    "make_user",
    "postgres_container",
    "postgres_database",
    "sqlite_database",
]
