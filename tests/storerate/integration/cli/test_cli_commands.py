"""Tests for the storerate CLI."""

import pytest
from typer.testing import CliRunner

from storerate.domain.user import UserRole
from storerate.infrastructure.persistence.sqlalchemy import SQLAlchemyRepositoryFactory
from storerate.presentation.cli.app import app
from storerate.presentation.cli.seed import (
    SEED_RATINGS,
    SEED_STORES,
    SEED_USERS,
    seed_demo_data,
)
from storerate_auth import PasswordHashingService
from storerate_config import clear_settings_cache
from tests.shared.fixtures.database import sqlite_database, sqlite_url  # noqa: F401

runner = CliRunner()


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point get_settings() at a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE_DSN", sqlite_url(tmp_path))
    monkeypatch.setenv("PASSWORD_HASH_ROUNDS", "4")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_secrets_generate():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET_KEY" in result.output
    assert "POSTGRES_PASSWORD" in result.output


def test_db_init(cli_env):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert "Schema ready" in result.output
    assert "sqlite" in result.output


def test_db_seed_twice(cli_env):
    first = runner.invoke(app, ["db", "seed"])
    second = runner.invoke(app, ["db", "seed"])

    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert "Demo data" in second.output


async def test_seed_is_idempotent(sqlite_database):  # noqa: F811
    password_service = PasswordHashingService(rounds=4)

    async with sqlite_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        first = await seed_demo_data(factory, password_service)
        await session.commit()

    assert len(first.users_created) == len(SEED_USERS)
    assert len(first.stores_created) == len(SEED_STORES)
    assert first.ratings_created == len(SEED_RATINGS)

    async with sqlite_database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        second = await seed_demo_data(factory, password_service)
        await session.commit()

        assert second.users_created == []
        assert second.stores_created == []
        assert second.ratings_created == 0
        assert second.ratings_skipped == len(SEED_RATINGS)
        assert await factory.user_repository().count() == len(SEED_USERS)

        owner = await factory.user_repository().find_by_email("owner1@techstore.com")
        assert owner.role == UserRole.STORE_OWNER
        store = await factory.store_repository().find_by_owner_id(owner.id)
        assert store.email == "contact@techstore.com"

        stats = await factory.rating_repository().statistics_for_store(store.id)
        assert stats.average_rating == "4.5"
