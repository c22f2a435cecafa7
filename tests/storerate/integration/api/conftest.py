"""Pytest fixtures for API integration tests.

Each test gets its own SQLite file. The admin cannot sign up through the
API, so it is inserted through the application layer on the client's
event loop once the lifespan has built the database; everyone else goes
through the HTTP endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from storerate.application.commands import CreateUserCommand
from storerate.domain.user import UserRole
from storerate.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from storerate.presentation.api.app import API_V1_PREFIX, create_app
from storerate_auth import PasswordHashingService
from storerate_config.settings import Settings
from tests.shared.fixtures.api_client import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    auth_headers,
    login,
    signup,
)
from tests.shared.fixtures.database import make_settings, sqlite_url


async def _insert_admin(database: Database, rounds: int) -> None:
    async with database.session() as session:
        factory = SQLAlchemyRepositoryFactory(session)
        command = CreateUserCommand.from_factory(
            factory,
            PasswordHashingService(rounds=rounds),
        )
        await command.execute(
            name="Platform Admin",
            email=ADMIN_EMAIL,
            password=ADMIN_PASSWORD,
            address="1 Admin Way",
            role=UserRole.ADMIN,
        )
        await session.commit()


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return make_settings(sqlite_url(tmp_path))


@pytest.fixture
def test_client(api_settings):
    """Client with the lifespan running and an admin account in place."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        client.portal.call(
            _insert_admin,
            app.state.database,
            api_settings.password_hash_rounds,
        )
        yield client


@pytest.fixture
def admin_headers(test_client) -> dict[str, str]:
    return auth_headers(login(test_client, ADMIN_EMAIL, ADMIN_PASSWORD))


@pytest.fixture
def user_headers(test_client) -> dict[str, str]:
    body = signup(test_client, "alice@example.com", name="Alice Example")
    return auth_headers(body["token"])
