"""Database handle owning the async engine and session maker.

One Database instance is built per process (API lifespan, CLI command or
test) from explicit settings. Nothing in this module is global.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Import models to register with Base.metadata
import storerate.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import storerate_auth.persistence.sqlalchemy.models  # noqa: F401
from storerate.infrastructure.persistence.sqlalchemy.models.base import Base
from storerate_auth.persistence.sqlalchemy.base import AuthBase

if TYPE_CHECKING:
    from storerate_config.settings import Settings

logger = logging.getLogger(__name__)

_METADATA = (Base.metadata, AuthBase.metadata)


class Database:
    """Async engine plus session factory with an explicit lifecycle."""

    def __init__(self, url: str, echo: bool = False):
        self._url = url
        engine_kwargs: dict = {"echo": echo}
        if not url.startswith("sqlite"):
            engine_kwargs["pool_pre_ping"] = True
        self._engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        return cls(settings.database_url, echo=settings.database_echo)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session; uncommitted work is rolled back on exit."""
        async with self._session_maker() as session:
            yield session

    async def create_schema(self) -> None:
        """Create all missing tables (idempotent)."""
        logger.info("Ensuring all database tables exist...")
        async with self._engine.begin() as conn:
            for metadata in _METADATA:
                await conn.run_sync(metadata.create_all)
        logger.info("Database schema is up to date")

    async def drop_schema(self) -> None:
        """Drop all tables (tests and local resets only)."""
        logger.warning("Dropping all database tables...")
        async with self._engine.begin() as conn:
            for metadata in reversed(_METADATA):
                await conn.run_sync(metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.debug("Database engine disposed")
