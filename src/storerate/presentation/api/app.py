"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.

Run with uvicorn's factory mode:
    uvicorn storerate.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storerate.infrastructure.persistence.sqlalchemy import Database
from storerate.presentation.api.exception_handlers import setup_exception_handlers
from storerate.presentation.api.routers import (
    auth_router,
    dashboard_router,
    ratings_router,
    stores_router,
    users_router,
)
from storerate_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

_logging_configured_level: str | None = None


def _configure_logging(level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the storerate packages with:
    - Console output with timestamps and module names
    - Configurable log level (from settings)
    - WARNING level for noisy third-party libraries
    """
    global _logging_configured_level  # NOQA: PLW0603
    level_name = level_name.upper()
    if _logging_configured_level == level_name:
        return

    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in ("storerate", "storerate_auth", "storerate_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "asyncpg"):
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured_level = level_name


# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Signup, login and password management.

**Security:**
- Passwords are hashed with bcrypt
- Passwords are 8-16 characters with an uppercase letter and a special character
- JWT bearer tokens, valid for 7 days by default
""",
    },
    {
        "name": "Users",
        "description": """User directory (admin only).

**Listing:**
- `search` matches name, email or address (case-insensitive substring)
- `name`, `email`, `address` and `role` narrow the result further
- Sort with `sortBy` (name, email, address, role, createdAt) and `sortOrder`
""",
    },
    {
        "name": "Stores",
        "description": """Store directory.

Every entry carries `averageRating` (one decimal, null without ratings)
and `totalRatings`. Users with the USER role also see their own rating.
""",
    },
    {
        "name": "Ratings",
        "description": """Store ratings from 1 to 5.

**Rules:**
- One rating per user and store; use PUT to change it
- Store owners see every rating of their own store
""",
    },
    {
        "name": "Dashboard",
        "description": "Platform statistics for administrators.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the Database from the application settings, ensures the schema
    exists and disposes the engine on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    database = Database.from_settings(settings)
    try:
        await database.create_schema()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        await database.dispose()
        raise SystemExit(1) from None
    app.state.database = database

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await database.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints.

    Returns
    -------
    APIRouter with all v1 endpoints mounted.
    """
    v1_router = APIRouter()

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    v1_router.include_router(stores_router, prefix="/stores", tags=["Stores"])
    v1_router.include_router(ratings_router, prefix="/ratings", tags=["Ratings"])
    v1_router.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "A **store rating** platform: browse stores, rate them from 1 to 5 "
            "and let store owners follow their reviews."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    # Include versioned API router
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Health check endpoint (unversioned - always accessible)
    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint.

        Unversioned for load balancer/monitoring compatibility.
        """
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "users": f"{API_V1_PREFIX}/users",
                "stores": f"{API_V1_PREFIX}/stores",
                "ratings": f"{API_V1_PREFIX}/ratings",
                "dashboard": f"{API_V1_PREFIX}/dashboard",
            },
        }

    return app
