"""FastAPI dependency injection for the StoreRate API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Role gates built on the user context
- Service instances
"""

import logging
from collections.abc import Callable, Coroutine
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from storerate.application.context import UserContext
from storerate.application.services import AuthenticationService
from storerate.domain.user import User, UserRole
from storerate.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyRepositoryFactory,
)
from storerate.presentation.api.config import get_api_settings
from storerate_auth import InvalidTokenError, JWTService, PasswordHashingService
from storerate_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Opens one session per request from the Database created in the
    application lifespan.

    Yields
    ------
    AsyncSession for database operations
    """
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Repository factory bound to the request session."""
    return SQLAlchemyRepositoryFactory(session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        token_expire_days=settings.jwt_token_expire_days,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates signup, login, and password changes.
    """
    return AuthenticationService(
        user_repository=factory.user_repository(),
        credential_repository=factory.credential_repository(),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    factory: RepoFactory,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts and validates the JWT token from the Authorization header,
    then loads the corresponding User from the database. The role used for
    authorization is the stored one, not the claim in the token.

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await factory.user_repository().find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_user_context(user: CurrentUser) -> UserContext:
    return UserContext.create(user)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


def require_roles(
    *roles: UserRole,
) -> Callable[[UserContext], Coroutine[Any, Any, UserContext]]:
    """Build a dependency that admits only users holding one of `roles`.

    Denials raise AccessDeniedError, rendered as 403 by the exception
    handlers.
    """

    async def _require(user_context: CurrentUserContext) -> UserContext:
        user_context.require_role(*roles)
        return user_context

    return _require


AdminUser = Annotated[UserContext, Depends(require_roles(UserRole.ADMIN))]
RaterUser = Annotated[UserContext, Depends(require_roles(UserRole.USER))]
StoreOwnerUser = Annotated[UserContext, Depends(require_roles(UserRole.STORE_OWNER))]


# -----------------------------------------------------------------------------
# Application Queries & Commands
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   async def list_stores(factory: RepoFactory, ...):
#       query = ListStoresQuery.from_factory(factory)  # NOQA: ERA001
