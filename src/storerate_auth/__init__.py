"""StoreRate Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the store-rating domain. It handles:
- Password hashing and password policy (bcrypt)
- JWT token creation and verification
- User credential storage (with pluggable persistence)

Architecture:
    storerate_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from storerate_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from storerate_auth.repositories import UserCredentialData, UserCredentialRepository
from storerate_auth.schemas import TokenPayload
from storerate_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
