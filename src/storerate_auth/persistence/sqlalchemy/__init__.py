"""SQLAlchemy implementation for storerate_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel: SQLAlchemy model for credentials
- UserCredentialRepositorySQLAlchemy: Repository implementation
"""

from storerate_auth.persistence.sqlalchemy.base import AuthBase
from storerate_auth.persistence.sqlalchemy.models import UserCredentialModel
from storerate_auth.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
