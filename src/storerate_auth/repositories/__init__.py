"""Repository interfaces for storerate_auth.

The SQLAlchemy implementation lives in storerate_auth.persistence.sqlalchemy.
"""

from storerate_auth.repositories.user_credential_repository import (
    UserCredentialData,
    UserCredentialRepository,
)

__all__ = ["UserCredentialData", "UserCredentialRepository"]
