"""SQLAlchemy models for storerate_auth."""

from storerate_auth.persistence.sqlalchemy.models.user_credential_model import (
    UserCredentialModel,
)

__all__ = ["UserCredentialModel"]
