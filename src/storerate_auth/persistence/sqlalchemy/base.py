"""SQLAlchemy declarative base for storerate_auth models.

Auth tables live in their own metadata. The application's Database handle
creates both AuthBase.metadata and the core Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for storerate_auth models."""
