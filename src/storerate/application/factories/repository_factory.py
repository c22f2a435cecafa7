"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from storerate.domain.rating.repositories import RatingRepository
from storerate.domain.store.repositories import StoreRepository
from storerate.domain.user.repositories import UserRepository
from storerate_auth.repositories import UserCredentialRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """The unit-of-work session; routers commit or roll back through it."""
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def credential_repository(self) -> UserCredentialRepository:
        """Get credential repository."""
        ...

    def store_repository(self) -> StoreRepository:
        """Get store repository."""
        ...

    def rating_repository(self) -> RatingRepository:
        """Get rating repository."""
        ...
