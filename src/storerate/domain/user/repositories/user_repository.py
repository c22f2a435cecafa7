"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional, Union
from uuid import UUID

from storerate.domain.shared.pagination import PageRequest
from storerate.domain.user.aggregates.user import User
from storerate.domain.user.value_objects import Email, UserFilter, UserSort


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        """Find several users at once, keyed by ID. Missing IDs are omitted."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user.

        Raises EmailAlreadyExistsError when the email is taken.
        """

    @abstractmethod
    async def search(
        self,
        user_filter: UserFilter,
        sort: UserSort,
        page: PageRequest,
    ) -> tuple[list[User], int]:
        """Return one page of matching users and the total match count."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
