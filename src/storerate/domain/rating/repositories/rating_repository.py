"""Rating repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional
from uuid import UUID

from storerate.domain.rating.aggregates.rating import Rating
from storerate.domain.rating.value_objects import RatingStatistics


class RatingRepository(ABC):
    """Repository interface for Rating aggregates."""

    @abstractmethod
    async def find_by_user_and_store(
        self,
        user_id: UUID,
        store_id: UUID,
    ) -> Optional[Rating]:
        """Find the rating a user gave a store."""

    @abstractmethod
    async def find_by_user_for_stores(
        self,
        user_id: UUID,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, Rating]:
        """Find a user's ratings for several stores, keyed by store ID."""

    @abstractmethod
    async def list_for_store(self, store_id: UUID) -> list[Rating]:
        """List a store's ratings, newest first."""

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> list[Rating]:
        """List a user's ratings, newest first."""

    @abstractmethod
    async def statistics_for_store(self, store_id: UUID) -> RatingStatistics:
        """Count and sum of one store's ratings."""

    @abstractmethod
    async def statistics_for_stores(
        self,
        store_ids: Iterable[UUID],
    ) -> dict[UUID, RatingStatistics]:
        """Count and sum per store. Stores without ratings get empty stats."""

    @abstractmethod
    async def save(self, rating: Rating) -> None:
        """Insert or update a rating.

        Raises DuplicateRatingError when inserting a second rating for the
        same (user, store) pair.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count total ratings."""
