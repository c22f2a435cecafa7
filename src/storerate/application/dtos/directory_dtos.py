"""Read models returned by the directory and rating queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from storerate.domain.rating import Rating, RatingStatistics
from storerate.domain.store import Store
from storerate.domain.user import User


@dataclass(frozen=True)
class OwnedStoreSummaryDTO:
    """The store a user owns, with its derived average."""

    id: UUID
    name: str
    average_rating: Optional[str]


@dataclass(frozen=True)
class UserWithStoreDTO:
    user: User
    store: Optional[OwnedStoreSummaryDTO] = None


@dataclass(frozen=True)
class StoreListItemDTO:
    """A directory entry plus the requesting user's own rating, if any."""

    store: Store
    statistics: RatingStatistics
    user_rating: Optional[Rating] = None


@dataclass(frozen=True)
class RatingWithRaterDTO:
    rating: Rating
    rater: Optional[User]


@dataclass(frozen=True)
class StoreDetailDTO:
    store: Store
    owner: Optional[User]
    statistics: RatingStatistics
    ratings: list[RatingWithRaterDTO] = field(default_factory=list)


@dataclass(frozen=True)
class StoreRatingsDTO:
    """Ratings of one store as seen by its owner."""

    store: Store
    ratings: list[RatingWithRaterDTO]
    statistics: RatingStatistics


@dataclass(frozen=True)
class UserRatingDTO:
    rating: Rating
    store: Optional[Store]


@dataclass(frozen=True)
class PlatformStatsDTO:
    total_users: int
    total_stores: int
    total_ratings: int
