"""Rating domain.

This domain handles:
- Rating aggregate (one per user and store)
- Score validation (integer 1..5)
- Derived statistics (count, half-up rounded average)
"""

from storerate.domain.rating.aggregates import Rating
from storerate.domain.rating.exceptions import (
    DuplicateRatingError,
    InvalidRatingError,
    RatingNotFoundError,
)
from storerate.domain.rating.repositories import RatingRepository
from storerate.domain.rating.value_objects import RatingScore, RatingStatistics

__all__ = [
    "DuplicateRatingError",
    "InvalidRatingError",
    "Rating",
    "RatingNotFoundError",
    "RatingRepository",
    "RatingScore",
    "RatingStatistics",
]
