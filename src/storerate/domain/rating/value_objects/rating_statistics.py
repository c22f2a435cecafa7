"""Derived per-store rating statistics.

The average is never stored. It is computed from a rating count and sum
every time a store is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True)
class RatingStatistics:
    """Count and sum of a store's ratings.

    Examples
    --------
    >>> RatingStatistics(total_ratings=2, score_sum=9).average_rating
    '4.5'
    >>> RatingStatistics.empty().average_rating is None
    True
    """

    total_ratings: int = 0
    score_sum: int = 0

    @classmethod
    def empty(cls) -> RatingStatistics:
        return cls()

    @classmethod
    def from_scores(cls, scores: list[int]) -> RatingStatistics:
        return cls(total_ratings=len(scores), score_sum=sum(scores))

    @property
    def average(self) -> Decimal | None:
        """Mean rounded half-up to one decimal place, None without ratings."""
        if self.total_ratings == 0:
            return None
        mean = Decimal(self.score_sum) / Decimal(self.total_ratings)
        return mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)

    @property
    def average_rating(self) -> str | None:
        """The average as a string with exactly one decimal digit, e.g. "4.0"."""
        average = self.average
        return None if average is None else f"{average:.1f}"
