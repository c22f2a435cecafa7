"""Rating score value object."""

from dataclasses import dataclass
from typing import Any

from storerate.domain.rating.exceptions import InvalidRatingError


@dataclass(frozen=True)
class RatingScore:
    """Integer score from 1 to 5.

    Booleans, strings and non-integral numbers are rejected. Integral
    floats such as 4.0 are accepted and stored as int.
    """

    value: int

    MIN = 1
    MAX = 5

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self._coerce(self.value))

    @classmethod
    def _coerce(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidRatingError(value)
        if isinstance(value, float) and not value.is_integer():
            raise InvalidRatingError(value)
        score = int(value)
        if not cls.MIN <= score <= cls.MAX:
            raise InvalidRatingError(value)
        return score

    def __int__(self) -> int:
        return self.value
