"""Rating aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from storerate.domain.rating.value_objects import RatingScore
from storerate.domain.shared.time import utc_now


class Rating:
    """
    Rating aggregate root.

    One rating exists per (user, store) pair. It is created once and then
    only its score changes.
    """

    def __init__(
        self,
        user_id: UUID,
        store_id: UUID,
        score: Union[int, RatingScore],
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._store_id = store_id
        self._score = score if isinstance(score, RatingScore) else RatingScore(score)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def store_id(self) -> UUID:
        return self._store_id

    @property
    def score(self) -> int:
        return self._score.value

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_score(self, score: Union[int, RatingScore]) -> None:
        """Overwrite the score and bump updated_at."""
        self._score = score if isinstance(score, RatingScore) else RatingScore(score)
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        user_id: UUID,
        store_id: UUID,
        score: Union[int, RatingScore],
    ) -> "Rating":
        return cls(user_id=user_id, store_id=store_id, score=score)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        user_id: UUID,
        store_id: UUID,
        score: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Rating":
        return cls(
            id=id,
            user_id=user_id,
            store_id=store_id,
            score=score,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rating):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Rating(id={self._id}, user_id={self._user_id}, "
            f"store_id={self._store_id}, score={self.score})"
        )
