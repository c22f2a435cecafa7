"""Rating schemas for request/response models."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import field_validator

from storerate.application.dtos import StoreRatingsDTO, UserRatingDTO
from storerate.domain.rating import InvalidRatingError, Rating, RatingScore
from storerate.presentation.api.schemas.common import CamelModel
from storerate.presentation.api.schemas.stores import StoreRatingResponse


def _validate_score(value: Any) -> int:
    try:
        return RatingScore(value).value
    except InvalidRatingError as e:
        raise ValueError(e.message) from e


class SubmitRatingRequest(CamelModel):
    store_id: UUID
    rating: int

    @field_validator("rating", mode="before")
    @classmethod
    def _validate_rating(cls, v: Any) -> int:
        return _validate_score(v)


class UpdateRatingRequest(CamelModel):
    rating: int

    @field_validator("rating", mode="before")
    @classmethod
    def _validate_rating(cls, v: Any) -> int:
        return _validate_score(v)


class RatingResponse(CamelModel):
    id: UUID
    rating: int
    store_id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, rating: Rating) -> "RatingResponse":
        return cls(
            id=rating.id,
            rating=rating.score,
            store_id=rating.store_id,
            user_id=rating.user_id,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class RatingEnvelope(CamelModel):
    message: str
    rating: RatingResponse


class RatedStoreSummary(CamelModel):
    id: UUID
    name: str
    address: str


class MyRatingResponse(CamelModel):
    """One of the caller's ratings with the rated store."""

    id: UUID
    rating: int
    store_id: UUID
    store: RatedStoreSummary | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: UserRatingDTO) -> "MyRatingResponse":
        store = None
        if dto.store is not None:
            store = RatedStoreSummary(
                id=dto.store.id,
                name=dto.store.name,
                address=dto.store.address,
            )
        return cls(
            id=dto.rating.id,
            rating=dto.rating.score,
            store_id=dto.rating.store_id,
            store=store,
            created_at=dto.rating.created_at,
            updated_at=dto.rating.updated_at,
        )


class MyRatingsResponse(CamelModel):
    ratings: list[MyRatingResponse]


class StoreRatingsResponse(CamelModel):
    """Owner view: every rating plus the derived aggregate."""

    ratings: list[StoreRatingResponse]
    average_rating: str | None
    total_ratings: int

    @classmethod
    def from_dto(cls, dto: StoreRatingsDTO) -> "StoreRatingsResponse":
        return cls(
            ratings=[StoreRatingResponse.from_dto(r) for r in dto.ratings],
            average_rating=dto.statistics.average_rating,
            total_ratings=dto.statistics.total_ratings,
        )
