"""Store schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, field_validator

from storerate.application.dtos import (
    RatingWithRaterDTO,
    StoreDetailDTO,
    StoreListItemDTO,
)
from storerate.domain.user import User
from storerate.presentation.api.schemas.common import (
    CamelModel,
    PaginationResponse,
    validate_address,
    validate_name,
)


class CreateStoreRequest(CamelModel):
    """Admin request to create a store, optionally assigned to an owner."""

    name: str
    email: EmailStr
    address: str
    owner_id: UUID | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Corner Books",
                "email": "hello@cornerbooks.com",
                "address": "5 Library Lane",
                "ownerId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
            },
        },
    )

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        return validate_name(v)

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str) -> str:
        return validate_address(v)


class PersonSummary(CamelModel):
    """Name and email of a store owner or a rater."""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User | None) -> "PersonSummary | None":
        if user is None:
            return None
        return cls(id=user.id, name=user.name, email=user.email)


class StoreRatingResponse(CamelModel):
    """A rating as listed on a store, with the rater's identity."""

    id: UUID
    rating: int
    user_id: UUID
    user: PersonSummary | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: RatingWithRaterDTO) -> "StoreRatingResponse":
        rating = dto.rating
        return cls(
            id=rating.id,
            rating=rating.score,
            user_id=rating.user_id,
            user=PersonSummary.from_user(dto.rater),
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class StoreListItemResponse(CamelModel):
    """Directory entry with derived rating data."""

    id: UUID
    name: str
    email: str
    address: str
    created_at: datetime
    average_rating: str | None = Field(
        None,
        description="Average rating with one decimal, null without ratings",
    )
    total_ratings: int
    user_rating: int | None = Field(
        None,
        description="The requesting user's own rating, if any",
    )
    user_rating_id: UUID | None = None

    @classmethod
    def from_dto(cls, dto: StoreListItemDTO) -> "StoreListItemResponse":
        store = dto.store
        return cls(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            created_at=store.created_at,
            average_rating=dto.statistics.average_rating,
            total_ratings=dto.statistics.total_ratings,
            user_rating=dto.user_rating.score if dto.user_rating else None,
            user_rating_id=dto.user_rating.id if dto.user_rating else None,
        )


class StoreListResponse(CamelModel):
    stores: list[StoreListItemResponse]
    pagination: PaginationResponse


class StoreDetailResponse(CamelModel):
    """A store with its owner and every rating, newest first."""

    id: UUID
    name: str
    email: str
    address: str
    created_at: datetime
    owner: PersonSummary | None
    average_rating: str | None
    total_ratings: int
    ratings: list[StoreRatingResponse]

    @classmethod
    def from_dto(cls, dto: StoreDetailDTO) -> "StoreDetailResponse":
        store = dto.store
        return cls(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            created_at=store.created_at,
            owner=PersonSummary.from_user(dto.owner),
            average_rating=dto.statistics.average_rating,
            total_ratings=dto.statistics.total_ratings,
            ratings=[StoreRatingResponse.from_dto(r) for r in dto.ratings],
        )


class StoreEnvelope(CamelModel):
    store: StoreDetailResponse


class CreateStoreResponse(CamelModel):
    message: str
    store: StoreDetailResponse
