"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, field_validator

from storerate.application.dtos import UserWithStoreDTO
from storerate.domain.user import User, UserRole
from storerate.presentation.api.schemas.common import (
    CamelModel,
    PaginationResponse,
    validate_address,
    validate_name,
    validate_password,
)


class UserResponse(CamelModel):
    """Public user data."""

    id: UUID
    name: str
    email: str
    address: str
    role: UserRole
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            address=user.address,
            role=user.role,
            created_at=user.created_at,
        )


class UserEnvelope(CamelModel):
    user: UserResponse


class OwnedStoreSummary(CamelModel):
    id: UUID
    name: str
    average_rating: str | None = Field(
        None,
        description="Average rating with one decimal, null without ratings",
    )


class UserWithStoreResponse(UserResponse):
    """User directory entry; store is set for users who own a store."""

    store: OwnedStoreSummary | None = None

    @classmethod
    def from_dto(cls, dto: UserWithStoreDTO) -> "UserWithStoreResponse":
        store = None
        if dto.store is not None:
            store = OwnedStoreSummary(
                id=dto.store.id,
                name=dto.store.name,
                average_rating=dto.store.average_rating,
            )
        user = dto.user
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            address=user.address,
            role=user.role,
            created_at=user.created_at,
            store=store,
        )


class UserDetailEnvelope(CamelModel):
    user: UserWithStoreResponse


class UserListResponse(CamelModel):
    users: list[UserWithStoreResponse]
    pagination: PaginationResponse


class CreateUserRequest(CamelModel):
    """Admin request to create a user with any role."""

    name: str
    email: EmailStr
    password: str
    address: str
    role: UserRole = Field(default=UserRole.USER)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Store Owner",
                "email": "owner@example.com",
                "password": "Owner@123",
                "address": "12 Market Street",
                "role": "STORE_OWNER",
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

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        return validate_password(v)


class CreateUserResponse(CamelModel):
    message: str
    user: UserResponse
