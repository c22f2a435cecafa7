"""Pydantic schemas for API request/response models."""

from storerate.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    SignupRequest,
)
from storerate.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    MessageResponse,
    PaginationResponse,
    ValidationErrorResponse,
)
from storerate.presentation.api.schemas.dashboard import (
    PlatformStatsResponse,
    StatsEnvelope,
)
from storerate.presentation.api.schemas.ratings import (
    MyRatingResponse,
    MyRatingsResponse,
    RatingEnvelope,
    RatingResponse,
    StoreRatingsResponse,
    SubmitRatingRequest,
    UpdateRatingRequest,
)
from storerate.presentation.api.schemas.stores import (
    CreateStoreRequest,
    CreateStoreResponse,
    PersonSummary,
    StoreDetailResponse,
    StoreEnvelope,
    StoreListItemResponse,
    StoreListResponse,
    StoreRatingResponse,
)
from storerate.presentation.api.schemas.users import (
    CreateUserRequest,
    CreateUserResponse,
    UserDetailEnvelope,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserWithStoreResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "ChangePasswordRequest",
    "LoginRequest",
    "SignupRequest",
    # Common
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
    "PaginationResponse",
    "ValidationErrorResponse",
    # Dashboard
    "PlatformStatsResponse",
    "StatsEnvelope",
    # Ratings
    "MyRatingResponse",
    "MyRatingsResponse",
    "RatingEnvelope",
    "RatingResponse",
    "StoreRatingsResponse",
    "SubmitRatingRequest",
    "UpdateRatingRequest",
    # Stores
    "CreateStoreRequest",
    "CreateStoreResponse",
    "PersonSummary",
    "StoreDetailResponse",
    "StoreEnvelope",
    "StoreListItemResponse",
    "StoreListResponse",
    "StoreRatingResponse",
    # Users
    "CreateUserRequest",
    "CreateUserResponse",
    "UserDetailEnvelope",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
    "UserWithStoreResponse",
]
