"""Rating domain exceptions."""

from typing import Any
from uuid import UUID

from storerate.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidRatingError(ValidationError):
    """Rating value is not an integer between 1 and 5."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            "Rating must be between 1 and 5",
            ErrorCode.INVALID_RATING,
            {"value": repr(value)},
        )


class DuplicateRatingError(ConflictError):
    """The user already rated this store; the update path must be used."""

    def __init__(self, user_id: UUID, store_id: UUID) -> None:
        self.user_id = user_id
        self.store_id = store_id
        super().__init__(
            "You have already rated this store. Use update to modify.",
            ErrorCode.DUPLICATE_RATING,
            {"user_id": str(user_id), "store_id": str(store_id)},
        )


class RatingNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: UUID, store_id: UUID) -> None:
        self.user_id = user_id
        self.store_id = store_id
        super().__init__(
            "Rating not found",
            ErrorCode.RATING_NOT_FOUND,
            {"user_id": str(user_id), "store_id": str(store_id)},
        )
