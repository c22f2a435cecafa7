"""Common schemas shared across API endpoints."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storerate.domain.shared.pagination import Page
from storerate_auth import PasswordHashingService, WeakPasswordError

_password_policy = PasswordHashingService()


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON keys.

    Python code uses snake_case attribute names; both spellings are accepted
    on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="When the error occurred",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"detail": "Store not found", "code": "STORE_NOT_FOUND"},
        },
    )


class ValidationErrorResponse(ErrorResponse):
    """400 body for rejected request input, one message per field."""

    errors: dict[str, str] = Field(default_factory=dict)


class MessageResponse(BaseModel):
    message: str


class PaginationResponse(CamelModel):
    """Pagination block of list responses."""

    page: int = Field(..., description="Current page number (1-indexed)")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total number of matching items")
    total_pages: int = Field(..., description="ceil(total / limit)")

    @classmethod
    def from_page(cls, page: Page) -> "PaginationResponse":
        return cls(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )


# -----------------------------------------------------------------------------
# Field validators shared by request schemas
# -----------------------------------------------------------------------------

MAX_ADDRESS_LENGTH = 400


def validate_name(value: str) -> str:
    value = value.strip()
    if not value:
        msg = "Name is required"
        raise ValueError(msg)
    return value


def validate_address(value: str) -> str:
    value = value.strip()
    if not value:
        msg = "Address is required"
        raise ValueError(msg)
    if len(value) > MAX_ADDRESS_LENGTH:
        msg = f"Address must not exceed {MAX_ADDRESS_LENGTH} characters"
        raise ValueError(msg)
    return value


def validate_password(value: str) -> str:
    try:
        _password_policy.validate_strength(value)
    except WeakPasswordError as e:
        raise ValueError(e.message) from e
    return value
