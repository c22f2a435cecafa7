"""Authentication schemas for request/response models."""

from pydantic import ConfigDict, EmailStr, field_validator

from storerate.presentation.api.schemas.common import (
    CamelModel,
    validate_address,
    validate_name,
    validate_password,
)
from storerate.presentation.api.schemas.users import UserResponse


class SignupRequest(CamelModel):
    """Request schema for self-service registration (role USER)."""

    name: str
    email: EmailStr
    password: str
    address: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Alice Example",
                "email": "alice@example.com",
                "password": "Secret@123",
                "address": "1 Main Street",
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


class LoginRequest(CamelModel):
    """Request schema for user login.

    The email is not format-checked here so malformed and unknown emails
    produce the same 401 as a wrong password.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "Secret@123",
            },
        },
    )


class ChangePasswordRequest(CamelModel):
    """Request schema for changing the caller's password."""

    current_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def _validate_new_password(cls, v: str) -> str:
        return validate_password(v)


class AuthResponse(CamelModel):
    """Signup/login response: bearer token plus the user."""

    message: str
    token: str
    user: UserResponse
