"""Validation of API request bodies."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from storerate.domain.user import UserRole
from storerate.presentation.api.schemas import (
    ChangePasswordRequest,
    CreateStoreRequest,
    CreateUserRequest,
    LoginRequest,
    SignupRequest,
    SubmitRatingRequest,
    UpdateRatingRequest,
)

VALID_SIGNUP = {
    "name": "Alice Example",
    "email": "alice@example.com",
    "password": "Secret@123",
    "address": "1 Main Street",
}


def _messages(exc_info) -> list[str]:
    return [error["msg"] for error in exc_info.value.errors()]


class TestSignupRequest:
    def test_valid(self):
        request = SignupRequest(**VALID_SIGNUP)

        assert request.email == "alice@example.com"

    def test_strips_name_and_address(self):
        request = SignupRequest(
            **{**VALID_SIGNUP, "name": "  Alice  ", "address": " 1 Main Street "},
        )

        assert request.name == "Alice"
        assert request.address == "1 Main Street"

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Sh@1", "Password must be 8-16 characters long"),
            ("Way@TooLongPassword1", "Password must be 8-16 characters long"),
            ("secret@123", "at least one uppercase letter"),
            ("Secret1234", "at least one special character"),
        ],
    )
    def test_password_policy(self, password, message):
        with pytest.raises(ValidationError) as exc_info:
            SignupRequest(**{**VALID_SIGNUP, "password": password})

        assert any(message in msg for msg in _messages(exc_info))

    def test_address_length_limit(self):
        SignupRequest(**{**VALID_SIGNUP, "address": "x" * 400})

        with pytest.raises(ValidationError):
            SignupRequest(**{**VALID_SIGNUP, "address": "x" * 401})

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            SignupRequest(**{**VALID_SIGNUP, "email": "not-an-email"})

    def test_blank_name(self):
        with pytest.raises(ValidationError) as exc_info:
            SignupRequest(**{**VALID_SIGNUP, "name": "   "})

        assert any("Name is required" in msg for msg in _messages(exc_info))


def test_login_accepts_any_string_email():
    request = LoginRequest(email="not-an-email", password="whatever")

    assert request.email == "not-an-email"


def test_change_password_accepts_camel_case():
    request = ChangePasswordRequest.model_validate(
        {"currentPassword": "Secret@123", "newPassword": "Newer@123"},
    )

    assert request.current_password == "Secret@123"
    assert request.new_password == "Newer@123"


def test_change_password_checks_new_password_only():
    with pytest.raises(ValidationError):
        ChangePasswordRequest(current_password="x", new_password="weak")


def test_create_user_defaults_to_user_role():
    request = CreateUserRequest(**VALID_SIGNUP)

    assert request.role == UserRole.USER


def test_create_user_rejects_unknown_role():
    with pytest.raises(ValidationError):
        CreateUserRequest(**{**VALID_SIGNUP, "role": "SUPERUSER"})


def test_create_store_owner_is_optional():
    request = CreateStoreRequest(
        name="Corner Books",
        email="hello@cornerbooks.com",
        address="5 Library Lane",
    )

    assert request.owner_id is None


class TestRatingRequests:
    @pytest.mark.parametrize("rating", [1, 3, 5])
    def test_valid_scores(self, rating):
        request = SubmitRatingRequest.model_validate(
            {"storeId": str(uuid4()), "rating": rating},
        )

        assert request.rating == rating

    @pytest.mark.parametrize("rating", [0, 6, 4.5, "5", True, None])
    def test_invalid_scores(self, rating):
        with pytest.raises(ValidationError) as exc_info:
            UpdateRatingRequest(rating=rating)

        assert any(
            "Rating must be between 1 and 5" in msg for msg in _messages(exc_info)
        )

    def test_missing_store_id(self):
        with pytest.raises(ValidationError):
            SubmitRatingRequest.model_validate({"rating": 4})
