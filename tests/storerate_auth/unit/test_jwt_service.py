"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from storerate_auth.exceptions import InvalidTokenError
from storerate_auth.services import JWTService

SECRET = "unit-test-secret"


class TestJWTService:
    def setup_method(self):
        self.service = JWTService(secret_key=SECRET)
        self.user_id = uuid4()

    def test_round_trip_preserves_claims(self):
        token = self.service.create_access_token(
            self.user_id,
            "alice@example.com",
            "USER",
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == "alice@example.com"
        assert payload.role == "USER"
        assert payload.is_expired() is False

    def test_default_validity_is_seven_days(self):
        token = self.service.create_access_token(self.user_id, "a@b.co", "ADMIN")

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())

    def test_configured_validity(self):
        service = JWTService(secret_key=SECRET, token_expire_days=1)
        token = service.create_access_token(self.user_id, "a@b.co", "USER")

        claims = jwt.decode(token, SECRET, algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == int(timedelta(days=1).total_seconds())

    def test_expired_token_raises(self):
        token = self.service.create_access_token(
            self.user_id,
            "a@b.co",
            "USER",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_wrong_signature_raises(self):
        other = JWTService(secret_key="another-secret")
        token = other.create_access_token(self.user_id, "a@b.co", "USER")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_malformed_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not-a-jwt")

    def test_missing_claim_raises(self):
        token = jwt.encode({"sub": str(self.user_id)}, SECRET, algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_non_uuid_subject_raises(self):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": "a@b.co",
                "role": "USER",
                "iat": 1_700_000_000,
                "exp": 4_100_000_000,
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")
