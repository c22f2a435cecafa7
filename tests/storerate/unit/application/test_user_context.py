"""Tests for UserContext role checks."""

from uuid import uuid4

import pytest

from storerate.application.context import UserContext
from storerate.domain.shared.exceptions import AccessDeniedError, ErrorCode
from storerate.domain.user import UserRole
from tests.shared.fixtures.factories import make_user


def test_create_from_user():
    user = make_user(role=UserRole.STORE_OWNER)

    context = UserContext.create(user)

    assert context.user_id == user.id
    assert context.email == user.email
    assert context.role == UserRole.STORE_OWNER


def test_require_role_passes_for_allowed_role():
    context = UserContext.from_values(uuid4(), "a@b.co", UserRole.ADMIN)

    context.require_role(UserRole.ADMIN, UserRole.USER)


def test_require_role_denies_other_roles():
    context = UserContext.from_values(uuid4(), "a@b.co", UserRole.USER)

    with pytest.raises(AccessDeniedError) as exc_info:
        context.require_role(UserRole.ADMIN)

    assert exc_info.value.message == "Access denied"
    assert exc_info.value.code == ErrorCode.FORBIDDEN
    assert exc_info.value.details["required"] == ["ADMIN"]
