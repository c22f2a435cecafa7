"""Error-code to HTTP status mapping."""

from uuid import uuid4

import pytest

from storerate.domain.rating import DuplicateRatingError, InvalidRatingError
from storerate.domain.shared.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)
from storerate.domain.store import NoOwnedStoreError, StoreNotFoundError
from storerate.domain.user import EmailAlreadyExistsError
from storerate.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    _get_status_for_exception,
)


def test_every_error_code_has_a_status():
    assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)


@pytest.mark.parametrize(
    ("exc", "status_code"),
    [
        (InvalidRatingError(9), 400),
        (EmailAlreadyExistsError("a@b.co"), 400),
        (DuplicateRatingError(uuid4(), uuid4()), 400),
        (StoreNotFoundError(uuid4()), 404),
        (NoOwnedStoreError(uuid4()), 404),
        (AccessDeniedError(), 403),
        (DomainException("boom"), 500),
    ],
)
def test_status_for_domain_exceptions(exc, status_code):
    assert _get_status_for_exception(exc) == status_code


def test_fallback_uses_exception_type():
    class _Unmapped(EntityNotFoundError):
        pass

    exc = _Unmapped("gone")
    exc.code = "SOMETHING_ELSE"

    assert _get_status_for_exception(exc) == 404
    conflict = ConflictError("clash")
    conflict.code = "SOMETHING_ELSE"
    assert _get_status_for_exception(conflict) == 400
