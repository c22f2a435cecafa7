"""Shared domain components.

This module exports shared value objects, exceptions, and base classes
used across domain boundaries.
"""

# Re-export all exceptions from the exceptions module
from storerate.domain.shared.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from storerate.domain.shared.pagination import (
    InvalidListingCriteriaError,
    Page,
    PageRequest,
    SortOrder,
)
from storerate.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "AccessDeniedError",
    "InvalidListingCriteriaError",
    # Listings
    "Page",
    "PageRequest",
    "SortOrder",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
