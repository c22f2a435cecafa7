"""Pagination and sort-order value objects shared by directory listings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from storerate.domain.shared.exceptions import ErrorCode, ValidationError

T = TypeVar("T")


class InvalidListingCriteriaError(ValidationError):
    """Raised for unknown sort fields, sort orders or out-of-range paging."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, ErrorCode.INVALID_LISTING_CRITERIA, details)


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | SortOrder | None) -> SortOrder:
        """Parse a sort order, case-insensitively. None means ascending."""
        if value is None:
            return cls.ASC
        if isinstance(value, SortOrder):
            return value
        try:
            return cls(value.lower())
        except ValueError as e:
            msg = f"Invalid sort order: {value}"
            raise InvalidListingCriteriaError(
                msg,
                details={"field": "sortOrder", "value": value},
            ) from e


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page request.

    offset = (page - 1) * limit
    """

    page: int = 1
    limit: int = 10
    max_limit: int = 100

    def __post_init__(self) -> None:
        if self.page < 1:
            msg = "Page must be at least 1"
            raise InvalidListingCriteriaError(msg, details={"field": "page"})
        if not 1 <= self.limit <= self.max_limit:
            msg = f"Limit must be between 1 and {self.max_limit}"
            raise InvalidListingCriteriaError(msg, details={"field": "limit"})

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the total number of matching rows."""

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @classmethod
    def of(cls, items: list[T], total: int, request: PageRequest) -> Page[T]:
        return cls(items=items, total=total, page=request.page, limit=request.limit)
