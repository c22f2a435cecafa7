"""Search, filter and sort criteria for the store directory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storerate.domain.shared.pagination import InvalidListingCriteriaError, SortOrder


class StoreSortField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    ADDRESS = "address"
    CREATED_AT = "createdAt"


@dataclass(frozen=True)
class StoreFilter:
    """`search` matches name, email or address; other fields narrow one column."""

    search: str | None = None
    name: str | None = None
    email: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class StoreSort:
    field: StoreSortField = StoreSortField.NAME
    order: SortOrder = SortOrder.ASC

    @classmethod
    def parse(cls, field: str | None, order: str | None) -> StoreSort:
        """Build a sort from raw query values.

        Raises
        ------
        InvalidListingCriteriaError
            If the field or order is not recognized
        """
        sort_field = StoreSortField.NAME
        if field:
            try:
                sort_field = StoreSortField(field)
            except ValueError as e:
                allowed = ", ".join(f.value for f in StoreSortField)
                msg = f"Invalid sort field: {field}. Allowed: {allowed}"
                raise InvalidListingCriteriaError(
                    msg,
                    details={"field": "sortBy", "value": field},
                ) from e
        return cls(field=sort_field, order=SortOrder.parse(order))
