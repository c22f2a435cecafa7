"""Search, filter and sort criteria for the user directory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storerate.domain.shared.pagination import InvalidListingCriteriaError, SortOrder
from storerate.domain.user.value_objects.user_role import UserRole


class UserSortField(str, Enum):
    NAME = "name"
    EMAIL = "email"
    ADDRESS = "address"
    ROLE = "role"
    CREATED_AT = "createdAt"


@dataclass(frozen=True)
class UserFilter:
    """Directory filter, all present criteria are AND-combined.

    `search` matches name, email or address by case-insensitive substring.
    The other text fields narrow on their own column the same way.
    """

    search: str | None = None
    name: str | None = None
    email: str | None = None
    address: str | None = None
    role: UserRole | None = None


@dataclass(frozen=True)
class UserSort:
    field: UserSortField = UserSortField.NAME
    order: SortOrder = SortOrder.ASC

    @classmethod
    def parse(cls, field: str | None, order: str | None) -> UserSort:
        """Build a sort from raw query values.

        Raises
        ------
        InvalidListingCriteriaError
            If the field or order is not recognized
        """
        sort_field = UserSortField.NAME
        if field:
            try:
                sort_field = UserSortField(field)
            except ValueError as e:
                allowed = ", ".join(f.value for f in UserSortField)
                msg = f"Invalid sort field: {field}. Allowed: {allowed}"
                raise InvalidListingCriteriaError(
                    msg,
                    details={"field": "sortBy", "value": field},
                ) from e
        return cls(field=sort_field, order=SortOrder.parse(order))
