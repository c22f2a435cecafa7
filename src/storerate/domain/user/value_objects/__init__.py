"""Value objects for the user domain."""

from storerate.domain.shared.email import Email
from storerate.domain.user.value_objects.user_listing import (
    UserFilter,
    UserSort,
    UserSortField,
)
from storerate.domain.user.value_objects.user_role import UserRole

__all__ = [
    "Email",
    "UserFilter",
    "UserRole",
    "UserSort",
    "UserSortField",
]
