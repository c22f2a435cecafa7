"""User domain manages identity and directory data.

This domain handles:
- User aggregate (id, name, email, address, role)
- Directory search criteria
- Role promotion when a store is assigned
"""

from storerate.domain.shared.email import InvalidEmailError
from storerate.domain.user.aggregates import User
from storerate.domain.user.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
)
from storerate.domain.user.repositories import UserRepository
from storerate.domain.user.value_objects import (
    Email,
    UserFilter,
    UserRole,
    UserSort,
    UserSortField,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserFilter",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserSort",
    "UserSortField",
]
