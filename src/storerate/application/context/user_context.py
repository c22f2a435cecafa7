"""User context for request-scoped user identity and role checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from storerate.domain.shared.exceptions import AccessDeniedError
from storerate.domain.user.value_objects import UserRole

if TYPE_CHECKING:
    from storerate.domain.user.aggregates import User


@dataclass(frozen=True)
class UserContext:
    """
    Immutable context for the current authenticated user.

    Built once per request from the user record re-read from storage, so
    `role` is the live role rather than the one embedded in the token.
    """

    user_id: UUID
    email: str
    role: UserRole

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email, role=user.role)

    @classmethod
    def from_values(cls, user_id: UUID, email: str, role: UserRole) -> UserContext:
        return cls(user_id=user_id, email=email, role=role)

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles

    def require_role(self, *roles: UserRole) -> None:
        """Raise AccessDeniedError unless the user holds one of `roles`."""
        if not self.has_role(*roles):
            raise AccessDeniedError(
                details={
                    "user_id": str(self.user_id),
                    "role": self.role.value,
                    "required": [role.value for role in roles],
                },
            )

    def __str__(self) -> str:
        return f"UserContext({self.email})"

    def __repr__(self) -> str:
        return (
            f"UserContext(user_id={self.user_id}, email={self.email!r}, "
            f"role={self.role.value})"
        )
