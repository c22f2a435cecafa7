"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from storerate.domain.shared.exceptions import ValidationError
from storerate.domain.shared.time import utc_now
from storerate.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    Holds identity and directory data only. The password digest is kept by
    storerate_auth in a separate credential record.
    """

    MAX_ADDRESS_LENGTH = 400

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        address: str,
        role: Union[str, UserRole] = UserRole.USER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._address = address
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def address(self) -> str:
        return self._address

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_role(self, *roles: UserRole) -> bool:
        return self._role in roles

    def assign_store_ownership(self) -> None:
        """Promote the user to STORE_OWNER when a store is assigned to them."""
        if self._role == UserRole.STORE_OWNER:
            return
        self._role = UserRole.STORE_OWNER
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        address: str,
        role: UserRole = UserRole.USER,
    ) -> "User":
        name = (name or "").strip()
        address = (address or "").strip()
        if not name:
            msg = "Name is required"
            raise ValidationError(msg, details={"field": "name"})
        if not address:
            msg = "Address is required"
            raise ValidationError(msg, details={"field": "address"})
        if len(address) > cls.MAX_ADDRESS_LENGTH:
            msg = f"Address must not exceed {cls.MAX_ADDRESS_LENGTH} characters"
            raise ValidationError(msg, details={"field": "address"})
        return cls(name=name, email=email, address=address, role=role)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        address: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"User(id={self._id}, email={self._email.value}, "
            f"role={self._role.value})"
        )
