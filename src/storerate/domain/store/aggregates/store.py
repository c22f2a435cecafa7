"""Store aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from storerate.domain.shared.email import Email
from storerate.domain.shared.exceptions import ValidationError
from storerate.domain.shared.time import utc_now


class Store:
    """
    Store aggregate root.

    A store optionally references the user who owns it. Ratings are a
    separate aggregate; averages are never stored on the store.
    """

    MAX_ADDRESS_LENGTH = 400

    def __init__(
        self,
        name: str,
        email: Union[str, Email],
        address: str,
        owner_id: UUID | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._email = email if isinstance(email, Email) else Email(email)
        self._address = address
        self._owner_id = owner_id
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
    def address(self) -> str:
        return self._address

    @property
    def owner_id(self) -> UUID | None:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._owner_id is not None and self._owner_id == user_id

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        address: str,
        owner_id: UUID | None = None,
    ) -> "Store":
        name = (name or "").strip()
        address = (address or "").strip()
        if not name:
            msg = "Store name is required"
            raise ValidationError(msg, details={"field": "name"})
        if not address:
            msg = "Address is required"
            raise ValidationError(msg, details={"field": "address"})
        if len(address) > cls.MAX_ADDRESS_LENGTH:
            msg = f"Address must not exceed {cls.MAX_ADDRESS_LENGTH} characters"
            raise ValidationError(msg, details={"field": "address"})
        return cls(name=name, email=email, address=address, owner_id=owner_id)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        address: str,
        owner_id: UUID | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Store":
        return cls(
            id=id,
            name=name,
            email=email,
            address=address,
            owner_id=owner_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Store):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Store(id={self._id}, name={self._name!r})"
