"""Store domain exceptions."""

from uuid import UUID

from storerate.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class StoreNotFoundError(EntityNotFoundError):
    def __init__(self, store_id: UUID | str) -> None:
        self.store_id = store_id
        super().__init__(
            "Store not found",
            ErrorCode.STORE_NOT_FOUND,
            {"store_id": str(store_id)},
        )


class NoOwnedStoreError(EntityNotFoundError):
    """The acting store owner has no store assigned."""

    def __init__(self, owner_id: UUID | str) -> None:
        self.owner_id = owner_id
        super().__init__(
            "You do not own a store",
            ErrorCode.STORE_NOT_FOUND,
            {"owner_id": str(owner_id)},
        )


class OwnerNotFoundError(EntityNotFoundError):
    def __init__(self, owner_id: UUID | str) -> None:
        self.owner_id = owner_id
        super().__init__(
            "Owner not found",
            ErrorCode.OWNER_NOT_FOUND,
            {"owner_id": str(owner_id)},
        )


class StoreEmailAlreadyExistsError(ConflictError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Store email already exists",
            ErrorCode.DUPLICATE_STORE_EMAIL,
            {"email": email},
        )


class OwnerAlreadyHasStoreError(ConflictError):
    def __init__(self, owner_id: UUID | str) -> None:
        self.owner_id = owner_id
        super().__init__(
            "User already owns a store",
            ErrorCode.OWNER_ALREADY_HAS_STORE,
            {"owner_id": str(owner_id)},
        )
