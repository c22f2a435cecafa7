from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from storerate.domain.shared.email import Email
from storerate.domain.store import (
    OwnerAlreadyHasStoreError,
    OwnerNotFoundError,
    Store,
    StoreEmailAlreadyExistsError,
    StoreRepository,
)
from storerate.domain.user import User, UserRepository

if TYPE_CHECKING:
    from storerate.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateStoreCommand:
    """Command to create a store, optionally assigning it to an owner.

    Assigning an owner promotes that user to STORE_OWNER within the same
    unit of work as the store insert.
    """

    def __init__(
        self,
        store_repository: StoreRepository,
        user_repository: UserRepository,
    ):
        self._store_repo = store_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateStoreCommand:
        return cls(
            store_repository=factory.store_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(
        self,
        name: str,
        email: str,
        address: str,
        owner_id: Optional[UUID] = None,
    ) -> tuple[Store, Optional[User]]:
        """
        Create the store.

        Returns
        -------
        The new store and its owner (None when created without one)

        Raises
        ------
        StoreEmailAlreadyExistsError
            If another store uses the email
        OwnerNotFoundError
            If owner_id does not reference a user
        OwnerAlreadyHasStoreError
            If the owner already owns a store
        """
        email_obj = Email(email)
        if await self._store_repo.find_by_email(email_obj):
            raise StoreEmailAlreadyExistsError(email_obj.value)

        owner: Optional[User] = None
        if owner_id is not None:
            owner = await self._user_repo.find_by_id(owner_id)
            if owner is None:
                raise OwnerNotFoundError(owner_id)
            if await self._store_repo.find_by_owner_id(owner_id):
                raise OwnerAlreadyHasStoreError(owner_id)

        store = Store.create(
            name=name,
            email=email_obj,
            address=address,
            owner_id=owner_id,
        )
        await self._store_repo.save(store)

        if owner is not None:
            owner.assign_store_ownership()
            await self._user_repo.save(owner)
            logger.info("User %s now owns store %s", owner.id, store.id)

        return store, owner
