"""Store repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional, Union
from uuid import UUID

from storerate.domain.shared.email import Email
from storerate.domain.shared.pagination import PageRequest
from storerate.domain.store.aggregates.store import Store
from storerate.domain.store.value_objects import StoreFilter, StoreSort


class StoreRepository(ABC):
    """Repository interface for Store aggregates."""

    @abstractmethod
    async def find_by_id(self, store_id: UUID) -> Optional[Store]:
        """Find a store by its ID."""

    @abstractmethod
    async def find_by_ids(self, store_ids: Iterable[UUID]) -> dict[UUID, Store]:
        """Find several stores at once, keyed by ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[Store]:
        """Find a store by its contact email."""

    @abstractmethod
    async def find_by_owner_id(self, owner_id: UUID) -> Optional[Store]:
        """Find the store owned by a user, if any."""

    @abstractmethod
    async def find_by_owner_ids(self, owner_ids: Iterable[UUID]) -> dict[UUID, Store]:
        """Find the stores of several owners, keyed by owner ID."""

    @abstractmethod
    async def save(self, store: Store) -> None:
        """Save or update a store.

        Raises StoreEmailAlreadyExistsError or OwnerAlreadyHasStoreError when
        a uniqueness constraint is violated.
        """

    @abstractmethod
    async def search(
        self,
        store_filter: StoreFilter,
        sort: StoreSort,
        page: PageRequest,
    ) -> tuple[list[Store], int]:
        """Return one page of matching stores and the total match count."""

    @abstractmethod
    async def count(self) -> int:
        """Count total stores."""
