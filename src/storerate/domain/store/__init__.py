"""Store domain: the store directory and store ownership."""

from storerate.domain.store.aggregates import Store
from storerate.domain.store.exceptions import (
    NoOwnedStoreError,
    OwnerAlreadyHasStoreError,
    OwnerNotFoundError,
    StoreEmailAlreadyExistsError,
    StoreNotFoundError,
)
from storerate.domain.store.repositories import StoreRepository
from storerate.domain.store.value_objects import (
    StoreFilter,
    StoreSort,
    StoreSortField,
)

__all__ = [
    "NoOwnedStoreError",
    "OwnerAlreadyHasStoreError",
    "OwnerNotFoundError",
    "Store",
    "StoreEmailAlreadyExistsError",
    "StoreFilter",
    "StoreNotFoundError",
    "StoreRepository",
    "StoreSort",
    "StoreSortField",
]
