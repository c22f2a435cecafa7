from storerate.domain.store.value_objects.store_listing import (
    StoreFilter,
    StoreSort,
    StoreSortField,
)

__all__ = ["StoreFilter", "StoreSort", "StoreSortField"]
