from storerate.application.queries.store.list_stores_query import ListStoresQuery
from storerate.application.queries.store.store_detail_query import (
    GetOwnedStoreQuery,
    GetStoreQuery,
)

__all__ = ["GetOwnedStoreQuery", "GetStoreQuery", "ListStoresQuery"]
