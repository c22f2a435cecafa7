"""Queries (read-only use cases)."""

from storerate.application.queries.dashboard import PlatformStatsQuery
from storerate.application.queries.rating import (
    ListStoreRatingsQuery,
    ListUserRatingsQuery,
)
from storerate.application.queries.store import (
    GetOwnedStoreQuery,
    GetStoreQuery,
    ListStoresQuery,
)
from storerate.application.queries.user import GetUserQuery, ListUsersQuery

__all__ = [
    "GetOwnedStoreQuery",
    "GetStoreQuery",
    "GetUserQuery",
    "ListStoreRatingsQuery",
    "ListStoresQuery",
    "ListUserRatingsQuery",
    "ListUsersQuery",
    "PlatformStatsQuery",
]
