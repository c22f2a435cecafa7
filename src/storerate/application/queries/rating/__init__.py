from storerate.application.queries.rating.rating_queries import (
    ListStoreRatingsQuery,
    ListUserRatingsQuery,
)

__all__ = ["ListStoreRatingsQuery", "ListUserRatingsQuery"]
