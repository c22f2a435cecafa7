"""Application DTOs."""

from storerate.application.dtos.directory_dtos import (
    OwnedStoreSummaryDTO,
    PlatformStatsDTO,
    RatingWithRaterDTO,
    StoreDetailDTO,
    StoreListItemDTO,
    StoreRatingsDTO,
    UserRatingDTO,
    UserWithStoreDTO,
)

__all__ = [
    "OwnedStoreSummaryDTO",
    "PlatformStatsDTO",
    "RatingWithRaterDTO",
    "StoreDetailDTO",
    "StoreListItemDTO",
    "StoreRatingsDTO",
    "UserRatingDTO",
    "UserWithStoreDTO",
]
