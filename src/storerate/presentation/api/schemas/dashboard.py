"""Dashboard schemas."""

from storerate.application.dtos import PlatformStatsDTO
from storerate.presentation.api.schemas.common import CamelModel


class PlatformStatsResponse(CamelModel):
    total_users: int
    total_stores: int
    total_ratings: int

    @classmethod
    def from_dto(cls, dto: PlatformStatsDTO) -> "PlatformStatsResponse":
        return cls(
            total_users=dto.total_users,
            total_stores=dto.total_stores,
            total_ratings=dto.total_ratings,
        )


class StatsEnvelope(CamelModel):
    stats: PlatformStatsResponse
