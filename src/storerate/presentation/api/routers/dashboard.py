"""Admin dashboard router."""

from fastapi import APIRouter

from storerate.application.queries import PlatformStatsQuery
from storerate.presentation.api.dependencies import AdminUser, RepoFactory
from storerate.presentation.api.schemas.dashboard import (
    PlatformStatsResponse,
    StatsEnvelope,
)

router = APIRouter()


@router.get(
    "/stats",
    summary="Platform statistics",
    responses={
        200: {"description": "Counts of users, stores and ratings"},
        403: {"description": "Admin access required"},
    },
)
async def get_stats(_admin: AdminUser, factory: RepoFactory) -> StatsEnvelope:
    stats = await PlatformStatsQuery.from_factory(factory).execute()
    return StatsEnvelope(stats=PlatformStatsResponse.from_dto(stats))
