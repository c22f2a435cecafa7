from storerate.application.queries.dashboard.platform_stats_query import (
    PlatformStatsQuery,
)

__all__ = ["PlatformStatsQuery"]
