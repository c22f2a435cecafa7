from storerate.presentation.api.routers.auth import router as auth_router
from storerate.presentation.api.routers.dashboard import router as dashboard_router
from storerate.presentation.api.routers.ratings import router as ratings_router
from storerate.presentation.api.routers.stores import router as stores_router
from storerate.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "ratings_router",
    "stores_router",
    "users_router",
]
