from .auth import router as auth_router
from .posts import router as posts_router
from .calendar import router as calendar_router
from .platforms import router as platforms_router
from .analytics import router as analytics_router
from .dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "posts_router",
    "calendar_router",
    "platforms_router",
    "analytics_router",
    "dashboard_router",
]
