from .posts import PostCreate, PostUpdate, PostResponse, PostStats, ValidationResult
from .platforms import PlatformResponse, PlatformPageResponse
from .analytics import AnalyticsDataPoint, AnalyticsSummary, EngagementTotals
from .dashboard import DashboardStats

__all__ = [
    "PostCreate", "PostUpdate", "PostResponse", "PostStats", "ValidationResult",
    "PlatformResponse", "PlatformPageResponse",
    "AnalyticsDataPoint", "AnalyticsSummary", "EngagementTotals",
    "DashboardStats",
]
