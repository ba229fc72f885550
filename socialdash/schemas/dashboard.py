from pydantic import BaseModel
from typing import List

from .analytics import AnalyticsDataPoint, EngagementTotals
from .posts import PostResponse


class DashboardStats(BaseModel):
    total_posts: int
    scheduled_posts: int
    published_posts: int
    draft_posts: int
    engagement: EngagementTotals
    total_interactions: int
    recent_published: List[PostResponse]
    engagement_chart: List[AnalyticsDataPoint]
