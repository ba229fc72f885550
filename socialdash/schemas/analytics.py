from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List


class AnalyticsDataPoint(BaseModel):
    """One day (or month) of engagement figures."""
    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    likes: int = Field(ge=0)
    comments: int = Field(ge=0)
    shares: int = Field(ge=0)


class EngagementTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    likes: int = 0
    comments: int = 0
    shares: int = 0


class AnalyticsSummary(BaseModel):
    range: str
    total_engagement: int
    published_posts: int
    posts_by_platform: Dict[str, int]
    average_engagement_per_post: int
    series: List[AnalyticsDataPoint]
