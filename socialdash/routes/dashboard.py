"""
Dashboard route combining post counts, engagement and the recent posts list.
"""
from datetime import datetime, tzinfo
from fastapi import APIRouter, Depends
from typing import Optional

from ..analytics import AnalyticsSource
from ..dependencies import get_analytics, get_display_timezone, get_owner, get_post_store
from ..projections import aggregate_engagement, count_by_status, recent_published, total_interactions
from ..schemas.dashboard import DashboardStats
from ..store import PostStore

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
def get_dashboard_stats(
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
    source: AnalyticsSource = Depends(get_analytics),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Get dashboard statistics for the caller's partition."""
    posts = store.list(owner)
    counts = count_by_status(posts)
    engagement = aggregate_engagement(posts)

    return DashboardStats(
        total_posts=len(posts),
        scheduled_posts=counts["scheduled"],
        published_posts=counts["published"],
        draft_posts=counts["draft"],
        engagement=engagement,
        total_interactions=total_interactions(engagement),
        recent_published=recent_published(posts),
        engagement_chart=source.series("week", datetime.now(tz).date()),
    )
