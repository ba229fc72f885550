"""
Analytics routes for engagement charts and headline numbers.
"""
from datetime import datetime, tzinfo
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from ..analytics import AnalyticsSource, summarize
from ..dependencies import get_analytics, get_display_timezone, get_owner, get_post_store
from ..schemas.analytics import AnalyticsDataPoint, AnalyticsSummary
from ..store import PostStore

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("", response_model=List[AnalyticsDataPoint])
def get_engagement_series(
    range_name: str = Query(default="week", alias="range"),
    source: AnalyticsSource = Depends(get_analytics),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Engagement over time for the week, month or year ending today."""
    return source.series(range_name, datetime.now(tz).date())


@router.get("/summary", response_model=AnalyticsSummary)
def get_summary(
    range_name: str = Query(default="week", alias="range"),
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
    source: AnalyticsSource = Depends(get_analytics),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Total engagement, published post counts and engagement per post."""
    series = source.series(range_name, datetime.now(tz).date())
    return summarize(range_name, series, store.list(owner))
