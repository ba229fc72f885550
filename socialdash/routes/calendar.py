"""
Calendar routes: scheduled posts by day and in due order.
"""
from datetime import date, tzinfo
from fastapi import APIRouter, Depends, Query
from typing import Dict, List, Optional

from ..dependencies import get_display_timezone, get_owner, get_post_store
from ..projections import group_by_scheduled_day, upcoming
from ..schemas.posts import PostResponse
from ..store import PostStore

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


@router.get("", response_model=Dict[str, List[PostResponse]])
def get_calendar(
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Scheduled posts grouped by calendar day, optionally limited to [start, end]."""
    grouped = group_by_scheduled_day(store.list(owner), tz)
    start_key = start.isoformat() if start else None
    end_key = end.isoformat() if end else None
    return {
        day: posts
        for day, posts in sorted(grouped.items())
        if (start_key is None or day >= start_key) and (end_key is None or day <= end_key)
    }


@router.get("/upcoming", response_model=List[PostResponse])
def get_upcoming(
    limit: int = Query(default=50, ge=1, le=500),
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
):
    """Scheduled posts, earliest first."""
    return upcoming(store.list(owner))[:limit]


@router.get("/{day}", response_model=List[PostResponse])
def get_day(
    day: date,
    owner: Optional[str] = Depends(get_owner),
    store: PostStore = Depends(get_post_store),
    tz: tzinfo = Depends(get_display_timezone),
):
    """Scheduled posts for one calendar day."""
    return group_by_scheduled_day(store.list(owner), tz).get(day.isoformat(), [])
