"""
Read-only projections over a snapshot of posts.

List, calendar and dashboard views derive their collections from the store's
current contents through these functions. None of them mutate their input.
"""
from collections import Counter
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional

from .lifecycle import PLATFORMS, PostStatus
from .schemas.analytics import EngagementTotals

ALL = "all"


def _matches(value: Optional[str], expected: Optional[str]) -> bool:
    return expected is None or expected == ALL or value == expected


def filter_posts(
    posts: Iterable[Any],
    status: Optional[str] = None,
    platform: Optional[str] = None,
    search_term: Optional[str] = None,
) -> List[Any]:
    """Filter by exact status/platform and a case-insensitive content search, ANDed."""
    needle = search_term.lower() if search_term else ""
    return [
        post for post in posts
        if _matches(post.status, status)
        and _matches(post.platform, platform)
        and needle in post.content.lower()
    ]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def day_key(value: datetime, tz: Optional[tzinfo] = None) -> str:
    """Calendar day of ``value`` in ``tz`` as YYYY-MM-DD."""
    moment = _as_utc(value)
    if tz is not None:
        moment = moment.astimezone(tz)
    return moment.strftime("%Y-%m-%d")


def group_by_scheduled_day(posts: Iterable[Any], tz: Optional[tzinfo] = None) -> Dict[str, List[Any]]:
    """
    Group scheduled posts by the calendar day of their ``scheduled_at``.

    Drafts, published posts and scheduled posts without a time are left out,
    so every key maps to a non-empty list. Posts keep their input order.
    """
    grouped: Dict[str, List[Any]] = {}
    for post in posts:
        if post.status != PostStatus.SCHEDULED.value or post.scheduled_at is None:
            continue
        grouped.setdefault(day_key(post.scheduled_at, tz), []).append(post)
    return grouped


def sort_by_scheduled_at(posts: Iterable[Any]) -> List[Any]:
    """
    Sort posts by ``scheduled_at``, earliest first. Ties keep input order.

    Every post must carry ``scheduled_at``; filter to scheduled posts first.
    """
    posts = list(posts)
    for post in posts:
        if post.scheduled_at is None:
            raise ValueError(f"Post '{post.id}' has no scheduled_at and cannot be ordered by it")
    return sorted(posts, key=lambda post: _as_utc(post.scheduled_at))


def upcoming(posts: Iterable[Any]) -> List[Any]:
    """Scheduled posts in the order they are due."""
    return sort_by_scheduled_at(
        post for post in posts
        if post.status == PostStatus.SCHEDULED.value and post.scheduled_at is not None
    )


def aggregate_engagement(posts: Iterable[Any]) -> EngagementTotals:
    """Sum likes, comments and shares. Posts without stats count as zero."""
    likes = comments = shares = 0
    for post in posts:
        if post.stats is None:
            continue
        likes += post.stats.likes
        comments += post.stats.comments
        shares += post.stats.shares
    return EngagementTotals(likes=likes, comments=comments, shares=shares)


def total_interactions(totals: EngagementTotals) -> int:
    return totals.likes + totals.comments + totals.shares


def count_by_platform(posts: Iterable[Any]) -> Dict[str, int]:
    counts = Counter(post.platform for post in posts)
    return {platform: counts.get(platform, 0) for platform in sorted(PLATFORMS)}


def count_by_status(posts: Iterable[Any]) -> Dict[str, int]:
    counts = Counter(post.status for post in posts)
    return {status.value: counts.get(status.value, 0) for status in PostStatus}


def recent_published(posts: Iterable[Any], limit: int = 3) -> List[Any]:
    """The first ``limit`` published posts, in snapshot order."""
    return filter_posts(posts, status=PostStatus.PUBLISHED.value)[:limit]
