"""
Analytics sources.

There is no real analytics backend; the dashboard charts read from a
pluggable source. The generated source is seeded so the same seed always
yields the same series.
"""
import calendar
import random
from datetime import date, timedelta
from typing import Any, Iterable, List, Optional, Protocol

from .lifecycle import PostStatus
from .projections import count_by_platform, filter_posts
from .schemas.analytics import AnalyticsDataPoint, AnalyticsSummary

RANGES = ("week", "month", "year")
DEFAULT_RANGE = "week"

# Bigger ranges aggregate more activity per point
RANGE_MULTIPLIER = {"week": 1, "month": 5, "year": 30}

DEMO_SERIES = [
    AnalyticsDataPoint(date="2023-04-15", likes=45, comments=12, shares=5),
    AnalyticsDataPoint(date="2023-04-16", likes=38, comments=8, shares=3),
    AnalyticsDataPoint(date="2023-04-17", likes=62, comments=15, shares=8),
    AnalyticsDataPoint(date="2023-04-18", likes=43, comments=9, shares=4),
    AnalyticsDataPoint(date="2023-04-19", likes=54, comments=11, shares=7),
    AnalyticsDataPoint(date="2023-04-20", likes=74, comments=18, shares=12),
    AnalyticsDataPoint(date="2023-04-21", likes=82, comments=24, shares=15),
]


class AnalyticsSource(Protocol):
    def series(self, range_name: str, today: date) -> List[AnalyticsDataPoint]:
        ...


def normalize_range(range_name: Optional[str]) -> str:
    return range_name if range_name in RANGES else DEFAULT_RANGE


def months_ago(day: date, months: int) -> date:
    """Same day of month ``months`` earlier, clamped to the month's length."""
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def range_dates(range_name: str, today: date) -> List[date]:
    """Oldest-first sample dates for a range."""
    range_name = normalize_range(range_name)
    if range_name == "month":
        return [today - timedelta(days=i) for i in range(30, -1, -3)]
    if range_name == "year":
        return [months_ago(today, i) for i in range(11, -1, -1)]
    return [today - timedelta(days=i) for i in range(6, -1, -1)]


class StaticAnalyticsSource:
    """The fixed demo week, whatever range is asked for."""

    def series(self, range_name: str, today: date) -> List[AnalyticsDataPoint]:
        return list(DEMO_SERIES)


class GeneratedAnalyticsSource:
    """Pseudo-random series. Each call reseeds, so output depends only on its inputs."""

    def __init__(self, seed: int = 42):
        self.seed = seed

    def series(self, range_name: str, today: date) -> List[AnalyticsDataPoint]:
        range_name = normalize_range(range_name)
        rng = random.Random(f"{self.seed}:{range_name}:{today.isoformat()}")
        multiplier = RANGE_MULTIPLIER[range_name]
        return [
            AnalyticsDataPoint(
                date=day.isoformat(),
                likes=int(rng.random() * 50 * multiplier + 30),
                comments=int(rng.random() * 20 * multiplier + 5),
                shares=int(rng.random() * 15 * multiplier + 2),
            )
            for day in range_dates(range_name, today)
        ]


def get_analytics_source(kind: str = "generated", seed: int = 42) -> AnalyticsSource:
    if kind == "static":
        return StaticAnalyticsSource()
    if kind == "generated":
        return GeneratedAnalyticsSource(seed)
    raise ValueError(f"Unknown analytics source '{kind}'")


def summarize(range_name: str, series: List[AnalyticsDataPoint], posts: Iterable[Any]) -> AnalyticsSummary:
    """Headline numbers for the analytics page."""
    total = sum(point.likes + point.comments + point.shares for point in series)
    published = filter_posts(posts, status=PostStatus.PUBLISHED.value)
    average = int(total / len(published) + 0.5) if published else 0
    return AnalyticsSummary(
        range=normalize_range(range_name),
        total_engagement=total,
        published_posts=len(published),
        posts_by_platform=count_by_platform(published),
        average_engagement_per_post=average,
        series=series,
    )
