"""
Tests for analytics sources, the summary and the analytics routes.
"""
from datetime import date

import pytest

from socialdash.analytics import (
    DEMO_SERIES,
    GeneratedAnalyticsSource,
    StaticAnalyticsSource,
    get_analytics_source,
    months_ago,
    range_dates,
    summarize,
)
from socialdash.schemas.analytics import AnalyticsDataPoint

TODAY = date(2026, 10, 19)


class TestRangeDates:
    """Test range_dates() and months_ago()."""

    @pytest.mark.parametrize("range_name, count", [("week", 7), ("month", 11), ("year", 12)])
    def test_point_counts(self, range_name, count):
        dates = range_dates(range_name, TODAY)
        assert len(dates) == count
        assert dates == sorted(dates)
        assert dates[-1] == TODAY

    def test_week(self):
        assert range_dates("week", TODAY)[0] == date(2026, 10, 13)

    def test_month_steps_three_days(self):
        dates = range_dates("month", TODAY)
        assert dates[0] == date(2026, 9, 19)
        assert dates[1] == date(2026, 9, 22)

    def test_unknown_range_is_week(self):
        assert range_dates("decade", TODAY) == range_dates("week", TODAY)

    def test_months_ago_clamps(self):
        assert months_ago(date(2026, 3, 31), 1) == date(2026, 2, 28)
        assert months_ago(date(2026, 1, 15), 2) == date(2025, 11, 15)
        assert months_ago(date(2024, 3, 31), 1) == date(2024, 2, 29)


class TestSources:
    """Test the static and generated sources."""

    def test_generated_is_deterministic(self):
        first = GeneratedAnalyticsSource(seed=7).series("month", TODAY)
        second = GeneratedAnalyticsSource(seed=7).series("month", TODAY)
        assert first == second

    def test_seed_changes_series(self):
        a = GeneratedAnalyticsSource(seed=1).series("week", TODAY)
        b = GeneratedAnalyticsSource(seed=2).series("week", TODAY)
        assert a != b

    def test_generated_bounds(self):
        for point in GeneratedAnalyticsSource().series("week", TODAY):
            assert 30 <= point.likes < 80
            assert 5 <= point.comments < 25
            assert 2 <= point.shares < 17

    def test_generated_dates(self):
        series = GeneratedAnalyticsSource().series("year", TODAY)
        assert series[-1].date == "2026-10-19"
        assert series[0].date == "2025-11-19"

    def test_static(self):
        assert StaticAnalyticsSource().series("year", TODAY) == DEMO_SERIES

    def test_factory(self):
        assert isinstance(get_analytics_source("static"), StaticAnalyticsSource)
        assert get_analytics_source("generated", 9).seed == 9
        with pytest.raises(ValueError):
            get_analytics_source("live")


class TestSummarize:
    """Test summarize()."""

    def test_summary(self, stores):
        series = [AnalyticsDataPoint(date="2026-10-19", likes=10, comments=5, shares=5)]
        summary = summarize("week", series, stores.posts.list())
        assert summary.total_engagement == 20
        assert summary.published_posts == 1
        assert summary.posts_by_platform == {"facebook": 0, "instagram": 1}
        assert summary.average_engagement_per_post == 20

    def test_no_published_posts(self):
        summary = summarize("year", DEMO_SERIES, [])
        assert summary.published_posts == 0
        assert summary.average_engagement_per_post == 0
        assert summary.range == "year"


class TestAnalyticsRoutes:
    """Test /api/analytics."""

    @pytest.mark.parametrize("range_name, count", [("week", 7), ("month", 11), ("year", 12)])
    def test_series(self, client, range_name, count):
        response = client.get("/api/analytics", params={"range": range_name})
        assert response.status_code == 200
        assert len(response.json()) == count

    def test_default_range(self, client):
        assert len(client.get("/api/analytics").json()) == 7

    def test_summary(self, client):
        response = client.get("/api/analytics/summary", params={"range": "month"})
        assert response.status_code == 200
        data = response.json()
        assert data["range"] == "month"
        assert data["published_posts"] == 1
        assert len(data["series"]) == 11
