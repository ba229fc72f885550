"""
Tests for the dashboard and app-level endpoints.
"""


class TestDashboard:
    """Test /api/dashboard."""

    def test_seeded_stats(self, client):
        response = client.get("/api/dashboard")
        assert response.status_code == 200
        data = response.json()
        assert data["total_posts"] == 3
        assert data["scheduled_posts"] == 1
        assert data["published_posts"] == 1
        assert data["draft_posts"] == 1
        assert data["engagement"] == {"likes": 45, "comments": 12, "shares": 5}
        assert data["total_interactions"] == 62
        assert [p["id"] for p in data["recent_published"]] == ["post2"]
        assert len(data["engagement_chart"]) == 7

    def test_empty_partition(self, empty_client):
        data = empty_client.get("/api/dashboard").json()
        assert data["total_posts"] == 0
        assert data["engagement"] == {"likes": 0, "comments": 0, "shares": 0}
        assert data["recent_published"] == []

    def test_follows_publish(self, client):
        client.post("/api/posts/post3/publish")
        data = client.get("/api/dashboard").json()
        assert data["published_posts"] == 2
        assert data["draft_posts"] == 0


class TestAppEndpoints:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_security_headers(self, client):
        response = client.get("/api/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
