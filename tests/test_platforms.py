"""
Tests for the platform catalog and its routes.
"""
import pytest

from socialdash.errors import NotFoundError


class TestPlatformStore:
    """Test PlatformStore."""

    def test_seeded_catalog(self, stores):
        platforms = stores.platforms.list()
        assert [p.id for p in platforms] == ["platform1", "platform2"]
        assert [p.name for p in platforms] == ["facebook", "instagram"]
        assert all(p.connected for p in platforms)
        assert platforms[0].pages[0].id == "page1"
        assert platforms[1].pages[0].name == "Instagram Business"

    def test_disconnect_clears_pages(self, stores):
        platform = stores.platforms.set_connected(None, "platform1", False)
        assert not platform.connected
        assert platform.pages == []
        assert stores.platforms.list()[0].pages == []

    def test_reconnect_has_no_pages(self, stores):
        stores.platforms.set_connected(None, "platform2", False)
        platform = stores.platforms.set_connected(None, "platform2", True)
        assert platform.connected
        assert platform.pages == []

    def test_unknown_platform(self, stores):
        with pytest.raises(NotFoundError) as exc_info:
            stores.platforms.set_connected(None, "platform9", True)
        assert exc_info.value.resource == "Platform"

    def test_partitions_are_isolated(self, stores):
        stores.platforms.set_connected("1", "platform1", False)
        assert stores.platforms.list()[0].connected
        assert not stores.platforms.list("1")[0].connected


class TestPlatformRoutes:
    """Test /api/platforms."""

    def test_list(self, client):
        response = client.get("/api/platforms")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_disconnect(self, client):
        response = client.post("/api/platforms/platform1/disconnect")
        assert response.status_code == 200
        data = response.json()
        assert data["connected"] is False
        assert data["pages"] == []

    def test_connect(self, client):
        client.post("/api/platforms/platform2/disconnect")
        response = client.post("/api/platforms/platform2/connect")
        assert response.status_code == 200
        assert response.json()["connected"] is True

    def test_unknown_platform(self, client):
        response = client.post("/api/platforms/nope/connect")
        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
