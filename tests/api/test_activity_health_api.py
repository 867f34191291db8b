"""Tests for activity feed and health endpoints."""

from httpx import AsyncClient


async def test_activity_feed(api_client: AsyncClient, sample_item_data: dict):
    await api_client.post("/api/inventory", json=sample_item_data)

    response = await api_client.get("/api/activity", params={"limit": 5})

    entries = response.json()
    assert entries[0]["type"] == "INVENTORY_ADDED"
    assert entries[0]["link"] == "/inventory"


async def test_root_health(api_client: AsyncClient):
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_api_health_reports_database(api_client: AsyncClient):
    response = await api_client.get("/api/health")

    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"]["available"] is True
    assert "uptime_seconds" in data


async def test_request_id_header(api_client: AsyncClient):
    response = await api_client.get("/health")

    assert response.headers["X-Request-ID"]
    assert response.headers["X-Response-Time"].endswith("ms")
