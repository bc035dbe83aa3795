"""Tests for location API endpoints."""

import pytest
from conftest import make_reading
from httpx import AsyncClient
from sqlalchemy import func, select

from fireprotect.database import async_session
from fireprotect.models import Alert
from fireprotect.services.thingspeak import MAX_HISTORY_RESULTS

NEW_LOCATION = {
    "name": "Connaught Place",
    "region": "Delhi",
    "latitude": 28.6315,
    "longitude": 77.2167,
    "thingspeak_channel_id": 7654321,
    "thingspeak_read_key": "NEWKEY",
}


@pytest.mark.asyncio
async def test_locations_require_token(client: AsyncClient):
    response = await client.get("/api/locations")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_list_locations_ordered_by_name(
    client: AsyncClient, location, offline_location, civilian_headers
):
    response = await client.get("/api/locations", headers=civilian_headers)
    assert response.status_code == 200

    data = response.json()
    assert [loc["name"] for loc in data] == ["Okhla Industrial Area", "Sanjay Van"]
    assert data[0]["sensor_enabled"] is True
    assert data[1]["sensor_enabled"] is False


@pytest.mark.asyncio
async def test_get_location(client: AsyncClient, location, civilian_headers):
    response = await client.get(f"/api/locations/{location.id}", headers=civilian_headers)
    assert response.status_code == 200
    assert response.json()["id"] == location.id


@pytest.mark.asyncio
async def test_get_unknown_location(client: AsyncClient, civilian_headers):
    response = await client.get("/api/locations/nope", headers=civilian_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_authority_can_create_location(client: AsyncClient, authority_headers):
    response = await client.post("/api/locations", json=NEW_LOCATION, headers=authority_headers)
    assert response.status_code == 201

    data = response.json()
    assert data["name"] == "Connaught Place"
    assert data["thingspeak_channel_id"] == "7654321"
    assert data["status"] == "normal"
    assert data["sensor_enabled"] is True


@pytest.mark.asyncio
async def test_civilian_cannot_create_location(client: AsyncClient, civilian_headers):
    response = await client.post("/api/locations", json=NEW_LOCATION, headers=civilian_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_location_validates_coordinates(client: AsyncClient, authority_headers):
    response = await client.post(
        "/api/locations", json={**NEW_LOCATION, "latitude": 120}, headers=authority_headers
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_delete_location_removes_its_alerts(
    client: AsyncClient, location, alert, authority_headers
):
    response = await client.delete(f"/api/locations/{location.id}", headers=authority_headers)
    assert response.status_code == 204

    async with async_session() as session:
        remaining = await session.scalar(select(func.count(Alert.id)))
    assert remaining == 0

    response = await client.get(f"/api/locations/{location.id}", headers=authority_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_civilian_cannot_delete_location(client: AsyncClient, location, civilian_headers):
    response = await client.delete(f"/api/locations/{location.id}", headers=civilian_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_delete_unknown_location(client: AsyncClient, authority_headers):
    response = await client.delete("/api/locations/nope", headers=authority_headers)
    assert response.status_code == 404


# --- Readings ---


@pytest.mark.asyncio
async def test_latest_reading(client: AsyncClient, location, gateway, civilian_headers):
    gateway.reading = make_reading(gas=140)

    response = await client.get(f"/api/locations/{location.id}/readings/latest", headers=civilian_headers)
    assert response.status_code == 200
    assert response.json()["gas"] == 140.0


@pytest.mark.asyncio
async def test_latest_reading_unavailable(client: AsyncClient, location, gateway, civilian_headers):
    gateway.reading = None

    response = await client.get(f"/api/locations/{location.id}/readings/latest", headers=civilian_headers)
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_reading_history(client: AsyncClient, location, gateway, civilian_headers):
    gateway.history_readings = [make_reading(humidity=h) for h in (40.0, 45.0, 50.0)]

    response = await client.get(
        f"/api/locations/{location.id}/readings/history",
        params={"results": 2},
        headers=civilian_headers,
    )
    assert response.status_code == 200
    assert [entry["humidity"] for entry in response.json()] == [40.0, 45.0]


@pytest.mark.asyncio
async def test_reading_history_caps_results(client: AsyncClient, location, civilian_headers):
    url = f"/api/locations/{location.id}/readings/history"

    response = await client.get(url, params={"results": MAX_HISTORY_RESULTS}, headers=civilian_headers)
    assert response.status_code == 200

    response = await client.get(
        url, params={"results": MAX_HISTORY_RESULTS + 1}, headers=civilian_headers
    )
    assert response.status_code == 422
