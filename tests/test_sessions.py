import pytest
from httpx import AsyncClient


async def _create(client: AsyncClient, name: str, start: str, end: str, current: bool = False) -> dict:
    response = await client.post(
        "/api/sessions",
        json={"name": name, "startDate": start, "endDate": end, "isCurrent": current, "totalWorkingDays": "220"},
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]


@pytest.mark.asyncio
async def test_current_session_cannot_be_deleted_until_replaced(client: AsyncClient) -> None:
    current = await _create(client, "2024", "2024-01-01", "2024-12-31", current=True)
    other = await _create(client, "2025", "2025-01-01", "2025-12-31")

    blocked = await client.delete(f"/api/sessions/{current['id']}")
    assert blocked.status_code == 400
    assert blocked.json()["success"] is False
    assert "current session" in blocked.json()["message"]

    promoted = await client.patch(f"/api/sessions/{other['id']}/set-current")
    assert promoted.status_code == 200
    assert promoted.json()["data"]["isCurrent"] is True

    deleted = await client.delete(f"/api/sessions/{current['id']}")
    assert deleted.status_code == 200
    assert (await client.get(f"/api/sessions/{current['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_current_active_endpoint(client: AsyncClient) -> None:
    missing = await client.get("/api/sessions/current/active")
    assert missing.status_code == 404

    await _create(client, "2024", "2024-01-01", "2024-12-31", current=True)
    latest = await _create(client, "2025", "2025-01-01", "2025-12-31", current=True)

    response = await client.get("/api/sessions/current/active")
    assert response.status_code == 200
    assert response.json()["data"]["id"] == latest["id"]

    listed = (await client.get("/api/sessions")).json()["data"]
    assert sum(1 for s in listed if s["isCurrent"]) == 1


@pytest.mark.asyncio
async def test_sessions_sorted_by_start_date_desc(client: AsyncClient) -> None:
    await _create(client, "2023", "2023-01-01", "2023-12-31")
    await _create(client, "2025", "2025-01-01", "2025-12-31")
    await _create(client, "2024", "2024-01-01", "2024-12-31")
    listed = (await client.get("/api/sessions")).json()["data"]
    assert [s["name"] for s in listed] == ["2025", "2024", "2023"]
    assert listed[0]["totalWorkingDays"] == 220


@pytest.mark.asyncio
async def test_inverted_date_range_is_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/sessions", json={"name": "Bad", "startDate": "2024-12-31", "endDate": "2024-01-01"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Start date must be before or equal to end date"


@pytest.mark.asyncio
async def test_partial_update_rechecks_range_against_stored_values(client: AsyncClient) -> None:
    session = await _create(client, "2024", "2024-01-01", "2024-12-31")
    response = await client.put(f"/api/sessions/{session['id']}", json={"endDate": "2023-06-30"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_name_longer_than_column_is_a_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/sessions", json={"name": "x" * 101, "startDate": "2024-01-01", "endDate": "2024-12-31"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Name must be at most 100 characters long"

    created = await _create(client, "2024", "2024-01-01", "2024-12-31")
    update = await client.put(f"/api/sessions/{created['id']}", json={"name": "y" * 101})
    assert update.status_code == 400
