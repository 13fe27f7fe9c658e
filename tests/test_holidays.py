import pytest
from httpx import AsyncClient


async def _holiday(client: AsyncClient, session_id: str, name: str, dates: list) -> dict:
    response = await client.post("/api/holidays", json={"name": name, "sessionId": session_id, "dates": dates})
    assert response.status_code == 201, response.json()
    return response.json()["data"]


@pytest.mark.asyncio
async def test_check_date_is_inclusive(client: AsyncClient, academic_session) -> None:
    await _holiday(client, academic_session["id"], "Winter", [{"fromDate": "2024-01-01", "toDate": "2024-01-03"}])

    inside = await client.get("/api/holidays/check/2024-01-02")
    assert inside.status_code == 200
    assert inside.json()["data"]["isHoliday"] is True
    assert inside.json()["data"]["holiday"]["name"] == "Winter"

    edge = await client.get("/api/holidays/check/2024-01-03")
    assert edge.json()["data"]["isHoliday"] is True

    outside = await client.get("/api/holidays/check/2024-02-01")
    assert outside.json()["data"] == {"isHoliday": False}


@pytest.mark.asyncio
async def test_holiday_populates_session(client: AsyncClient, academic_session) -> None:
    holiday = await _holiday(client, academic_session["id"], "Eid", [{"fromDate": "2024-04-10", "toDate": "2024-04-12"}])
    assert holiday["session"] == {"id": academic_session["id"], "name": "2024"}
    assert holiday["dates"] == [{"fromDate": "2024-04-10", "toDate": "2024-04-12", "isFullDay": True}]


@pytest.mark.asyncio
async def test_deleted_session_yields_placeholder(client: AsyncClient) -> None:
    session = (
        await client.post("/api/sessions", json={"name": "Old", "startDate": "2020-01-01", "endDate": "2020-12-31"})
    ).json()["data"]
    holiday = await _holiday(client, session["id"], "Old day", [{"fromDate": "2020-03-01", "toDate": "2020-03-01"}])

    assert (await client.delete(f"/api/sessions/{session['id']}")).status_code == 200

    response = await client.get(f"/api/holidays/{holiday['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["session"] == {"id": session["id"], "name": "Unknown Session"}


@pytest.mark.asyncio
async def test_soft_delete_hides_from_listing(client: AsyncClient, academic_session) -> None:
    holiday = await _holiday(client, academic_session["id"], "Spring", [{"fromDate": "2024-03-01", "toDate": "2024-03-02"}])

    response = await client.delete(f"/api/holidays/{holiday['id']}")
    assert response.status_code == 200

    assert (await client.get("/api/holidays")).json()["data"] == []
    with_inactive = (await client.get("/api/holidays", params={"includeInactive": "true"})).json()["data"]
    assert [h["id"] for h in with_inactive] == [holiday["id"]]
    assert with_inactive[0]["isActive"] is False

    # still visible by id, but a second delete finds nothing to delete
    assert (await client.get(f"/api/holidays/{holiday['id']}")).status_code == 200
    assert (await client.delete(f"/api/holidays/{holiday['id']}")).status_code == 404

    check = await client.get("/api/holidays/check/2024-03-01")
    assert check.json()["data"]["isHoliday"] is False


@pytest.mark.asyncio
async def test_month_lookup(client: AsyncClient, academic_session) -> None:
    await _holiday(client, academic_session["id"], "Late Jan", [{"fromDate": "2024-01-30", "toDate": "2024-02-02"}])
    await _holiday(client, academic_session["id"], "Mid Feb", [{"fromDate": "2024-02-21", "toDate": "2024-02-21"}])
    await _holiday(client, academic_session["id"], "March", [{"fromDate": "2024-03-26", "toDate": "2024-03-26"}])

    response = await client.get("/api/holidays/month/2024/2")
    assert response.status_code == 200
    assert [h["name"] for h in response.json()["data"]] == ["Late Jan", "Mid Feb"]

    invalid = await client.get("/api/holidays/month/2024/13")
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_holiday_validation(client: AsyncClient, academic_session) -> None:
    no_dates = await client.post("/api/holidays", json={"name": "X", "sessionId": academic_session["id"], "dates": []})
    assert no_dates.status_code == 400

    inverted = await client.post(
        "/api/holidays",
        json={"name": "X", "sessionId": academic_session["id"], "dates": [{"fromDate": "2024-01-05", "toDate": "2024-01-01"}]},
    )
    assert inverted.status_code == 400

    bad_session = await client.post(
        "/api/holidays",
        json={
            "name": "X",
            "sessionId": "00000000-0000-0000-0000-000000000000",
            "dates": [{"fromDate": "2024-01-01", "toDate": "2024-01-01"}],
        },
    )
    assert bad_session.status_code == 400
    assert bad_session.json()["message"] == "Session not found"


@pytest.mark.asyncio
async def test_holiday_type_unique_among_active_only(client: AsyncClient) -> None:
    first = (await client.post("/api/holiday-type", json={"name": "Religious"})).json()["data"]
    assert (await client.post("/api/holiday-type", json={"name": "religious"})).status_code == 400

    assert (await client.delete(f"/api/holiday-type/{first['id']}")).status_code == 200
    replacement = await client.post("/api/holiday-type", json={"name": "Religious"})
    assert replacement.status_code == 201

    # reactivating the deleted one would create a duplicate among active records
    reactivate = await client.patch(f"/api/holiday-type/{first['id']}/toggle-status")
    assert reactivate.status_code == 400


@pytest.mark.asyncio
async def test_holiday_caches_holiday_type_name(client: AsyncClient, academic_session) -> None:
    holiday_type = (await client.post("/api/holiday-type", json={"name": "National"})).json()["data"]
    response = await client.post(
        "/api/holidays",
        json={
            "name": "Victory Day",
            "sessionId": academic_session["id"],
            "holidayTypeId": holiday_type["id"],
            "holidayTypeName": "spoofed",
            "dates": [{"fromDate": "2024-12-16", "toDate": "2024-12-16"}],
        },
    )
    assert response.status_code == 201
    assert response.json()["data"]["holidayTypeName"] == "National"


@pytest.mark.asyncio
async def test_preload_public_holidays_into_session(client: AsyncClient, academic_session) -> None:
    await client.post("/api/holiday-type", json={"name": "National"})
    response = await client.post("/api/holidays/preload-bd-holidays", json={"sessionId": academic_session["id"]})
    assert response.status_code == 201, response.json()
    body = response.json()
    assert body["message"] == "7 holidays preloaded successfully"
    assert body["data"]["skipped"] == []

    victory = next(h for h in body["data"]["created"] if h["name"] == "Victory Day")
    assert victory["holidayTypeName"] == "National"
    assert victory["dates"][0]["fromDate"] == "2024-12-16"

    check = await client.get("/api/holidays/check/2024-12-16")
    assert check.json()["data"]["isHoliday"] is True


@pytest.mark.asyncio
async def test_preload_skips_holidays_the_session_already_has(client: AsyncClient, academic_session) -> None:
    first = await client.post("/api/holidays/preload-bd-holidays", json={"sessionId": academic_session["id"]})
    assert first.status_code == 201

    again = await client.post("/api/holidays/preload-bd-holidays", json={"sessionId": academic_session["id"]})
    assert again.status_code == 201
    assert again.json()["data"]["created"] == []
    assert len(again.json()["data"]["skipped"]) == 7
    assert len((await client.get("/api/holidays")).json()["data"]) == 7


@pytest.mark.asyncio
async def test_preload_requires_a_known_session(client: AsyncClient) -> None:
    response = await client.post(
        "/api/holidays/preload-bd-holidays", json={"sessionId": "00000000-0000-0000-0000-000000000000"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Session not found"
