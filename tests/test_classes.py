import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import IntegrityError

from app.api.classes.router import engine as class_engine
from app.core.exceptions import ValidationError
from app.crud.engine import is_unique_violation


@pytest.mark.asyncio
async def test_create_class_then_duplicate(client: AsyncClient) -> None:
    response = await client.post("/api/class", json={"name": "Six"})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Six"
    assert body["data"]["isActive"] is True
    uuid.UUID(body["data"]["id"])

    duplicate = await client.post("/api/class", json={"name": "Six"})
    assert duplicate.status_code == 400
    assert duplicate.json()["success"] is False
    assert "already exists" in duplicate.json()["message"]


@pytest.mark.asyncio
async def test_duplicate_name_is_case_insensitive(client: AsyncClient) -> None:
    await client.post("/api/class", json={"name": "Seven"})
    response = await client.post("/api/class", json={"name": "  sEVEN "})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_duplicate_non_ascii_name_is_rejected(client: AsyncClient) -> None:
    assert (await client.post("/api/class", json={"name": "Ärzte"})).status_code == 201
    response = await client.post("/api/class", json={"name": "Ärzte"})
    assert response.status_code == 400
    assert response.json()["message"] == "Class with this name already exists"


@pytest.mark.asyncio
async def test_name_is_anchored_not_substring(client: AsyncClient) -> None:
    await client.post("/api/class", json={"name": "Seven"})
    response = await client.post("/api/class", json={"name": "Seven A"})
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_name_too_short(client: AsyncClient) -> None:
    response = await client.post("/api/class", json={"name": "A"})
    assert response.status_code == 400
    assert response.json()["message"] == "Name must be at least 2 characters long"


@pytest.mark.asyncio
async def test_list_is_sorted_by_name(client: AsyncClient) -> None:
    for name in ("Ten", "Eight", "Nine"):
        await client.post("/api/class", json={"name": name})
    response = await client.get("/api/class")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()["data"]] == ["Eight", "Nine", "Ten"]


@pytest.mark.asyncio
async def test_get_invalid_and_missing_id(client: AsyncClient) -> None:
    invalid = await client.get("/api/class/not-an-id")
    assert invalid.status_code == 400
    assert invalid.json() == {"success": False, "message": "Invalid class ID"}

    missing = await client.get(f"/api/class/{uuid.uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Class not found"


@pytest.mark.asyncio
async def test_toggle_status_twice_restores_flag(client: AsyncClient, school_class) -> None:
    path = f"/api/class/{school_class['id']}/toggle-status"
    first = await client.patch(path)
    assert first.json()["data"] == {"isActive": False}
    second = await client.patch(path)
    assert second.json()["data"] == {"isActive": True}


@pytest.mark.asyncio
async def test_inactive_class_still_visible(client: AsyncClient, school_class) -> None:
    await client.patch(f"/api/class/{school_class['id']}/toggle-status")
    listed = await client.get("/api/class")
    assert [c["id"] for c in listed.json()["data"]] == [school_class["id"]]
    fetched = await client.get(f"/api/class/{school_class['id']}")
    assert fetched.json()["data"]["isActive"] is False


@pytest.mark.asyncio
async def test_empty_update_only_touches_updated_at(client: AsyncClient, school_class) -> None:
    response = await client.put(f"/api/class/{school_class['id']}", json={})
    assert response.status_code == 200
    updated = response.json()["data"]
    before = {k: v for k, v in school_class.items() if k != "updatedAt"}
    after = {k: v for k, v in updated.items() if k != "updatedAt"}
    assert after == before


@pytest.mark.asyncio
async def test_update_to_existing_name_is_rejected(client: AsyncClient, school_class) -> None:
    await client.post("/api/class", json={"name": "Seven"})
    response = await client.put(f"/api/class/{school_class['id']}", json={"name": "seven"})
    assert response.status_code == 400

    # renaming to its own name is not a conflict
    same = await client.put(f"/api/class/{school_class['id']}", json={"name": "SIX"})
    assert same.status_code == 200
    assert same.json()["data"]["name"] == "SIX"


@pytest.mark.asyncio
async def test_delete_is_hard(client: AsyncClient, school_class) -> None:
    response = await client.delete(f"/api/class/{school_class['id']}")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Class deleted successfully"}

    again = await client.delete(f"/api/class/{school_class['id']}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_malformed_body_uses_envelope(client: AsyncClient) -> None:
    response = await client.post("/api/class", json=["Six"])
    assert response.status_code == 400
    assert response.json()["success"] is False


@pytest.mark.asyncio
async def test_not_null_violation_is_not_reported_as_duplicate(db_session) -> None:
    with pytest.raises(ValidationError) as exc:
        await class_engine.create(db_session, {"name": "Six"}, name=None)
    assert exc.value.message == "Class could not be saved: a required value is missing or invalid"


def test_unique_violation_detection() -> None:
    sqlite_unique = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: classes.name"))
    postgres_unique = IntegrityError("INSERT", {}, Exception('duplicate key value violates unique constraint "ix"'))
    not_null = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed: classes.name"))
    assert is_unique_violation(sqlite_unique)
    assert is_unique_violation(postgres_unique)
    assert not is_unique_violation(not_null)
