import pytest
from httpx import AsyncClient
from jose import jwt

from app.auth.security import create_access_token, read_access_token
from app.core.config import settings


@pytest.mark.asyncio
async def test_writes_require_authentication(anon_client: AsyncClient) -> None:
    response = await anon_client.post("/api/class", json={"name": "Six"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Authentication required"}


@pytest.mark.asyncio
async def test_reads_are_public(anon_client: AsyncClient) -> None:
    response = await anon_client.get("/api/class")
    assert response.status_code == 200
    assert response.json()["data"] == []


@pytest.mark.asyncio
async def test_invalid_token_rejected(anon_client: AsyncClient) -> None:
    response = await anon_client.post(
        "/api/class", json={"name": "Six"}, headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Could not validate credentials"


@pytest.mark.asyncio
async def test_token_without_role_rejected(anon_client: AsyncClient) -> None:
    token = jwt.encode({"sub": "user-1"}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    response = await anon_client.post("/api/class", json={"name": "Six"}, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_cookie_token_accepted(anon_client: AsyncClient) -> None:
    anon_client.cookies.set("token", create_access_token("user-1", "SUPER_ADMIN"))
    response = await anon_client.post("/api/class", json={"name": "Six"})
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_module_permissions_enforced(anon_client: AsyncClient) -> None:
    token = create_access_token("teacher-1", "TEACHER", {"classes": {"create": True}})
    headers = {"Authorization": f"Bearer {token}"}

    created = await anon_client.post("/api/class", json={"name": "Six"}, headers=headers)
    assert created.status_code == 201

    deleted = await anon_client.delete(f"/api/class/{created.json()['data']['id']}", headers=headers)
    assert deleted.status_code == 403
    assert deleted.json()["message"] == "Insufficient permissions"

    other_module = await anon_client.post("/api/batches", json={"name": "A"}, headers=headers)
    assert other_module.status_code == 403


@pytest.mark.asyncio
async def test_expired_token_rejected(anon_client: AsyncClient) -> None:
    token = create_access_token("user-1", "ADMIN", expires_minutes=-1)
    response = await anon_client.post("/api/class", json={"name": "Six"}, headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_current_user_grants() -> None:
    admin = read_access_token(create_access_token("u", "ADMIN"))
    assert admin.is_admin and admin.can("classes", "delete")

    teacher = read_access_token(create_access_token("u", "TEACHER", {"results": {"update": True}}))
    assert teacher.can("results", "update")
    assert not teacher.can("results", "delete")
    assert not teacher.can("classes", "update")
