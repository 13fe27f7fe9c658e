import pytest
from httpx import AsyncClient


@pytest.fixture()
async def exam_category(client: AsyncClient):
    response = await client.post("/api/exam-categories", json={"name": "Final", "totalMarks": 100, "passMarks": 33})
    return response.json()["data"]


@pytest.mark.asyncio
async def test_admission_token_lifecycle(client: AsyncClient, school_class, academic_session) -> None:
    created = await client.post(
        "/api/admission-tokens",
        json={"classId": school_class["id"], "sessionId": academic_session["id"], "monthlyFee": 800},
    )
    assert created.status_code == 201
    token = created.json()["data"]
    assert token["tokenNumber"].startswith("AT")
    assert token["status"] == "active"
    assert token["isUsed"] is False
    assert token["className"] == "Six"

    by_number = await client.get(f"/api/admission-tokens/number/{token['tokenNumber']}")
    assert by_number.json()["data"]["id"] == token["id"]

    used = await client.patch(f"/api/admission-tokens/{token['id']}/use", json={"usedBy": "office"})
    assert used.status_code == 200
    assert used.json()["data"]["status"] == "used"
    assert used.json()["data"]["usedBy"] == "office"
    assert used.json()["data"]["usedAt"] is not None

    again = await client.patch(f"/api/admission-tokens/{token['id']}/use")
    assert again.status_code == 400
    assert again.json()["message"] == "Admission token has already been used"


@pytest.mark.asyncio
async def test_admission_token_unknown_number(client: AsyncClient) -> None:
    response = await client.get("/api/admission-tokens/number/AT000")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_admission_tokens_are_paginated(client: AsyncClient, school_class, academic_session) -> None:
    payload = {"classId": school_class["id"], "sessionId": academic_session["id"]}
    for _ in range(3):
        assert (await client.post("/api/admission-tokens", json=payload)).status_code == 201

    response = await client.get("/api/admission-tokens", params={"page": 2, "limit": 2})
    body = response.json()
    assert len(body["data"]) == 1
    assert body["pagination"] == {"currentPage": 2, "totalPages": 2, "totalItems": 3, "itemsPerPage": 2}

    default_page = (await client.get("/api/admission-tokens")).json()
    assert default_page["pagination"]["currentPage"] == 1
    assert default_page["pagination"]["itemsPerPage"] == 10


@pytest.mark.asyncio
async def test_admission_token_partial_update(client: AsyncClient, school_class, academic_session) -> None:
    token = (
        await client.post(
            "/api/admission-tokens",
            json={"classId": school_class["id"], "sessionId": academic_session["id"], "monthlyFee": 500},
        )
    ).json()["data"]
    response = await client.patch(f"/api/admission-tokens/{token['id']}", json={"monthlyFee": 650})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["monthlyFee"] == 650
    assert data["tokenNumber"] == token["tokenNumber"]
    assert data["classId"] == school_class["id"]


@pytest.mark.asyncio
async def test_admit_card_print(client: AsyncClient, school_class, academic_session, exam_category) -> None:
    created = await client.post(
        "/api/admit-cards",
        json={"classId": school_class["id"], "sessionId": academic_session["id"], "examCategoryId": exam_category["id"]},
    )
    assert created.status_code == 201
    card = created.json()["data"]
    assert card["admitCardNumber"].startswith("AC")
    assert card["examName"] == "Final"
    assert card["printed"] is False

    printed = await client.patch(f"/api/admit-cards/{card['id']}/print")
    assert printed.json()["data"]["printed"] is True
    assert printed.json()["data"]["status"] == "printed"

    listed = await client.get("/api/admit-cards", params={"printed": "true"})
    assert [c["id"] for c in listed.json()["data"]] == [card["id"]]


@pytest.mark.asyncio
async def test_admit_card_requires_exam_category(client: AsyncClient, school_class, academic_session) -> None:
    response = await client.post(
        "/api/admit-cards", json={"classId": school_class["id"], "sessionId": academic_session["id"]}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Exam category is required"
