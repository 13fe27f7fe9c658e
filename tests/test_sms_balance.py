import uuid

import pytest
from httpx import AsyncClient

from app.api.sms_balance import service
from app.core.exceptions import ConflictError
from app.core.models import SmsPurchase


@pytest.mark.asyncio
async def test_balance_created_lazily(client: AsyncClient) -> None:
    response = await client.get("/api/sms-balance/balance")
    assert response.status_code == 200
    data = response.json()["data"]
    assert (data["totalSms"], data["usedSms"], data["remainingSms"]) == (0, 0, 0)

    again = await client.get("/api/sms-balance/balance")
    assert again.json()["data"]["id"] == data["id"]


@pytest.mark.asyncio
async def test_pricing(client: AsyncClient) -> None:
    data = (await client.get("/api/sms-balance/pricing")).json()["data"]
    assert data == {
        "pricePerSms": 0.4,
        "currency": "BDT",
        "onlineChargePercent": 2.5,
        "minPurchase": 10,
        "maxPurchase": 10000,
    }


@pytest.mark.asyncio
async def test_online_purchase_adds_charge(client: AsyncClient) -> None:
    response = await client.post("/api/sms-balance/purchase", json={"amount": 100, "paymentMethod": "online"})
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["status"] == "pending"
    assert data["basePrice"] == 40.0
    assert data["onlineCharge"] == 1.0
    assert data["totalPrice"] == 41.0
    assert "paymentInstructions" not in data

    approve = await client.patch(f"/api/sms-balance/purchase/{data['id']}/approve")
    assert approve.status_code == 400


@pytest.mark.asyncio
async def test_manual_purchase_approval_credits_balance(client: AsyncClient) -> None:
    purchase = (
        await client.post(
            "/api/sms-balance/purchase",
            json={"amount": 500, "paymentMethod": "manual", "transactionId": " TX-1 "},
        )
    ).json()["data"]
    assert purchase["status"] == "waiting_approval"
    assert purchase["transactionId"] == "TX-1"
    assert purchase["onlineCharge"] == 0
    assert "paymentInstructions" in purchase

    approved = await client.patch(f"/api/sms-balance/purchase/{purchase['id']}/approve", json={"approvedBy": "admin"})
    assert approved.status_code == 200
    assert approved.json()["data"] == {"addedSms": 500, "newBalance": 500}

    twice = await client.patch(f"/api/sms-balance/purchase/{purchase['id']}/approve")
    assert twice.status_code == 400

    history = (await client.get("/api/sms-balance/purchase-history")).json()["data"]
    assert [p["status"] for p in history] == ["approved"]
    assert history[0]["approvedBy"] == "admin"


@pytest.mark.asyncio
async def test_purchase_limits(client: AsyncClient) -> None:
    too_small = await client.post("/api/sms-balance/purchase", json={"amount": 5, "paymentMethod": "manual"})
    assert too_small.status_code == 400
    assert too_small.json()["message"] == "Minimum purchase is 10 SMS"

    bad_method = await client.post("/api/sms-balance/purchase", json={"amount": 50, "paymentMethod": "cash"})
    assert bad_method.status_code == 400


@pytest.mark.asyncio
async def test_approve_unknown_purchase(client: AsyncClient) -> None:
    missing = await client.patch("/api/sms-balance/purchase/00000000-0000-0000-0000-000000000000/approve")
    assert missing.status_code == 404
    invalid = await client.patch("/api/sms-balance/purchase/nope/approve")
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_consume_balance(client: AsyncClient) -> None:
    purchase = (
        await client.post("/api/sms-balance/purchase", json={"amount": 100, "paymentMethod": "manual"})
    ).json()["data"]
    await client.patch(f"/api/sms-balance/purchase/{purchase['id']}/approve")

    used = await client.patch("/api/sms-balance/update-balance", json={"usedSms": 30})
    assert used.status_code == 200
    assert used.json()["data"] == {"usedSms": 30, "newUsedSms": 30, "newRemainingSms": 70}

    too_many = await client.patch("/api/sms-balance/update-balance", json={"usedSms": 71})
    assert too_many.status_code == 400
    assert too_many.json()["message"] == "Insufficient SMS balance"

    balance = (await client.get("/api/sms-balance/balance")).json()["data"]
    assert (balance["usedSms"], balance["remainingSms"]) == (30, 70)

    zero = await client.patch("/api/sms-balance/update-balance", json={"usedSms": 0})
    assert zero.status_code == 400


@pytest.mark.asyncio
async def test_consume_without_balance(client: AsyncClient) -> None:
    response = await client.patch("/api/sms-balance/update-balance", json={"usedSms": 1})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_approval_adds_to_consumed_balance(client: AsyncClient) -> None:
    first = (await client.post("/api/sms-balance/purchase", json={"amount": 500, "paymentMethod": "manual"})).json()
    await client.patch(f"/api/sms-balance/purchase/{first['data']['id']}/approve")
    await client.patch("/api/sms-balance/update-balance", json={"usedSms": 30})

    second = (await client.post("/api/sms-balance/purchase", json={"amount": 100, "paymentMethod": "manual"})).json()
    approved = await client.patch(f"/api/sms-balance/purchase/{second['data']['id']}/approve")
    assert approved.json()["data"] == {"addedSms": 100, "newBalance": 570}

    balance = (await client.get("/api/sms-balance/balance")).json()["data"]
    assert (balance["totalSms"], balance["usedSms"], balance["remainingSms"]) == (600, 30, 570)


@pytest.mark.asyncio
async def test_second_session_cannot_approve_an_already_approved_purchase(client: AsyncClient, session_factory) -> None:
    purchase = (
        await client.post("/api/sms-balance/purchase", json={"amount": 200, "paymentMethod": "manual"})
    ).json()["data"]

    async with session_factory() as first, session_factory() as second:
        # both sessions saw the purchase waiting for approval
        assert (await first.get(SmsPurchase, uuid.UUID(purchase["id"]))).status == "waiting_approval"
        assert (await second.get(SmsPurchase, uuid.UUID(purchase["id"]))).status == "waiting_approval"

        result = await service.approve_purchase(first, purchase["id"], None)
        assert result == {"addedSms": 200, "newBalance": 200}
        with pytest.raises(ConflictError):
            await service.approve_purchase(second, purchase["id"], None)

    balance = (await client.get("/api/sms-balance/balance")).json()["data"]
    assert (balance["totalSms"], balance["remainingSms"]) == (200, 200)
