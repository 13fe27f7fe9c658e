from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.engine import to_document
from app.db.session import get_db

from . import service
from .schemas import ApprovePurchaseRequest, BalanceUpdateRequest, SmsPurchaseRequest

router = APIRouter(prefix="/api/sms-balance", tags=["sms-balance"])


@router.get("/balance")
async def get_balance(db: AsyncSession = Depends(get_db)):
    balance = await service.get_or_create_balance(db)
    return ok(to_document(balance), "SMS balance fetched successfully")


@router.get("/pricing")
async def get_pricing():
    return ok(service.pricing().model_dump(by_alias=True), "SMS pricing fetched successfully")


@router.get("/purchase-history")
async def get_purchase_history(db: AsyncSession = Depends(get_db)):
    purchases = await service.list_purchases(db)
    return ok([service.purchase_document(p) for p in purchases], "Purchase history fetched successfully")


@router.post(
    "/purchase",
    dependencies=[Depends(check_permission("sms_balance", "create"))],
)
async def create_purchase(payload: SmsPurchaseRequest, db: AsyncSession = Depends(get_db)):
    purchase = await service.create_purchase(db, payload)
    message = (
        "Online payment request created"
        if purchase.payment_method == "online"
        else "Manual purchase request created"
    )
    return ok(service.purchase_document(purchase), message, status_code=status.HTTP_201_CREATED)


@router.patch(
    "/purchase/{purchase_id}/approve",
    dependencies=[Depends(check_permission("sms_balance", "update"))],
)
async def approve_purchase(
    purchase_id: str,
    payload: Optional[ApprovePurchaseRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = await service.approve_purchase(db, purchase_id, payload)
    return ok(data, "SMS purchase approved successfully")


@router.patch(
    "/update-balance",
    dependencies=[Depends(check_permission("sms_balance", "update"))],
)
async def update_balance(payload: BalanceUpdateRequest, db: AsyncSession = Depends(get_db)):
    data = await service.consume_balance(db, payload)
    return ok(data, "SMS balance updated successfully")
