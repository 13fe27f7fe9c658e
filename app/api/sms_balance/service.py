"""
SMS credit bookkeeping: one balance row (kind="current"), created lazily, plus purchase requests.
Manual purchases wait for approval; approval credits the balance in the same commit.
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.enums import PaymentMethod, SmsPurchaseStatus
from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.core.models import SmsBalance, SmsPurchase
from app.core.models.base import utcnow
from app.crud.engine import to_document
from app.crud.validation import parse_id

from .schemas import ApprovePurchaseRequest, BalanceUpdateRequest, SmsPricing, SmsPurchaseRequest

logger = logging.getLogger(__name__)

CURRENT = "current"


def pricing() -> SmsPricing:
    return SmsPricing(
        price_per_sms=settings.sms_price_per_message,
        currency=settings.sms_currency,
        online_charge_percent=settings.sms_online_charge_percent,
        min_purchase=settings.sms_min_purchase,
        max_purchase=settings.sms_max_purchase,
    )


async def _find_balance(db: AsyncSession) -> Optional[SmsBalance]:
    stmt = select(SmsBalance).where(SmsBalance.kind == CURRENT).execution_options(populate_existing=True)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_or_create_balance(db: AsyncSession) -> SmsBalance:
    balance = await _find_balance(db)
    if balance is None:
        now = utcnow()
        balance = SmsBalance(kind=CURRENT, total_sms=0, used_sms=0, remaining_sms=0, created_at=now, updated_at=now)
        db.add(balance)
        await db.commit()
        await db.refresh(balance)
        logger.info("SMS balance initialised")
    return balance


async def list_purchases(db: AsyncSession) -> List[SmsPurchase]:
    stmt = select(SmsPurchase).order_by(SmsPurchase.purchase_date.desc(), SmsPurchase.id.asc())
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def create_purchase(db: AsyncSession, payload: SmsPurchaseRequest) -> SmsPurchase:
    if payload.amount < settings.sms_min_purchase:
        raise ValidationError(f"Minimum purchase is {settings.sms_min_purchase} SMS", "amount")
    if payload.amount > settings.sms_max_purchase:
        raise ValidationError(f"Maximum purchase is {settings.sms_max_purchase} SMS", "amount")

    base_price = round(payload.amount * settings.sms_price_per_message, 2)
    if payload.payment_method == PaymentMethod.ONLINE:
        online_charge = round(base_price * settings.sms_online_charge_percent / 100, 2)
        status = SmsPurchaseStatus.PENDING
    else:
        online_charge = 0.0
        status = SmsPurchaseStatus.WAITING_APPROVAL

    now = utcnow()
    purchase = SmsPurchase(
        amount=payload.amount,
        price_per_sms=settings.sms_price_per_message,
        base_price=base_price,
        online_charge=online_charge,
        total_price=round(base_price + online_charge, 2),
        payment_method=payload.payment_method.value,
        transaction_id=(payload.transaction_id or "").strip() or None,
        phone_number=(payload.phone_number or "").strip() or None,
        status=status.value,
        purchase_date=now,
        created_at=now,
        updated_at=now,
    )
    db.add(purchase)
    await db.commit()
    await db.refresh(purchase)
    logger.info(
        "SMS purchase requested id=%s amount=%d method=%s", purchase.id, purchase.amount, purchase.payment_method
    )
    return purchase


async def approve_purchase(
    db: AsyncSession, purchase_id: str, payload: Optional[ApprovePurchaseRequest]
) -> Dict[str, Any]:
    uid = parse_id(purchase_id, "purchase")
    purchase = await db.get(SmsPurchase, uid, populate_existing=True)
    if purchase is None:
        raise NotFoundError("Purchase request not found")
    await get_or_create_balance(db)

    # claim the purchase and credit the balance in one transaction; a concurrent approval
    # finds the status already changed and credits nothing
    now = utcnow()
    claimed = await db.execute(
        update(SmsPurchase)
        .where(SmsPurchase.id == uid, SmsPurchase.status == SmsPurchaseStatus.WAITING_APPROVAL.value)
        .values(
            status=SmsPurchaseStatus.APPROVED.value,
            approved_at=now,
            approved_by=payload.approved_by if payload else None,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    if claimed.rowcount == 0:
        await db.rollback()
        raise ConflictError("Only purchase requests waiting for approval can be approved")

    await db.execute(
        update(SmsBalance)
        .where(SmsBalance.kind == CURRENT)
        .values(
            total_sms=SmsBalance.total_sms + purchase.amount,
            remaining_sms=SmsBalance.remaining_sms + purchase.amount,
            updated_at=now,
        )
        .execution_options(synchronize_session=False)
    )
    await db.commit()

    balance = await _find_balance(db)
    logger.info("SMS purchase approved id=%s amount=%d", uid, purchase.amount)
    return {"addedSms": purchase.amount, "newBalance": balance.remaining_sms}


async def consume_balance(db: AsyncSession, payload: BalanceUpdateRequest) -> Dict[str, Any]:
    if payload.used_sms <= 0:
        raise ValidationError("Used SMS count must be greater than 0", "used_sms")
    balance = await _find_balance(db)
    if balance is None:
        raise NotFoundError("SMS balance not found")

    # conditional update: concurrent consumers cannot drive the balance negative
    stmt = (
        update(SmsBalance)
        .where(SmsBalance.kind == CURRENT, SmsBalance.remaining_sms >= payload.used_sms)
        .values(
            used_sms=SmsBalance.used_sms + payload.used_sms,
            remaining_sms=SmsBalance.remaining_sms - payload.used_sms,
            updated_at=utcnow(),
        )
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    if result.rowcount == 0:
        await db.rollback()
        raise ValidationError("Insufficient SMS balance")
    await db.commit()

    balance = await _find_balance(db)
    logger.info("SMS balance consumed used=%d remaining=%d", payload.used_sms, balance.remaining_sms)
    return {"usedSms": payload.used_sms, "newUsedSms": balance.used_sms, "newRemainingSms": balance.remaining_sms}


def purchase_document(purchase: SmsPurchase) -> Dict[str, Any]:
    document = to_document(purchase)
    if purchase.payment_method == PaymentMethod.MANUAL.value:
        document["paymentInstructions"] = "Pay the total price and share the transaction ID for approval"
    return document
