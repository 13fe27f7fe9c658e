import logging
import secrets
import time
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import AdmitCardStatus
from app.core.models import AdmitCard
from app.core.models.base import utcnow
from app.crud.engine import ResourceEngine

from .schemas import ADMIT_CARD_SCHEMA

logger = logging.getLogger(__name__)

engine = ResourceEngine(ADMIT_CARD_SCHEMA)


def generate_admit_card_number() -> str:
    return f"AC{int(time.time() * 1000)}{secrets.token_hex(4).upper()}"


async def create_admit_card(db: AsyncSession, payload: Any) -> AdmitCard:
    return await engine.create(
        db,
        payload,
        admit_card_number=generate_admit_card_number(),
        status=AdmitCardStatus.GENERATED.value,
        printed=False,
    )


async def mark_printed(db: AsyncSession, card_id: str) -> AdmitCard:
    """Reprinting is allowed; printed_at keeps the latest print time."""
    card = await engine.load(db, card_id)
    now = utcnow()
    card.printed = True
    card.printed_at = now
    card.status = AdmitCardStatus.PRINTED.value
    card.updated_at = now
    await engine.commit(db)
    await db.refresh(card)
    logger.info("Admit card printed id=%s", card.id)
    return card
