import logging
import secrets
import time
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import AdmissionTokenStatus
from app.core.exceptions import ConflictError, NotFoundError
from app.core.models import AdmissionToken
from app.core.models.base import utcnow
from app.crud.engine import ResourceEngine

from .schemas import ADMISSION_TOKEN_SCHEMA

logger = logging.getLogger(__name__)

engine = ResourceEngine(ADMISSION_TOKEN_SCHEMA)


def generate_token_number() -> str:
    return f"AT{int(time.time() * 1000)}{secrets.token_hex(4).upper()}"


async def create_token(db: AsyncSession, payload: Any) -> AdmissionToken:
    return await engine.create(
        db,
        payload,
        token_number=generate_token_number(),
        status=AdmissionTokenStatus.ACTIVE.value,
        is_used=False,
    )


async def get_by_number(db: AsyncSession, token_number: str) -> AdmissionToken:
    stmt = (
        select(AdmissionToken)
        .where(AdmissionToken.token_number == token_number.strip())
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    token = result.scalar_one_or_none()
    if token is None:
        raise NotFoundError("Admission token not found")
    return token


async def mark_used(db: AsyncSession, token_id: str, used_by: Optional[str]) -> AdmissionToken:
    token = await engine.load(db, token_id)
    if token.is_used:
        raise ConflictError("Admission token has already been used")
    now = utcnow()
    token.is_used = True
    token.used_at = now
    token.used_by = used_by
    token.status = AdmissionTokenStatus.USED.value
    token.updated_at = now
    await engine.commit(db)
    await db.refresh(token)
    logger.info("Admission token used id=%s", token.id)
    return token
