from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db

from . import service
from .schemas import UseTokenRequest

router = APIRouter(prefix="/api/admission-tokens", tags=["admission-tokens"])


@router.post(
    "",
    dependencies=[Depends(check_permission("admission_tokens", "create"))],
)
async def create_admission_token(payload: Dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
    token = await service.create_token(db, payload)
    return ok(
        await service.engine.serialize(db, token),
        "Admission token generated successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/number/{token_number}")
async def get_admission_token_by_number(token_number: str, db: AsyncSession = Depends(get_db)):
    token = await service.get_by_number(db, token_number)
    return ok(await service.engine.serialize(db, token), "Admission token fetched successfully")


@router.patch(
    "/{item_id}/use",
    dependencies=[Depends(check_permission("admission_tokens", "update"))],
)
async def use_admission_token(
    item_id: str,
    payload: Optional[UseTokenRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    token = await service.mark_used(db, item_id, payload.used_by if payload else None)
    return ok(await service.engine.serialize(db, token), "Admission token marked as used")


register_crud_routes(
    router,
    service.engine,
    "admission_tokens",
    include_create=False,
    update_methods=("PUT", "PATCH"),
)
