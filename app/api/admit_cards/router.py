from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db

from . import service

router = APIRouter(prefix="/api/admit-cards", tags=["admit-cards"])


@router.post(
    "",
    dependencies=[Depends(check_permission("admit_cards", "create"))],
)
async def create_admit_card(payload: Dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db)):
    card = await service.create_admit_card(db, payload)
    return ok(
        await service.engine.serialize(db, card),
        "Admit card generated successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.patch(
    "/{item_id}/print",
    dependencies=[Depends(check_permission("admit_cards", "update"))],
)
async def print_admit_card(item_id: str, db: AsyncSession = Depends(get_db)):
    card = await service.mark_printed(db, item_id)
    return ok(await service.engine.serialize(db, card), "Admit card marked as printed")


register_crud_routes(
    router,
    service.engine,
    "admit_cards",
    include_create=False,
    update_methods=("PUT", "PATCH"),
)
