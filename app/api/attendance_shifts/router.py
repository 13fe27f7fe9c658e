from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db
from app.services.sms_gateway import dispatch_sms

from . import service
from .schemas import ShiftSmsRequest

router = APIRouter(prefix="/api/smart-attendance-shift", tags=["smart-attendance-shift"])


@router.post(
    "/{item_id}/send-sms",
    dependencies=[Depends(check_permission("attendance_shifts", "update"))],
)
async def send_shift_sms(
    item_id: str,
    background_tasks: BackgroundTasks,
    payload: Optional[ShiftSmsRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    outgoing = await service.prepare_shift_sms(db, item_id, payload)
    if outgoing["number"]:
        background_tasks.add_task(dispatch_sms, outgoing["number"], outgoing["message"])
    return ok(outgoing, "SMS sent successfully for the shift")


register_crud_routes(router, service.engine, "attendance_shifts")
