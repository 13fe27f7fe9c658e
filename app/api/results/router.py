from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db
from app.services.sms_gateway import dispatch_sms

from . import service
from .schemas import ResultBulkSmsRequest, ResultSmsRequest

router = APIRouter(prefix="/api/results", tags=["results"])


@router.post(
    "/{item_id}/send-sms",
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(check_permission("results", "update"))],
)
async def send_result_sms(
    item_id: str,
    background_tasks: BackgroundTasks,
    payload: Optional[ResultSmsRequest] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    entry = await service.queue_result_sms(db, item_id, payload)
    background_tasks.add_task(dispatch_sms, entry["phoneNumber"], entry["message"])
    return ok(entry, "SMS queued successfully", status_code=status.HTTP_202_ACCEPTED)


@router.post(
    "/send-bulk",
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(check_permission("results", "update"))],
)
async def send_bulk_result_sms(
    payload: ResultBulkSmsRequest,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
):
    outcome = await service.queue_bulk_result_sms(db, payload)
    for entry in outcome["successful"]:
        background_tasks.add_task(dispatch_sms, entry["phoneNumber"], entry["message"])
    message = f"SMS queued. Success: {len(outcome['successful'])}, Failed: {len(outcome['failed'])}"
    return ok(outcome, message, status_code=status.HTTP_202_ACCEPTED)


@router.get("/history/{student_id}")
async def student_sms_history(student_id: str, db: AsyncSession = Depends(get_db)):
    history = await service.student_sms_history(db, student_id)
    return ok(history, "SMS history fetched successfully")


@router.get("/{item_id}/sms-logs")
async def get_sms_logs(item_id: str, db: AsyncSession = Depends(get_db)):
    logs = await service.get_sms_logs(db, item_id)
    return ok(logs, "SMS logs fetched successfully")


register_crud_routes(router, service.engine, "results")
