import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import SmsLogStatus
from app.core.exceptions import ValidationError
from app.core.models import ExamResult
from app.core.models.base import utcnow
from app.crud.engine import ResourceEngine
from app.crud.validation import parse_id
from app.services.sms_gateway import normalize_bd_phone

from .schemas import RESULT_SCHEMA, ResultBulkSmsRequest, ResultSmsRequest

logger = logging.getLogger(__name__)

engine = ResourceEngine(RESULT_SCHEMA)


def build_result_message(result: ExamResult) -> str:
    attended = result.total_present + result.total_absent
    return (
        f"Dear {result.student_name},\n"
        f"Exam: {result.exam_category_name}\n"
        f"Marks: {result.average_marks}\n"
        f"Grade: {result.average_letter_grade}\n"
        f"Position: {result.position}\n"
        f"Attendance: {result.total_present}/{attended}"
    )


def _append_log(result: ExamResult, number: str, message: str) -> Dict[str, Any]:
    entry = {
        "id": str(uuid.uuid4()),
        "studentId": result.student_id,
        "phoneNumber": number,
        "message": message,
        "status": SmsLogStatus.QUEUED.value,
        "createdAt": utcnow().isoformat(),
    }
    # assign a new list so the JSON column is flagged dirty
    result.sms_logs = [*(result.sms_logs or []), entry]
    result.updated_at = utcnow()
    return entry


async def queue_result_sms(db: AsyncSession, result_id: str, request: Optional[ResultSmsRequest]) -> Dict[str, Any]:
    """Append a queued log entry to the result. Earlier entries are never modified."""
    result = await engine.load(db, result_id)
    raw_number = (request.phone_number if request else None) or result.phone_number
    if not raw_number:
        raise ValidationError("Phone number is required", "phone_number")
    number = normalize_bd_phone(raw_number)
    message = (request.message if request else None) or build_result_message(result)

    entry = _append_log(result, number, message)
    await engine.commit(db)
    logger.info("Result SMS queued result=%s number=%s", result.id, number)
    return entry


async def get_sms_logs(db: AsyncSession, result_id: str) -> List[Dict[str, Any]]:
    result = await engine.load(db, result_id)
    return list(result.sms_logs or [])


async def queue_bulk_result_sms(db: AsyncSession, request: ResultBulkSmsRequest) -> Dict[str, List[Dict[str, Any]]]:
    """
    Queue the result SMS of every listed student for one exam category. A student without a
    result or a valid phone number is reported under `failed`; the others are logged and committed together.
    """
    category_id = parse_id(request.exam_category_id, "exam category")
    student_ids = list(dict.fromkeys(s.strip() for s in request.student_ids if s and s.strip()))
    stmt = select(ExamResult).where(
        ExamResult.exam_category_id == category_id, ExamResult.student_id.in_(student_ids)
    )
    by_student = {result.student_id: result for result in (await db.execute(stmt)).scalars().all()}

    successful: List[Dict[str, Any]] = []
    failed: List[Dict[str, Any]] = []
    for student_id in student_ids:
        result = by_student.get(student_id)
        if result is None:
            failed.append({"studentId": student_id, "reason": "Result not found for this exam"})
            continue
        if not result.phone_number:
            failed.append({"studentId": student_id, "reason": "No phone number on this result"})
            continue
        try:
            number = normalize_bd_phone(result.phone_number)
        except ValidationError:
            failed.append({"studentId": student_id, "reason": "Invalid phone number format"})
            continue
        entry = _append_log(result, number, build_result_message(result))
        successful.append({**entry, "studentName": result.student_name, "resultId": str(result.id)})

    if successful:
        await engine.commit(db)
    logger.info("Bulk result SMS queued=%d failed=%d", len(successful), len(failed))
    return {"successful": successful, "failed": failed}


async def student_sms_history(db: AsyncSession, student_id: str) -> List[Dict[str, Any]]:
    """Every SMS logged on the student's results, newest first, tagged with the exam category."""
    stmt = select(ExamResult).where(ExamResult.student_id == student_id.strip())
    history = [
        {**log, "examCategoryId": result.exam_category_id, "examCategoryName": result.exam_category_name}
        for result in (await db.execute(stmt)).scalars().all()
        for log in result.sms_logs or []
    ]
    history.sort(key=lambda log: log["createdAt"], reverse=True)
    return history
