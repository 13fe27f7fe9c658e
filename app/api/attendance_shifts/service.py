from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.crud.engine import ResourceEngine
from app.services.sms_gateway import normalize_bd_phone

from .schemas import ATTENDANCE_SHIFT_SCHEMA, ShiftSmsRequest

engine = ResourceEngine(ATTENDANCE_SHIFT_SCHEMA)


async def prepare_shift_sms(db: AsyncSession, shift_id: str, request: Optional[ShiftSmsRequest]) -> Dict[str, Any]:
    """Check the shift may send SMS and build the outgoing message, if any."""
    shift = await engine.load(db, shift_id)
    if not shift.send_sms:
        raise ValidationError("SMS is not enabled for this shift")

    if request is None or not request.phone_number:
        return {"shiftId": shift.id, "number": None, "message": None}

    number = normalize_bd_phone(request.phone_number)
    prefix = f"{shift.institute_short_name}: " if shift.institute_short_name else ""
    message = request.message or f"{prefix}{shift.shift_name} attendance notification"
    return {"shiftId": shift.id, "number": number, "message": message}
