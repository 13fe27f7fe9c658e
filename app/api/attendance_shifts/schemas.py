from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.enums import SmsRecipient, SmsType
from app.core.exceptions import ValidationError
from app.core.models import AttendanceShift, SchoolClass, Section
from app.crud.schema import Populate, Record, ResourceSchema, UniqueKey, choice, flag, integer, ref, text


def entry_time_and_sms(record: Record) -> None:
    if not record.get("student_entry_time") and not record.get("teacher_entry_time"):
        raise ValidationError("Either student or teacher entry time is required")
    if record.get("send_sms"):
        if not record.get("sms_type"):
            raise ValidationError("SMS type is required when SMS is enabled", "sms_type")
    else:
        record["sms_type"] = None
    try:
        ZoneInfo(record.get("timezone") or "Asia/Dhaka")
    except (ZoneInfoNotFoundError, ValueError):
        raise ValidationError("Invalid timezone", "timezone")


ATTENDANCE_SHIFT_SCHEMA = ResourceSchema(
    name="Attendance shift",
    model=AttendanceShift,
    fields=[
        text("shift_name", required=True, label="Shift name"),
        ref("class_id", SchoolClass, "Class"),
        ref("section_id", Section, "Section"),
        text("student_entry_time"),
        text("student_exit_time"),
        text("teacher_entry_time"),
        text("teacher_exit_time"),
        integer("count_late_after", min_value=0),
        integer("count_early_exit_before", min_value=0),
        text("timezone", default="Asia/Dhaka"),
        flag("send_sms"),
        choice("sms_type", SmsType),
        text("absent_after", default=None),
        text("institute_short_name"),
        flag("enable_absent_sms"),
        choice("send_sms_to", SmsRecipient, default=SmsRecipient.TO_INSTITUTE.value),
    ],
    unique=[UniqueKey(("shift_name",), case_insensitive=("shift_name",), message="Shift name already exists")],
    filters=("class_id", "section_id"),
    populate=(
        Populate("class_id", SchoolClass, "class"),
        Populate("section_id", Section, "section"),
    ),
    checks=[entry_time_and_sms],
)


class ShiftSmsRequest(BaseModel):
    """Optional one-off message for a shift. Without a phone number the request is only acknowledged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    phone_number: Optional[str] = None
    message: Optional[str] = None
