from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.models import ExamCategory, ExamResult
from app.crud.schema import Record, ResourceSchema, UniqueKey, integer, number, ref, text
from app.services.sms_gateway import normalize_bd_phone


def normalize_phone(record: Record) -> None:
    if record.get("phone_number"):
        record["phone_number"] = normalize_bd_phone(record["phone_number"])


RESULT_SCHEMA = ResourceSchema(
    name="Result",
    model=ExamResult,
    fields=[
        text("student_id", required=True, label="Student ID"),
        text("student_name", required=True),
        ref("exam_category_id", ExamCategory, "Exam category", name_field="exam_category_name", required=True),
        number("average_marks", min_value=0),
        text("average_letter_grade", required=True, max_length=5),
        integer("position", min_value=0),
        integer("total_present", min_value=0),
        integer("total_absent", min_value=0),
        text("phone_number"),
    ],
    unique=[
        UniqueKey(
            ("student_id", "exam_category_id"),
            message="Result already exists for this student and exam category",
        )
    ],
    filters=("student_id", "exam_category_id"),
    computed=[normalize_phone],
    sort=(("position", False), ("created_at", True)),
)


class ResultSmsRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    phone_number: Optional[str] = None
    message: Optional[str] = None


class ResultBulkSmsRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    student_ids: List[str] = Field(..., min_length=1)
    exam_category_id: str
