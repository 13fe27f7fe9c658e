from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.models import AcademicSession, AdmissionToken, Batch, SchoolClass, Section
from app.crud.schema import ResourceSchema, flag, number, ref

ADMISSION_TOKEN_SCHEMA = ResourceSchema(
    name="Admission token",
    model=AdmissionToken,
    fields=[
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
        ref("batch_id", Batch, "Batch"),
        ref("section_id", Section, "Section"),
        ref("session_id", AcademicSession, "Session", name_field="session_name", required=True),
        number("monthly_fee", min_value=0),
        flag("send_attendance_sms"),
    ],
    filters=("class_id", "session_id", "status"),
    paginate=True,
)


class UseTokenRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    used_by: Optional[str] = None
