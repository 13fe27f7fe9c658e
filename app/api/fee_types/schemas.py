from app.core.enums import FeeApplicable
from app.core.models import AcademicSession, FeeType, SchoolClass
from app.crud.schema import ResourceSchema, UniqueKey, choice, day, flag, number, ref, text

FEE_TYPE_SCHEMA = ResourceSchema(
    name="Fee type",
    model=FeeType,
    fields=[
        text("name", required=True),
        number("amount", required=True, positive=True),
        flag("is_monthly"),
        choice("fee_applicable", FeeApplicable, default=FeeApplicable.ALL_STUDENTS.value),
        day("fee_ends_date"),
        text("description"),
        ref("session_id", AcademicSession, "Session", name_field="session_name", required=True),
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
    ],
    unique=[
        UniqueKey(
            ("name", "class_id", "session_id"),
            case_insensitive=("name",),
            message="Fee type with this name already exists for this class and session",
        )
    ],
    filters=("class_id", "session_id", "is_monthly", "fee_applicable"),
)
