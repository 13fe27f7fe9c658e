from app.core.models import AcademicSession, AdmitCard, Batch, ExamCategory, SchoolClass, Section
from app.crud.schema import ResourceSchema, flag, number, ref

ADMIT_CARD_SCHEMA = ResourceSchema(
    name="Admit card",
    model=AdmitCard,
    fields=[
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
        ref("batch_id", Batch, "Batch"),
        ref("section_id", Section, "Section"),
        ref("session_id", AcademicSession, "Session", name_field="session_name", required=True),
        ref("exam_category_id", ExamCategory, "Exam category", name_field="exam_name", required=True),
        number("monthly_fee", min_value=0),
        flag("send_attendance_sms"),
    ],
    filters=("class_id", "session_id", "exam_category_id", "status", "printed"),
    paginate=True,
)
