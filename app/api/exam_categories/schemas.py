from app.core.models import ExamCategory
from app.crud.schema import ResourceSchema, UniqueKey, flag, number, text
from app.crud.validation import not_greater

EXAM_CATEGORY_SCHEMA = ResourceSchema(
    name="Exam category",
    plural="Exam categories",
    model=ExamCategory,
    fields=[
        text("name", required=True),
        flag("is_main"),
        number("total_marks", required=True, positive=True),
        number("pass_marks", required=True, positive=True),
        number("weight", positive=True, fallback=100.0),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Exam category with this name already exists")],
    checks=[not_greater("pass_marks", "total_marks", "Pass marks cannot be greater than total marks")],
)
