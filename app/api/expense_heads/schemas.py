from app.core.models import AcademicSession, ExpenseCategory, ExpenseHead
from app.crud.schema import ResourceSchema, UniqueKey, day, flag, number, ref, text
from app.crud.validation import date_range

EXPENSE_HEAD_SCHEMA = ResourceSchema(
    name="Expense head",
    model=ExpenseHead,
    fields=[
        text("name", required=True),
        text("description"),
        number("amount", required=True, positive=True),
        flag("is_monthly"),
        day("applicable_from"),
        day("ends_at"),
        ref("session_id", AcademicSession, "Session", name_field="session_name"),
        ref("category_id", ExpenseCategory, "Expense category", name_field="category_name"),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Expense head with this name already exists")],
    filters=("session_id", "category_id", "is_monthly"),
    checks=[date_range("applicable_from", "ends_at", "Applicable from date must be before or equal to end date")],
)
