from app.core.models import ExpenseCategory
from app.crud.schema import ResourceSchema, UniqueKey, text

EXPENSE_CATEGORY_SCHEMA = ResourceSchema(
    name="Expense category",
    plural="Expense categories",
    model=ExpenseCategory,
    fields=[text("name", required=True)],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Expense category with this name already exists")],
)
