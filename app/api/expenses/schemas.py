from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.incomes.schemas import derive_period
from app.core.exceptions import NotFoundError, ValidationError
from app.core.models import BankAccount, Expense, ExpenseCategory, ExpenseHead
from app.crud.schema import Record, ResourceSchema, day, items, ref, text


class ExpenseLine(BaseModel):
    """One paid expense head inside an expense."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    expense_category_id: UUID
    expense_head_id: UUID
    quantity: int = Field(1, ge=1)
    amount: float = Field(..., gt=0)
    description: str = Field("", max_length=500)

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_defaults_to_one(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 1
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        return "" if value is None else str(value).strip()


def derive_totals(record: Record) -> None:
    """Each line's subtotal is quantity x amount; total_amount is their sum."""
    lines = record.get("expense_items") or []
    for line in lines:
        line["subtotal"] = round(line["quantity"] * line["amount"], 2)
    record["total_amount"] = round(sum(line["subtotal"] for line in lines), 2)


async def resolve_lines(db: AsyncSession, record: Record) -> None:
    """Every line must name an existing category and head; the head must sit in that category."""
    for index, line in enumerate(record.get("expense_items") or [], start=1):
        category = await db.get(ExpenseCategory, UUID(str(line["expenseCategoryId"])))
        if category is None:
            raise NotFoundError(f"Expense category not found for item {index}", 400)
        head = await db.get(ExpenseHead, UUID(str(line["expenseHeadId"])))
        if head is None:
            raise NotFoundError(f"Expense head not found for item {index}", 400)
        if head.category_id is not None and head.category_id != category.id:
            raise ValidationError(
                f"Expense head does not belong to the selected category for item {index}", "expense_items"
            )
        line["expenseCategoryName"] = category.name
        line["expenseHeadName"] = head.name


EXPENSE_SCHEMA = ResourceSchema(
    name="Expense",
    model=Expense,
    fields=[
        ref("account_id", BankAccount, "Bank account", name_field="account_name", required=True),
        day("date", required=True),
        items("expense_items", ExpenseLine, required=True, min_items=1, label="Expense items"),
        text("payment_status", default="Cash"),
        text("description"),
        text("note"),
    ],
    computed=[derive_period, derive_totals],
    store_checks=[resolve_lines],
    filters=("account_id", "payment_status", "year", "month"),
    sort=(("date", True), ("created_at", True)),
)
