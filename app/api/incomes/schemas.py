from app.core.models import BankAccount, Income, IncomeSource, PaymentType
from app.crud.schema import Record, ResourceSchema, day, number, ref, text


def derive_period(record: Record) -> None:
    """month (English month name) and year (4-digit string) always follow the income date."""
    income_date = record.get("date")
    if income_date is not None:
        record["month"] = income_date.strftime("%B")
        record["year"] = str(income_date.year)


INCOME_SCHEMA = ResourceSchema(
    name="Income",
    model=Income,
    fields=[
        ref("account_id", BankAccount, "Bank account", name_field="account_name", required=True),
        ref("income_source_id", IncomeSource, "Income source", name_field="income_source_name", required=True),
        ref("payment_type_id", PaymentType, "Payment type", name_field="payment_type_name"),
        day("date", required=True),
        number("amount", required=True, positive=True),
        text("description"),
        text("note"),
    ],
    computed=[derive_period],
    filters=("account_id", "income_source_id", "payment_type_id", "year", "month"),
    sort=(("date", True), ("created_at", True)),
)
