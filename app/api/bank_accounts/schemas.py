from app.core.models import BankAccount
from app.crud.schema import ResourceSchema, Singleton, UniqueKey, flag, number, text

BANK_ACCOUNT_SCHEMA = ResourceSchema(
    name="Bank account",
    model=BankAccount,
    fields=[
        text("name", required=True),
        text("account_number", required=True),
        text("branch_name"),
        number("current_balance"),
        text("details"),
        flag("is_default"),
    ],
    # account numbers are compared exactly
    unique=[UniqueKey(("account_number",), message="Bank account with this account number already exists")],
    singleton=Singleton("is_default"),
)
