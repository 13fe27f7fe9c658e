from app.core.models import DiscountType
from app.crud.schema import ResourceSchema, UniqueKey, flag, number, text
from app.crud.validation import percent_or_amount

DISCOUNT_TYPE_SCHEMA = ResourceSchema(
    name="Discount type",
    model=DiscountType,
    fields=[
        text("name", required=True),
        flag("is_percent"),
        number("discount_amount", min_value=0),
        number("percent_amount", min_value=0, max_value=100),
        text("description"),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Discount type with this name already exists")],
    checks=[percent_or_amount("is_percent", "percent_amount", "discount_amount")],
)
