from app.core.models import FineType
from app.crud.schema import ResourceSchema, UniqueKey, day, flag, number, text
from app.crud.validation import percent_or_amount

FINE_TYPE_SCHEMA = ResourceSchema(
    name="Fine type",
    model=FineType,
    fields=[
        text("name", required=True),
        flag("is_parcel"),
        number("fine_amount", min_value=0),
        number("percentage", min_value=0, max_value=100),
        flag("is_absence_fine"),
        day("fixed_date"),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Fine type with this name already exists")],
    checks=[percent_or_amount("is_parcel", "percentage", "fine_amount")],
)
