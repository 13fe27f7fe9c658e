from app.core.models import HolidayType
from app.crud.schema import ResourceSchema, UniqueKey, text

HOLIDAY_TYPE_SCHEMA = ResourceSchema(
    name="Holiday type",
    model=HolidayType,
    fields=[text("name", required=True)],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Holiday type with this name already exists")],
    soft_delete=True,
    sort=(("name", False),),
)
