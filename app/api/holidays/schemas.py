from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.models import AcademicSession, Holiday, HolidayType
from app.crud.bodies import DateSpan
from app.crud.schema import Populate, ResourceSchema, items, ref, text

UNKNOWN_SESSION = {"name": "Unknown Session"}

HOLIDAY_SCHEMA = ResourceSchema(
    name="Holiday",
    model=Holiday,
    fields=[
        text("name", required=True),
        ref("session_id", AcademicSession, "Session", required=True),
        ref("holiday_type_id", HolidayType, "Holiday type", name_field="holiday_type_name"),
        items("dates", DateSpan, required=True, min_items=1, label="Dates"),
    ],
    soft_delete=True,
    filters=("session_id", "holiday_type_id"),
    populate=(Populate("session_id", AcademicSession, "session", placeholder=UNKNOWN_SESSION),),
)


class PreloadHolidaysRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str
    year: Optional[int] = Field(None, ge=1900, le=9999)
