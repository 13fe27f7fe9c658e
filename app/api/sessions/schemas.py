from app.core.models import AcademicSession
from app.crud.schema import ResourceSchema, Singleton, UniqueKey, day, flag, integer, text
from app.crud.validation import date_range

SESSION_SCHEMA = ResourceSchema(
    name="Session",
    model=AcademicSession,
    fields=[
        text("name", required=True),
        day("start_date", required=True),
        day("end_date", required=True),
        integer("total_working_days", min_value=0),
        text("description"),
        flag("is_current"),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Session with this name already exists")],
    singleton=Singleton(
        "is_current",
        protect_delete=True,
        delete_message="Cannot delete the current session. Set another session as current first.",
    ),
    sort=(("start_date", True),),
    checks=[date_range("start_date", "end_date", "Start date must be before or equal to end date")],
)
