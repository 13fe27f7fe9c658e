from app.core.models import SchoolClass
from app.crud.schema import ResourceSchema, UniqueKey, text

CLASS_SCHEMA = ResourceSchema(
    name="Class",
    plural="Classes",
    model=SchoolClass,
    fields=[
        text("name", required=True, min_length=2, max_length=50),
        text("description"),
    ],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Class with this name already exists")],
    sort=(("name", False),),
)
