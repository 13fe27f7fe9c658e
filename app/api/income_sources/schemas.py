from app.core.models import IncomeSource
from app.crud.schema import ResourceSchema, UniqueKey, text

INCOME_SOURCE_SCHEMA = ResourceSchema(
    name="Income source",
    model=IncomeSource,
    fields=[text("name", required=True), text("description")],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Income source with this name already exists")],
)
