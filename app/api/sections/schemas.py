from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.core.models import Batch, SchoolClass, Section
from app.crud.schema import Populate, Record, ResourceSchema, UniqueKey, ref, text


async def batch_belongs_to_class(db: AsyncSession, record: Record) -> None:
    batch_id = record.get("batch_id")
    if batch_id is None:
        return
    batch = await db.get(Batch, batch_id)
    if batch is not None and batch.class_id != record.get("class_id"):
        raise ValidationError("Selected batch does not belong to the selected class", "batch_id")


SECTION_SCHEMA = ResourceSchema(
    name="Section",
    model=Section,
    fields=[
        text("name", required=True),
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
        ref("batch_id", Batch, "Batch", name_field="batch_name"),
    ],
    unique=[
        UniqueKey(
            ("name", "class_id", "batch_id"),
            case_insensitive=("name",),
            message="Section with this name already exists for this class and batch",
        )
    ],
    filters=("class_id", "batch_id"),
    populate=(
        Populate("class_id", SchoolClass, "class"),
        Populate("batch_id", Batch, "batch"),
    ),
    store_checks=[batch_belongs_to_class],
    sort=(("name", False),),
)
