from app.core.models import Batch, SchoolClass
from app.crud.schema import Populate, ResourceSchema, UniqueKey, ref, text

BATCH_SCHEMA = ResourceSchema(
    name="Batch",
    plural="Batches",
    model=Batch,
    fields=[
        text("name", required=True),
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
        text("description"),
    ],
    unique=[
        UniqueKey(
            ("name", "class_id"),
            case_insensitive=("name",),
            message="Batch with this name already exists in this class",
        )
    ],
    filters=("class_id",),
    populate=(Populate("class_id", SchoolClass, "class"),),
    sort=(("name", False),),
)
