from app.core.models import AcademicSession, Batch, Discount, DiscountType, FeeType, SchoolClass
from app.crud.schema import ResourceSchema, UniqueKey, number, ref, text

DISCOUNT_SCHEMA = ResourceSchema(
    name="Discount",
    model=Discount,
    fields=[
        ref("session_id", AcademicSession, "Session", name_field="session_name", required=True),
        ref("class_id", SchoolClass, "Class", name_field="class_name", required=True),
        ref("batch_id", Batch, "Batch", name_field="batch_name"),
        ref("fee_type_id", FeeType, "Fee type", name_field="fee_type_name", required=True),
        ref("discount_type_id", DiscountType, "Discount type", name_field="discount_type_name", required=True),
        number("discount_amount", min_value=0),
        number("discount_percentage", min_value=0, max_value=100),
        text("description"),
    ],
    unique=[
        UniqueKey(
            ("session_id", "class_id", "batch_id", "fee_type_id", "discount_type_id"),
            message="Discount already exists for this session, class, batch, fee type and discount type",
        )
    ],
    filters=("session_id", "class_id", "batch_id", "fee_type_id", "discount_type_id"),
)
