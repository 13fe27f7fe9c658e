from app.core.models import PaymentType
from app.crud.schema import ResourceSchema, UniqueKey, text

PAYMENT_TYPE_SCHEMA = ResourceSchema(
    name="Payment type",
    model=PaymentType,
    fields=[text("name", required=True), text("details")],
    unique=[UniqueKey(("name",), case_insensitive=("name",), message="Payment type with this name already exists")],
)
