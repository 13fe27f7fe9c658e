"""
Boundary validation: turns a raw JSON payload into a normalized record for a ResourceSchema.

Field-level rules live in the pydantic models built by app.crud.bodies. This module runs them,
resolves reference fields against their collection (caching display names on the record) and
provides the cross-field checks resources declare.
"""
import uuid
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidIdError, NotFoundError, ValidationError
from app.crud.bodies import record_model, to_service_error
from app.crud.schema import Kind, Record, RecordCheck, ResourceSchema


def parse_id(value: Any, label: str = "record") -> uuid.UUID:
    """Validate an identifier before it reaches the store."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except (ValueError, AttributeError, TypeError):
        raise InvalidIdError(f"Invalid {label} ID")


def normalize(schema: ResourceSchema, payload: Any, *, partial: bool = False) -> Record:
    """
    Build a record from the payload. With partial=True only the keys present in the payload
    are returned (update semantics); otherwise absent optional fields get their default.
    The first failing field, in declaration order, fails the whole payload.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    try:
        body = record_model(schema, partial=partial).model_validate(payload)
    except PydanticValidationError as exc:
        raise to_service_error(schema, exc.errors()[0]) from exc

    record: Record = body.model_dump(exclude_unset=partial)
    for name in list(record):
        spec = schema.field(name)
        value = record[name]
        if value is None and spec.default is not None and not spec.required:
            record[name] = spec.default() if callable(spec.default) else spec.default
        elif spec.kind == Kind.LIST and spec.item is not None:
            record[name] = [entry.model_dump(mode="json", by_alias=True) for entry in getattr(body, name)]
    return record
async def resolve_references(db: AsyncSession, schema: ResourceSchema, record: Record) -> None:
    """
    Check referenced records exist (NotFoundError with status 400: the bad id is caller input)
    and cache their display names. Only references present in `record` are touched.
    """
    for spec in schema.fields:
        reference = spec.reference
        if reference is None or spec.name not in record:
            continue
        ref_id = record[spec.name]
        if ref_id is None:
            if reference.name_field:
                record[reference.name_field] = ""
            continue
        target = await db.get(reference.model, ref_id, populate_existing=True)
        if target is None and reference.must_exist:
            raise NotFoundError(f"{reference.label} not found", 400)
        if reference.name_field:
            record[reference.name_field] = getattr(target, reference.source_field, "") if target else ""


def run_checks(checks: Iterable[RecordCheck], record: Record) -> None:
    for check in checks:
        check(record)


def date_range(start: str, end: str, message: Optional[str] = None) -> RecordCheck:
    """Cross-field check: start <= end when both are set. Never swaps the values."""

    def check(record: Record) -> None:
        first, last = record.get(start), record.get(end)
        if first is not None and last is not None and first > last:
            raise ValidationError(message or f"{_title(start)} must be before or equal to {_title(end)}", start)

    return check


def not_greater(lower: str, upper: str, message: str) -> RecordCheck:
    def check(record: Record) -> None:
        low, high = record.get(lower), record.get(upper)
        if low is not None and high is not None and low > high:
            raise ValidationError(message, lower)

    return check


def _title(name: str) -> str:
    return name.replace("_", " ").capitalize()


def percent_or_amount(flag_field: str, percent_field: str, amount_field: str) -> RecordCheck:
    """
    flag set: percent must lie in (0, 100] and the amount is zeroed.
    flag clear: amount must be positive and the percent is zeroed.
    """

    def check(record: Record) -> None:
        if record.get(flag_field):
            percent = record.get(percent_field) or 0
            if percent <= 0 or percent > 100:
                raise ValidationError(f"{_title(percent_field)} must be greater than 0 and at most 100", percent_field)
            record[amount_field] = 0.0
        else:
            amount = record.get(amount_field) or 0
            if amount <= 0:
                raise ValidationError(f"{_title(amount_field)} must be greater than 0", amount_field)
            record[percent_field] = 0.0

    return check
