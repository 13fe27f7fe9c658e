"""
Pydantic request-body models derived from a ResourceSchema.

Each resource gets a create model (required fields, defaults) and an update model (every
field optional, dumped with exclude_unset) built with `create_model`. Lengths and ranges are
Field constraints; the before-validators only trim, apply the numeric fallback and report
blank required values.
"""
import math
from datetime import date, datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type
from uuid import UUID
from zoneinfo import ZoneInfo

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter, create_model, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.config import settings
from app.core.exceptions import InvalidIdError, ServiceError, ValidationError
from app.crud.schema import FieldSpec, Kind, ResourceSchema

_MOMENT = TypeAdapter(datetime)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, dict)):
        return len(value) == 0
    return False


def school_day(value: Any) -> Any:
    """
    Calendar day. A plain YYYY-MM-DD is taken as-is; a timestamp carrying an offset is first
    converted into the school timezone.
    """
    if isinstance(value, str):
        value = value.strip()
        if len(value) > 10:
            try:
                value = _MOMENT.validate_python(value)
            except PydanticValidationError:
                raise PydanticCustomError("date_parsing", "Input should be a valid date")
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(ZoneInfo(settings.school_timezone))
        return value.date()
    return value


def lenient_flag(value: Any) -> Any:
    if value is None or (isinstance(value, str) and not value.strip()):
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return value.strip() if isinstance(value, str) else value


SchoolDay = Annotated[date, BeforeValidator(school_day)]
Flag = Annotated[bool, BeforeValidator(lenient_flag)]


class DateSpan(BaseModel):
    """One `{fromDate, toDate, isFullDay}` entry of a holiday. Stored as ISO strings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    from_date: SchoolDay
    to_date: SchoolDay
    is_full_day: Flag = True

    @model_validator(mode="after")
    def _ordered(self) -> "DateSpan":
        if self.from_date > self.to_date:
            raise PydanticCustomError("date_order", "fromDate must be before or equal to toDate")
        return self


def _number(spec: FieldSpec, value: Any) -> Any:
    """Unparseable numbers fall back to the field's fallback instead of failing."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int) and spec.kind == Kind.INTEGER:
        return value
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (TypeError, ValueError):
        return spec.fallback
    if not math.isfinite(number):
        return spec.fallback
    return int(number) if spec.kind == Kind.INTEGER else number


def _blank_value(spec: FieldSpec) -> Any:
    if spec.kind == Kind.STRING:
        return spec.default if isinstance(spec.default, str) else ""
    if spec.kind in (Kind.INTEGER, Kind.FLOAT):
        return spec.fallback
    if spec.kind == Kind.BOOLEAN:
        return False
    if spec.kind == Kind.LIST:
        return []
    return None


def _before(spec: FieldSpec):
    def validate(value: Any) -> Any:
        if is_blank(value):
            if spec.required:
                raise PydanticCustomError("required", "{title} is required", {"title": spec.title})
            return _blank_value(spec)
        if spec.kind in (Kind.STRING, Kind.CHOICE):
            return str(value).strip()
        if spec.kind in (Kind.INTEGER, Kind.FLOAT):
            return _number(spec, value)
        return value

    return validate


def _annotation(spec: FieldSpec) -> Any:
    kind = spec.kind
    if kind == Kind.STRING:
        return str
    if kind == Kind.INTEGER:
        return int
    if kind == Kind.FLOAT:
        return float
    if kind == Kind.BOOLEAN:
        return Flag
    if kind == Kind.DATE:
        return Optional[SchoolDay]
    if kind == Kind.REFERENCE:
        return Optional[UUID]
    if kind == Kind.CHOICE:
        return Optional[Literal[spec.choices]]
    if kind == Kind.LIST:
        return List[spec.item] if spec.item is not None else List[Any]
    raise ValueError(f"Unsupported field kind: {kind}")


def _column_width(schema: ResourceSchema, spec: FieldSpec) -> Optional[int]:
    column = schema.model.__table__.c.get(spec.name)
    return getattr(column.type, "length", None) if column is not None else None


def _constraints(schema: ResourceSchema, spec: FieldSpec) -> Dict[str, Any]:
    constraints: Dict[str, Any] = {}
    if spec.kind == Kind.STRING:
        if spec.min_length is not None:
            constraints["min_length"] = spec.min_length
        # an explicit max_length wins; otherwise the column width bounds the value
        max_length = spec.max_length or _column_width(schema, spec)
        if max_length is not None:
            constraints["max_length"] = max_length
    elif spec.kind in (Kind.INTEGER, Kind.FLOAT):
        if spec.positive:
            constraints["gt"] = 0
        if spec.min_value is not None:
            constraints["ge"] = spec.min_value
        if spec.max_value is not None:
            constraints["le"] = spec.max_value
    elif spec.kind == Kind.LIST and spec.min_items:
        constraints["min_length"] = spec.min_items
    return constraints


def _field(schema: ResourceSchema, spec: FieldSpec, partial: bool) -> Tuple[Any, Any]:
    annotation = Annotated[_annotation(spec), BeforeValidator(_before(spec))]
    options = dict(_constraints(schema, spec), alias=spec.wire_name, title=spec.title)
    # defaults are not validated: an absent key stays unset, an explicit null still runs the validators
    if partial:
        return annotation, Field(None, **options)
    if spec.required:
        return annotation, Field(..., **options)
    if callable(spec.default):
        return annotation, Field(default_factory=spec.default, **options)
    return annotation, Field(spec.default, **options)


def build_model(schema: ResourceSchema, *, partial: bool = False) -> Type[BaseModel]:
    suffix = "Update" if partial else "Create"
    fields = {spec.name: _field(schema, spec, partial) for spec in schema.fields}
    return create_model(
        f"{schema.name.replace(' ', '')}{suffix}",
        __config__=ConfigDict(extra="ignore"),
        **fields,
    )


def record_model(schema: ResourceSchema, *, partial: bool = False) -> Type[BaseModel]:
    """The create (or update) model of a schema, built once."""
    model = schema.body_models.get(partial)
    if model is None:
        model = schema.body_models[partial] = build_model(schema, partial=partial)
    return model


# ----- pydantic errors -> service errors -----


_OBJECT_ERRORS = ("model_type", "model_attributes_type", "dict_type")


def _fmt(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)


def _describe(spec: FieldSpec, label: str, error: Dict[str, Any]) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "missing":
        return f"{label} is required"
    if kind == "string_too_short":
        return f"{label} must be at least {ctx['min_length']} characters long"
    if kind == "string_too_long":
        return f"{label} must be at most {ctx['max_length']} characters long"
    if kind == "greater_than":
        return f"{label} must be greater than {_fmt(ctx['gt'])}"
    if kind in ("greater_than_equal", "less_than_equal"):
        if spec.min_value is not None and spec.max_value is not None:
            return f"{label} must be between {_fmt(spec.min_value)} and {_fmt(spec.max_value)}"
        if kind == "greater_than_equal":
            return f"{label} must be at least {_fmt(ctx['ge'])}"
        return f"{label} must be at most {_fmt(ctx['le'])}"
    if kind == "literal_error":
        return f"{label} must be one of: {', '.join(spec.choices or ())}"
    if kind == "list_type":
        return f"{label} must be an array"
    if kind == "too_short":
        return f"At least {ctx['min_length']} {label.lower()} entry is required"
    if kind.startswith("bool"):
        return f"{label} must be true or false"
    if kind.startswith("date"):
        return f"{label} must be a valid date"
    if kind.startswith("uuid"):
        return f"{label} must be a valid ID"
    if kind in _OBJECT_ERRORS:
        return f"{label} must be an object"
    return error["msg"].replace("Value error, ", "")


def to_service_error(schema: ResourceSchema, error: Dict[str, Any]) -> ServiceError:
    """Map the first pydantic error of a record body to the service error the API reports."""
    loc = error.get("loc") or ()
    spec = schema.field_by_wire_name(loc[0]) if loc else None
    if spec is None:
        return ValidationError("Request body must be a JSON object")
    if spec.kind == Kind.REFERENCE and error["type"] != "required" and error["type"] != "missing":
        return InvalidIdError(f"Invalid {spec.title.lower()} ID")
    if len(loc) == 1:
        return ValidationError(_describe(spec, spec.title, error), spec.name)

    # nested list entry: (field, index[, attribute])
    entry = f"{spec.title} entry {loc[1] + 1}"
    if len(loc) == 2:
        if error["type"] in _OBJECT_ERRORS:
            return ValidationError(f"{entry} must be an object", spec.name)
        return ValidationError(f"{entry}: {error['msg']}", spec.name)
    return ValidationError(f"{entry}: {_describe(spec, str(loc[-1]), error)}", spec.name)


def parse_as(adapter: TypeAdapter, raw: Any, message: str) -> Any:
    """Validate a single value (path or query parameter) with a pydantic adapter."""
    try:
        return adapter.validate_python(raw)
    except PydanticValidationError:
        raise ValidationError(message)


DAY = TypeAdapter(SchoolDay)
FLAG = TypeAdapter(Flag)
WHOLE = TypeAdapter(int)
