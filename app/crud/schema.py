"""
Declarative resource schemas consumed by ResourceEngine.

A resource is described once (fields, uniqueness keys, default/current flag,
soft-delete, ordering, filters, populate rules, cross-field checks) and the
engine derives List/Get/Create/Update/Delete/ToggleStatus/SetDefault from it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence, Tuple, Type

from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

Record = Dict[str, Any]
RecordCheck = Callable[[Record], None]
StoreCheck = Callable[[AsyncSession, Record], Awaitable[None]]
ItemModel = Type[Any]


class Kind(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATE = "date"
    REFERENCE = "reference"
    CHOICE = "choice"
    LIST = "list"


@dataclass(frozen=True)
class Reference:
    """Pointer to another resource. name_field, when set, caches the referenced display name."""

    model: Type[Any]
    label: str
    name_field: Optional[str] = None
    source_field: str = "name"
    must_exist: bool = True


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: Kind = Kind.STRING
    required: bool = False
    default: Any = None
    fallback: Any = None
    positive: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    choices: Optional[Tuple[str, ...]] = None
    reference: Optional[Reference] = None
    item: Optional[ItemModel] = None
    min_items: int = 0
    label: Optional[str] = None
    alias: Optional[str] = None

    @property
    def wire_name(self) -> str:
        return self.alias or to_camel(self.name)

    @property
    def title(self) -> str:
        if self.label:
            return self.label
        text = self.name[:-3] if self.name.endswith("_id") else self.name
        return text.replace("_", " ").capitalize()


@dataclass(frozen=True)
class UniqueKey:
    """
    Uniqueness over one or more fields. All fields must match for a conflict; a null value
    matches only null. active_only=None follows the resource's soft-delete setting.
    """

    fields: Tuple[str, ...]
    case_insensitive: Tuple[str, ...] = ()
    message: Optional[str] = None
    active_only: Optional[bool] = None


@dataclass(frozen=True)
class Singleton:
    """At most one record per scope may have `flag` set. scope=() means the whole table."""

    flag: str
    scope: Tuple[str, ...] = ()
    protect_delete: bool = False
    delete_message: Optional[str] = None


@dataclass(frozen=True)
class Populate:
    """Inline display fields of a referenced record at read time."""

    field: str
    model: Type[Any]
    target: str
    attributes: Tuple[str, ...] = ("id", "name")
    placeholder: Optional[Dict[str, Any]] = None


@dataclass
class ResourceSchema:
    name: str
    model: Type[Any]
    fields: Sequence[FieldSpec]
    plural: Optional[str] = None
    unique: Sequence[UniqueKey] = ()
    singleton: Optional[Singleton] = None
    soft_delete: bool = False
    sort: Sequence[Tuple[str, bool]] = (("created_at", True),)
    filters: Sequence[str] = ()
    populate: Sequence[Populate] = ()
    checks: Sequence[RecordCheck] = ()
    store_checks: Sequence[StoreCheck] = ()
    computed: Sequence[Callable[[Record], None]] = ()
    paginate: bool = False
    body_models: Dict[bool, Any] = field(init=False, repr=False, default_factory=dict)
    _by_name: Dict[str, FieldSpec] = field(init=False, repr=False, default_factory=dict)
    _by_wire: Dict[str, FieldSpec] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        self._by_name = {spec.name: spec for spec in self.fields}
        self._by_wire = {spec.wire_name: spec for spec in self.fields}
        if self.soft_delete and not self.has_status:
            raise ValueError(f"{self.name}: soft delete needs an is_active column")

    @property
    def label_plural(self) -> str:
        return self.plural or f"{self.name}s"

    @property
    def has_status(self) -> bool:
        return hasattr(self.model, "is_active")

    def field(self, name: str) -> Optional[FieldSpec]:
        return self._by_name.get(name)

    def field_by_wire_name(self, wire_name: Any) -> Optional[FieldSpec]:
        return self._by_wire.get(wire_name)

    def title_of(self, name: str) -> str:
        spec = self.field(name)
        return spec.title if spec else name.replace("_", " ").capitalize()


# Shorthand constructors used by resource declarations.


def text(name: str, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("default", "")
    return FieldSpec(name, Kind.STRING, **kwargs)


def integer(name: str, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("fallback", 0)
    kwargs.setdefault("default", kwargs["fallback"])
    return FieldSpec(name, Kind.INTEGER, **kwargs)


def number(name: str, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("fallback", 0.0)
    kwargs.setdefault("default", kwargs["fallback"])
    return FieldSpec(name, Kind.FLOAT, **kwargs)


def flag(name: str, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("default", False)
    return FieldSpec(name, Kind.BOOLEAN, **kwargs)


def day(name: str, **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, Kind.DATE, **kwargs)


def choice(name: str, options: Type[Enum], **kwargs: Any) -> FieldSpec:
    return FieldSpec(name, Kind.CHOICE, choices=tuple(o.value for o in options), **kwargs)


def ref(
    name: str,
    model: Type[Any],
    label: str,
    *,
    name_field: Optional[str] = None,
    required: bool = False,
    must_exist: bool = True,
    **kwargs: Any,
) -> FieldSpec:
    reference = Reference(model=model, label=label, name_field=name_field, must_exist=must_exist)
    return FieldSpec(name, Kind.REFERENCE, required=required, reference=reference, label=label, **kwargs)


def items(name: str, model: ItemModel, **kwargs: Any) -> FieldSpec:
    kwargs.setdefault("default", [])
    return FieldSpec(name, Kind.LIST, item=model, **kwargs)
