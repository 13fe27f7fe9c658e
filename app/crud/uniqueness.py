from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import DuplicateError
from app.crud.schema import Record, ResourceSchema, UniqueKey


def _message(schema: ResourceSchema, key: UniqueKey) -> str:
    if key.message:
        return key.message
    names = " and ".join(schema.title_of(name).lower() for name in key.fields)
    return f"{schema.name} with this {names} already exists"


def _active_only(schema: ResourceSchema, key: UniqueKey) -> bool:
    return schema.soft_delete if key.active_only is None else key.active_only


def key_value(key: UniqueKey, record: Record) -> Tuple[Any, ...]:
    """Comparable key tuple; case-insensitive parts are lowercased."""
    parts = []
    for name in key.fields:
        value = record.get(name)
        if name in key.case_insensitive and isinstance(value, str):
            value = value.lower()
        parts.append(value)
    return tuple(parts)


def _conditions(schema: ResourceSchema, key: UniqueKey, record: Record) -> List[Any]:
    model = schema.model
    conditions = []
    for name in key.fields:
        column = getattr(model, name)
        value = record.get(name)
        if value is None:
            # null matches null only, never acts as a wildcard
            conditions.append(column.is_(None))
        elif name in key.case_insensitive and isinstance(value, str):
            # both sides folded by the database: SQLite lower() only folds ASCII
            conditions.append(func.lower(column) == func.lower(literal(value)))
        else:
            conditions.append(column == value)
    if _active_only(schema, key):
        conditions.append(model.is_active.is_(True))
    return conditions


async def ensure_unique(
    db: AsyncSession,
    schema: ResourceSchema,
    record: Record,
    exclude_id: Optional[UUID] = None,
    keys: Optional[Sequence[UniqueKey]] = None,
) -> None:
    """Raise DuplicateError when another stored record matches any uniqueness key of `record`."""
    model = schema.model
    for key in schema.unique if keys is None else keys:
        conditions = _conditions(schema, key, record)
        if exclude_id is not None:
            conditions.append(model.id != exclude_id)
        stmt = select(model.id).where(and_(*conditions)).limit(1)
        result = await db.execute(stmt)
        if result.scalar_one_or_none() is not None:
            raise DuplicateError(_message(schema, key), key.fields)


def ensure_batch_unique(schema: ResourceSchema, records: Sequence[Record]) -> None:
    """Reject a bulk payload that repeats a key within itself."""
    for key in schema.unique:
        seen = set()
        for index, record in enumerate(records):
            value = key_value(key, record)
            if value in seen:
                names = " and ".join(schema.title_of(name).lower() for name in key.fields)
                raise DuplicateError(f"Duplicate {names} in request at position {index + 1}", key.fields)
            seen.add(value)
