from typing import Any, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError
from app.core.models.base import utcnow
from app.crud.schema import Record, ResourceSchema


async def demote_others(
    db: AsyncSession,
    schema: ResourceSchema,
    record: Record,
    keep_id: Optional[UUID] = None,
) -> None:
    """
    Clear the singleton flag on every other record in the scope of `record`.
    Runs inside the caller's transaction; the caller promotes its record and commits once,
    so demote and promote become visible together.
    """
    rule = schema.singleton
    if rule is None:
        return
    model = schema.model
    flag_column = getattr(model, rule.flag)
    stmt = update(model).where(flag_column.is_(True))
    for name in rule.scope:
        value = record.get(name)
        column = getattr(model, name)
        stmt = stmt.where(column.is_(None) if value is None else column == value)
    if keep_id is not None:
        stmt = stmt.where(model.id != keep_id)
    stmt = stmt.values({rule.flag: False, "updated_at": utcnow()}).execution_options(synchronize_session=False)
    await db.execute(stmt)


def ensure_deletable(schema: ResourceSchema, obj: Any) -> None:
    rule = schema.singleton
    if rule is None or not rule.protect_delete:
        return
    if getattr(obj, rule.flag, False):
        raise ConflictError(
            rule.delete_message
            or f"Cannot delete the {rule.flag.replace('is_', '').replace('_', ' ')} {schema.name.lower()}"
        )
