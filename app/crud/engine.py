"""
Schema-driven CRUD over one mapped table.

ResourceEngine(schema) provides list/get/create/bulk_create/update/delete/toggle_status/
set_flag for a ResourceSchema. Every write runs validation, reference resolution,
cross-field checks and uniqueness before touching the store, and commits once.
"""
import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from uuid import UUID

from pydantic.alias_generators import to_camel
from sqlalchemy import Boolean, Integer, Uuid, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.exceptions import DuplicateError, NotFoundError, StoreError, ValidationError
from app.core.models.base import utcnow
from app.core.schemas import Pagination
from app.crud.schema import Record, ResourceSchema
from app.crud.singleton import demote_others, ensure_deletable
from app.crud.uniqueness import ensure_batch_unique, ensure_unique
from app.crud.bodies import FLAG, WHOLE, parse_as
from app.crud.validation import normalize, parse_id, resolve_references, run_checks

logger = logging.getLogger(__name__)


def to_document(obj: Any) -> Dict[str, Any]:
    """Row -> camelCase dict of every column."""
    return {to_camel(column.key): getattr(obj, column.key) for column in obj.__table__.columns}


def snapshot(obj: Any) -> Record:
    return {column.key: getattr(obj, column.key) for column in obj.__table__.columns}


def is_unique_violation(exc: IntegrityError) -> bool:
    """Unique-key violations, as opposed to NOT NULL, foreign-key or check failures."""
    # asyncpg reports SQLSTATE 23505; SQLite only says so in the message
    if getattr(exc.orig, "sqlstate", None) == "23505":
        return True
    text = str(exc.orig).lower()
    return "unique" in text or "duplicate key" in text


class ResourceEngine:
    def __init__(self, schema: ResourceSchema) -> None:
        self.schema = schema
        self.model = schema.model

    # ----- reads -----

    async def load(self, db: AsyncSession, item_id: Any) -> Any:
        """Fetch by id or raise NotFoundError. Malformed ids fail before the lookup."""
        uid = parse_id(item_id, self.schema.name.lower())
        stmt = select(self.model).where(self.model.id == uid).execution_options(populate_existing=True)
        result = await db.execute(stmt)
        obj = result.scalar_one_or_none()
        if obj is None:
            raise NotFoundError(f"{self.schema.name} not found")
        return obj

    async def get(self, db: AsyncSession, item_id: Any) -> Any:
        return await self.load(db, item_id)

    def filter_conditions(self, filters: Optional[Mapping[str, Any]]) -> List[Any]:
        conditions: List[Any] = []
        if not filters:
            return conditions
        for name in self.schema.filters:
            wire = to_camel(name)
            if wire not in filters:
                continue
            raw = filters[wire]
            if raw is None or (isinstance(raw, str) and raw.strip().lower() in ("", "all")):
                continue
            spec = self.schema.field(name)
            column = getattr(self.model, name)
            column_type = self.model.__table__.c[name].type
            title = self.schema.title_of(name)
            if spec is not None:
                value = normalize(self.schema, {spec.wire_name: raw}, partial=True)[name]
            elif isinstance(column_type, Boolean):
                value = parse_as(FLAG, raw, f"{title} must be true or false")
            elif isinstance(column_type, Integer):
                value = parse_as(WHOLE, raw, f"{title} must be a number")
            elif isinstance(column_type, Uuid):
                value = parse_id(raw, name[:-3].replace("_", " "))
            else:
                value = raw.strip() if isinstance(raw, str) else raw
            conditions.append(column.is_(None) if value is None else column == value)
        return conditions

    def _order_by(self) -> List[Any]:
        clauses = []
        for name, descending in self.schema.sort:
            column = getattr(self.model, name)
            clauses.append(column.desc() if descending else column.asc())
        clauses.append(self.model.id.asc())
        return clauses

    async def list(
        self,
        db: AsyncSession,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        include_inactive: bool = False,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        conditions: Sequence[Any] = (),
    ) -> Tuple[List[Any], Optional[Pagination]]:
        where = list(conditions) + self.filter_conditions(filters)
        if self.schema.soft_delete and not include_inactive:
            where.append(self.model.is_active.is_(True))

        stmt = select(self.model).where(*where).order_by(*self._order_by()).execution_options(
            populate_existing=True
        )

        pagination = None
        if self.schema.paginate or page is not None or limit is not None:
            page = max(page or 1, 1)
            limit = min(max(limit or settings.default_page_size, 1), settings.max_page_size)
            total = (await db.execute(select(func.count()).select_from(self.model).where(*where))).scalar_one()
            pagination = Pagination(
                current_page=page,
                total_pages=math.ceil(total / limit) if total else 0,
                total_items=total,
                items_per_page=limit,
            )
            stmt = stmt.offset((page - 1) * limit).limit(limit)

        result = await db.execute(stmt)
        return list(result.scalars().all()), pagination

    # ----- writes -----

    async def prepare(self, db: AsyncSession, payload: Any) -> Record:
        """Full validation of a create payload. No store writes."""
        record = normalize(self.schema, payload)
        await resolve_references(db, self.schema, record)
        for derive in self.schema.computed:
            derive(record)
        run_checks(self.schema.checks, record)
        for check in self.schema.store_checks:
            await check(db, record)
        return record

    async def create(self, db: AsyncSession, payload: Any, **extra: Any) -> Any:
        record = await self.prepare(db, payload)
        record.update(extra)
        await ensure_unique(db, self.schema, record)

        now = utcnow()
        obj = self.model(**record, created_at=now, updated_at=now)
        rule = self.schema.singleton
        if rule is not None and record.get(rule.flag):
            await demote_others(db, self.schema, record)
        db.add(obj)
        await self.commit(db)
        await db.refresh(obj)
        logger.info("%s created id=%s", self.schema.name, obj.id)
        return obj

    async def bulk_create(self, db: AsyncSession, payloads: Any) -> List[Any]:
        if not isinstance(payloads, list) or not payloads:
            raise ValidationError(f"A non-empty array of {self.schema.label_plural.lower()} is required")
        records = [await self.prepare(db, payload) for payload in payloads]
        ensure_batch_unique(self.schema, records)
        for record in records:
            await ensure_unique(db, self.schema, record)

        now = utcnow()
        objs = [self.model(**record, created_at=now, updated_at=now) for record in records]
        db.add_all(objs)
        await self.commit(db)
        for obj in objs:
            await db.refresh(obj)
        logger.info("%s bulk created count=%d", self.schema.name, len(objs))
        return objs

    async def update(self, db: AsyncSession, item_id: Any, payload: Any) -> Any:
        """Partial update: only fields present in the payload change, plus updated_at."""
        obj = await self.load(db, item_id)
        changes = normalize(self.schema, payload, partial=True)
        await resolve_references(db, self.schema, changes)

        before = snapshot(obj)
        merged = {**before, **changes}
        for derive in self.schema.computed:
            derive(merged)
        run_checks(self.schema.checks, merged)
        for check in self.schema.store_checks:
            await check(db, merged)
        await ensure_unique(db, self.schema, merged, exclude_id=obj.id)

        rule = self.schema.singleton
        if rule is not None and changes.get(rule.flag):
            await demote_others(db, self.schema, merged, keep_id=obj.id)

        for name, value in merged.items():
            if name in changes or before.get(name) != value:
                setattr(obj, name, value)
        obj.updated_at = utcnow()
        await self.commit(db)
        await db.refresh(obj)
        logger.info("%s updated id=%s fields=%s", self.schema.name, obj.id, sorted(changes))
        return obj

    async def delete(self, db: AsyncSession, item_id: Any) -> Any:
        obj = await self.load(db, item_id)
        if self.schema.soft_delete:
            if not obj.is_active:
                raise NotFoundError(f"{self.schema.name} not found")
            obj.is_active = False
            obj.updated_at = utcnow()
        else:
            ensure_deletable(self.schema, obj)
            await db.delete(obj)
        await self.commit(db)
        logger.info("%s deleted id=%s soft=%s", self.schema.name, obj.id, self.schema.soft_delete)
        return obj

    async def toggle_status(self, db: AsyncSession, item_id: Any) -> bool:
        obj = await self.load(db, item_id)
        activate = not obj.is_active
        if activate and self.schema.soft_delete:
            # reactivation must not collide with a record created while this one was inactive
            await ensure_unique(db, self.schema, snapshot(obj), exclude_id=obj.id)
        obj.is_active = activate
        obj.updated_at = utcnow()
        await self.commit(db)
        logger.info("%s status id=%s active=%s", self.schema.name, obj.id, activate)
        return activate

    async def set_flag(self, db: AsyncSession, item_id: Any) -> Any:
        """Mark one record as the default/current one of its scope, demoting the rest."""
        rule = self.schema.singleton
        if rule is None:
            raise ValueError(f"{self.schema.name} has no default flag")
        obj = await self.load(db, item_id)
        await demote_others(db, self.schema, snapshot(obj), keep_id=obj.id)
        setattr(obj, rule.flag, True)
        obj.updated_at = utcnow()
        await self.commit(db)
        await db.refresh(obj)
        logger.info("%s %s set id=%s", self.schema.name, rule.flag, obj.id)
        return obj

    async def commit(self, db: AsyncSession) -> None:
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            logger.warning("%s integrity error: %s", self.schema.name, exc.orig)
            if is_unique_violation(exc):
                raise DuplicateError(f"{self.schema.name} already exists") from exc
            message = f"{self.schema.name} could not be saved: a required value is missing or invalid"
            raise ValidationError(message) from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("%s store failure", self.schema.name)
            raise StoreError(f"Failed to save {self.schema.name.lower()}", str(exc)) from exc

    # ----- serialization -----

    async def serialize(self, db: AsyncSession, obj: Any) -> Dict[str, Any]:
        return (await self.serialize_many(db, [obj]))[0]

    async def serialize_many(self, db: AsyncSession, objs: Sequence[Any]) -> List[Dict[str, Any]]:
        """Documents with populate rules applied. A referenced record that is gone yields the placeholder."""
        documents = [to_document(obj) for obj in objs]
        for rule in self.schema.populate:
            ids = {getattr(obj, rule.field) for obj in objs if getattr(obj, rule.field) is not None}
            found: Dict[UUID, Any] = {}
            if ids:
                result = await db.execute(select(rule.model).where(rule.model.id.in_(ids)))
                found = {target.id: target for target in result.scalars().all()}
            for obj, document in zip(objs, documents):
                ref_id = getattr(obj, rule.field)
                if ref_id is None:
                    document[rule.target] = None
                elif ref_id in found:
                    target = found[ref_id]
                    document[rule.target] = {to_camel(attr): getattr(target, attr) for attr in rule.attributes}
                elif rule.placeholder is not None:
                    document[rule.target] = {"id": ref_id, **rule.placeholder}
                else:
                    document[rule.target] = None
        return documents

