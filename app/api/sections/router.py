from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import Section
from app.core.schemas import ok
from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes
from app.crud.validation import parse_id
from app.db.session import get_db

from .schemas import SECTION_SCHEMA

router = APIRouter(prefix="/api/sections", tags=["sections"])
engine = ResourceEngine(SECTION_SCHEMA)


@router.get("/class/{class_id}")
async def list_sections_by_class(class_id: str, db: AsyncSession = Depends(get_db)):
    """Active sections of one class."""
    uid = parse_id(class_id, "class")
    sections, _ = await engine.list(db, conditions=[Section.class_id == uid, Section.is_active.is_(True)])
    return ok(await engine.serialize_many(db, sections), "Sections fetched successfully")


register_crud_routes(router, engine, "sections")
