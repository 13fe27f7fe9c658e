from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import EXAM_CATEGORY_SCHEMA

router = APIRouter(prefix="/api/exam-categories", tags=["exam-categories"])
engine = ResourceEngine(EXAM_CATEGORY_SCHEMA)

register_crud_routes(router, engine, "exam_categories")
