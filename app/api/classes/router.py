from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import CLASS_SCHEMA

router = APIRouter(prefix="/api/class", tags=["classes"])
engine = ResourceEngine(CLASS_SCHEMA)

register_crud_routes(router, engine, "classes")
