from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import FINE_TYPE_SCHEMA

router = APIRouter(prefix="/api/fine-types", tags=["fine-types"])
engine = ResourceEngine(FINE_TYPE_SCHEMA)

register_crud_routes(router, engine, "fine_types")
