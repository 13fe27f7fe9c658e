from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import DISCOUNT_TYPE_SCHEMA

router = APIRouter(prefix="/api/discount", tags=["discount"])
engine = ResourceEngine(DISCOUNT_TYPE_SCHEMA)

register_crud_routes(router, engine, "discount_types")
