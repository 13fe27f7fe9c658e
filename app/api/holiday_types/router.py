from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import HOLIDAY_TYPE_SCHEMA

router = APIRouter(prefix="/api/holiday-type", tags=["holiday-type"])
engine = ResourceEngine(HOLIDAY_TYPE_SCHEMA)

register_crud_routes(router, engine, "holiday_types")
