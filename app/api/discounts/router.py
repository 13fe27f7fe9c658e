from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import DISCOUNT_SCHEMA

router = APIRouter(prefix="/api/discounts", tags=["discounts"])
engine = ResourceEngine(DISCOUNT_SCHEMA)

register_crud_routes(router, engine, "discounts")
