from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import FEE_TYPE_SCHEMA

router = APIRouter(prefix="/api/fee-types", tags=["fee-types"])
engine = ResourceEngine(FEE_TYPE_SCHEMA)

register_crud_routes(router, engine, "fee_types")
