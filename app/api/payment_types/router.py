from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import PAYMENT_TYPE_SCHEMA

router = APIRouter(prefix="/api/payment-types", tags=["payment-types"])
engine = ResourceEngine(PAYMENT_TYPE_SCHEMA)

register_crud_routes(router, engine, "payment_types")
