from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import INCOME_SOURCE_SCHEMA

router = APIRouter(prefix="/api/income-sources", tags=["income-sources"])
engine = ResourceEngine(INCOME_SOURCE_SCHEMA)

register_crud_routes(router, engine, "income_sources", bulk_key="incomeSources")
