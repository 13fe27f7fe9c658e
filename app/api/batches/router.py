from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import BATCH_SCHEMA

router = APIRouter(prefix="/api/batches", tags=["batches"])
engine = ResourceEngine(BATCH_SCHEMA)

register_crud_routes(router, engine, "batches")
