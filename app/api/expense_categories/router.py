from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import EXPENSE_CATEGORY_SCHEMA

router = APIRouter(prefix="/api/expense-category", tags=["expense-category"])
engine = ResourceEngine(EXPENSE_CATEGORY_SCHEMA)

register_crud_routes(router, engine, "expense_categories")
