from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import EXPENSE_HEAD_SCHEMA

router = APIRouter(prefix="/api/expense-heads", tags=["expense-heads"])
engine = ResourceEngine(EXPENSE_HEAD_SCHEMA)

register_crud_routes(router, engine, "expense_heads", bulk_key="expenseHeads")
