from fastapi import APIRouter

from app.crud.engine import ResourceEngine
from app.crud.router import register_crud_routes

from .schemas import BANK_ACCOUNT_SCHEMA

router = APIRouter(prefix="/api/bank-accounts", tags=["bank-accounts"])
engine = ResourceEngine(BANK_ACCOUNT_SCHEMA)

register_crud_routes(
    router,
    engine,
    "bank_accounts",
    flag_path="/{item_id}/set-default",
    flag_message="Default bank account updated successfully",
)
