from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db

from . import service

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("/stats/summary")
async def expense_summary(year: Optional[str] = Query(None), db: AsyncSession = Depends(get_db)):
    data = await service.expense_summary(db, year)
    return ok(data, "Expense statistics fetched successfully")


register_crud_routes(router, service.engine, "expenses", list_conditions=service.date_window)
