from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationError
from app.core.models import Expense
from app.crud.bodies import DAY, parse_as
from app.crud.engine import ResourceEngine

from .schemas import EXPENSE_SCHEMA

engine = ResourceEngine(EXPENSE_SCHEMA)


def date_window(params: Mapping[str, Any]) -> List[Any]:
    """fromDate/toDate narrow the list only when both are given; both ends inclusive."""
    raw_from, raw_to = params.get("fromDate"), params.get("toDate")
    if not raw_from or not raw_to:
        return []
    first = parse_as(DAY, raw_from, "From date must be a valid date")
    last = parse_as(DAY, raw_to, "To date must be a valid date")
    if first > last:
        raise ValidationError("From date must be before or equal to to date")
    return [Expense.date >= first, Expense.date <= last]


async def expense_summary(db: AsyncSession, year: Optional[str] = None) -> Dict[str, Any]:
    """Yearly total, per-month breakdown and totals per bank account."""
    selected_year = year if year and year != "all" else str(datetime.now().year)

    total = (
        await db.execute(
            select(func.coalesce(func.sum(Expense.total_amount), 0)).where(Expense.year == selected_year)
        )
    ).scalar_one()
    monthly = await db.execute(
        select(Expense.month, func.sum(Expense.total_amount), func.count(Expense.id))
        .where(Expense.year == selected_year)
        .group_by(Expense.month)
        .order_by(Expense.month)
    )
    accounts = await db.execute(
        select(Expense.account_id, Expense.account_name, func.sum(Expense.total_amount), func.count(Expense.id))
        .where(Expense.year == selected_year)
        .group_by(Expense.account_id, Expense.account_name)
        .order_by(func.sum(Expense.total_amount).desc())
    )

    return {
        "totalExpense": float(total or 0),
        "monthlyBreakdown": [
            {"month": month, "total": float(amount or 0), "count": count} for month, amount, count in monthly.all()
        ],
        "byAccount": [
            {"accountId": account_id, "accountName": name, "total": float(amount or 0), "count": count}
            for account_id, name, amount, count in accounts.all()
        ],
        "selectedYear": selected_year,
    }
