from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.models import Income
from app.crud.engine import ResourceEngine

from .schemas import INCOME_SCHEMA

engine = ResourceEngine(INCOME_SCHEMA)


async def income_summary(db: AsyncSession, year: Optional[str] = None) -> Dict[str, Any]:
    """Yearly total, per-month breakdown and the five largest income sources."""
    selected_year = year if year and year != "all" else str(datetime.now().year)

    total = (
        await db.execute(select(func.coalesce(func.sum(Income.amount), 0)).where(Income.year == selected_year))
    ).scalar_one()

    monthly = await db.execute(
        select(Income.month, func.sum(Income.amount), func.count(Income.id))
        .where(Income.year == selected_year)
        .group_by(Income.month)
        .order_by(Income.month)
    )
    top_sources = await db.execute(
        select(
            Income.income_source_id,
            Income.income_source_name,
            func.sum(Income.amount).label("total"),
            func.count(Income.id),
        )
        .where(Income.year == selected_year)
        .group_by(Income.income_source_id, Income.income_source_name)
        .order_by(func.sum(Income.amount).desc())
        .limit(5)
    )

    return {
        "totalIncome": float(total or 0),
        "monthlyBreakdown": [
            {"month": month, "total": float(amount or 0), "count": count} for month, amount, count in monthly.all()
        ],
        "topSources": [
            {"incomeSourceId": source_id, "incomeSourceName": name, "total": float(amount or 0), "count": count}
            for source_id, name, amount, count in top_sources.all()
        ],
        "selectedYear": selected_year,
    }
