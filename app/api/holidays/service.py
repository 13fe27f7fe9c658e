import calendar
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from app.core.models import AcademicSession, Holiday, HolidayType
from app.crud.bodies import DAY, WHOLE, parse_as
from app.crud.engine import ResourceEngine
from app.crud.validation import parse_id

from .schemas import HOLIDAY_SCHEMA, PreloadHolidaysRequest

engine = ResourceEngine(HOLIDAY_SCHEMA)

# Fixed-date public holidays of Bangladesh: (name, MM-DD, holiday type name).
# Lunar holidays (Eid, Durga Puja) move every year and are entered by hand.
BD_PUBLIC_HOLIDAYS = (
    ("International Mother Language Day", "02-21", "National"),
    ("Independence Day", "03-26", "National"),
    ("Bengali New Year", "04-14", "Cultural"),
    ("May Day", "05-01", "International"),
    ("National Mourning Day", "08-15", "National"),
    ("Victory Day", "12-16", "National"),
    ("Christmas", "12-25", "Religious"),
)


def overlaps(holiday: Holiday, first: date, last: date) -> bool:
    """True when any date range of the holiday intersects [first, last], both ends inclusive."""
    start, end = first.isoformat(), last.isoformat()
    return any(span["fromDate"] <= end and span["toDate"] >= start for span in holiday.dates or [])


async def _active_holidays(db: AsyncSession) -> List[Holiday]:
    stmt = (
        select(Holiday)
        .where(Holiday.is_active.is_(True))
        .order_by(Holiday.created_at.desc(), Holiday.id.asc())
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def find_holiday_on(db: AsyncSession, raw_date: str) -> Optional[Holiday]:
    day = parse_as(DAY, raw_date, "Date must be a valid date")
    for holiday in await _active_holidays(db):
        if overlaps(holiday, day, day):
            return holiday
    return None


async def holidays_in_month(db: AsyncSession, raw_year: str, raw_month: str) -> List[Holiday]:
    year = parse_as(WHOLE, raw_year, "Invalid year")
    month = parse_as(WHOLE, raw_month, "Invalid month")
    if not 1 <= year <= 9999:
        raise ValidationError("Invalid year")
    if not 1 <= month <= 12:
        raise ValidationError("Invalid month")
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    matches = [h for h in await _active_holidays(db) if overlaps(h, first, last)]
    matches.sort(key=lambda h: min(span["fromDate"] for span in h.dates))
    return matches


async def preload_bd_holidays(db: AsyncSession, request: PreloadHolidaysRequest) -> Dict[str, Any]:
    """
    Add the fixed-date public holidays to a session for one year (default: the year the
    session starts). Holidays the session already has, matched by name, are skipped.
    A holiday type with the matching name, when one exists, is linked.
    """
    session = await db.get(AcademicSession, parse_id(request.session_id, "session"))
    if session is None:
        raise NotFoundError("Session not found", 400)
    year = request.year or session.start_date.year

    existing = {h.name.lower() for h in await _active_holidays(db) if h.session_id == session.id}
    result = await db.execute(select(HolidayType).where(HolidayType.is_active.is_(True)))
    types = {holiday_type.name.lower(): holiday_type for holiday_type in result.scalars().all()}

    payloads, skipped = [], []
    for name, month_day, type_name in BD_PUBLIC_HOLIDAYS:
        if name.lower() in existing:
            skipped.append(name)
            continue
        day = f"{year}-{month_day}"
        holiday_type = types.get(type_name.lower())
        payloads.append(
            {
                "name": name,
                "sessionId": str(session.id),
                "holidayTypeId": str(holiday_type.id) if holiday_type else None,
                "dates": [{"fromDate": day, "toDate": day}],
            }
        )

    created = await engine.bulk_create(db, payloads) if payloads else []
    return {"created": created, "skipped": skipped}
