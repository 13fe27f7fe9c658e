from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.rbac import check_permission
from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db

from . import service
from .schemas import PreloadHolidaysRequest

router = APIRouter(prefix="/api/holidays", tags=["holidays"])


@router.get("/check/{day}")
async def check_holiday(day: str, db: AsyncSession = Depends(get_db)):
    holiday = await service.find_holiday_on(db, day)
    if holiday is None:
        return ok({"isHoliday": False}, "Date is not a holiday")
    data = {"isHoliday": True, "holiday": await service.engine.serialize(db, holiday)}
    return ok(data, "Date is a holiday")


@router.get("/month/{year}/{month}")
async def holidays_in_month(year: str, month: str, db: AsyncSession = Depends(get_db)):
    holidays = await service.holidays_in_month(db, year, month)
    return ok(await service.engine.serialize_many(db, holidays), "Monthly holidays fetched successfully")


@router.post(
    "/preload-bd-holidays",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(check_permission("holidays", "create"))],
)
async def preload_bd_holidays(payload: PreloadHolidaysRequest, db: AsyncSession = Depends(get_db)):
    outcome = await service.preload_bd_holidays(db, payload)
    data = {
        "created": await service.engine.serialize_many(db, outcome["created"]),
        "skipped": outcome["skipped"],
    }
    message = f"{len(outcome['created'])} holidays preloaded successfully"
    return ok(data, message, status_code=status.HTTP_201_CREATED)


register_crud_routes(router, service.engine, "holidays")
