from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.schemas import ok
from app.crud.router import register_crud_routes
from app.db.session import get_db

from . import service

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("/current/active")
async def get_current_session(db: AsyncSession = Depends(get_db)):
    session = await service.get_current_session(db)
    return ok(await service.engine.serialize(db, session), "Current session fetched successfully")


register_crud_routes(
    router,
    service.engine,
    "sessions",
    flag_path="/{item_id}/set-current",
    flag_message="Session set as current successfully",
)
