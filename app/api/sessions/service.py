from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.core.models import AcademicSession
from app.crud.engine import ResourceEngine

from .schemas import SESSION_SCHEMA

engine = ResourceEngine(SESSION_SCHEMA)


async def get_current_session(db: AsyncSession) -> AcademicSession:
    stmt = (
        select(AcademicSession)
        .where(AcademicSession.is_current.is_(True))
        .order_by(AcademicSession.updated_at.desc())
        .limit(1)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(stmt)
    session = result.scalar_one_or_none()
    if session is None:
        raise NotFoundError("No current session found")
    return session
