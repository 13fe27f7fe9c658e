from sqlalchemy import Column, String

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class HolidayType(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "holiday_types"

    name = Column(String(100), nullable=False, index=True)
