from sqlalchemy import JSON, Column, String, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Holiday(DocumentMixin, ActiveFlagMixin, Base):
    """
    Holiday made of one or more date ranges:
    dates = [{"fromDate": "2024-01-01", "toDate": "2024-01-03", "isFullDay": true}, ...]
    Deleting sets is_active = false.
    """

    __tablename__ = "holidays"

    name = Column(String(200), nullable=False)
    session_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    holiday_type_id = Column(Uuid(as_uuid=True), nullable=True)
    holiday_type_name = Column(String(100), nullable=False, default="")
    dates = Column(JSON, nullable=False, default=list)
