from sqlalchemy import Boolean, Column, Date, Integer, String, Text

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class AcademicSession(DocumentMixin, ActiveFlagMixin, Base):
    """
    Academic session (e.g. "2025"). At most one row has is_current = true.
    The current session cannot be deleted until another one is promoted.
    """

    __tablename__ = "sessions"

    name = Column(String(100), nullable=False, index=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    total_working_days = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
    is_current = Column(Boolean, nullable=False, default=False)
