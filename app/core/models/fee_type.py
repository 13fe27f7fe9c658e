from sqlalchemy import Boolean, Column, Date, Float, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class FeeType(DocumentMixin, ActiveFlagMixin, Base):
    """Fee definition for one class in one session. Name is unique per (class, session)."""

    __tablename__ = "fee_types"

    name = Column(String(100), nullable=False)
    amount = Column(Float, nullable=False)
    is_monthly = Column(Boolean, nullable=False, default=False)
    fee_applicable = Column(String(20), nullable=False, default="all_students")
    fee_ends_date = Column(Date, nullable=True)
    description = Column(Text, nullable=False, default="")
    session_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    session_name = Column(String(100), nullable=False, default="")
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
