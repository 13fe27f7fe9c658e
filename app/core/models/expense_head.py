from sqlalchemy import Boolean, Column, Date, Float, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class ExpenseHead(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "expense_heads"

    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    amount = Column(Float, nullable=False)
    is_monthly = Column(Boolean, nullable=False, default=False)
    applicable_from = Column(Date, nullable=True)
    ends_at = Column(Date, nullable=True)
    session_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    session_name = Column(String(100), nullable=False, default="")
    category_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    category_name = Column(String(100), nullable=False, default="")
