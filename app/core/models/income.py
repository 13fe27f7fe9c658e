from sqlalchemy import Column, Date, Float, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Income(DocumentMixin, ActiveFlagMixin, Base):
    """Income entry credited to a bank account. month/year are derived from date for reporting filters."""

    __tablename__ = "incomes"

    account_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    account_name = Column(String(100), nullable=False, default="")
    income_source_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    income_source_name = Column(String(100), nullable=False, default="")
    payment_type_id = Column(Uuid(as_uuid=True), nullable=True)
    payment_type_name = Column(String(100), nullable=False, default="")
    date = Column(Date, nullable=False)
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=False, default="")
    note = Column(Text, nullable=False, default="")
    month = Column(String(20), nullable=False, index=True)
    year = Column(String(4), nullable=False, index=True)
