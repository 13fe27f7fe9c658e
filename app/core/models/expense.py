from sqlalchemy import JSON, Column, Date, Float, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Expense(DocumentMixin, ActiveFlagMixin, Base):
    """
    Expense paid from a bank account. expense_items holds one entry per expense head with the
    category and head names cached; total_amount is the sum of the entry subtotals.
    """

    __tablename__ = "expenses"

    account_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    account_name = Column(String(100), nullable=False, default="")
    date = Column(Date, nullable=False)
    expense_items = Column(JSON, nullable=False, default=list)
    total_amount = Column(Float, nullable=False, default=0)
    payment_status = Column(String(20), nullable=False, default="Cash")
    description = Column(Text, nullable=False, default="")
    note = Column(Text, nullable=False, default="")
    month = Column(String(20), nullable=False, index=True)
    year = Column(String(4), nullable=False, index=True)
