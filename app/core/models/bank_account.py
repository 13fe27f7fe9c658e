from sqlalchemy import Boolean, Column, Float, String, Text, UniqueConstraint

from app.core.models.base import DocumentMixin
from app.db.session import Base


class BankAccount(DocumentMixin, Base):
    """School bank/cash account. At most one row has is_default = true."""

    __tablename__ = "bank_accounts"
    __table_args__ = (UniqueConstraint("account_number", name="uq_bank_account_number"),)

    name = Column(String(100), nullable=False)
    account_number = Column(String(50), nullable=False)
    branch_name = Column(String(100), nullable=False, default="")
    current_balance = Column(Float, nullable=False, default=0)
    details = Column(Text, nullable=False, default="")
    is_default = Column(Boolean, nullable=False, default=False)
