from sqlalchemy import Column, DateTime, Float, Integer, String

from app.core.models.base import DocumentMixin, utcnow
from app.db.session import Base


class SmsBalance(DocumentMixin, Base):
    """Single row keyed by kind='current'. Created lazily on first read."""

    __tablename__ = "sms_balance"

    kind = Column(String(20), nullable=False, unique=True, default="current")
    total_sms = Column(Integer, nullable=False, default=0)
    used_sms = Column(Integer, nullable=False, default=0)
    remaining_sms = Column(Integer, nullable=False, default=0)


class SmsPurchase(DocumentMixin, Base):
    """SMS bundle purchase request. Manual payments wait for approval before crediting the balance."""

    __tablename__ = "sms_purchases"

    amount = Column(Integer, nullable=False)
    price_per_sms = Column(Float, nullable=False)
    base_price = Column(Float, nullable=False)
    online_charge = Column(Float, nullable=False, default=0)
    total_price = Column(Float, nullable=False)
    payment_method = Column(String(20), nullable=False)
    transaction_id = Column(String(100), nullable=True)
    phone_number = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, index=True)
    purchase_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    approved_by = Column(String(100), nullable=True)
