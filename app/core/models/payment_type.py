from sqlalchemy import Column, String, Text

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class PaymentType(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "payment_types"

    name = Column(String(100), nullable=False, index=True)
    details = Column(Text, nullable=False, default="")
