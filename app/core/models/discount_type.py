from sqlalchemy import Boolean, Column, Float, String, Text

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class DiscountType(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "discount_types"

    name = Column(String(100), nullable=False, index=True)
    is_percent = Column(Boolean, nullable=False, default=False)
    discount_amount = Column(Float, nullable=False, default=0)
    percent_amount = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
