from sqlalchemy import Boolean, Column, Date, Float, String

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class FineType(DocumentMixin, ActiveFlagMixin, Base):
    """Fine rule: a fixed fine_amount, or a percentage when is_parcel is set."""

    __tablename__ = "fine_types"

    name = Column(String(100), nullable=False, index=True)
    is_parcel = Column(Boolean, nullable=False, default=False)
    fine_amount = Column(Float, nullable=False, default=0)
    percentage = Column(Float, nullable=False, default=0)
    is_absence_fine = Column(Boolean, nullable=False, default=False)
    fixed_date = Column(Date, nullable=True)
