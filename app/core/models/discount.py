from sqlalchemy import Column, Float, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Discount(DocumentMixin, ActiveFlagMixin, Base):
    """
    Discount assigned to a (session, class, batch, fee type, discount type) combination.
    batch_id may be null; a null batch is its own key value, not a wildcard.
    """

    __tablename__ = "discounts"

    session_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    session_name = Column(String(100), nullable=False, default="")
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
    batch_id = Column(Uuid(as_uuid=True), nullable=True)
    batch_name = Column(String(100), nullable=False, default="")
    fee_type_id = Column(Uuid(as_uuid=True), nullable=False)
    fee_type_name = Column(String(100), nullable=False, default="")
    discount_type_id = Column(Uuid(as_uuid=True), nullable=False)
    discount_type_name = Column(String(100), nullable=False, default="")
    discount_amount = Column(Float, nullable=False, default=0)
    discount_percentage = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
