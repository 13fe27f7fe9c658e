from sqlalchemy import Boolean, Column, DateTime, Float, String, UniqueConstraint, Uuid

from app.core.models.base import DocumentMixin
from app.db.session import Base


class AdmitCard(DocumentMixin, Base):
    __tablename__ = "admit_cards"
    __table_args__ = (UniqueConstraint("admit_card_number", name="uq_admit_card_number"),)

    admit_card_number = Column(String(40), nullable=False)
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
    batch_id = Column(Uuid(as_uuid=True), nullable=True)
    section_id = Column(Uuid(as_uuid=True), nullable=True)
    session_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    session_name = Column(String(100), nullable=False, default="")
    exam_category_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    exam_name = Column(String(100), nullable=False, default="")
    monthly_fee = Column(Float, nullable=False, default=0)
    send_attendance_sms = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="generated")
    printed = Column(Boolean, nullable=False, default=False)
    printed_at = Column(DateTime(timezone=True), nullable=True)
