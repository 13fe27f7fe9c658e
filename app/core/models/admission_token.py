from sqlalchemy import Boolean, Column, DateTime, Float, String, UniqueConstraint, Uuid

from app.core.models.base import DocumentMixin
from app.db.session import Base


class AdmissionToken(DocumentMixin, Base):
    __tablename__ = "admission_tokens"
    __table_args__ = (UniqueConstraint("token_number", name="uq_admission_token_number"),)

    token_number = Column(String(40), nullable=False)
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
    batch_id = Column(Uuid(as_uuid=True), nullable=True)
    section_id = Column(Uuid(as_uuid=True), nullable=True)
    session_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    session_name = Column(String(100), nullable=False, default="")
    monthly_fee = Column(Float, nullable=False, default=0)
    send_attendance_sms = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="active", index=True)
    is_used = Column(Boolean, nullable=False, default=False)
    used_at = Column(DateTime(timezone=True), nullable=True)
    used_by = Column(String(100), nullable=True)
