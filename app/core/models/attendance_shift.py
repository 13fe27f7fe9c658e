from sqlalchemy import Boolean, Column, Integer, String, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class AttendanceShift(DocumentMixin, ActiveFlagMixin, Base):
    """Smart attendance shift: entry/exit times ("HH:MM") for students and/or teachers."""

    __tablename__ = "attendance_shifts"

    shift_name = Column(String(100), nullable=False, index=True)
    class_id = Column(Uuid(as_uuid=True), nullable=True)
    section_id = Column(Uuid(as_uuid=True), nullable=True)
    student_entry_time = Column(String(10), nullable=False, default="")
    student_exit_time = Column(String(10), nullable=False, default="")
    teacher_entry_time = Column(String(10), nullable=False, default="")
    teacher_exit_time = Column(String(10), nullable=False, default="")
    count_late_after = Column(Integer, nullable=False, default=0)
    count_early_exit_before = Column(Integer, nullable=False, default=0)
    timezone = Column(String(50), nullable=False, default="Asia/Dhaka")
    send_sms = Column(Boolean, nullable=False, default=False)
    sms_type = Column(String(20), nullable=True)
    absent_after = Column(String(10), nullable=True)
    institute_short_name = Column(String(50), nullable=False, default="")
    enable_absent_sms = Column(Boolean, nullable=False, default=False)
    send_sms_to = Column(String(20), nullable=False, default="to_institute")
