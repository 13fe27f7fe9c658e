from sqlalchemy import JSON, Column, Float, Integer, String, Uuid

from app.core.models.base import DocumentMixin
from app.db.session import Base


class ExamResult(DocumentMixin, Base):
    """
    Result of one student in one exam category.
    sms_logs is append-only: every dispatched result SMS adds one entry, entries are never rewritten.
    """

    __tablename__ = "results"

    student_id = Column(String(50), nullable=False, index=True)
    student_name = Column(String(200), nullable=False)
    exam_category_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    exam_category_name = Column(String(100), nullable=False, default="")
    average_marks = Column(Float, nullable=False, default=0)
    average_letter_grade = Column(String(5), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    total_present = Column(Integer, nullable=False, default=0)
    total_absent = Column(Integer, nullable=False, default=0)
    phone_number = Column(String(20), nullable=False, default="")
    sms_logs = Column(JSON, nullable=False, default=list)
