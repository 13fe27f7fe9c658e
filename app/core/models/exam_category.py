from sqlalchemy import Boolean, Column, Float, String

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class ExamCategory(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "exam_categories"

    name = Column(String(100), nullable=False, index=True)
    is_main = Column(Boolean, nullable=False, default=False)
    total_marks = Column(Float, nullable=False)
    pass_marks = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
