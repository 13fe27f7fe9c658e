from sqlalchemy import Column, String, Text

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class IncomeSource(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "income_sources"

    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
