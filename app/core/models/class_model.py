"""Classes (e.g. Six, Seven). Model named SchoolClass to avoid Python 'class' keyword."""
from sqlalchemy import Column, String, Text

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class SchoolClass(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "classes"

    name = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
