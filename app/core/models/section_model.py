from sqlalchemy import Column, String, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Section(DocumentMixin, ActiveFlagMixin, Base):
    """Section of a class, optionally narrowed to one batch of that class."""

    __tablename__ = "sections"

    name = Column(String(50), nullable=False)
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
    batch_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    batch_name = Column(String(100), nullable=False, default="")
