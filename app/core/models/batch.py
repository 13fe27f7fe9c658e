from sqlalchemy import Column, String, Text, Uuid

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class Batch(DocumentMixin, ActiveFlagMixin, Base):
    """Batch inside a class. class_name is a cached copy of classes.name taken at write time."""

    __tablename__ = "batches"

    name = Column(String(100), nullable=False)
    class_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    class_name = Column(String(50), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
