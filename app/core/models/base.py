"""Columns shared by every resource table."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Uuid


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentMixin:
    """id plus creation/modification timestamps. The engine sets both timestamps explicitly."""

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class ActiveFlagMixin:
    """Enable/disable flag. Soft-delete resources also use it as their delete marker."""

    is_active = Column(Boolean, nullable=False, default=True)
