from sqlalchemy import Column, String

from app.core.models.base import ActiveFlagMixin, DocumentMixin
from app.db.session import Base


class ExpenseCategory(DocumentMixin, ActiveFlagMixin, Base):
    __tablename__ = "expense_categories"

    name = Column(String(100), nullable=False, index=True)
