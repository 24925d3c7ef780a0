"""Category model for the database."""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from components.core.database import Base, TimestampMixin


class Category(TimestampMixin, Base):
    """Named bucket for transactions and budgets (e.g. Food, Income)."""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(10), nullable=False)  # income | expense
    color = Column(String(20), nullable=True)
    icon = Column(String(50), nullable=True)

    # Relationships
    user = relationship("User", back_populates="categories")
    transactions = relationship("Transaction", back_populates="category")
    budget_categories = relationship("BudgetCategory", back_populates="category")
