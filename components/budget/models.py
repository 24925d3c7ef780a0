"""Budget category model for the database."""

from sqlalchemy import Column, Integer, ForeignKey, Numeric
from sqlalchemy.orm import relationship

from components.core.database import Base, TimestampMixin


class BudgetCategory(TimestampMixin, Base):
    """Spending cap for one category in one month of one year."""
    __tablename__ = "budget_categories"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    month = Column(Integer, nullable=False)  # 1-12
    year = Column(Integer, nullable=False)

    # Relationships
    user = relationship("User", back_populates="budget_categories")
    category = relationship("Category", back_populates="budget_categories")
