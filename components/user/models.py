"""User model for the database."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from components.core.database import Base, TimestampMixin


class User(TimestampMixin, Base):
    """User model representing an account holder."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # Hashed password
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)

    # Owned records
    categories = relationship("Category", back_populates="user")
    transactions = relationship("Transaction", back_populates="user")
    budget_categories = relationship("BudgetCategory", back_populates="user")
    goals = relationship("Goal", back_populates="user")
    investments = relationship("Investment", back_populates="user")
