"""Financial goal model for the database."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from components.core.database import Base, TimestampMixin


class Goal(TimestampMixin, Base):
    """Savings target with a deadline."""
    __tablename__ = "goals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    target = Column(Numeric(10, 2), nullable=False)
    current_amount = Column(Numeric(10, 2), nullable=False, default=0)
    deadline = Column(Date, nullable=False)
    category = Column(String(100), nullable=False)  # free-text label
    notes = Column(Text, nullable=True)

    user = relationship("User", back_populates="goals")
