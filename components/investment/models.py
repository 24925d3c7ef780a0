"""Investment model for the database."""

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from components.core.database import Base, TimestampMixin


class Investment(TimestampMixin, Base):
    """A holding with its current and initial value."""
    __tablename__ = "investments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    value = Column(Numeric(12, 2), nullable=False)
    initial_value = Column(Numeric(12, 2), nullable=False)
    initial_date = Column(Date, nullable=False)
    institution = Column(String(100), nullable=False)
    return_rate = Column(Numeric(6, 2), nullable=True)
    notes = Column(Text, nullable=True)

    user = relationship("User", back_populates="investments")
