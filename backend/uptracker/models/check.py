"""Check model - targets being monitored."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from ..database import Base


class Check(Base):
    """A monitored target. The engine only relies on its id."""
    
    __tablename__ = "checks"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    pings = relationship("Ping", back_populates="check", cascade="all, delete-orphan")
