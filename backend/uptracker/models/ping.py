"""Ping model - timestamped up/down samples for each check."""
from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, Boolean, Index
from sqlalchemy.orm import relationship

from ..database import Base


class Ping(Base):
    """Single up/down observation of a check. Never mutated once stored."""
    
    __tablename__ = "pings"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    check_id = Column(Integer, ForeignKey("checks.id", ondelete="CASCADE"), nullable=False)
    timestamp = Column(DateTime, nullable=False)  # naive UTC
    is_up = Column(Boolean, nullable=False)
    response_time_ms = Column(Float, nullable=True)
    monitor_name = Column(String, nullable=True)  # Probe that produced the sample
    details = Column(String, nullable=True)  # Error message if down
    
    # Relationship
    check = relationship("Check", back_populates="pings")
    
    def __repr__(self):
        state = "up" if self.is_up else "down"
        return f"<Ping check={self.check_id} at={self.timestamp} {state}>"


# Backs both point lookups and range scans of the ping store
Index("ix_pings_check_id_timestamp", Ping.check_id, Ping.timestamp.desc())
