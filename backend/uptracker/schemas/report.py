"""Availability summary schemas."""
from typing import Any
from pydantic import BaseModel, Field


class UptimeSummary(BaseModel):
    """Availability of a check over one window, derived from its uptime periods."""
    start: Any  # Window bounds as given: datetime or epoch milliseconds
    end: Any
    uptime_ms: float
    downtime_ms: float
    availability: float = Field(..., ge=0, le=1)  # Ratio, not percentage
    period_count: int
