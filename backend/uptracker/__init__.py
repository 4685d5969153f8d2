"""UptimeTracker uptime engine - uptime periods from sparse ping samples."""
from .exceptions import InvalidPeriodError, InvalidWindowError, UptimeError
from .services import UptimeCalculator, flatten_periods

__all__ = [
    "InvalidPeriodError",
    "InvalidWindowError",
    "UptimeError",
    "UptimeCalculator",
    "flatten_periods",
]
__version__ = "1.0.0"
