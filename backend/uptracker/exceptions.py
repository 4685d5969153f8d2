"""Errors raised by the uptime engine.

Ping store failures are not listed here: they propagate unchanged from
SQLAlchemy (or whatever store is plugged in).
"""


class UptimeError(Exception):
    """Base class for uptime engine errors."""


class InvalidWindowError(UptimeError, ValueError):
    """Query window with start after end."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Invalid window: start {start!r} is after end {end!r}")


class InvalidPeriodError(UptimeError, ValueError):
    """Period with start after end, or a period list that is not normalized."""
