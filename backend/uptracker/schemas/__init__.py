"""Pydantic schemas for engine results."""
from .report import UptimeSummary

__all__ = ["UptimeSummary"]
