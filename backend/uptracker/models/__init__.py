"""Database models."""
from .check import Check
from .ping import Ping

__all__ = ["Check", "Ping"]
