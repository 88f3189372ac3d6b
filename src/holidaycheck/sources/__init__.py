"""Adapters for public-holiday data providers."""

from .base import HolidaySource
from .nager import NagerDateSource

__all__ = ["HolidaySource", "NagerDateSource"]
