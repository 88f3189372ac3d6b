"""Public-holiday status checker for a fixed set of countries."""

from .holiday import find_next_holiday, merge_holiday_sets, resolve_day
from .models import DayKind, DayStatus, HolidayRecord, Language, NextHolidayInfo

__all__ = [
    "DayKind",
    "DayStatus",
    "HolidayRecord",
    "Language",
    "NextHolidayInfo",
    "find_next_holiday",
    "merge_holiday_sets",
    "resolve_day",
]
