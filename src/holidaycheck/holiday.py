from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional, Sequence, Tuple

from .models import DayStatus, HolidayRecord, Language, NextHolidayInfo


def is_weekend(day: dt.date) -> bool:
    return day.weekday() >= 5


def lookup_window(today: dt.date) -> Tuple[int, int]:
    """Years to load so that a next holiday exists even late in December."""
    return today.year, today.year + 1


def merge_holiday_sets(*holiday_sets: Iterable[HolidayRecord]) -> List[HolidayRecord]:
    merged: List[HolidayRecord] = []
    for records in holiday_sets:
        merged.extend(records)
    return merged


def find_holiday(target_date: dt.date, holidays: Iterable[HolidayRecord]) -> Optional[HolidayRecord]:
    # First match in list order wins when the service repeats a date.
    for record in holidays:
        if record.date == target_date:
            return record
    return None


def resolve_day(
    target_date: dt.date,
    holidays: Iterable[HolidayRecord],
    language: Language = Language.ENGLISH,
) -> DayStatus:
    record = find_holiday(target_date, holidays)
    if record is not None:
        return DayStatus.holiday(record.display_name(language))
    if is_weekend(target_date):
        return DayStatus.weekend()
    return DayStatus.weekday()


def find_next_holiday(
    reference_date: dt.date,
    holidays: Sequence[HolidayRecord],
    language: Language = Language.ENGLISH,
) -> Optional[NextHolidayInfo]:
    """Return the earliest holiday strictly after ``reference_date``."""
    upcoming = [record for record in holidays if record.date > reference_date]
    if not upcoming:
        return None
    nearest = min(upcoming, key=lambda record: record.date)
    return NextHolidayInfo(date=nearest.date, name=nearest.display_name(language))


__all__ = [
    "find_holiday",
    "find_next_holiday",
    "is_weekend",
    "lookup_window",
    "merge_holiday_sets",
    "resolve_day",
]
