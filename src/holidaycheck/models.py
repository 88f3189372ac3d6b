from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    ENGLISH = "en"
    JAPANESE = "jp"


class DayKind(str, Enum):
    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    WEEKDAY = "weekday"


class HolidayRecord(BaseModel):
    """One public holiday as returned by the PublicHolidays endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: dt.date
    local_name: str = Field(alias="localName")
    name: str
    country_code: str = Field(alias="countryCode")

    def display_name(self, language: Language) -> str:
        if language == Language.JAPANESE:
            return self.local_name
        return self.name


class DayStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DayKind
    holiday_name: Optional[str] = None

    @classmethod
    def holiday(cls, name: str) -> "DayStatus":
        return cls(kind=DayKind.HOLIDAY, holiday_name=name)

    @classmethod
    def weekend(cls) -> "DayStatus":
        return cls(kind=DayKind.WEEKEND)

    @classmethod
    def weekday(cls) -> "DayStatus":
        return cls(kind=DayKind.WEEKDAY)

    @property
    def is_day_off(self) -> bool:
        return self.kind in (DayKind.HOLIDAY, DayKind.WEEKEND)


class NextHolidayInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: dt.date
    name: str


class Selection(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: str
    language: Language = Language.ENGLISH


class HolidayView(BaseModel):
    """Everything the card shows for one selection."""

    selection: Selection
    today: dt.date
    tomorrow: dt.date
    today_status: Optional[DayStatus] = None
    tomorrow_status: Optional[DayStatus] = None
    next_holiday: Optional[NextHolidayInfo] = None
    today_text: str = ""
    tomorrow_text: str = ""
    next_holiday_text: str = ""
    loading: bool = False
    error: Optional[str] = None
