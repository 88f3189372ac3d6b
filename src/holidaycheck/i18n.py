"""UI strings, the supported country table and date formatting."""

from __future__ import annotations

import datetime as dt
import re
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

from .models import Language

_REGIONAL_INDICATOR_OFFSET = 127397

_JP_WEEKDAYS = ("月", "火", "水", "木", "金", "土", "日")
_EN_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_EN_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_JP_DATE_RE = re.compile(r"^(?P<year>\d{1,4})年 (?P<month>\d{1,2})月 (?P<day>\d{1,2})日 \((?P<weekday>.)\)$")
_EN_DATE_RE = re.compile(r"^(?P<weekday>[A-Z][a-z]{2}), (?P<month>[A-Z][a-z]+) (?P<day>\d{1,2}), (?P<year>\d{1,4})$")


class UiText(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    today: str
    tomorrow: str
    next_holiday: str
    weekday: str
    weekend: str
    holiday: str
    error: str
    no_next_holiday: str
    loading: str


UI_TEXT: Dict[Language, UiText] = {
    Language.ENGLISH: UiText(
        title="Holiday Checker",
        today="Today",
        tomorrow="Tomorrow",
        next_holiday="Next Holiday",
        weekday="Weekday",
        weekend="Weekend",
        holiday="Holiday",
        error="Failed to load holiday data.",
        no_next_holiday="No upcoming holidays found.",
        loading="Loading...",
    ),
    Language.JAPANESE: UiText(
        title="祝日チェッカー",
        today="今日",
        tomorrow="明日",
        next_holiday="次の祝日",
        weekday="平日です",
        weekend="休日です",
        holiday="祝日",
        error="祝日データの取得に失敗しました。",
        no_next_holiday="次の祝日は見つかりませんでした。",
        loading="読み込み中...",
    ),
}


def flag_emoji(country_code: str) -> str:
    """Map each letter of a two-letter code to its regional-indicator symbol."""
    return "".join(chr(_REGIONAL_INDICATOR_OFFSET + ord(char)) for char in country_code.upper())


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    names: Dict[Language, str]

    @property
    def flag(self) -> str:
        return flag_emoji(self.code)

    def display_name(self, language: Language) -> str:
        return self.names[language]


SUPPORTED_COUNTRIES: Tuple[Country, ...] = tuple(
    Country(code=code, names={Language.ENGLISH: en, Language.JAPANESE: jp})
    for code, en, jp in (
        ("JP", "Japan", "日本"),
        ("US", "USA", "アメリカ"),
        ("GB", "UK", "イギリス"),
        ("FR", "France", "フランス"),
        ("DE", "Germany", "ドイツ"),
        ("IT", "Italy", "イタリア"),
        ("CA", "Canada", "カナダ"),
        ("AU", "Australia", "オーストラリア"),
        ("PH", "Philippines", "フィリピン"),
    )
)


def get_country(code: str) -> Country:
    wanted = code.upper()
    for country in SUPPORTED_COUNTRIES:
        if country.code == wanted:
            return country
    raise ValueError(f"Unsupported country code: {code!r}")


def format_date(day: dt.date, language: Language) -> str:
    if language == Language.JAPANESE:
        weekday = _JP_WEEKDAYS[day.weekday()]
        return f"{day.year}年 {day.month}月 {day.day}日 ({weekday})"
    weekday = _EN_WEEKDAYS[day.weekday()]
    month = _EN_MONTHS[day.month - 1]
    return f"{weekday}, {month} {day.day}, {day.year}"


def parse_date(text: str, language: Language) -> dt.date:
    """Inverse of :func:`format_date`."""
    if language == Language.JAPANESE:
        match = _JP_DATE_RE.match(text.strip())
        if not match:
            raise ValueError(f"Not a Japanese display date: {text!r}")
        month = int(match.group("month"))
    else:
        match = _EN_DATE_RE.match(text.strip())
        if not match:
            raise ValueError(f"Not an English display date: {text!r}")
        try:
            month = _EN_MONTHS.index(match.group("month")) + 1
        except ValueError:
            raise ValueError(f"Unknown month name in {text!r}") from None
    return dt.date(int(match.group("year")), month, int(match.group("day")))


__all__ = [
    "Country",
    "SUPPORTED_COUNTRIES",
    "UI_TEXT",
    "UiText",
    "flag_emoji",
    "format_date",
    "get_country",
    "parse_date",
]
