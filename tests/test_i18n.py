import datetime as dt

import pytest

from holidaycheck.i18n import (
    SUPPORTED_COUNTRIES,
    UI_TEXT,
    flag_emoji,
    format_date,
    get_country,
    parse_date,
)
from holidaycheck.models import Language


def test_format_date_english():
    assert format_date(dt.date(2024, 1, 1), Language.ENGLISH) == "Mon, January 1, 2024"
    assert format_date(dt.date(2025, 12, 28), Language.ENGLISH) == "Sun, December 28, 2025"


def test_format_date_japanese():
    assert format_date(dt.date(2024, 1, 1), Language.JAPANESE) == "2024年 1月 1日 (月)"
    assert format_date(dt.date(2024, 1, 7), Language.JAPANESE) == "2024年 1月 7日 (日)"
    assert format_date(dt.date(2024, 11, 23), Language.JAPANESE) == "2024年 11月 23日 (土)"


@pytest.mark.parametrize("language", list(Language))
def test_display_date_parses_back_to_same_lookup_key(language):
    day = dt.date(2023, 12, 20)
    while day <= dt.date(2025, 1, 10):
        text = format_date(day, language)
        parsed = parse_date(text, language)
        assert parsed == day
        assert parsed.isoformat() == day.isoformat()
        day += dt.timedelta(days=7)


@pytest.mark.parametrize(
    "text, language",
    [
        ("2024-01-01", Language.ENGLISH),
        ("Mon, Janvier 1, 2024", Language.ENGLISH),
        ("Mon, January 1, 2024", Language.JAPANESE),
    ],
)
def test_parse_date_rejects_other_formats(text, language):
    with pytest.raises(ValueError):
        parse_date(text, language)


def test_flag_emoji_uses_regional_indicators():
    assert flag_emoji("JP") == "\U0001F1EF\U0001F1F5"
    assert flag_emoji("gb") == "\U0001F1EC\U0001F1E7"


def test_supported_countries_table():
    codes = [country.code for country in SUPPORTED_COUNTRIES]
    assert codes == ["JP", "US", "GB", "FR", "DE", "IT", "CA", "AU", "PH"]
    for country in SUPPORTED_COUNTRIES:
        assert country.display_name(Language.ENGLISH)
        assert country.display_name(Language.JAPANESE)
        assert len(country.flag) == 2


def test_get_country():
    assert get_country("de").display_name(Language.JAPANESE) == "ドイツ"
    with pytest.raises(ValueError):
        get_country("XX")


def test_ui_text_covers_both_languages():
    assert set(UI_TEXT) == set(Language)
    assert UI_TEXT[Language.ENGLISH].title == "Holiday Checker"
    assert UI_TEXT[Language.JAPANESE].weekend == "休日です"
