import datetime as dt

from holidaycheck.controller import build_view, error_view
from holidaycheck.holiday import merge_holiday_sets
from holidaycheck.models import HolidayRecord, Language, Selection
from holidaycheck.reporting.html_report import render_holiday_card, write_holiday_card


def test_render_english_card(jp_2024, jp_2025):
    view = build_view(Selection(country="JP"), dt.date(2024, 12, 30), merge_holiday_sets(jp_2024, jp_2025))

    html = render_holiday_card(view)

    assert "<h1>Holiday Checker</h1>" in html
    assert 'class="lang-button active" data-lang="en"' in html
    assert 'class="country-button active" data-country="JP"' in html
    assert "\U0001F1EF\U0001F1F5" in html
    assert "Today: Mon, December 30, 2024" in html
    assert "Wed, January 1, 2025 - New Year&#39;s Day" in html


def test_render_japanese_card_marks_day_off(jp_2024):
    selection = Selection(country="JP", language=Language.JAPANESE)
    view = build_view(selection, dt.date(2024, 1, 1), jp_2024)

    html = render_holiday_card(view)

    assert "祝日チェッカー" in html
    assert "フィリピン" in html
    assert '<p class="result-content holiday">祝日 (元日)</p>' in html
    # 2024-01-02 is an ordinary Tuesday.
    assert '<p class="result-content">平日です</p>' in html


def test_render_escapes_holiday_names():
    record = HolidayRecord(date=dt.date(2024, 3, 1), local_name="<b>x</b>", name="<b>x</b>", country_code="US")
    view = build_view(Selection(country="US"), dt.date(2024, 2, 1), [record])

    html = render_holiday_card(view)

    assert "<b>x</b>" not in html
    assert "&lt;b&gt;x&lt;/b&gt;" in html


def test_write_error_card(tmp_path):
    view = error_view(Selection(country="FR"), dt.date(2024, 6, 1), "boom")
    output = tmp_path / "cards" / "fr.html"

    write_holiday_card(view, output)

    html = output.read_text(encoding="utf-8")
    assert "Failed to load holiday data." in html
    assert "boom" not in html
