from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path

# Ensure the project's src/ is on sys.path so this script runs without PYTHONPATH
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_SRC_PATH = _PROJECT_ROOT / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from holidaycheck import config
from holidaycheck.controller import HolidayController
from holidaycheck.i18n import SUPPORTED_COUNTRIES, UI_TEXT, format_date, get_country
from holidaycheck.models import HolidayView, Language
from holidaycheck.reporting.html_report import write_holiday_card
from holidaycheck.sources.nager import NagerDateSource


def format_card_text(view: HolidayView) -> str:
    language = view.selection.language
    text = UI_TEXT[language]
    country = get_country(view.selection.country)
    lines = [
        f"{text.title} {country.flag} {country.display_name(language)}",
        f"{text.today}: {format_date(view.today, language)}",
        f"  {view.today_text}",
        f"{text.tomorrow}: {format_date(view.tomorrow, language)}",
        f"  {view.tomorrow_text}",
        f"{text.next_holiday}",
        f"  {view.next_holiday_text}",
    ]
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Show today's and tomorrow's public-holiday status")
    parser.add_argument(
        "--country",
        default=config.DEFAULT_COUNTRY,
        type=str.upper,
        choices=[country.code for country in SUPPORTED_COUNTRIES],
    )
    parser.add_argument(
        "--lang",
        default=config.DEFAULT_LANGUAGE,
        choices=[language.value for language in Language],
    )
    parser.add_argument("--date", help="Treat this date (YYYY-MM-DD) as today")
    parser.add_argument(
        "--output",
        nargs="?",
        const="",
        help="Also write the card as HTML (default path under reports/ when no value is given)",
    )
    parser.add_argument("--base-url", help=f"Holiday service root (default: ${config.BASE_URL_ENV} or {config.DEFAULT_BASE_URL})")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    config.configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.date:
        try:
            today = dt.date.fromisoformat(args.date)
        except ValueError:
            parser.error(f"invalid --date {args.date!r}, expected YYYY-MM-DD")
        today_provider = lambda: today  # noqa: E731
    else:
        today_provider = dt.date.today

    source = NagerDateSource(base_url=args.base_url)
    with HolidayController(
        source,
        country=args.country,
        language=Language(args.lang),
        today_provider=today_provider,
    ) as controller:
        view = controller.refresh().result()

    print(format_card_text(view))
    if args.output is not None:
        if args.output:
            output_path = Path(args.output)
        else:
            output_path = config.ensure_report_dir() / f"holidays_{view.selection.country}_{view.selection.language.value}_{view.today.isoformat()}.html"
        write_holiday_card(view, output_path)
        print(f"card written to {output_path}")
    if view.error:
        print(f"error: {view.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
