from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .. import config
from ..i18n import SUPPORTED_COUNTRIES, UI_TEXT, format_date
from ..models import HolidayView, Language


def _status_is_day_off(view: HolidayView, which: str) -> bool:
    status = getattr(view, f"{which}_status")
    return status is not None and status.is_day_off


def render_holiday_card(view: HolidayView, *, template_dir: Path = config.TEMPLATE_DIR) -> str:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    template = env.get_template("holiday_card.html")
    language = view.selection.language
    return template.render(
        view=view,
        text=UI_TEXT[language],
        language=language.value,
        languages=[lang.value for lang in Language],
        countries=[
            {
                "code": country.code,
                "flag": country.flag,
                "name": country.display_name(language),
                "active": country.code == view.selection.country,
            }
            for country in SUPPORTED_COUNTRIES
        ],
        today_label=format_date(view.today, language),
        tomorrow_label=format_date(view.tomorrow, language),
        today_off=_status_is_day_off(view, "today"),
        tomorrow_off=_status_is_day_off(view, "tomorrow"),
    )


def write_holiday_card(view: HolidayView, output_path: Path, *, template_dir: Path = config.TEMPLATE_DIR) -> None:
    html = render_holiday_card(view, template_dir=template_dir)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")


__all__ = ["render_holiday_card", "write_holiday_card"]
