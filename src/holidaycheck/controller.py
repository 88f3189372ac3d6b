"""Request handling and view derivation for the holiday card.

Each selection change issues one tagged request. The request loads the
current and the following year concurrently and derives a
:class:`~holidaycheck.models.HolidayView`; the view is applied only while
its tag is still the latest one, so a slow response for an old selection
never overwrites the state of a newer one.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, List, Optional

from . import config
from .errors import HolidayCheckError
from .holiday import find_next_holiday, lookup_window, merge_holiday_sets, resolve_day
from .i18n import UI_TEXT, format_date, get_country
from .models import DayKind, DayStatus, HolidayRecord, HolidayView, Language, Selection

logger = logging.getLogger(__name__)

HolidayProvider = Callable[[str, int], List[HolidayRecord]]


def fetch_lookup_window(source: HolidayProvider, country: str, today: dt.date) -> List[HolidayRecord]:
    """Load this year and next year in parallel and merge them in year order."""
    this_year, next_year = lookup_window(today)
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="holiday-fetch") as pool:
        current = pool.submit(source, country, this_year)
        following = pool.submit(source, country, next_year)
        # result() re-raises; the current year is checked first.
        return merge_holiday_sets(current.result(), following.result())


def describe_status(status: DayStatus, language: Language) -> str:
    text = UI_TEXT[language]
    if status.kind == DayKind.HOLIDAY:
        return f"{text.holiday} ({status.holiday_name})"
    if status.kind == DayKind.WEEKEND:
        return text.weekend
    return text.weekday


def build_view(selection: Selection, today: dt.date, holidays: List[HolidayRecord]) -> HolidayView:
    language = selection.language
    tomorrow = today + dt.timedelta(days=1)
    today_status = resolve_day(today, holidays, language)
    tomorrow_status = resolve_day(tomorrow, holidays, language)
    upcoming = find_next_holiday(today, holidays, language)
    if upcoming is None:
        next_text = UI_TEXT[language].no_next_holiday
    else:
        next_text = f"{format_date(upcoming.date, language)} - {upcoming.name}"
    return HolidayView(
        selection=selection,
        today=today,
        tomorrow=tomorrow,
        today_status=today_status,
        tomorrow_status=tomorrow_status,
        next_holiday=upcoming,
        today_text=describe_status(today_status, language),
        tomorrow_text=describe_status(tomorrow_status, language),
        next_holiday_text=next_text,
    )


def loading_view(selection: Selection, today: dt.date) -> HolidayView:
    loading = UI_TEXT[selection.language].loading
    return HolidayView(
        selection=selection,
        today=today,
        tomorrow=today + dt.timedelta(days=1),
        today_text=loading,
        tomorrow_text=loading,
        next_holiday_text=loading,
        loading=True,
    )


def error_view(selection: Selection, today: dt.date, detail: str) -> HolidayView:
    return HolidayView(
        selection=selection,
        today=today,
        tomorrow=today + dt.timedelta(days=1),
        today_text=UI_TEXT[selection.language].error,
        error=detail,
    )


class HolidayController:
    """Owns the current selection and the view derived for it."""

    def __init__(
        self,
        source: HolidayProvider,
        *,
        country: str = config.DEFAULT_COUNTRY,
        language: Language = Language(config.DEFAULT_LANGUAGE),
        today_provider: Callable[[], dt.date] = dt.date.today,
        on_update: Optional[Callable[[HolidayView], None]] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._source = source
        self._today_provider = today_provider
        self._on_update = on_update
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=4, thread_name_prefix="holiday-load")
        self._lock = threading.Lock()
        self._latest_tag = 0
        self._applied_tag = 0
        self._notified_tag = 0
        self._notifying = False
        self._selection = Selection(country=get_country(country).code, language=language)
        self._view = loading_view(self._selection, today_provider())

    @property
    def selection(self) -> Selection:
        with self._lock:
            return self._selection

    @property
    def view(self) -> HolidayView:
        with self._lock:
            return self._view

    def select(self, *, country: Optional[str] = None, language: Optional[Language] = None) -> Future:
        """Switch country and/or language and start loading the new view."""
        updates = {}
        if country is not None:
            updates["country"] = get_country(country).code
        if language is not None:
            updates["language"] = Language(language)
        today = self._today_provider()
        with self._lock:
            selection = self._selection.model_copy(update=updates)
            self._latest_tag += 1
            tag = self._latest_tag
            self._selection = selection
            self._view = loading_view(selection, today)
        return self._executor.submit(self._load, tag, selection, today)

    def refresh(self) -> Future:
        return self.select()

    def _load(self, tag: int, selection: Selection, today: dt.date) -> HolidayView:
        try:
            holidays = fetch_lookup_window(self._source, selection.country, today)
            view = build_view(selection, today, holidays)
        except HolidayCheckError as exc:
            logger.warning("Holiday lookup failed for %s: %s", selection.country, exc)
            view = error_view(selection, today, str(exc))
        except Exception as exc:
            logger.exception("Holiday provider failed for %s", selection.country)
            view = error_view(selection, today, str(exc) or type(exc).__name__)
        self._apply(tag, view)
        return view

    def _apply(self, tag: int, view: HolidayView) -> bool:
        with self._lock:
            if tag != self._latest_tag:
                logger.debug(
                    "Discarding stale result for %s/%s (request %d, latest %d)",
                    view.selection.country,
                    view.selection.language.value,
                    tag,
                    self._latest_tag,
                )
                return False
            self._view = view
            self._applied_tag = tag
        self._notify()
        return True

    def _notify(self) -> None:
        """Deliver the latest applied view to ``on_update``.

        Only one thread runs callbacks at a time. A view applied while a
        callback is still running is delivered by that thread once it
        returns, so listeners always see the newest selection last and a
        slow listener never holds up a load.
        """
        if self._on_update is None:
            return
        with self._lock:
            if self._notifying:
                return
            self._notifying = True
        try:
            while True:
                with self._lock:
                    tag, view = self._applied_tag, self._view
                    if tag == self._notified_tag or tag != self._latest_tag:
                        self._notifying = False
                        return
                    self._notified_tag = tag
                self._on_update(view)
        except BaseException:
            with self._lock:
                self._notifying = False
            raise

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self) -> "HolidayController":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "HolidayController",
    "HolidayProvider",
    "build_view",
    "describe_status",
    "error_view",
    "fetch_lookup_window",
    "loading_view",
]
