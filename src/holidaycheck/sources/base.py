from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List

import requests

from .. import config
from ..errors import FetchError, ParseError
from ..models import HolidayRecord

DEFAULT_TIMEOUT = config.DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class HolidaySource(ABC):
    """Common interface for public-holiday providers.

    Instances are callable as ``source(country, year)`` so a plain function
    with the same signature can be used wherever a source is expected.
    """

    source_name: str

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or self._default_session()
        self.session.headers.setdefault("Accept", "application/json")

    @staticmethod
    def _default_session() -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = "Mozilla/5.0 (compatible; HolidayCheck/0.1)"
        session.headers["Accept"] = "application/json"
        return session

    def fetch_json(self, url: str, *, timeout: int = DEFAULT_TIMEOUT) -> Any:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("%s request failed for %s: %s", self.source_name, url, exc)
            raise FetchError(f"Failed to fetch {url!r}: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s returned a non-JSON body for %s", self.source_name, url)
            raise ParseError(f"Response from {url!r} is not valid JSON") from exc

    @abstractmethod
    def build_url(self, country: str, year: int) -> str:
        """Return the URL listing the holidays of one country and year."""

    @abstractmethod
    def parse(self, payload: Any, *, url: str) -> List[HolidayRecord]:
        """Turn a decoded response body into holiday records."""

    def fetch_holiday_set(self, country: str, year: int) -> List[HolidayRecord]:
        url = self.build_url(country, year)
        payload = self.fetch_json(url)
        return self.parse(payload, url=url)

    def __call__(self, country: str, year: int) -> List[HolidayRecord]:
        return self.fetch_holiday_set(country, year)


__all__ = ["DEFAULT_TIMEOUT", "HolidaySource"]
