from __future__ import annotations

import logging
from typing import Any, List

import requests
from pydantic import TypeAdapter, ValidationError

from .. import config
from ..errors import ParseError
from ..models import HolidayRecord
from .base import HolidaySource

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[HolidayRecord])


class NagerDateSource(HolidaySource):
    """Public holidays from the Nager.Date ``PublicHolidays`` endpoint."""

    source_name = "nager"

    def __init__(self, session: requests.Session | None = None, *, base_url: str | None = None) -> None:
        super().__init__(session)
        self.base_url = (base_url or config.base_url()).rstrip("/")

    def build_url(self, country: str, year: int) -> str:
        return f"{self.base_url}/api/v3/PublicHolidays/{year}/{country.upper()}"

    def parse(self, payload: Any, *, url: str) -> List[HolidayRecord]:
        if not isinstance(payload, list):
            logger.warning("%s returned %s instead of a list for %s", self.source_name, type(payload).__name__, url)
            raise ParseError(f"Expected a JSON array from {url!r}, got {type(payload).__name__}")
        try:
            records = _RECORDS.validate_python(payload)
        except ValidationError as exc:
            logger.warning("%s returned malformed holiday records for %s: %s", self.source_name, url, exc)
            raise ParseError(f"Malformed holiday record from {url!r}: {exc}") from exc
        logger.debug("Loaded %d holidays from %s", len(records), url)
        return records


__all__ = ["NagerDateSource"]
