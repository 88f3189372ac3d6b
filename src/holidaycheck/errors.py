from __future__ import annotations


class HolidayCheckError(RuntimeError):
    """Base class for failures while loading holiday data."""


class FetchError(HolidayCheckError):
    """The request failed outright or returned a non-success status."""


class ParseError(HolidayCheckError):
    """The response body is not a well-formed list of holiday records."""


__all__ = ["FetchError", "HolidayCheckError", "ParseError"]
