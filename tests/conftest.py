import json
from pathlib import Path

import pytest
import requests
from pydantic import TypeAdapter

from holidaycheck.models import HolidayRecord

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture_text(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


def load_records(name: str) -> list[HolidayRecord]:
    return TypeAdapter(list[HolidayRecord]).validate_python(json.loads(load_fixture_text(name)))


def make_response(url: str, status: int = 200, body: str = "[]") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.reason = "OK" if status < 400 else "Error"
    response.encoding = "utf-8"
    response._content = body.encode("utf-8")
    return response


class FakeSession(requests.Session):
    """Session returning canned responses (or raising canned errors) per URL."""

    def __init__(self, outcomes):
        super().__init__()
        self.outcomes = outcomes
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        outcome = self.outcomes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def jp_2024():
    return load_records("nager_jp_2024.json")


@pytest.fixture
def jp_2025():
    return load_records("nager_jp_2025.json")


@pytest.fixture
def jp_source(jp_2024, jp_2025):
    by_year = {2024: jp_2024, 2025: jp_2025}

    def source(country, year):
        assert country == "JP"
        return list(by_year.get(year, []))

    return source
