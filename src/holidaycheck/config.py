from __future__ import annotations

import logging
import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent
TEMPLATE_DIR = PACKAGE_ROOT / "templates"
REPORT_DIR = PROJECT_ROOT / "reports"

DEFAULT_BASE_URL = "https://date.nager.at"
BASE_URL_ENV = "HOLIDAYCHECK_BASE_URL"
DEFAULT_TIMEOUT = 20
DEFAULT_COUNTRY = "JP"
DEFAULT_LANGUAGE = "en"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def base_url() -> str:
    """Return the holiday service root, honouring the environment override."""
    url = os.environ.get(BASE_URL_ENV) or DEFAULT_BASE_URL
    return url.rstrip("/")


def ensure_report_dir() -> Path:
    """Create the report directory if needed and return it."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    return REPORT_DIR


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
