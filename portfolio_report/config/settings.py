"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_QUOTE_BASE_URL = "https://download.finance.yahoo.com/d/quotes.csv"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the quote report entry points."""

    app_name: str = "asx-portfolio-report"
    app_version: str = "1.0.0"
    quote_base_url: str = DEFAULT_QUOTE_BASE_URL
    market_suffix: str = ".AX"
    request_timeout_seconds: float = 15.0
    quote_max_workers: int = 1
    log_level: str = "WARNING"


def _as_int(value: str | None, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _as_float(value: str | None, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


def get_settings() -> Settings:
    """Load runtime settings from environment variables."""
    load_dotenv()

    return Settings(
        quote_base_url=os.getenv("QUOTE_BASE_URL", DEFAULT_QUOTE_BASE_URL).strip() or DEFAULT_QUOTE_BASE_URL,
        market_suffix=os.getenv("QUOTE_MARKET_SUFFIX", ".AX").strip(),
        request_timeout_seconds=_as_float(os.getenv("REQUEST_TIMEOUT_SECONDS"), 15.0),
        quote_max_workers=max(1, _as_int(os.getenv("QUOTE_MAX_WORKERS"), 1)),
        log_level=os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
    )
