from portfolio_report.config import settings as settings_module
from portfolio_report.config.settings import DEFAULT_QUOTE_BASE_URL, get_settings


def _no_dotenv(monkeypatch) -> None:
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)
    for name in ("QUOTE_BASE_URL", "QUOTE_MARKET_SUFFIX", "REQUEST_TIMEOUT_SECONDS", "QUOTE_MAX_WORKERS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults(monkeypatch) -> None:
    _no_dotenv(monkeypatch)
    settings = get_settings()
    assert settings.quote_base_url == DEFAULT_QUOTE_BASE_URL
    assert settings.market_suffix == ".AX"
    assert settings.request_timeout_seconds == 15.0
    assert settings.quote_max_workers == 1
    assert settings.log_level == "WARNING"


def test_settings_from_environment(monkeypatch) -> None:
    _no_dotenv(monkeypatch)
    monkeypatch.setenv("QUOTE_MARKET_SUFFIX", ".NZ")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("QUOTE_MAX_WORKERS", "4")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.market_suffix == ".NZ"
    assert settings.request_timeout_seconds == 3.5
    assert settings.quote_max_workers == 4
    assert settings.log_level == "DEBUG"


def test_settings_ignore_invalid_numbers(monkeypatch) -> None:
    _no_dotenv(monkeypatch)
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("QUOTE_MAX_WORKERS", "-3")
    settings = get_settings()
    assert settings.request_timeout_seconds == 15.0
    assert settings.quote_max_workers == 1
