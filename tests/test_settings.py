"""Tests for environment settings."""

import pytest

from mime_scout.config import Settings


@pytest.fixture(autouse=True)
def clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MIME_SCOUT_* variables from the environment."""
    for key in [
        "MIME_SCOUT_DATABASE",
        "MIME_SCOUT_TRANSPORT",
        "MIME_SCOUT_HTTP_HOST",
        "MIME_SCOUT_HTTP_PORT",
        "MIME_SCOUT_LOG_LEVEL",
        "MIME_SCOUT_LOG_COLORS",
        "MIME_SCOUT_LOG_PAYLOADS",
        "MIME_SCOUT_SLOW_THRESHOLD_MS",
        "MIME_SCOUT_INCLUDE_TRACEBACK",
    ]:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    """Unset variables give defaults."""
    settings = Settings.from_env()

    assert settings.database_path is None
    assert settings.transport == "http"
    assert settings.http_host == "0.0.0.0"
    assert settings.http_port == 8000
    assert settings.log_level == "INFO"
    assert settings.log_colors is True
    assert settings.log_payloads is False
    assert settings.slow_threshold_ms == 1000
    assert settings.include_traceback is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables override defaults."""
    monkeypatch.setenv("MIME_SCOUT_DATABASE", "/srv/mime/db.json")
    monkeypatch.setenv("MIME_SCOUT_TRANSPORT", "STDIO")
    monkeypatch.setenv("MIME_SCOUT_HTTP_PORT", "9000")
    monkeypatch.setenv("MIME_SCOUT_LOG_LEVEL", "debug")
    monkeypatch.setenv("MIME_SCOUT_LOG_COLORS", "false")
    monkeypatch.setenv("MIME_SCOUT_INCLUDE_TRACEBACK", "yes")

    settings = Settings.from_env()

    assert settings.database_path == "/srv/mime/db.json"
    assert settings.transport == "stdio"
    assert settings.http_port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.log_colors is False
    assert settings.include_traceback is True


def test_blank_database_path_means_bundled(monkeypatch: pytest.MonkeyPatch) -> None:
    """A blank database variable is ignored."""
    monkeypatch.setenv("MIME_SCOUT_DATABASE", "   ")

    assert Settings.from_env().database_path is None


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    """Invalid ints and transports fall back to defaults."""
    monkeypatch.setenv("MIME_SCOUT_HTTP_PORT", "eighty")
    monkeypatch.setenv("MIME_SCOUT_TRANSPORT", "carrier-pigeon")

    settings = Settings.from_env()

    assert settings.http_port == 8000
    assert settings.transport == "http"
