"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from entrez_records.config import Settings, get_settings


def test_defaults(monkeypatch):
    for var in ("NCBI_API_KEY", "NCBI_EMAIL", "NCBI_TOOL", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ncbi_api_key == ""
    assert settings.ncbi_tool == "entrez-records"
    assert settings.log_level == "INFO"
    assert settings.timeout_seconds == 30.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("NCBI_API_KEY", "abc123")
    monkeypatch.setenv("NCBI_EMAIL", "lab@example.org")
    monkeypatch.setenv("TIMEOUT_SECONDS", "5")

    settings = Settings(_env_file=None)

    assert settings.ncbi_api_key == "abc123"
    assert settings.ncbi_email == "lab@example.org"
    assert settings.timeout_seconds == 5.0


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("NCBI_TOOL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("NCBI_TOOL=from-dotenv\nUNRELATED_SETTING=1\n")

    settings = Settings(_env_file=env_file)

    assert settings.ncbi_tool == "from-dotenv"


@pytest.mark.parametrize(
    "api_key, requests_per_second, expected",
    [
        ("", None, 3.0),
        ("KEY", None, 10.0),
        ("", 1.5, 1.5),
        ("KEY", 2.0, 2.0),
    ],
)
def test_effective_rate_limit(api_key, requests_per_second, expected):
    settings = Settings(
        _env_file=None, ncbi_api_key=api_key, requests_per_second=requests_per_second
    )
    assert settings.effective_rate_limit == expected


def test_settings_are_frozen():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.log_level = "DEBUG"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
