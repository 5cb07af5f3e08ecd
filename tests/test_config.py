"""Tests for the environment-driven application settings."""

from __future__ import annotations

from account_server.core.config import Settings


def test_defaults_use_local_sqlite_database() -> None:
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite:///./account.db"
    assert settings.cancel_window_years == 1
    assert settings.log_level == "INFO"


def test_nested_sections_read_double_underscore_variables(monkeypatch) -> None:
    monkeypatch.setenv("TRANSACTIONS__CANCEL_WINDOW_YEARS", "2")
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./other.db")

    settings = Settings(_env_file=None)

    assert settings.cancel_window_years == 2
    assert settings.database_url == "sqlite+aiosqlite:///./other.db"


def test_unknown_variables_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert "environment" not in Settings.model_fields
    assert not hasattr(settings, "environment")
