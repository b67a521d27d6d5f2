"""Tests for application settings."""
import importlib

import pytest


@pytest.fixture
def settings(monkeypatch):
    import backend.app.settings as settings_module
    yield settings_module
    # Leave the module as the rest of the suite expects it
    monkeypatch.undo()
    importlib.reload(settings_module)


def test_database_url_respects_env_var(monkeypatch, settings):
    """DATABASE_URL uses the env var when set."""
    monkeypatch.setenv("DATABASE_URL", "sqlite:////var/data/puzzles.db")
    importlib.reload(settings)

    assert settings.DATABASE_URL == "sqlite:////var/data/puzzles.db"


def test_database_url_defaults_to_local_sqlite(monkeypatch, settings):
    """DATABASE_URL falls back to repo-root puzzles.db when env var is unset."""
    monkeypatch.delenv("DATABASE_URL", raising=False)
    importlib.reload(settings)

    assert settings.DATABASE_URL.startswith("sqlite:///")
    assert settings.DATABASE_URL.endswith("puzzles.db")


def test_allowed_origins_split_and_trimmed(monkeypatch, settings):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example ,")
    importlib.reload(settings)

    assert settings.ALLOWED_ORIGINS == ["https://a.example", "https://b.example"]


def test_identity_url_trailing_slash_stripped(monkeypatch, settings):
    monkeypatch.setenv("USERS_SERVICE_API_URL", "https://users.example/api/")
    importlib.reload(settings)

    assert settings.USERS_SERVICE_API_URL == "https://users.example/api"


def test_history_limit_defaults_to_ten(monkeypatch, settings):
    monkeypatch.delenv("HISTORY_LIMIT", raising=False)
    importlib.reload(settings)

    assert settings.HISTORY_LIMIT == 10
