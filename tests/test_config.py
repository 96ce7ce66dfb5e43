"""Settings — defaults and environment normalization."""

import pytest

from videogame_api.config import Settings


def test_defaults_use_volatile_in_memory_store(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.environment == "production"
    assert not settings.is_development


@pytest.mark.parametrize("raw", ["Development", "DEV", " development "])
def test_environment_aliases_normalize_to_development(monkeypatch, raw):
    monkeypatch.setenv("ENVIRONMENT", raw)
    assert Settings(_env_file=None).is_development


def test_unknown_environment_rejected(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "staging")
    with pytest.raises(ValueError):
        Settings(_env_file=None)
