import pytest

from app.config import ServerSettings, Settings


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://hotels.example.com"]')

    assert ServerSettings(_env_file=None).cors_origins == ["https://hotels.example.com"]


def test_malformed_cors_origins_fails_loudly(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://hotels.example.com,http://localhost")

    with pytest.raises(ValueError):
        ServerSettings(_env_file=None)


def test_cors_origins_do_not_need_the_signing_secret(monkeypatch):
    monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)

    assert ServerSettings(_env_file=None).cors_origins == ["http://localhost:5173"]


def test_settings_require_signing_secret(monkeypatch):
    monkeypatch.delenv("ACCESS_TOKEN_SECRET", raising=False)

    with pytest.raises(ValueError):
        Settings(_env_file=None)
