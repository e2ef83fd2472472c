"""설정 로딩"""
import pytest
from pydantic import ValidationError

from mineralwater.config import Settings


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com, https://b.example.com")
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.cors_origins == ["https://a.example.com", "https://b.example.com"]
    assert s.token_expire_days == 7


def test_cors_origins_accepts_json_list(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("CORS_ORIGINS", '["https://a.example.com"]')
    assert Settings(_env_file=None).cors_origins == ["https://a.example.com"]
