# tests/common/test_settings_basic.py
import pytest

from flowershop.common import settings as s


@pytest.fixture(autouse=True)
def _fresh_settings():
    s.get_settings.cache_clear()
    yield
    s.get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    cfg = s.get_settings()
    assert cfg.api.prefix == "/api"
    assert cfg.media.placeholder_path == "/placeholder-image.jpg"
    assert cfg.media.storage_prefix == "/storage"
    assert cfg.db.statement_timeout_ms > 0
    assert cfg.database_url.startswith("postgresql+psycopg://")


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://u:p@db:5432/shop")
    cfg = s.get_settings()
    assert cfg.database_url == "postgresql+psycopg://u:p@db:5432/shop"


def test_nested_db_env(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB__HOST", "db.internal")
    monkeypatch.setenv("DB__STATEMENT_TIMEOUT_MS", "2500")
    cfg = s.get_settings()
    assert "@db.internal:" in cfg.database_url
    assert cfg.db.statement_timeout_ms == 2500


def test_flat_media_public_url(monkeypatch):
    monkeypatch.setenv("MEDIA_PUBLIC_URL", " https://media.example.com ")
    cfg = s.get_settings()
    assert cfg.media.public_base_url == "https://media.example.com"


def test_nested_media_env(monkeypatch):
    monkeypatch.delenv("MEDIA_PUBLIC_URL", raising=False)
    monkeypatch.setenv("MEDIA__PUBLIC_BASE_URL", "https://cdn.example.com/")
    monkeypatch.setenv("MEDIA__PROXY_PATH", "/api/upload")
    cfg = s.get_settings()
    assert cfg.media.public_base_url == "https://cdn.example.com/"
    assert cfg.media.proxy_path == "/api/upload"


def test_blank_public_url_is_none():
    assert s.MediaConfig(public_base_url="   ").public_base_url is None


def test_cors_csv_split():
    api = s.APIConfig(cors_allow_origins="http://a.test, http://b.test ,")
    assert api.cors_allow_origins == ["http://a.test", "http://b.test"]
