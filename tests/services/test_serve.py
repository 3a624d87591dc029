# tests/services/test_serve.py
from flowershop.common import settings as s
from flowershop.services.api import serve


def test_main_runs_the_app_with_configured_host_and_port(monkeypatch):
    monkeypatch.setenv("API__PORT", "8123")
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    s.get_settings.cache_clear()
    calls = []
    monkeypatch.setattr(serve.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    try:
        serve.main()
    finally:
        s.get_settings.cache_clear()

    assert calls == [(
        "flowershop.services.api.app:app",
        {"host": s.APIConfig().host, "port": 8123, "log_level": "warning", "reload": False},
    )]
