# tests/common/test_logging_setup.py
import logging

from flowershop.common.logging import get_logger


def test_named_logger_with_explicit_level():
    log = get_logger("flowershop.test.explicit", level="debug")
    assert log.name == "flowershop.test.explicit"
    assert log.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    log = get_logger("flowershop.test.bogus", level="chatty")
    assert log.level == logging.INFO


def test_default_level_from_settings(monkeypatch):
    from flowershop.common import settings as s

    s.get_settings.cache_clear()
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    try:
        assert get_logger("flowershop.test.default").level == logging.WARNING
    finally:
        s.get_settings.cache_clear()
