# flowershop/common/logging.py
from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = "flowershop", level: int | str | None = None) -> logging.Logger:
    """
    Return a named logger. Under uvicorn the root logger already has handlers
    and we leave them alone; otherwise basicConfig is applied once.
    When `level` is omitted the configured LOG_LEVEL is used.
    """
    if level is None:
        from flowershop.common.settings import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    if not logging.getLogger().handlers and not logger.handlers:
        logging.basicConfig(level=level, format=_FORMAT)
    logger.setLevel(level)
    return logger
