"""Logging setup for applications built with tkcompose."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve the log level, TKCOMPOSE_LOG_LEVEL taking precedence over LOG_LEVEL."""
    value = os.getenv("TKCOMPOSE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Send tkcompose log records to the console.

    The library never configures logging on import; applications call
    this once at startup. Returns the package logger.
    """
    level_name = (level or resolve_log_level_name()).upper()
    logger = logging.getLogger("tkcompose")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not any(getattr(h, "_tkcompose", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._tkcompose = True
        logger.addHandler(handler)
    return logger


def setup_logging() -> None:
    """Configure minimal console logging if nothing handles tkcompose records yet."""
    logger = logging.getLogger("tkcompose")
    if logger.handlers or logging.getLogger().handlers:
        return
    configure_logging()
