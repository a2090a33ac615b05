"""Logging setup."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from victoriabank.core.config import get_settings

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure root logger.

    Args:
        level: Log level name, defaults to settings.log_level
        log_format: "json" or "standard", defaults to settings.log_format
    """
    if level is None or log_format is None:
        settings = get_settings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonFormatter(fmt=JSON_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT))

    root = logging.getLogger()
    root.setLevel(level.upper())
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
