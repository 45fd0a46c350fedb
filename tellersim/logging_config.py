"""Opt-in logging for tellersim.

The package logger carries only a NullHandler until one of the helpers
below attaches a real handler. The command line calls them for
``--log-level`` and ``--log-file``, and falls back to the environment:

    TS_LOGGING   level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TS_LOG_FILE  rotating log file
    TS_LOG_JSON  "1" for one JSON object per line

Per-customer traces are emitted at DEBUG by ``tellersim.core.simulation``.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
]

LOGGER_NAME = "tellersim"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(handler: logging.Handler, level: LogLevel | int) -> logging.Handler:
    numeric = _get_level(level)
    handler.setLevel(numeric)
    logger = _get_logger()
    logger.setLevel(numeric)
    logger.addHandler(handler)
    return handler


def _rotating_file(path: str | Path) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=DEFAULT_MAX_BYTES, backupCount=DEFAULT_BACKUP_COUNT)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
) -> logging.StreamHandler:
    """Log tellersim records to stderr at level and above."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format, DEFAULT_DATE_FORMAT))
    return _attach(handler, level)


def enable_file_logging(path: str | Path, level: LogLevel | int = "INFO") -> RotatingFileHandler:
    """Log tellersim records to a size-rotated file.

    Parent directories are created. Each file is capped at 10 MB with five
    backups kept.
    """
    handler = _rotating_file(path)
    handler.setFormatter(logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    return _attach(handler, level)


def enable_json_logging(
    level: LogLevel | int = "INFO",
    path: str | Path | None = None,
) -> logging.Handler:
    """Log JSON lines to stderr, or to a rotating file when path is given."""
    handler = logging.StreamHandler() if path is None else _rotating_file(path)
    handler.setFormatter(JsonFormatter())
    return _attach(handler, level)


def configure_from_env() -> logging.Handler | None:
    """Attach a handler described by TS_LOGGING, TS_LOG_FILE and TS_LOG_JSON.

    Returns None, attaching nothing, when neither TS_LOGGING nor TS_LOG_FILE
    is set.
    """
    level = os.environ.get("TS_LOGGING", "").upper()
    log_file = os.environ.get("TS_LOG_FILE", "")
    if not level and not log_file:
        return None

    level = level or "INFO"
    if os.environ.get("TS_LOG_JSON", "") == "1":
        return enable_json_logging(level=level, path=log_file or None)
    if log_file:
        return enable_file_logging(log_file, level=level)
    return enable_console_logging(level=level)


def disable_logging() -> None:
    """Close every attached handler and silence tellersim."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
