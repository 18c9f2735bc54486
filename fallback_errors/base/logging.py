"""Base structured logging utilities for the classifier package.

Rationale:
- One place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in the classifier and config loader.

All package loggers are children of the shared ``fallback_errors`` logger,
which writes to stderr. Its level can be set with ``FALLBACK_ERRORS_LOG_LEVEL``.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

from .log_support import JsonFormatter

BASE_LOGGER_NAME = "fallback_errors"
LOG_LEVEL_ENV = "FALLBACK_ERRORS_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_fallback_errors_logger_initialized"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name case-insensitively; ``default`` on unknown values."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        logger.setLevel(desired_level)
        for handler in logger.handlers:
            handler.setLevel(desired_level)
            if type(handler) is logging.StreamHandler:
                handler.setStream(sys.stderr)
                if json_mode != isinstance(handler.formatter, JsonFormatter):
                    handler.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_make_formatter(json_mode))
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO
) -> logging.Logger:
    """Return a logger under the shared ``fallback_errors`` hierarchy.

    The base logger is configured on first use; child loggers propagate to it
    and carry no handlers of their own.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as one JSON payload.

    Keys whose values are ``None`` are dropped.
    """
    if not logger.isEnabledFor(level):
        return
    payload: dict[str, Any] = {"event": event}
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "get_logger",
    "log_event",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
