"""Coarse error categories grouping related :class:`ErrorCode` values."""
from __future__ import annotations

from enum import Enum


class ErrorClassification(str, Enum):
    """Reporting category for a classified error (many codes map to one)."""

    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    AUTHENTICATION = "authentication"
    MODEL = "model"
    QUALITY = "quality"
    NETWORK = "network"
    SYSTEM = "system"
    UNKNOWN = "unknown"


__all__ = ["ErrorClassification"]
