"""
Canonical provider error codes (taxonomy keys).

Defines the `ErrorCode` enumeration used by the classifier, the taxonomy
table, and retry configuration overrides. Values equal the member names and
are considered a stable public contract for logging and configuration files.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated canonical error codes grouped by failure family."""

    # Network
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"

    # Authentication
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    INVALID_API_KEY = "INVALID_API_KEY"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Rate limiting
    RATE_LIMIT = "RATE_LIMIT"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"

    # Model
    MODEL_NOT_FOUND = "MODEL_NOT_FOUND"
    MODEL_OVERLOADED = "MODEL_OVERLOADED"
    CONTEXT_LENGTH_EXCEEDED = "CONTEXT_LENGTH_EXCEEDED"

    # Response
    INVALID_RESPONSE = "INVALID_RESPONSE"
    PARSE_ERROR = "PARSE_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"

    # Quality
    QUALITY_THRESHOLD_NOT_MET = "QUALITY_THRESHOLD_NOT_MET"
    LATENCY_TOO_HIGH = "LATENCY_TOO_HIGH"

    # System
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Caller-defined
    CUSTOM_ERROR = "CUSTOM_ERROR"


__all__ = ["ErrorCode"]
