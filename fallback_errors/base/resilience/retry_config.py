"""Typed retry/fallback configuration consumed by the error classifier.

Purpose
-------
Capture the caller-owned retry configuration as immutable, validated data.
The classifier only reads the two override sets (``fallback_on_errors`` and
``retryable_errors``); the remaining fields travel with the config for the
orchestrator that schedules retries, trips circuit breakers, and applies
quality gates. No behavior is attached to them here.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Failure modes & side effects
----------------------------
- Pure data containers: no I/O side effects. Pydantic raises
  ``ValidationError`` for malformed values (negative delays, unknown codes in
  ``fallback_on_errors``) at construction time, never during classification.

Notes
-----
- Time values are milliseconds.
- ``retryable_errors`` is loosely typed so callers can list custom codes;
  :class:`ErrorCode` members are normalized to their string value.
- Models are frozen; swap a classifier's config with ``set_config`` rather
  than mutating it in place.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors_parts.error_code import ErrorCode


class CircuitBreakerConfig(BaseModel):
    """Circuit breaker thresholds for the orchestrator."""

    model_config = ConfigDict(frozen=True)

    failure_threshold: int = Field(default=5, ge=1)
    recovery_timeout: int = Field(default=60000, ge=0)
    half_open_attempts: int = Field(default=3, ge=1)


class AdaptiveRetryConfig(BaseModel):
    """Weights used to tune retry parameters from observed outcomes."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    success_weight: float = 1.0
    failure_weight: float = 1.0
    adjustment_factor: float = 0.1
    min_delay_multiplier: Optional[float] = None
    max_delay_multiplier: Optional[float] = None


class QualityGatesConfig(BaseModel):
    """Response quality thresholds."""

    model_config = ConfigDict(frozen=True)

    min_response_length: int = Field(default=1, ge=0)
    max_error_rate: float = Field(default=0.1, ge=0.0, le=1.0)
    latency_threshold: int = Field(default=30000, ge=0)
    min_quality_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class TimeoutConfig(BaseModel):
    """Per-agent and end-to-end timeouts."""

    model_config = ConfigDict(frozen=True)

    agent: int = Field(default=30000, ge=0)
    total: int = Field(default=120000, ge=0)


class RetryConfig(BaseModel):
    """Retry configuration shared by the classifier and its orchestrator.

    Attributes
    ----------
    max_retries, base_delay, max_delay, backoff_multiplier, jitter:
        Backoff parameters for the orchestrator's retry loop.
    circuit_breaker, adaptive_retry, quality_gates, timeout:
        Optional nested policies, carried as data.
    fallback_on_errors:
        Codes that must trigger fallback even when the taxonomy says otherwise.
    retryable_errors:
        Code strings that must be retried even when the taxonomy says otherwise.
    """

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=3, ge=0)
    base_delay: int = Field(default=1000, ge=0)
    max_delay: int = Field(default=30000, ge=0)
    backoff_multiplier: float = Field(default=2.0, ge=1.0)
    jitter: bool = True
    circuit_breaker: Optional[CircuitBreakerConfig] = None
    adaptive_retry: Optional[AdaptiveRetryConfig] = None
    quality_gates: Optional[QualityGatesConfig] = None
    timeout: Optional[TimeoutConfig] = None
    fallback_on_errors: FrozenSet[ErrorCode] = Field(default_factory=frozenset)
    retryable_errors: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("retryable_errors", mode="before")
    @classmethod
    def _normalize_retryable(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, (str, Enum)):
            value = [value]
        return frozenset(item.value if isinstance(item, Enum) else str(item) for item in value)

    @field_validator("fallback_on_errors", mode="before")
    @classmethod
    def _normalize_fallback(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, (str, Enum)):
            return [value]
        return value

    def allows_retry(self, code: ErrorCode) -> bool:
        """Return True when ``code`` is listed as additionally retryable."""
        return code.value in self.retryable_errors

    def forces_fallback(self, code: ErrorCode) -> bool:
        """Return True when ``code`` is listed as additionally fallback-eligible."""
        return code in self.fallback_on_errors


DEFAULT_TIMEOUT_CONFIG = TimeoutConfig()
DEFAULT_CIRCUIT_BREAKER_CONFIG = CircuitBreakerConfig()
DEFAULT_QUALITY_GATES_CONFIG = QualityGatesConfig()

DEFAULT_RETRY_CONFIG = RetryConfig(
    fallback_on_errors=frozenset(
        {
            ErrorCode.TIMEOUT,
            ErrorCode.RATE_LIMIT,
            ErrorCode.MODEL_OVERLOADED,
            ErrorCode.INVALID_RESPONSE,
            ErrorCode.SERVICE_UNAVAILABLE,
            ErrorCode.CONNECTION_ERROR,
        }
    ),
)


__all__ = [
    "RetryConfig",
    "CircuitBreakerConfig",
    "AdaptiveRetryConfig",
    "QualityGatesConfig",
    "TimeoutConfig",
    "DEFAULT_RETRY_CONFIG",
    "DEFAULT_TIMEOUT_CONFIG",
    "DEFAULT_CIRCUIT_BREAKER_CONFIG",
    "DEFAULT_QUALITY_GATES_CONFIG",
]
