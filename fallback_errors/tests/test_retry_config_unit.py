from __future__ import annotations

import pytest
from pydantic import ValidationError

from fallback_errors.base.errors import ErrorCode
from fallback_errors.base.resilience.retry_config import (
    DEFAULT_CIRCUIT_BREAKER_CONFIG,
    DEFAULT_QUALITY_GATES_CONFIG,
    DEFAULT_RETRY_CONFIG,
    DEFAULT_TIMEOUT_CONFIG,
    CircuitBreakerConfig,
    RetryConfig,
)


def test_default_retry_config_values():
    cfg = DEFAULT_RETRY_CONFIG
    assert (cfg.max_retries, cfg.base_delay, cfg.max_delay) == (3, 1000, 30000)  # nosec B101
    assert cfg.backoff_multiplier == 2.0  # nosec B101
    assert cfg.jitter is True  # nosec B101
    assert cfg.fallback_on_errors == frozenset(  # nosec B101
        {
            ErrorCode.TIMEOUT,
            ErrorCode.RATE_LIMIT,
            ErrorCode.MODEL_OVERLOADED,
            ErrorCode.INVALID_RESPONSE,
            ErrorCode.SERVICE_UNAVAILABLE,
            ErrorCode.CONNECTION_ERROR,
        }
    )
    assert cfg.retryable_errors == frozenset()  # nosec B101


def test_nested_defaults():
    assert (DEFAULT_TIMEOUT_CONFIG.agent, DEFAULT_TIMEOUT_CONFIG.total) == (30000, 120000)  # nosec B101
    assert DEFAULT_CIRCUIT_BREAKER_CONFIG.failure_threshold == 5  # nosec B101
    assert DEFAULT_CIRCUIT_BREAKER_CONFIG.recovery_timeout == 60000  # nosec B101
    assert DEFAULT_CIRCUIT_BREAKER_CONFIG.half_open_attempts == 3  # nosec B101
    assert DEFAULT_QUALITY_GATES_CONFIG.min_response_length == 1  # nosec B101
    assert DEFAULT_QUALITY_GATES_CONFIG.max_error_rate == 0.1  # nosec B101
    assert DEFAULT_QUALITY_GATES_CONFIG.latency_threshold == 30000  # nosec B101


def test_retryable_errors_normalizes_members_and_custom_codes():
    cfg = RetryConfig(retryable_errors=[ErrorCode.RATE_LIMIT, "MY_CUSTOM_CODE"])
    assert cfg.retryable_errors == frozenset({"RATE_LIMIT", "MY_CUSTOM_CODE"})  # nosec B101
    assert cfg.allows_retry(ErrorCode.RATE_LIMIT)  # nosec B101
    assert not cfg.allows_retry(ErrorCode.TIMEOUT)  # nosec B101


def test_single_values_are_accepted():
    cfg = RetryConfig(retryable_errors="TIMEOUT", fallback_on_errors="INTERNAL_ERROR")
    assert cfg.retryable_errors == frozenset({"TIMEOUT"})  # nosec B101
    assert cfg.forces_fallback(ErrorCode.INTERNAL_ERROR)  # nosec B101


def test_fallback_on_errors_rejects_unknown_codes():
    with pytest.raises(ValidationError):
        RetryConfig(fallback_on_errors=["NOT_A_CODE"])


def test_negative_values_rejected():
    with pytest.raises(ValidationError):
        RetryConfig(max_retries=-1)
    with pytest.raises(ValidationError):
        CircuitBreakerConfig(failure_threshold=0)


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_RETRY_CONFIG.max_retries = 10  # type: ignore[misc]


def test_nested_sections_validate_from_mappings():
    cfg = RetryConfig.model_validate(
        {"circuit_breaker": {"failure_threshold": 2}, "timeout": {"agent": 5000, "total": 9000}}
    )
    assert cfg.circuit_breaker is not None  # nosec B101
    assert cfg.circuit_breaker.failure_threshold == 2  # nosec B101
    assert cfg.circuit_breaker.half_open_attempts == 3  # nosec B101
    assert cfg.timeout is not None and cfg.timeout.total == 9000  # nosec B101
