"""Resilience configuration consumed by the classifier and its orchestrator."""

from .retry_config import (
    AdaptiveRetryConfig,
    CircuitBreakerConfig,
    DEFAULT_CIRCUIT_BREAKER_CONFIG,
    DEFAULT_QUALITY_GATES_CONFIG,
    DEFAULT_RETRY_CONFIG,
    DEFAULT_TIMEOUT_CONFIG,
    QualityGatesConfig,
    RetryConfig,
    TimeoutConfig,
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
