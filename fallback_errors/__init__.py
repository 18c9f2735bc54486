"""fallback_errors package

Error classification for provider retry/fallback decisions.

Purpose:
    Map failures from model-inference providers onto a fixed taxonomy and
    derive two verdicts: retry on the same provider, or fall back to another.
    Retry loops, backoff, circuit breakers and provider selection belong to
    the calling orchestrator.

Public API (re-exported):
    - Version: ``__version__``
    - Taxonomy: :class:`ErrorCode`, :class:`ErrorClassification`,
      :class:`ClassifiedError`, :class:`ProviderError`, ``TAXONOMY``
    - Engine: :class:`ErrorClassifier`, :func:`create_error_classifier`
    - Config: :class:`RetryConfig`, ``DEFAULT_RETRY_CONFIG``,
      :func:`get_retry_config`
"""

from .base.errors import (
    ClassifiedError,
    ErrorClassification,
    ErrorCode,
    ProviderError,
    TAXONOMY,
    TaxonomyEntry,
)
from .base.classifier import ErrorClassifier, create_error_classifier
from .base.resilience import (
    AdaptiveRetryConfig,
    CircuitBreakerConfig,
    DEFAULT_RETRY_CONFIG,
    QualityGatesConfig,
    RetryConfig,
    TimeoutConfig,
)
from .config import get_retry_config

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ErrorCode",
    "ErrorClassification",
    "ClassifiedError",
    "ProviderError",
    "TAXONOMY",
    "TaxonomyEntry",
    "ErrorClassifier",
    "create_error_classifier",
    "RetryConfig",
    "CircuitBreakerConfig",
    "AdaptiveRetryConfig",
    "QualityGatesConfig",
    "TimeoutConfig",
    "DEFAULT_RETRY_CONFIG",
    "get_retry_config",
]
