"""
Classifier Base Package

Exports the error taxonomy, the classifier, and the retry configuration
models consumed by a retry/fallback orchestrator.
"""

from .errors import (
    ClassifiedError,
    ErrorClassification,
    ErrorCode,
    ProviderError,
    TAXONOMY,
    TaxonomyEntry,
)
from .classifier import ErrorClassifier, create_error_classifier
from .resilience import DEFAULT_RETRY_CONFIG, RetryConfig

__all__ = [
    "ErrorCode",
    "ErrorClassification",
    "ClassifiedError",
    "ProviderError",
    "TAXONOMY",
    "TaxonomyEntry",
    "ErrorClassifier",
    "create_error_classifier",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
]
