"""Pytest configuration for the classifier test suite.

Provides classifier fixtures bound to common configurations and clears the
environment variables read by the configuration loader so host settings do
not leak into tests.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from fallback_errors.base.classifier import ErrorClassifier
from fallback_errors.base.resilience.retry_config import DEFAULT_RETRY_CONFIG, RetryConfig
from fallback_errors.config.defaults import CONFIG_FILE_ENV, ENV_FIELD_MAP, ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove classifier config env vars for the duration of a test."""

    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    for suffix in ENV_FIELD_MAP.values():
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)
    yield


@pytest.fixture()
def classifier() -> ErrorClassifier:
    """Classifier with an empty config (taxonomy-only verdicts)."""

    return ErrorClassifier(RetryConfig())


@pytest.fixture()
def default_classifier() -> ErrorClassifier:
    """Classifier bound to ``DEFAULT_RETRY_CONFIG``."""

    return ErrorClassifier(DEFAULT_RETRY_CONFIG)
