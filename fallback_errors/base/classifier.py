"""
Error classifier: turns observed failures into retry/fallback verdicts.

The classifier normalizes its input to an :class:`ErrorCode`, looks up the
static taxonomy entry, and widens the entry's verdicts with the active
:class:`RetryConfig`. Overrides are OR-ed in, so configuration can only make
an error more retryable or more fallback-eligible, never less.

Accepted inputs
---------------
- ``ErrorCode`` -> used as-is.
- Structured errors (exceptions, objects with ``name``/``message``, mappings
  with ``"message"``) -> ``infer_from_error`` (default ``UNKNOWN_ERROR``).
- ``str`` -> ``infer_from_message`` (default ``CUSTOM_ERROR``).
- Anything else -> treated as a structured error.

Thread safety
-------------
The only mutable state is the config reference. ``set_config`` replaces it in
a single assignment and each ``classify`` call reads it once, so a concurrent
call sees either the old or the new config, never a mix.
"""
from __future__ import annotations

import contextlib
import logging
from typing import Any, Optional

from .errors_parts.classified_error import ClassifiedError
from .errors_parts.error_code import ErrorCode
from .errors_parts.inference import (
    Inference,
    error_message,
    infer_from_error,
    infer_from_message,
)
from .errors_parts.taxonomy import lookup_entry
from .logging import get_logger, log_event
from .resilience.retry_config import RetryConfig

_logger = get_logger(__name__)


class ErrorClassifier:
    """Classifies provider errors against the static taxonomy plus config overrides."""

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._config = config if config is not None else RetryConfig()
        self._logger = logger or _logger

    @property
    def config(self) -> RetryConfig:
        return self._config

    def set_config(self, config: RetryConfig) -> None:
        """Replace the active configuration for all subsequent calls."""
        self._config = config

    def classify(
        self, error: Any, custom_message: Optional[str] = None
    ) -> ClassifiedError:
        """Classify ``error`` into a :class:`ClassifiedError`.

        ``custom_message`` only applies to ``ErrorCode`` input, where it
        replaces the default message (the code value). Never raises.
        """
        config = self._config
        inference, message = self._normalize(error, custom_message)
        code = inference.code
        entry = lookup_entry(code)

        result = ClassifiedError(
            code=code,
            classification=entry.classification,
            retryable=entry.retryable or config.allows_retry(code),
            should_fallback=entry.should_fallback or config.forces_fallback(code),
            message=message,
        )
        with contextlib.suppress(Exception):
            log_event(
                self._logger,
                "error.classified",
                level=logging.DEBUG,
                code=code.value,
                classification=result.classification.value,
                retryable=result.retryable,
                should_fallback=result.should_fallback,
                source=inference.source,
            )
        return result

    def is_retryable(self, error: Any) -> bool:
        return self.classify(error).retryable

    def should_fallback(self, error: Any) -> bool:
        return self.classify(error).should_fallback

    def _normalize(
        self, error: Any, custom_message: Optional[str]
    ) -> tuple[Inference, str]:
        if isinstance(error, ErrorCode):
            return Inference(error, "code"), custom_message or error.value
        if isinstance(error, str):
            return infer_from_message(error), error
        try:
            return infer_from_error(error), error_message(error)
        except Exception as exc:  # noqa: BLE001 - classification must stay total
            with contextlib.suppress(Exception):
                self._logger.warning(
                    "error inference failed for %s: %s", type(error).__name__, type(exc).__name__
                )
            return Inference(ErrorCode.UNKNOWN_ERROR, "default"), type(error).__name__


def create_error_classifier(config: Optional[RetryConfig] = None) -> ErrorClassifier:
    """Return a new :class:`ErrorClassifier` bound to ``config``."""
    return ErrorClassifier(config)


__all__ = ["ErrorClassifier", "create_error_classifier"]
