"""
Classification result value object.

`ClassifiedError` is what the classifier hands back to a retry/fallback
orchestrator. It has no identity and no lifecycle beyond the call that
produced it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .error_classification import ErrorClassification
from .error_code import ErrorCode


@dataclass(frozen=True)
class ClassifiedError:
    """Outcome of classifying one observed failure.

    Attributes:
        code: Canonical :class:`ErrorCode` derived from the input.
        classification: Coarse :class:`ErrorClassification` for the code.
        retryable: Whether the request is worth reattempting on the same provider.
        should_fallback: Whether the next attempt should go to another provider.
        message: Human-readable message (the original error text or code value).
    """

    code: ErrorCode
    classification: ErrorClassification
    retryable: bool
    should_fallback: bool
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping suitable for structured logs."""
        return {
            "code": self.code.value,
            "classification": self.classification.value,
            "retryable": self.retryable,
            "should_fallback": self.should_fallback,
            "message": self.message,
        }


__all__ = ["ClassifiedError"]
