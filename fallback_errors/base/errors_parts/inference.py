"""
Heuristic recovery of an :class:`ErrorCode` from unstructured failures.

Two entry points share the same shape but not the same rule set:

- ``infer_from_error`` handles structured errors (exceptions, objects exposing
  ``name``/``message``, or mappings with a ``"message"`` key). Precedence:
    1. An explicit ``ErrorCode`` carried on the error (e.g. ``ProviderError``).
    2. Ordered message rules (the error name also counts for timeouts).
    3. ``UNKNOWN_ERROR`` fallback.
  HTTP status attributes are not consulted; the message decides.
- ``infer_from_message`` handles raw strings with a shorter rule list and
  falls back to ``CUSTOM_ERROR``.

Rules are evaluated first-match-wins. Fragments overlap ("invalid api key"
vs. "invalid response"), so tuple order is part of the contract.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from .error_code import ErrorCode


@dataclass(frozen=True)
class InferenceRule:
    """Maps lowercase substring fragments to a code."""

    code: ErrorCode
    fragments: Tuple[str, ...]
    match_name: bool = False

    def matches(self, message: str, name: str = "") -> bool:
        if any(f in message for f in self.fragments):
            return True
        return self.match_name and any(f in name for f in self.fragments)


class Inference(NamedTuple):
    """Inferred code plus where it came from (for logging)."""

    code: ErrorCode
    source: str


STRUCTURED_RULES: Tuple[InferenceRule, ...] = (
    InferenceRule(ErrorCode.TIMEOUT, ("timeout",), match_name=True),
    InferenceRule(ErrorCode.RATE_LIMIT, ("rate limit", "rate_limit", "too many requests")),
    InferenceRule(
        ErrorCode.INVALID_API_KEY,
        ("authentication", "unauthorized", "invalid api key", "api key"),
    ),
    InferenceRule(ErrorCode.QUOTA_EXCEEDED, ("quota", "exceeded", "insufficient credits")),
    InferenceRule(ErrorCode.MODEL_OVERLOADED, ("overloaded",)),
    InferenceRule(
        ErrorCode.CONTEXT_LENGTH_EXCEEDED, ("context length", "max tokens", "token limit")
    ),
    InferenceRule(
        ErrorCode.CONNECTION_ERROR, ("connection", "network", "econnrefused", "enotfound")
    ),
    InferenceRule(ErrorCode.SERVICE_UNAVAILABLE, ("503", "service unavailable", "unavailable")),
    InferenceRule(ErrorCode.EMPTY_RESPONSE, ("empty", "no response")),
    InferenceRule(ErrorCode.INVALID_RESPONSE, ("invalid response", "parse")),
    InferenceRule(ErrorCode.PERMISSION_DENIED, ("permission", "forbidden", "403")),
    InferenceRule(ErrorCode.MODEL_NOT_FOUND, ("model not found", "404")),
)

MESSAGE_RULES: Tuple[InferenceRule, ...] = (
    InferenceRule(ErrorCode.TIMEOUT, ("timeout",)),
    InferenceRule(ErrorCode.RATE_LIMIT, ("rate limit",)),
    InferenceRule(ErrorCode.INVALID_API_KEY, ("authentication", "api key")),
    InferenceRule(ErrorCode.QUOTA_EXCEEDED, ("quota",)),
    InferenceRule(ErrorCode.MODEL_OVERLOADED, ("overloaded",)),
    InferenceRule(ErrorCode.CONTEXT_LENGTH_EXCEEDED, ("context length",)),
    InferenceRule(ErrorCode.CONNECTION_ERROR, ("connection",)),
    InferenceRule(ErrorCode.SERVICE_UNAVAILABLE, ("unavailable",)),
    InferenceRule(ErrorCode.EMPTY_RESPONSE, ("empty",)),
    InferenceRule(ErrorCode.INVALID_RESPONSE, ("invalid response",)),
    InferenceRule(ErrorCode.PERMISSION_DENIED, ("permission",)),
    InferenceRule(ErrorCode.MODEL_NOT_FOUND, ("model not found",)),
)

def _safe_text(value: Any) -> str:
    """``str(value)`` that degrades to the type name when ``__str__`` fails."""
    try:
        return str(value)
    except Exception:  # noqa: BLE001 - classification must stay total
        return type(value).__name__


def _field(error: Any, key: str) -> Any:
    if isinstance(error, Mapping):
        return error.get(key)
    return getattr(error, key, None)


def error_name(error: Any) -> str:
    name = _field(error, "name")
    if isinstance(name, str) and name:
        return name
    return type(error).__name__


def error_message(error: Any) -> str:
    """Best-effort human message for a structured error."""
    message = _field(error, "message")
    if isinstance(message, str) and message:
        return message
    if isinstance(error, Mapping):
        return ""
    text = _safe_text(error)
    return text or type(error).__name__


def _first_match(
    rules: Tuple[InferenceRule, ...], message: str, name: str = ""
) -> Optional[ErrorCode]:
    for rule in rules:
        if rule.matches(message, name):
            return rule.code
    return None


def infer_from_error(error: Any) -> Inference:
    """Infer a code for a structured error; defaults to ``UNKNOWN_ERROR``."""
    explicit = _field(error, "code")
    if isinstance(explicit, ErrorCode):
        return Inference(explicit, "explicit")
    code = _first_match(
        STRUCTURED_RULES,
        error_message(error).lower(),
        error_name(error).lower(),
    )
    if code is not None:
        return Inference(code, "message")
    return Inference(ErrorCode.UNKNOWN_ERROR, "default")


def infer_from_message(message: str) -> Inference:
    """Infer a code for a raw message; defaults to ``CUSTOM_ERROR``."""
    code = _first_match(MESSAGE_RULES, message.lower())
    if code is not None:
        return Inference(code, "message")
    return Inference(ErrorCode.CUSTOM_ERROR, "default")


def infer_error_code(error: Any) -> ErrorCode:
    return infer_from_error(error).code


def infer_code_from_message(message: str) -> ErrorCode:
    return infer_from_message(message).code


__all__ = [
    "InferenceRule",
    "Inference",
    "STRUCTURED_RULES",
    "MESSAGE_RULES",
    "infer_from_error",
    "infer_from_message",
    "infer_error_code",
    "infer_code_from_message",
    "error_message",
    "error_name",
]
