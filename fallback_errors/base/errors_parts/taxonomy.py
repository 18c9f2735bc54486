"""
Static taxonomy table mapping every :class:`ErrorCode` to its entry.

Each entry fixes the coarse classification plus the baseline retry and
fallback verdicts. Configuration may widen those verdicts at classification
time but never narrows them, and never changes the classification.

Family notes
------------
- Authentication failures are never retried in place. An invalid key still
  warrants switching providers; denied permissions and generic auth failures
  do not, since the same credential failure recurs everywhere.
- Rate-limit and transient network/model conditions are retryable and
  fallback-eligible (quota exhaustion is fallback-only).
- Internal errors are retried in place but do not move traffic.
- Quality codes always permit fallback; only malformed/empty payloads are
  retryable. Threshold and latency failures describe the provider's behavior,
  not a one-off fluke.

The table is validated for totality at import; a missing code is a
definition bug and raises ``RuntimeError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .error_classification import ErrorClassification
from .error_code import ErrorCode


@dataclass(frozen=True)
class TaxonomyEntry:
    """Baseline verdicts for one error code."""

    classification: ErrorClassification
    retryable: bool
    should_fallback: bool


_C = ErrorClassification

TAXONOMY: Mapping[ErrorCode, TaxonomyEntry] = MappingProxyType(
    {
        # Network
        ErrorCode.TIMEOUT: TaxonomyEntry(_C.TIMEOUT, True, True),
        ErrorCode.CONNECTION_ERROR: TaxonomyEntry(_C.NETWORK, True, True),
        ErrorCode.DNS_ERROR: TaxonomyEntry(_C.NETWORK, True, True),
        # Authentication
        ErrorCode.AUTHENTICATION_ERROR: TaxonomyEntry(_C.AUTHENTICATION, False, False),
        ErrorCode.INVALID_API_KEY: TaxonomyEntry(_C.AUTHENTICATION, False, True),
        ErrorCode.PERMISSION_DENIED: TaxonomyEntry(_C.AUTHENTICATION, False, False),
        # Rate limiting
        ErrorCode.RATE_LIMIT: TaxonomyEntry(_C.RATE_LIMIT, True, True),
        ErrorCode.QUOTA_EXCEEDED: TaxonomyEntry(_C.RATE_LIMIT, False, True),
        # Model
        ErrorCode.MODEL_NOT_FOUND: TaxonomyEntry(_C.MODEL, False, True),
        ErrorCode.MODEL_OVERLOADED: TaxonomyEntry(_C.MODEL, True, True),
        ErrorCode.CONTEXT_LENGTH_EXCEEDED: TaxonomyEntry(_C.MODEL, False, True),
        # Response
        ErrorCode.INVALID_RESPONSE: TaxonomyEntry(_C.QUALITY, True, True),
        ErrorCode.PARSE_ERROR: TaxonomyEntry(_C.QUALITY, True, True),
        ErrorCode.EMPTY_RESPONSE: TaxonomyEntry(_C.QUALITY, True, True),
        # Quality
        ErrorCode.QUALITY_THRESHOLD_NOT_MET: TaxonomyEntry(_C.QUALITY, False, True),
        ErrorCode.LATENCY_TOO_HIGH: TaxonomyEntry(_C.QUALITY, False, True),
        # System
        ErrorCode.INTERNAL_ERROR: TaxonomyEntry(_C.SYSTEM, True, False),
        ErrorCode.SERVICE_UNAVAILABLE: TaxonomyEntry(_C.SYSTEM, True, True),
        ErrorCode.UNKNOWN_ERROR: TaxonomyEntry(_C.UNKNOWN, False, False),
        # Caller-defined
        ErrorCode.CUSTOM_ERROR: TaxonomyEntry(_C.UNKNOWN, False, False),
    }
)

# Entry used when a code cannot be found; mirrors UNKNOWN_ERROR.
UNKNOWN_ENTRY = TaxonomyEntry(_C.UNKNOWN, False, False)


def _validate_totality(table: Mapping[ErrorCode, TaxonomyEntry]) -> None:
    missing = [code.value for code in ErrorCode if code not in table]
    if missing:
        raise RuntimeError(f"taxonomy table missing entries for: {', '.join(missing)}")


_validate_totality(TAXONOMY)


def lookup_entry(code: ErrorCode) -> TaxonomyEntry:
    """Return the taxonomy entry for ``code`` (unknown default if absent)."""
    return TAXONOMY.get(code, UNKNOWN_ENTRY)


__all__ = ["TaxonomyEntry", "TAXONOMY", "UNKNOWN_ENTRY", "lookup_entry"]
