"""Error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``fallback_errors.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.error_classification import ErrorClassification
from .errors_parts.classified_error import ClassifiedError
from .errors_parts.provider_error import ProviderError
from .errors_parts.taxonomy import TAXONOMY, TaxonomyEntry, lookup_entry
from .errors_parts.inference import infer_code_from_message, infer_error_code

__all__ = [
    "ErrorCode",
    "ErrorClassification",
    "ClassifiedError",
    "ProviderError",
    "TAXONOMY",
    "TaxonomyEntry",
    "lookup_entry",
    "infer_error_code",
    "infer_code_from_message",
]
