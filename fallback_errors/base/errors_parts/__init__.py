"""Errors parts package public surface.

Re-exports individual taxonomy components for optional direct imports.
Prefer importing from `fallback_errors.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .error_classification import ErrorClassification
from .classified_error import ClassifiedError
from .provider_error import ProviderError
from .taxonomy import TAXONOMY, TaxonomyEntry, lookup_entry
from .inference import infer_code_from_message, infer_error_code

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
