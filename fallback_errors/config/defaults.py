"""fallback_errors.config.defaults
===============================

Central place for the environment variable names and small constants used by
the configuration loader. Only plain constants live here, so the module can
be imported from anywhere without circular dependencies.
"""

from __future__ import annotations

# Path to an optional JSON or YAML file holding a ``retry`` section.
CONFIG_FILE_ENV = "FALLBACK_ERRORS_CONFIG_FILE"

# Section of the external config file read by ``get_retry_config``.
CONFIG_FILE_SECTION = "retry"

# Prefix for per-field environment overrides (e.g. FALLBACK_ERRORS_MAX_RETRIES).
ENV_PREFIX = "FALLBACK_ERRORS_"

# RetryConfig field -> env suffix. List fields are comma-separated.
ENV_FIELD_MAP = {
    "max_retries": "MAX_RETRIES",
    "base_delay": "BASE_DELAY",
    "max_delay": "MAX_DELAY",
    "backoff_multiplier": "BACKOFF_MULTIPLIER",
    "jitter": "JITTER",
    "retryable_errors": "RETRYABLE_ERRORS",
    "fallback_on_errors": "FALLBACK_ON_ERRORS",
}

LIST_FIELDS = frozenset({"retryable_errors", "fallback_on_errors"})
