"""Configuration layer for the error classifier.

Goals
-----
* Build a validated :class:`RetryConfig` from predictable sources, merged in
  order (later wins):
    1. Built-in defaults (``DEFAULT_RETRY_CONFIG``)
    2. Optional external config file (JSON or YAML) pointed to by
       ``FALLBACK_ERRORS_CONFIG_FILE`` (``retry`` section)
    3. Environment variables (``FALLBACK_ERRORS_<FIELD>``)
    4. In-code overrides passed to the helper
* Keep the classifier itself free of environment access: callers load a
  config here and inject it.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Structure example:

```
retry:
  max_retries: 5
  retryable_errors: [AUTHENTICATION_ERROR, MY_CUSTOM_CODE]
  fallback_on_errors: [INTERNAL_ERROR]
  circuit_breaker:
    failure_threshold: 3
```

Failure Modes
-------------
* A missing or unparseable file contributes nothing (a warning is logged).
* Invalid values raise ``pydantic.ValidationError`` from ``get_retry_config``.

Public API
----------
* get_retry_config(overrides: dict | None = None) -> RetryConfig
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..base.logging import get_logger, log_event
from ..base.resilience.retry_config import DEFAULT_RETRY_CONFIG, RetryConfig
from .defaults import (
    CONFIG_FILE_ENV,
    CONFIG_FILE_SECTION,
    ENV_FIELD_MAP,
    ENV_PREFIX,
    LIST_FIELDS,
)

_logger = get_logger(__name__)


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _load_external_config() -> Dict[str, Any]:
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        log_event(_logger, "config.file_missing", level=logging.WARNING, path=str(p))
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            log_event(_logger, "config.file_invalid", level=logging.WARNING, path=str(p), error=str(exc))
            return {}
    if not isinstance(data, dict):
        return {}
    section = data.get(CONFIG_FILE_SECTION)
    return section if isinstance(section, dict) else {}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{ENV_PREFIX}{suffix}")
        if val is None:
            continue
        out[field] = _split_list(val) if field in LIST_FIELDS else val
    return out


def get_retry_config(overrides: Optional[Dict[str, Any]] = None) -> RetryConfig:
    """Return a merged, validated :class:`RetryConfig`.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = DEFAULT_RETRY_CONFIG.model_dump()
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return RetryConfig.model_validate(cfg)


__all__ = ["get_retry_config"]
