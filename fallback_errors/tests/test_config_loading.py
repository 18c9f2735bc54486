from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from fallback_errors.base.errors import ErrorCode
from fallback_errors.config import get_retry_config
from fallback_errors.config.defaults import CONFIG_FILE_ENV


def test_defaults_without_sources():
    cfg = get_retry_config()
    assert cfg.max_retries == 3  # nosec B101 - asserts are appropriate in unit tests
    assert ErrorCode.TIMEOUT in cfg.fallback_on_errors  # nosec B101


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FALLBACK_ERRORS_MAX_RETRIES", "7")
    monkeypatch.setenv("FALLBACK_ERRORS_JITTER", "false")
    monkeypatch.setenv("FALLBACK_ERRORS_RETRYABLE_ERRORS", "AUTHENTICATION_ERROR, MY_CODE")
    monkeypatch.setenv("FALLBACK_ERRORS_FALLBACK_ON_ERRORS", "INTERNAL_ERROR")
    cfg = get_retry_config()
    assert cfg.max_retries == 7  # nosec B101
    assert cfg.jitter is False  # nosec B101
    assert cfg.retryable_errors == frozenset({"AUTHENTICATION_ERROR", "MY_CODE"})  # nosec B101
    assert cfg.fallback_on_errors == frozenset({ErrorCode.INTERNAL_ERROR})  # nosec B101


def test_json_file_section(tmp_path, monkeypatch):
    path = tmp_path / "cfg.json"
    path.write_text(
        json.dumps({"retry": {"max_delay": 5000, "quality_gates": {"max_error_rate": 0.5}}}),
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    cfg = get_retry_config()
    assert cfg.max_delay == 5000  # nosec B101
    assert cfg.quality_gates is not None  # nosec B101
    assert cfg.quality_gates.max_error_rate == 0.5  # nosec B101


def test_yaml_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "cfg.yaml"
    path.write_text(
        "retry:\n  max_retries: 4\n  base_delay: 250\n  retryable_errors: [PERMISSION_DENIED]\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    monkeypatch.setenv("FALLBACK_ERRORS_MAX_RETRIES", "6")
    cfg = get_retry_config({"base_delay": 10, "max_delay": None})
    assert cfg.max_retries == 6  # nosec B101
    assert cfg.base_delay == 10  # nosec B101
    assert cfg.max_delay == 30000  # nosec B101
    assert cfg.retryable_errors == frozenset({"PERMISSION_DENIED"})  # nosec B101


def test_missing_or_garbage_file_contributes_nothing(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "absent.yaml"))
    assert get_retry_config().max_retries == 3  # nosec B101
    bad = tmp_path / "bad.yaml"
    bad.write_text("retry: [unclosed", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(bad))
    assert get_retry_config().max_retries == 3  # nosec B101


def test_invalid_env_value_raises(monkeypatch):
    monkeypatch.setenv("FALLBACK_ERRORS_MAX_RETRIES", "many")
    with pytest.raises(ValidationError):
        get_retry_config()
