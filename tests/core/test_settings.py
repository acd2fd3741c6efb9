from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from smart_logger.core.models import Severity
from smart_logger.core.settings import (
    CONFIG_ENV,
    MIN_SEVERITY_ENV,
    DebugBuildMode,
    LoggerSettings,
    StaticBuildMode,
    load_settings,
)


def test_defaults() -> None:
    s = load_settings()
    assert s == LoggerSettings()
    assert s.minimum_severity == Severity.VERBOSE
    assert s.enable_in_build is False
    assert s.show_timestamp is False
    assert s.enable_color_coding is True
    assert s.max_cache_size == 1000


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "logger.json"
    path.write_text(
        json.dumps({"minimum_severity": "important", "max_cache_size": 10, "show_timestamp": True}),
        encoding="utf-8",
    )

    s = load_settings(path)
    assert s.minimum_severity == Severity.IMPORTANT
    assert s.max_cache_size == 10
    assert s.show_timestamp is True


def test_load_from_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"minimum_severity": 2}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    assert load_settings().minimum_severity == Severity.CRITICAL


def test_missing_file_falls_back_to_defaults(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="smart_logger.core.settings"):
        s = load_settings(tmp_path / "missing.json")

    assert s == LoggerSettings()
    assert "using defaults" in caplog.text


def test_invalid_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"max_cache_size": -1}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_settings(path)


def test_unknown_keys_rejected(tmp_path: Path) -> None:
    path = tmp_path / "logger.json"
    path.write_text(json.dumps({"log_rotation": True}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_settings(path)


def test_env_override_min_severity(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MIN_SEVERITY_ENV, "critical")
    assert load_settings().minimum_severity == Severity.CRITICAL


def test_env_override_invalid_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(MIN_SEVERITY_ENV, "loud")
    with pytest.raises(ValueError, match=MIN_SEVERITY_ENV):
        load_settings()


def test_settings_are_frozen() -> None:
    s = LoggerSettings()
    with pytest.raises(ValidationError):
        s.max_cache_size = 5  # type: ignore[misc]


def test_build_modes() -> None:
    assert StaticBuildMode(True).is_development() is True
    assert StaticBuildMode(False).is_development() is False
    assert DebugBuildMode().is_development() is __debug__
