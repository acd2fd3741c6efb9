"""Logger settings and build-mode detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import Severity

logger = logging.getLogger(__name__)

CONFIG_ENV = "SMART_LOGGER_CONFIG"
MIN_SEVERITY_ENV = "SMART_LOGGER_MIN_SEVERITY"


class LoggerSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    minimum_severity: Severity = Field(
        default=Severity.VERBOSE,
        description="Lowest severity that is written (inclusive).",
    )
    enable_in_build: bool = Field(
        default=False,
        description="Keep logging on when the build is not a development build.",
    )
    show_timestamp: bool = Field(default=False, description="Prefix messages with a UTC time.")
    enable_color_coding: bool = Field(
        default=True, description="Emit <color=...> markup for warnings and errors."
    )
    max_cache_size: int = Field(
        default=1000, ge=0, description="Advisory caller cache size (reported, not enforced)."
    )

    @field_validator("minimum_severity", mode="before")
    @classmethod
    def _parse_severity(cls, value: Any) -> Any:
        if isinstance(value, (str, int)):
            return Severity.parse(value)
        return value


class BuildMode(Protocol):
    """Tells whether this process is a development build."""

    def is_development(self) -> bool:
        ...


@dataclass(frozen=True, slots=True)
class DebugBuildMode:
    """Development unless the interpreter runs optimized (``python -O``)."""

    def is_development(self) -> bool:
        return __debug__


@dataclass(frozen=True, slots=True)
class StaticBuildMode:
    development: bool

    def is_development(self) -> bool:
        return self.development


def _apply_env_overrides(settings: LoggerSettings) -> LoggerSettings:
    """Return settings with optional env overrides applied."""
    env = os.getenv(MIN_SEVERITY_ENV)
    if env is None or env == "":
        return settings

    try:
        value = Severity.parse(env)
    except ValueError as exc:
        raise ValueError(
            f"{MIN_SEVERITY_ENV} must be a severity name or value (verbose, important, critical)"
        ) from exc

    if value == settings.minimum_severity:
        return settings
    return settings.model_copy(update={"minimum_severity": value})


def load_settings(path: str | Path | None = None) -> LoggerSettings:
    """Load settings from a JSON file, falling back to defaults.

    The path defaults to ``$SMART_LOGGER_CONFIG``. A missing file is not an
    error: the defaults are used and a warning is logged.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV) or None

    if path is None:
        settings = LoggerSettings()
    else:
        p = Path(path)
        if p.is_file():
            settings = LoggerSettings.model_validate_json(p.read_text(encoding="utf-8"))
        else:
            logger.warning("Logger config %s not found; using defaults", p)
            settings = LoggerSettings()

    return _apply_env_overrides(settings)
