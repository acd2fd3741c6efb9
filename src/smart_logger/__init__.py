"""Caller-annotated, severity-gated logging facade."""

from __future__ import annotations

from .core import (
    CacheStats,
    CallSite,
    ConsoleSink,
    DebugBuildMode,
    InvalidMessageError,
    LoggerSettings,
    LoggingSink,
    MemorySink,
    Severity,
    Sink,
    SinkLevel,
    SmartLogger,
    StaticBuildMode,
    load_settings,
)
from .facade import (
    cache_stats,
    clear_cache,
    configure,
    current_log_level,
    get_logger,
    is_logging_enabled,
    log,
    log_error,
    log_exception,
    log_format,
    log_if,
    log_warning,
    reset,
)

__all__ = [
    "CacheStats",
    "CallSite",
    "ConsoleSink",
    "DebugBuildMode",
    "InvalidMessageError",
    "LoggerSettings",
    "LoggingSink",
    "MemorySink",
    "Severity",
    "Sink",
    "SinkLevel",
    "SmartLogger",
    "StaticBuildMode",
    "cache_stats",
    "clear_cache",
    "configure",
    "current_log_level",
    "get_logger",
    "is_logging_enabled",
    "load_settings",
    "log",
    "log_error",
    "log_exception",
    "log_format",
    "log_if",
    "log_warning",
    "reset",
]
