"""Core building blocks: models, gate, call-site cache, formatting, sinks."""

from __future__ import annotations

from .cache import CallerInfoCache, build_annotation
from .call_site import capture_call_site, find_call_site
from .errors import InvalidMessageError
from .filtering import should_log
from .formatting import Formatter, colorize, markup_to_ansi, strip_markup
from .logger import SmartLogger
from .models import UNKNOWN_CALL_SITE, CacheStats, CallSite, Severity, SinkLevel
from .settings import BuildMode, DebugBuildMode, LoggerSettings, StaticBuildMode, load_settings
from .sinks import ConsoleSink, LoggingSink, MemorySink, Sink

__all__ = [
    "UNKNOWN_CALL_SITE",
    "BuildMode",
    "CacheStats",
    "CallSite",
    "CallerInfoCache",
    "ConsoleSink",
    "DebugBuildMode",
    "Formatter",
    "InvalidMessageError",
    "LoggerSettings",
    "LoggingSink",
    "MemorySink",
    "Severity",
    "Sink",
    "SinkLevel",
    "SmartLogger",
    "StaticBuildMode",
    "build_annotation",
    "capture_call_site",
    "colorize",
    "find_call_site",
    "load_settings",
    "markup_to_ansi",
    "should_log",
    "strip_markup",
]
