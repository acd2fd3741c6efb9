"""Process-wide logging API.

The module owns one ``SmartLogger``. It is built lazily on first use from
``load_settings()``, ``LoggingSink.visible()`` and ``DebugBuildMode``, or explicitly
with ``configure``. ``reset`` drops it so the next call starts fresh.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from .core.cache import CallerInfoCache
from .core.logger import SmartLogger
from .core.models import CacheStats, CallSite, Severity
from .core.settings import BuildMode, LoggerSettings, load_settings
from .core.sinks import LoggingSink, Sink

_lock = threading.Lock()
_default: SmartLogger | None = None


def configure(
    sink: Sink | None = None,
    *,
    settings: LoggerSettings | None = None,
    config_path: str | Path | None = None,
    build_mode: BuildMode | None = None,
    cache: CallerInfoCache | None = None,
) -> SmartLogger:
    """Build and install the process-wide logger."""
    global _default
    if settings is None:
        settings = load_settings(config_path)
    instance = SmartLogger(
        sink if sink is not None else LoggingSink.visible(),
        settings=settings,
        build_mode=build_mode,
        cache=cache,
    )
    with _lock:
        _default = instance
    return instance


def get_logger() -> SmartLogger:
    """Return the process-wide logger, creating it with defaults if needed."""
    global _default
    instance = _default
    if instance is not None:
        return instance
    with _lock:
        if _default is None:
            _default = SmartLogger(LoggingSink.visible(), settings=load_settings())
        return _default


def reset() -> None:
    global _default
    with _lock:
        _default = None


def log(
    text: str | None,
    severity: Severity = Severity.VERBOSE,
    *,
    call_site: CallSite | None = None,
    stacklevel: int = 1,
) -> None:
    get_logger().log(text, severity, call_site=call_site, stacklevel=stacklevel + 1)


def log_warning(
    text: str | None, *, call_site: CallSite | None = None, stacklevel: int = 1
) -> None:
    get_logger().log_warning(text, call_site=call_site, stacklevel=stacklevel + 1)


def log_error(text: str | None, *, call_site: CallSite | None = None, stacklevel: int = 1) -> None:
    get_logger().log_error(text, call_site=call_site, stacklevel=stacklevel + 1)


def log_exception(
    exception: BaseException | None,
    additional_message: str | None = "",
    *,
    call_site: CallSite | None = None,
    stacklevel: int = 1,
) -> None:
    get_logger().log_exception(
        exception, additional_message, call_site=call_site, stacklevel=stacklevel + 1
    )


def log_if(
    condition: bool,
    text: str | None,
    severity: Severity = Severity.VERBOSE,
    *,
    call_site: CallSite | None = None,
    stacklevel: int = 1,
) -> None:
    get_logger().log_if(condition, text, severity, call_site=call_site, stacklevel=stacklevel + 1)


def log_format(
    format_string: str,
    *args: Any,
    call_site: CallSite | None = None,
    stacklevel: int = 1,
    **kwargs: Any,
) -> None:
    get_logger().log_format(
        format_string, *args, call_site=call_site, stacklevel=stacklevel + 1, **kwargs
    )


def clear_cache() -> None:
    get_logger().clear_cache()


def cache_stats() -> CacheStats:
    return get_logger().cache_stats()


def is_logging_enabled() -> bool:
    return get_logger().is_logging_enabled


def current_log_level() -> Severity:
    return get_logger().current_log_level
