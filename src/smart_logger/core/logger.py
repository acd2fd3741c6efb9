"""Caller-annotated logging facade.

Each operation runs gate -> validate -> resolve call site -> format -> write.
A call that fails the gate does nothing at all: no validation, no frame
access and no cache mutation.
"""

from __future__ import annotations

from typing import Any

from .cache import CallerInfoCache
from .call_site import capture_call_site
from .errors import InvalidMessageError
from .filtering import should_log
from .formatting import Formatter, describe_exception, render_traceback
from .models import CacheStats, CallSite, Severity, SinkLevel
from .settings import BuildMode, DebugBuildMode, LoggerSettings
from .sinks import Sink

def _validate(text: str | None) -> str:
    if not text:
        raise InvalidMessageError("Message cannot be None or empty")
    return text


class SmartLogger:
    """Write annotated messages to a sink, gated by build mode and severity.

    Settings and build mode are read once here and never again.
    """

    def __init__(
        self,
        sink: Sink,
        *,
        settings: LoggerSettings | None = None,
        build_mode: BuildMode | None = None,
        cache: CallerInfoCache | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        if settings is None:
            settings = LoggerSettings()
        if build_mode is None:
            build_mode = DebugBuildMode()

        self._sink = sink
        self._settings = settings
        self._development = build_mode.is_development() or settings.enable_in_build
        self._minimum = settings.minimum_severity
        self._cache = cache if cache is not None else CallerInfoCache(settings.max_cache_size)
        self._formatter = formatter or Formatter(
            color_coding=settings.enable_color_coding,
            show_timestamp=settings.show_timestamp,
        )

    @property
    def settings(self) -> LoggerSettings:
        return self._settings

    @property
    def is_logging_enabled(self) -> bool:
        return self._development

    @property
    def current_log_level(self) -> Severity:
        return self._minimum

    @property
    def cache(self) -> CallerInfoCache:
        return self._cache

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    def _emit(self, level: SinkLevel, text: str, site: CallSite) -> None:
        annotation = self._cache.resolve(site)
        self._sink.write(level, self._formatter.format(annotation, level, text))

    def log(
        self,
        text: str | None,
        severity: Severity = Severity.VERBOSE,
        *,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Write a regular message if `severity` clears the configured minimum.

        Raises InvalidMessageError for None/empty text, but only when the
        message would have been written.
        """
        if not should_log(severity, self._minimum, self._development):
            return
        text = _validate(text)
        if call_site is None:
            call_site = capture_call_site(stacklevel)
        self._emit(SinkLevel.INFO, text, call_site)

    def log_warning(
        self,
        text: str | None,
        *,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Write a warning (yellow). Only the development-mode gate applies."""
        if not self._development:
            return
        text = _validate(text)
        if call_site is None:
            call_site = capture_call_site(stacklevel)
        self._emit(SinkLevel.WARNING, text, call_site)

    def log_error(
        self,
        text: str | None,
        *,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Write an error (red). Only the development-mode gate applies."""
        if not self._development:
            return
        text = _validate(text)
        if call_site is None:
            call_site = capture_call_site(stacklevel)
        self._emit(SinkLevel.ERROR, text, call_site)

    def log_exception(
        self,
        exception: BaseException | None,
        additional_message: str | None = "",
        *,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Write the traceback, then an annotated summary, both as errors.

        A missing exception is ignored. Never raises.
        """
        if not self._development or exception is None:
            return
        if call_site is None:
            call_site = capture_call_site(stacklevel)
        annotation = self._cache.resolve(call_site)
        self._sink.write(SinkLevel.ERROR, render_traceback(exception))
        self._sink.write(
            SinkLevel.ERROR,
            self._formatter.format_exception(annotation, exception, additional_message or ""),
        )

    def log_if(
        self,
        condition: bool,
        text: str | None,
        severity: Severity = Severity.VERBOSE,
        *,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Same as `log`, but only when `condition` is true."""
        if condition:
            self.log(text, severity, call_site=call_site, stacklevel=stacklevel + 1)

    def log_format(
        self,
        format_string: str,
        *args: Any,
        call_site: CallSite | None = None,
        stacklevel: int = 1,
        **kwargs: Any,
    ) -> None:
        """Log ``format_string.format(*args, **kwargs)`` as a verbose message.

        A malformed format, or an argument that fails to format, is reported as
        an error record instead of raising. `call_site` and `stacklevel` are
        consumed here, so they cannot be used as named fields; pass those
        values positionally (`{0}`).
        """
        if not should_log(Severity.VERBOSE, self._minimum, self._development):
            return
        try:
            message = format_string.format(*args, **kwargs)
        except Exception as exc:
            self.log_error(
                f"Format error in log_format: {describe_exception(exc)}. Original format: '{format_string}'",
                call_site=call_site,
                stacklevel=stacklevel + 1,
            )
            return
        self.log(message, call_site=call_site, stacklevel=stacklevel + 1)
