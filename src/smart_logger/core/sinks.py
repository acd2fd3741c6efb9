"""Sink interface and the built-in sinks."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Protocol, TextIO

from .formatting import markup_to_ansi, strip_markup
from .models import SinkLevel

_STDLIB_LEVELS: dict[SinkLevel, int] = {
    SinkLevel.INFO: logging.INFO,
    SinkLevel.WARNING: logging.WARNING,
    SinkLevel.ERROR: logging.ERROR,
}


class Sink(Protocol):
    """Destination for fully formatted log text."""

    def write(self, level: SinkLevel, text: str) -> None:
        """Write one formatted message."""
        ...


class LoggingSink:
    """Forward messages to a stdlib logger (markup removed)."""

    def __init__(self, target: logging.Logger | None = None) -> None:
        self.target = target or logging.getLogger("smart_logger")

    @classmethod
    def visible(cls, name: str = "smart_logger") -> LoggingSink:
        """Sink on a logger that shows INFO even when logging is unconfigured.

        A level and a stderr handler are only added when the logger has none.
        """
        target = logging.getLogger(name)
        if target.level == logging.NOTSET:
            target.setLevel(logging.INFO)
        if not target.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
            target.addHandler(handler)
        return cls(target)

    def write(self, level: SinkLevel, text: str) -> None:
        self.target.log(_STDLIB_LEVELS[level], strip_markup(text))


class ConsoleSink:
    """Write ``[LEVEL] text`` lines to a stream.

    With rich text on, color tags become ANSI escapes; otherwise they are
    stripped. Defaults to rich text when the stream is a terminal.
    """

    def __init__(self, stream: TextIO | None = None, *, rich_text: bool | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        if rich_text is None:
            isatty = getattr(self.stream, "isatty", None)
            rich_text = bool(isatty and isatty())
        self.rich_text = rich_text
        self._lock = threading.Lock()

    def write(self, level: SinkLevel, text: str) -> None:
        text = markup_to_ansi(text) if self.rich_text else strip_markup(text)
        with self._lock:
            self.stream.write(f"[{level.value}] {text}\n")
            self.stream.flush()


class MemorySink:
    """Keep every record in memory; safe to share between threads."""

    def __init__(self) -> None:
        self._records: list[tuple[SinkLevel, str]] = []
        self._lock = threading.Lock()

    def write(self, level: SinkLevel, text: str) -> None:
        with self._lock:
            self._records.append((level, text))

    @property
    def records(self) -> list[tuple[SinkLevel, str]]:
        with self._lock:
            return list(self._records)

    def messages(self, level: SinkLevel | None = None) -> list[str]:
        """Texts written, optionally only those on one channel."""
        return [text for lvl, text in self.records if level is None or lvl == level]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
