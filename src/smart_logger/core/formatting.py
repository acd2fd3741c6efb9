"""Message decoration: annotation, optional timestamp and color markup."""

from __future__ import annotations

import re
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .models import SinkLevel

_COLOR_TAG_RE = re.compile(r"<color=(?P<name>[A-Za-z]+)>|</color>")

_LEVEL_COLORS: dict[SinkLevel, str] = {
    SinkLevel.WARNING: "yellow",
    SinkLevel.ERROR: "red",
}

_ANSI_CODES: dict[str, str] = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
    "grey": "90",
    "gray": "90",
}
_ANSI_RESET = "\033[0m"


def colorize(text: str, color: str) -> str:
    """Wrap text in a rich-text color tag."""
    return f"<color={color}>{text}</color>"


def strip_markup(text: str) -> str:
    """Remove color tags for sinks without rich-text support."""
    return _COLOR_TAG_RE.sub("", text)


def markup_to_ansi(text: str) -> str:
    """Translate color tags into ANSI escapes; unknown colors are dropped."""

    def _sub(m: re.Match[str]) -> str:
        name = m.group("name")
        if name is None:
            return _ANSI_RESET
        code = _ANSI_CODES.get(name.lower())
        return f"\033[{code}m" if code else ""

    return _COLOR_TAG_RE.sub(_sub, text)


def describe_exception(exc: BaseException) -> str:
    """Message text of an exception, falling back to its class name."""
    try:
        text = str(exc)
    except Exception:
        text = ""
    return text or type(exc).__name__


def render_traceback(exc: BaseException) -> str:
    """Full traceback text, as written for the raw exception record."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Formatter:
    """Build the final text handed to a sink."""

    color_coding: bool = True
    show_timestamp: bool = False
    clock: Callable[[], datetime] = field(default=_utcnow, compare=False)

    def format(self, annotation: str, level: SinkLevel, text: str) -> str:
        """Decorate a plain message: ``annotation'text'``, colored by channel."""
        return self._decorate(level, f"{annotation}'{text}'")

    def format_exception(
        self,
        annotation: str,
        exception: BaseException,
        additional_message: str = "",
    ) -> str:
        """Decorate an exception summary, with optional context message."""
        reason = describe_exception(exception)
        if additional_message:
            body = f"{annotation}'{additional_message}' - Exception: {reason}"
        else:
            body = f"{annotation}Exception: {reason}"
        return self._decorate(SinkLevel.ERROR, body)

    def _decorate(self, level: SinkLevel, body: str) -> str:
        if self.show_timestamp:
            ts = self.clock().strftime("%H:%M:%S.%f")[:-3]
            body = f"[{ts}] {body}"
        color = _LEVEL_COLORS.get(level) if self.color_coding else None
        return colorize(body, color) if color else body
