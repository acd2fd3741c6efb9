"""Core data models for the logging facade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import PurePath


class Severity(IntEnum):
    """Ordered importance of a message; higher is more severe."""

    VERBOSE = 0
    IMPORTANT = 1
    CRITICAL = 2

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Accept a Severity, its integer value, or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip()
            if name.lstrip("-").isdigit():
                return cls(int(name))
            try:
                return cls[name.upper()]
            except KeyError as e:
                valid = ", ".join(s.name.lower() for s in cls)
                raise ValueError(f"Unknown severity '{value}'. Valid values: {valid}") from e
        return cls(value)


class SinkLevel(str, Enum):
    """Channel a formatted message is written to."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class CallSite:
    """Source location of a log call (method + file base name + line)."""

    member: str
    file_name: str
    line: int

    @property
    def class_name(self) -> str:
        return PurePath(self.file_name).stem


UNKNOWN_CALL_SITE = CallSite(member="<unknown>", file_name="<unknown>", line=0)


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Observed cache size plus the configured (advisory) maximum."""

    count: int
    max_size: int
