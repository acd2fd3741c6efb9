"""Severity and development-mode gate."""

from __future__ import annotations

from .models import Severity


def should_log(severity: Severity, minimum: Severity, development: bool) -> bool:
    """Return True when a message of `severity` should be emitted.

    The threshold is inclusive: a message at exactly `minimum` passes.
    """
    return development and minimum <= severity
