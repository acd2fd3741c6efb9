"""Errors raised across the facade boundary."""

from __future__ import annotations


class InvalidMessageError(ValueError):
    """Raised when message text is None or empty after the gate passed."""
