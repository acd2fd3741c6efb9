"""Caller annotation cache."""

from __future__ import annotations

import logging
import threading

from .models import CacheStats, CallSite

logger = logging.getLogger(__name__)


def build_annotation(site: CallSite) -> str:
    """Render the prefix written before every message from `site`."""
    return f"Class: '{site.class_name}', Method: '{site.member}', Line: {site.line}, Message: "


class CallerInfoCache:
    """Concurrent CallSite -> annotation map.

    Hits read the current dict without locking. Misses insert under a lock
    with ``setdefault`` so racing writers agree on one stored value.
    ``clear`` swaps in a fresh dict, so a resolve racing it sees either the
    old entry or recomputes an identical one.

    ``max_size`` is reported by ``stats`` but never enforced.
    """

    def __init__(self, max_size: int = 1000) -> None:
        if max_size < 0:
            raise ValueError("max_size must be >= 0")
        self._max_size = max_size
        self._entries: dict[CallSite, str] = {}
        self._write_lock = threading.Lock()
        self._over_limit_reported = False

    @property
    def max_size(self) -> int:
        return self._max_size

    def resolve(self, site: CallSite) -> str:
        """Return the annotation for `site`, building and storing it on a miss."""
        annotation = self._entries.get(site)
        if annotation is not None:
            return annotation

        annotation = build_annotation(site)
        with self._write_lock:
            annotation = self._entries.setdefault(site, annotation)
            count = len(self._entries)
            if count > self._max_size and not self._over_limit_reported:
                self._over_limit_reported = True
                logger.debug(
                    "Caller cache holds %s entries, above the configured size %s (not evicting)",
                    count,
                    self._max_size,
                )
        return annotation

    def clear(self) -> None:
        """Drop every entry; later resolves start from misses."""
        with self._write_lock:
            self._entries = {}
            self._over_limit_reported = False

    def stats(self) -> CacheStats:
        return CacheStats(count=len(self._entries), max_size=self._max_size)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, site: object) -> bool:
        return site in self._entries
