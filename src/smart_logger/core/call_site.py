"""Call-site capture.

The primary path reads the caller's frame at a fixed depth, the same way
``logging`` honours ``stacklevel``: one frame lookup per call, after which the
cache turns the site into an annotation. Callers that already know their
location can pass an explicit ``CallSite`` and skip frame access entirely.

``find_call_site`` walks the whole stack instead. It is kept only for
interpreters without ``sys._getframe`` and is not reliable: frames of
decorators, wrappers and other helpers outside this package are reported as
the caller.
"""

from __future__ import annotations

import logging
import os
import sys
import traceback

from .models import UNKNOWN_CALL_SITE, CallSite

logger = logging.getLogger(__name__)

_getframe = getattr(sys, "_getframe", None)

# Directory of the smart_logger package; frames under it are never the caller.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _is_internal(filename: str) -> bool:
    return os.path.abspath(filename).startswith(_PACKAGE_DIR + os.sep)


def capture_call_site(stacklevel: int = 1) -> CallSite:
    """Return the call site `stacklevel` frames above the function calling this one.

    ``stacklevel=1`` is the direct caller of that function.
    """
    if stacklevel < 1:
        raise ValueError("stacklevel must be >= 1")
    if _getframe is None:
        return find_call_site()

    try:
        frame = _getframe(stacklevel + 1)
    except ValueError:
        # Call stack is shallower than requested.
        return UNKNOWN_CALL_SITE

    code = frame.f_code
    return CallSite(
        member=code.co_name,
        file_name=os.path.basename(code.co_filename),
        line=frame.f_lineno,
    )


def find_call_site() -> CallSite:
    """Walk the stack for the innermost frame outside this package."""
    logger.debug("Resolving call site by stack walk")
    for fs in reversed(traceback.extract_stack()):
        if _is_internal(fs.filename):
            continue
        return CallSite(
            member=fs.name,
            file_name=os.path.basename(fs.filename),
            line=fs.lineno or 0,
        )
    return UNKNOWN_CALL_SITE
