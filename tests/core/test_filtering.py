from __future__ import annotations

import pytest

from smart_logger.core.filtering import should_log
from smart_logger.core.models import Severity


@pytest.mark.parametrize("severity", list(Severity))
def test_should_log_threshold_is_inclusive(severity: Severity) -> None:
    assert should_log(severity, severity, True)


def test_should_log_below_minimum_is_filtered() -> None:
    assert not should_log(Severity.VERBOSE, Severity.IMPORTANT, True)
    assert not should_log(Severity.IMPORTANT, Severity.CRITICAL, True)
    assert should_log(Severity.CRITICAL, Severity.VERBOSE, True)


@pytest.mark.parametrize("severity", list(Severity))
def test_should_log_disabled_outside_development(severity: Severity) -> None:
    assert not should_log(severity, Severity.VERBOSE, False)
