"""
Shared test fixtures and helpers for the with_catch test suite.

Provides the sample error types and functions used across modules, and
isolates each test from cached settings and structlog configuration.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from with_catch.config import get_settings
from with_catch.observability import enable_outcome_logging


class DivideZeroError(Exception):
    """Raised by divide() when the divisor is zero."""


class DivideZero2Error(Exception):
    """Unrelated error type, never raised by divide()."""


def divide(a: float, b: float) -> float:
    if b == 0:
        raise DivideZeroError()
    return a / b


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging() -> Iterator[None]:
    """Reload settings per test and undo any logging configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    enable_outcome_logging(False)
    structlog.reset_defaults()


@pytest.fixture()
def log_outcomes() -> None:
    """Enable outcome logging for one test."""
    enable_outcome_logging(True)
