"""
Structured logging for catch outcomes.

Logging is opt-in and never alters control flow: a caught error is still
returned, a propagated error is still raised. The catch path only reads a
plain flag; settings are parsed when logging is configured, not when an
error is handled.
"""

from __future__ import annotations

import logging

import structlog

from with_catch.config import get_settings

log = structlog.get_logger("with_catch")

_log_outcomes = False


def enable_outcome_logging(enabled: bool = True) -> None:
    """Switch catch.caught / catch.propagated debug events on or off."""
    global _log_outcomes
    _log_outcomes = enabled


def outcome_logging_enabled() -> bool:
    return _log_outcomes


def configure_structlog(log_level: str | None = None) -> None:
    """
    Configure structlog for human-readable console output.

    Reads CatchSettings once: its log_level is used when no explicit level
    is given, and its log_outcomes switches outcome logging.
    Unknown level names fall back to INFO.
    """
    settings = get_settings()
    if log_level is None:
        log_level = settings.log_level
    enable_outcome_logging(settings.log_outcomes)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def log_caught(error: BaseException, mode: str) -> None:
    if _log_outcomes:
        log.debug("catch.caught", error_type=type(error).__qualname__, mode=mode)


def log_propagated(error: BaseException, mode: str) -> None:
    # The error's own __str__ is never called here; it may raise.
    if _log_outcomes:
        log.debug("catch.propagated", error_type=type(error).__qualname__, mode=mode)
