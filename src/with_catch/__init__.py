"""
with_catch — exceptions as values.

Run a callback or await a computation and get back an explicit Outcome
instead of a raised exception, optionally limited to an allow-list of
exception types:

    from with_catch import Caught, Returned, with_catch, with_catch_sync

    error, data = with_catch_sync(lambda: json.loads(raw))
    if error:
        ...

    match await with_catch(fetch(url), [TimeoutError]):
        case Returned(body): ...
        case Caught(error): ...
"""

from with_catch.outcome import Outcome, Returned, Caught
from with_catch.catch import catching, check_errors, with_catch, with_catch_sync
from with_catch.assertions import OutcomeAssertions
from with_catch.config import CatchSettings, get_settings
from with_catch.observability import configure_structlog, enable_outcome_logging

__all__ = [
    "Outcome",
    "Returned",
    "Caught",
    "with_catch",
    "with_catch_sync",
    "check_errors",
    "catching",
    "OutcomeAssertions",
    "CatchSettings",
    "get_settings",
    "configure_structlog",
    "enable_outcome_logging",
]

__version__ = "1.0.0"
