"""
Catch helpers — turn raised exceptions into Outcome values.

    outcome = with_catch_sync(lambda: json.loads(payload))
    outcome = await with_catch(client.fetch(url), [httpx.HTTPError])

Both entry points share one policy, check_errors():

  - no allow-list      → every Exception becomes Caught(error)
  - allow-list given   → matching errors (subclasses included) become
                         Caught(error); anything else is re-raised as the
                         very same object with its traceback intact

BaseExceptions that are not Exceptions (KeyboardInterrupt, SystemExit,
asyncio.CancelledError) are never caught.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, Awaitable, Callable, Iterable, Optional, TypeVar

from with_catch.observability import log_caught, log_propagated
from with_catch.outcome import Caught, Outcome, Returned

T = TypeVar("T")

ErrorTypes = Iterable[type[BaseException]]


def _allowed_types(
    errors_to_catch: Optional[ErrorTypes],
) -> Optional[tuple[type[BaseException], ...]]:
    """Freeze the allow-list into a tuple usable by isinstance()."""
    if errors_to_catch is None:
        return None
    allowed = tuple(errors_to_catch)
    for entry in allowed:
        if not (isinstance(entry, type) and issubclass(entry, BaseException)):
            raise TypeError(f"errors_to_catch entries must be exception classes, got {entry!r}")
    return allowed


def check_errors(
    error: BaseException,
    errors_to_catch: Optional[ErrorTypes] = None,
    *,
    mode: str = "sync",
) -> Caught:
    """
    Decide whether an error is returned as data or re-raised.

    Returns Caught(error) when no allow-list is given or when error is an
    instance of one of its entries. Otherwise raises error unchanged.
    An empty allow-list matches nothing.
    """
    allowed = _allowed_types(errors_to_catch)
    if allowed is None or isinstance(error, allowed):
        log_caught(error, mode)
        return Caught(error)

    log_propagated(error, mode)
    raise error


def with_catch_sync(
    callback: Callable[[], T],
    errors_to_catch: Optional[ErrorTypes] = None,
) -> Outcome[T]:
    """
    Call callback() and return Returned(result) or Caught(error).

        outcome = with_catch_sync(lambda: divide(6, 0), [ZeroDivisionError])
        match outcome:
            case Returned(quotient): ...
            case Caught(error): ...

    Raises the callback's own exception when errors_to_catch is given and
    the exception matches none of its entries.
    """
    allowed = _allowed_types(errors_to_catch)
    try:
        result = callback()
    except Exception as error:
        return check_errors(error, allowed, mode="sync")
    return Returned(result)


async def with_catch(
    awaitable: Awaitable[T],
    errors_to_catch: Optional[ErrorTypes] = None,
) -> Outcome[T]:
    """
    Await awaitable and return Returned(result) or Caught(error).

        outcome = await with_catch(fetch_user(user_id), [LookupError])

    The awaitable is awaited once, to completion. It is not cancelled,
    retried or timed out; cancellation raised inside it propagates.
    If errors_to_catch is malformed the awaitable is never awaited: a
    coroutine is closed and a task or future is cancelled.
    """
    try:
        allowed = _allowed_types(errors_to_catch)
    except TypeError:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        elif asyncio.isfuture(awaitable):
            awaitable.cancel()
        raise

    try:
        result = await awaitable
    except Exception as error:
        return check_errors(error, allowed, mode="async")
    return Returned(result)


def catching(*errors_to_catch: type[BaseException]) -> Callable:
    """
    Decorator form — every call of the wrapped function returns an Outcome.

    With no arguments all Exceptions are caught. Works on both plain and
    async functions:

        @catching(ValueError)
        def parse_port(raw: str) -> int:
            return int(raw)

        @catching()
        async def load(path: str) -> bytes: ...
    """
    allowed = _allowed_types(errors_to_catch) if errors_to_catch else None

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
                return await with_catch(fn(*args, **kwargs), allowed)

            return async_wrapper

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
            return with_catch_sync(lambda: fn(*args, **kwargs), allowed)

        return wrapper

    return decorator
