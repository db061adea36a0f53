"""
Outcome — the value returned by with_catch / with_catch_sync.

An Outcome[T] is either Returned(value: T) or Caught(error: BaseException).
Exactly one of the two is ever present:

    ┌──────────────┐   returns    ┌──────────────────┐
    │  callback /  │─────────────→│ Returned(value)  │
    │  awaitable   │              └──────────────────┘
    └──────┬───────┘   raises     ┌──────────────────┐
           └──────────→ filter ──→│ Caught(error)    │   (or re-raised)
                                  └──────────────────┘

Three ways to branch on it:

    match outcome:
        case Returned(value): ...
        case Caught(error): ...

    error, value = outcome          # (None, value) or (error, None)

    if outcome: ...                 # truthy only when Returned
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Outcome(Generic[T]):
    """
    Explicit result of running a computation that may raise.

    Usage:
        >>> outcome = Returned(21).map(lambda x: x * 2)
        >>> outcome.value()
        42

        >>> Caught(KeyError("id")).is_caught()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_returned(self) -> bool:
        """Check if the computation completed normally."""
        return isinstance(self, Returned)

    def is_caught(self) -> bool:
        """Check if the computation raised and the error was caught."""
        return isinstance(self, Caught)

    def value(self) -> T:
        """
        Extract the returned value. Raises ValueError if called on a Caught.

        Prefer .either(), unpacking or match/case for safe access.
        """
        match self:
            case Returned(v):
                return v
            case Caught(err):
                raise ValueError(f"Cannot get value from a Caught outcome: {err!r}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> BaseException:
        """Extract the caught exception. Raises ValueError if called on a Returned."""
        match self:
            case Caught(err):
                return err
            case Returned(v):
                raise ValueError(f"Cannot get error from a Returned outcome: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def either(
        self,
        on_returned: Callable[[T], R],
        on_caught: Callable[[BaseException], R],
    ) -> R:
        """
        Apply one of two functions depending on the track.

            outcome.either(
                on_returned=lambda data: data["hello"],
                on_caught=lambda err: f"bad payload: {err}",
            )
        """
        match self:
            case Returned(v):
                return on_returned(v)
            case Caught(err):
                return on_caught(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Outcome[U]:
        """Transform the returned value. A Caught outcome passes through as-is."""
        match self:
            case Returned(v):
                return Returned(mapper(v))
            case Caught(_):
                return self  # type: ignore[return-value]
        raise TypeError("unreachable")  # pragma: no cover

    def get_or_else(self, default: T) -> T:
        """Extract the value or return a default when an error was caught."""
        match self:
            case Returned(v):
                return v
            case _:
                return default

    def unwrap(self) -> T:
        """
        Extract the value, or raise the caught exception object itself.

        Turns an Outcome back into ordinary exception flow.
        """
        match self:
            case Returned(v):
                return v
            case Caught(err):
                raise err
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Dunder methods ────────────────────────

    def __iter__(self) -> Iterator[Any]:
        """Unpack as an (error, value) pair."""
        match self:
            case Returned(v):
                return iter((None, v))
            case Caught(err):
                return iter((err, None))
        raise TypeError("unreachable")  # pragma: no cover

    def __bool__(self) -> bool:
        return self.is_returned()


@dataclass(frozen=True, slots=True, eq=False)
class Returned(Outcome[T]):
    """The computation completed normally — wraps its value (None allowed)."""

    _value: T

    def __repr__(self) -> str:
        return f"Returned({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Returned):
            return self._value == other._value
        if isinstance(other, Outcome):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Returned", self._value))


Returned.__match_args__ = ("_value",)


@dataclass(frozen=True, slots=True, eq=False)
class Caught(Outcome[Any]):
    """The computation raised — wraps the exact exception instance."""

    _error: BaseException

    def __init__(self, error: BaseException) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"Caught error must be an exception instance, got {error!r}")
        object.__setattr__(self, "_error", error)

    def __repr__(self) -> str:
        return f"Caught({self._error!r})"

    def __eq__(self, other: object) -> bool:
        # Exceptions have no value equality; identity is what the caller raised.
        if isinstance(other, Caught):
            return self._error is other._error
        if isinstance(other, Outcome):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Caught", id(self._error)))


Caught.__match_args__ = ("_error",)
