"""
Test assertions for Outcome values.

Expressive assert helpers that produce clear failure messages:

    from with_catch import OutcomeAssertions

    def test_parse_port():
        outcome = parse_port("8080")
        assert OutcomeAssertions.assert_returned(outcome) == 8080

    def test_parse_port_rejects_text():
        outcome = parse_port("http")
        OutcomeAssertions.assert_caught(outcome, ValueError)
        OutcomeAssertions.assert_caught_message_contains(outcome, "invalid literal")
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from with_catch.outcome import Outcome

T = TypeVar("T")


class OutcomeAssertions:
    """Expressive test assertions for Outcome values."""

    @staticmethod
    def assert_returned(outcome: Outcome[T], message: str = "") -> T:
        """
        Assert the Outcome is Returned and return the value.

            value = OutcomeAssertions.assert_returned(outcome)
        """
        context = f" — {message}" if message else ""
        assert outcome.is_returned(), (
            f"Expected Returned but got Caught({outcome.error()!r}){context}"
        )
        return outcome.value()

    @staticmethod
    def assert_caught(
        outcome: Outcome[T],
        expected_type: Optional[type[BaseException]] = None,
        message: str = "",
    ) -> BaseException:
        """
        Assert the Outcome is Caught, optionally checking the exception type.

            error = OutcomeAssertions.assert_caught(outcome, ZeroDivisionError)
        """
        context = f" — {message}" if message else ""
        assert outcome.is_caught(), (
            f"Expected Caught but got Returned({outcome.value()!r}){context}"
        )
        error = outcome.error()
        if expected_type is not None:
            assert isinstance(error, expected_type), (
                f"Expected caught {expected_type.__name__} "
                f"but got {type(error).__name__}: {error}{context}"
            )
        return error

    @staticmethod
    def assert_caught_message_contains(outcome: Outcome[T], substring: str) -> None:
        """Assert that the caught exception's message contains the given substring."""
        error = OutcomeAssertions.assert_caught(outcome)
        assert substring.lower() in str(error).lower(), (
            f"Expected caught error message to contain {substring!r} "
            f"but message was: {str(error)!r}"
        )

    @staticmethod
    def assert_returned_value(outcome: Outcome[T], expected_value: Any) -> None:
        """Assert the Outcome is Returned with the specific value."""
        value = OutcomeAssertions.assert_returned(outcome)
        assert value == expected_value, (
            f"Expected returned value {expected_value!r} but got {value!r}"
        )
