"""Tests for the Outcome tagged union — Returned and Caught."""

from __future__ import annotations

import pytest

from with_catch import Caught, Outcome, Returned


class TestReturned:
    def test_wraps_value(self):
        outcome = Returned(42)
        assert outcome.is_returned()
        assert not outcome.is_caught()
        assert outcome.value() == 42

    def test_accepts_none(self):
        outcome = Returned(None)
        assert outcome.is_returned()
        assert outcome.value() is None

    def test_is_truthy(self):
        assert Returned(0)
        assert bool(Returned(None))

    def test_error_raises(self):
        with pytest.raises(ValueError, match="Cannot get error from a Returned"):
            Returned(42).error()

    def test_immutability(self):
        outcome = Returned(1)
        with pytest.raises(AttributeError):
            outcome._value = 2  # type: ignore[misc]


class TestCaught:
    def test_wraps_exact_error(self):
        error = KeyError("id")
        outcome = Caught(error)
        assert outcome.is_caught()
        assert not outcome.is_returned()
        assert outcome.error() is error

    def test_is_falsy(self):
        assert not Caught(ValueError("bad"))

    def test_value_raises(self):
        with pytest.raises(ValueError, match="Cannot get value from a Caught"):
            Caught(RuntimeError("boom")).value()

    def test_rejects_non_exception(self):
        with pytest.raises(TypeError, match="must be an exception instance"):
            Caught("not an error")  # type: ignore[arg-type]


class TestUnpacking:
    def test_returned_unpacks_to_none_and_value(self):
        error, value = Returned({"hello": "world"})
        assert error is None
        assert value == {"hello": "world"}

    def test_caught_unpacks_to_error_and_none(self):
        expected = ValueError("bad")
        error, value = Caught(expected)
        assert error is expected
        assert value is None


class TestPatternMatching:
    @pytest.mark.parametrize(
        "outcome, expected",
        [
            (Returned(5), "returned 5"),
            (Caught(ValueError("x")), "caught ValueError"),
        ],
    )
    def test_match_case(self, outcome: Outcome, expected: str):
        match outcome:
            case Returned(v):
                label = f"returned {v}"
            case Caught(err):
                label = f"caught {type(err).__name__}"
        assert label == expected


class TestTransformations:
    def test_map_transforms_value(self):
        assert Returned(5).map(lambda x: x * 2) == Returned(10)

    def test_map_passes_caught_through(self):
        outcome = Caught(ValueError("bad"))
        assert outcome.map(lambda x: x * 2) is outcome

    def test_either(self):
        assert Returned(3).either(lambda v: v + 1, lambda e: -1) == 4
        assert Caught(ValueError("x")).either(lambda v: v + 1, lambda e: -1) == -1

    def test_get_or_else(self):
        assert Returned(3).get_or_else(0) == 3
        assert Caught(ValueError("x")).get_or_else(0) == 0

    def test_unwrap_returns_value(self):
        assert Returned("ok").unwrap() == "ok"

    def test_unwrap_raises_caught_error(self):
        error = LookupError("missing")
        with pytest.raises(LookupError) as exc_info:
            Caught(error).unwrap()
        assert exc_info.value is error


class TestEqualityAndRepr:
    def test_returned_equality(self):
        assert Returned(42) == Returned(42)
        assert Returned(42) != Returned(99)

    def test_caught_equality_is_identity(self):
        error = ValueError("x")
        assert Caught(error) == Caught(error)
        assert Caught(error) != Caught(ValueError("x"))

    def test_returned_not_equal_to_caught(self):
        assert Returned(None) != Caught(ValueError("x"))

    def test_hashable(self):
        error = ValueError("x")
        assert len({Returned(1), Returned(1), Caught(error), Caught(error)}) == 2

    def test_repr(self):
        assert repr(Returned(42)) == "Returned(42)"
        assert repr(Caught(ValueError("gone"))) == "Caught(ValueError('gone'))"
