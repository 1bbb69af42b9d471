"""Tests for the two-variant cost type and the error hierarchy."""

from __future__ import annotations

import pytest

from dvconverge.types import (
    UNREACHABLE,
    ZERO,
    ConvergenceError,
    DistanceVectorError,
    Finite,
    InputFormatError,
    UnknownNodeError,
    Unreachable,
)


class TestCost:
    """Arithmetic, ordering and rendering of costs."""

    def test_finite_addition(self):
        assert Finite(2) + Finite(3) == Finite(5)

    def test_unreachable_absorbs_addition(self):
        assert Finite(2) + UNREACHABLE == UNREACHABLE
        assert UNREACHABLE + Finite(2) == UNREACHABLE
        assert UNREACHABLE + UNREACHABLE == UNREACHABLE

    def test_unreachable_instances_are_equal(self):
        assert Unreachable() == UNREACHABLE

    def test_finite_never_equals_unreachable(self):
        assert Finite(0) != UNREACHABLE
        assert UNREACHABLE != Finite(0)

    def test_ordering(self):
        assert Finite(1) < Finite(2)
        assert Finite(10**9) < UNREACHABLE
        assert not UNREACHABLE < Finite(0)
        assert sorted([UNREACHABLE, Finite(3), ZERO]) == [ZERO, Finite(3), UNREACHABLE]

    def test_is_finite(self):
        assert Finite(0).is_finite
        assert not UNREACHABLE.is_finite

    def test_rendering(self):
        assert str(Finite(7)) == "7"
        assert str(UNREACHABLE) == "INF"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Finite(-1)

    def test_non_int_rejected(self):
        with pytest.raises(TypeError):
            Finite(1.5)
        with pytest.raises(TypeError):
            Finite(True)

    def test_adding_plain_int_not_supported(self):
        with pytest.raises(TypeError):
            Finite(1) + 1

    def test_hashable(self):
        assert len({Finite(1), Finite(1), UNREACHABLE, Unreachable()}) == 2


class TestErrors:
    """Error hierarchy and messages."""

    def test_unknown_node_is_input_error(self):
        err = UnknownNodeError("Unknown node: Z", token="Z")
        assert isinstance(err, InputFormatError)
        assert isinstance(err, DistanceVectorError)
        assert str(err) == "Unknown node: Z (token='Z')"

    def test_input_error_without_token(self):
        assert str(InputFormatError("Unexpected end of input")) == "Unexpected end of input"

    def test_convergence_error_is_distinct(self):
        err = ConvergenceError("did not converge", rounds=9, limit=9)
        assert not isinstance(err, InputFormatError)
        assert str(err) == "did not converge after 9 rounds (limit=9)"
