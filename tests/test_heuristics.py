"""Tests for the stock A* heuristics."""

from __future__ import annotations

import math

import pytest

from waypoint.search import heuristics


class TestZero:
    def test_always_zero(self) -> None:
        assert heuristics.zero("a", "b") == 0.0
        assert heuristics.zero(None, None) == 0.0


class TestConstant:
    def test_returns_value(self) -> None:
        h = heuristics.constant(2.5)
        assert h("a", "b") == 2.5
        assert h(1, 2) == 2.5

    def test_coerces_to_float(self) -> None:
        assert isinstance(heuristics.constant(3)("a", "b"), float)

    @pytest.mark.parametrize("value", [-1.0, math.nan])
    def test_rejects_invalid(self, value: float) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            heuristics.constant(value)


class TestEuclidean:
    def test_two_dimensions(self) -> None:
        assert heuristics.euclidean((0, 0), (3, 4)) == 5.0

    def test_same_point(self) -> None:
        assert heuristics.euclidean((1.5, 2.5), (1.5, 2.5)) == 0.0

    def test_dimension_mismatch(self) -> None:
        with pytest.raises(ValueError):
            heuristics.euclidean((0, 0), (1, 2, 3))


class TestManhattan:
    def test_two_dimensions(self) -> None:
        assert heuristics.manhattan((0, 0), (3, -4)) == 7.0

    def test_three_dimensions(self) -> None:
        assert heuristics.manhattan((1, 1, 1), (2, 3, 4)) == 6.0

    def test_dimension_mismatch(self) -> None:
        with pytest.raises(ValueError, match="dimensions"):
            heuristics.manhattan((0, 0), (1,))


class TestScaled:
    def test_scales(self) -> None:
        h = heuristics.scaled(heuristics.manhattan, 0.5)
        assert h((0, 0), (2, 2)) == 2.0

    def test_zero_factor(self) -> None:
        h = heuristics.scaled(heuristics.euclidean, 0.0)
        assert h((0, 0), (3, 4)) == 0.0

    def test_rejects_negative_factor(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            heuristics.scaled(heuristics.zero, -1.0)
