"""Test scalar interval helpers.

Tests for pointgeometry.model.interval:
    - sort_pair ordering
    - closer / closer_with_other, including the midpoint tie
    - between_or_equal with reversed bounds
    - closer_point tie resolution
    - is_equal tolerance

Run:
    pytest tests/test_interval.py -v
"""
import pytest

from pointgeometry.model.geometry_primitives import Point
from pointgeometry.model.interval import (
    between_or_equal,
    closer,
    closer_point,
    closer_with_other,
    distance_squared,
    is_equal,
    sort_pair,
)


def test_sort_pair():
    assert sort_pair(3.0, 1.0) == (1.0, 3.0)
    assert sort_pair(1.0, 3.0) == (1.0, 3.0)
    assert sort_pair(2.0, 2.0) == (2.0, 2.0)


@pytest.mark.parametrize(
    "value, choice1, choice2, expected",
    [
        (4.0, 0.0, 10.0, 0.0),
        (6.0, 0.0, 10.0, 10.0),
        (5.0, 0.0, 10.0, 10.0),    # midpoint goes to the larger bound
        (7.0, 10.0, 0.0, 10.0),    # bounds in either order
        (-3.0, 0.0, 10.0, 0.0),
        (12.0, 0.0, 10.0, 10.0),
    ],
)
def test_closer(value, choice1, choice2, expected):
    assert closer(value, choice1, choice2) == expected


def test_closer_with_other_returns_both_bounds():
    assert closer_with_other(7.0, 0.0, 10.0) == (10.0, 0.0)
    assert closer_with_other(2.0, 10.0, 0.0) == (0.0, 10.0)


@pytest.mark.parametrize(
    "value, lower, upper, expected",
    [
        (5.0, 0.0, 10.0, True),
        (5.0, 10.0, 0.0, True),
        (10.0, 0.0, 10.0, True),
        (0.0, 10.0, 0.0, True),
        (10.1, 0.0, 10.0, False),
        (-0.1, 10.0, 0.0, False),
    ],
)
def test_between_or_equal(value, lower, upper, expected):
    assert between_or_equal(value, lower, upper) is expected


def test_closer_point_strictly_closer_wins():
    origin = Point(0.0, 0.0)
    assert closer_point(origin, Point(1.0, 0.0), Point(2.0, 0.0)) == Point(1.0, 0.0)
    assert closer_point(origin, Point(3.0, 0.0), Point(0.0, 2.0)) == Point(0.0, 2.0)


def test_closer_point_tie_goes_to_second():
    assert closer_point(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0)) == Point(0.0, 1.0)


def test_distance_squared():
    assert distance_squared(Point(1.0, 1.0), Point(4.0, 5.0)) == pytest.approx(25.0)


def test_is_equal_tolerance():
    assert is_equal(1.0, 1.0 + 5e-7)
    assert not is_equal(1.0, 1.0 + 2e-6)
