"""
Scalar interval helpers shared by the line and curve solvers.
"""
from __future__ import annotations

from typing import Tuple

from pointgeometry.config import EPSILON
from pointgeometry.model.geometry_primitives import Point


def is_equal(value1: float, value2: float) -> bool:
    return abs(value1 - value2) < EPSILON


def sort_pair(a: float, b: float) -> Tuple[float, float]:
    """Returns the two values as (smaller, larger)."""
    if b >= a:
        return a, b
    return b, a


def closer_with_other(value: float, choice1: float, choice2: float) -> Tuple[float, float]:
    """
    Given an interval and a value, returns the bound closer to the value
    together with the other bound.

    Args:
        value: The value being placed.
        choice1: One bound of the interval.
        choice2: The other bound; order does not matter.

    Returns:
        (nearest, other). A value exactly at the midpoint goes to the larger bound.
    """
    lower, upper = sort_pair(choice1, choice2)
    if value >= lower and (value > upper or value - lower >= upper - value):
        return upper, lower
    return lower, upper


def closer(value: float, choice1: float, choice2: float) -> float:
    nearest, _ = closer_with_other(value, choice1, choice2)
    return nearest


def between_or_equal(value: float, lower: float, upper: float) -> bool:
    """Inclusive range test; the bounds may be given in either order."""
    lower, upper = sort_pair(lower, upper)
    return lower <= value <= upper


def distance_squared(point1: Point, point2: Point) -> float:
    return (point1.x - point2.x) * (point1.x - point2.x) + (point1.y - point2.y) * (point1.y - point2.y)


def closer_point(point: Point, point1: Point, point2: Point) -> Point:
    """
    Returns whichever of point1 / point2 sits closer to `point`.
    point1 wins only when it is strictly closer; ties go to point2.
    """
    if distance_squared(point, point1) < distance_squared(point, point2):
        return point1
    return point2
