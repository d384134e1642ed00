"""
Geometric Primitives for the distance and closest-point engine.

Points and vectors are immutable 2D values. Equality is exact field
equality; tolerant comparisons go through `interval.is_equal`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union, TYPE_CHECKING
import logging
import math

import numpy as np

from pointgeometry.config import EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector:
    """
    A free 2D displacement with direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product of two planar vectors."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> Vector:
        """Clockwise normal (y, -x) of the same length."""
        return Vector(self.y, -self.x)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the plane."""
    x: float
    y: float

    def __add__(self, other: Union[Vector, Point]) -> Point:
        # Point + Vector = Point (Translation), Point + Point = Point (coordinate sum)
        if isinstance(other, (Vector, Point)):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector or Point to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def __mul__(self, multiplier: float) -> Point:
        return Point(self.x * multiplier, self.y * multiplier)

    def __truediv__(self, factor: float) -> Point:
        return Point(self.x / factor, self.y / factor)

    def difference(self, other: Point) -> Point:
        """Coordinate-wise difference kept as a Point."""
        return Point(self.x - other.x, self.y - other.y)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def distance_squared_to(self, other: Point) -> float:
        return (self.x - other.x) * (self.x - other.x) + (self.y - other.y) * (self.y - other.y)

    def distance_to_origin(self) -> float:
        return self.distance_to(Point(0.0, 0.0))

    def is_empty(self) -> bool:
        return self == Point(0.0, 0.0)

    def is_x_between(self, first: Point, second: Point) -> bool:
        """Inclusive test on the X coordinate; the bounds may come in either order."""
        if first.x <= self.x <= second.x:
            return True
        return second.x <= self.x <= first.x

    def is_y_between(self, first: Point, second: Point) -> bool:
        """Inclusive test on the Y coordinate; the bounds may come in either order."""
        if first.y <= self.y <= second.y:
            return True
        return second.y <= self.y <= first.y

    def rotate(self, pivot: Point, angle: float) -> Point:
        """
        Rotates the point about `pivot` by `angle` degrees.

        Positive angles turn counter-clockwise in a y-up frame (clockwise on a
        y-down screen). Angles within EPSILON of zero return the point unchanged.
        """
        if abs(angle) < EPSILON:
            return self
        rad = math.radians(angle)
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        dx = self.x - pivot.x
        dy = self.y - pivot.y
        return Point(
            pivot.x + dx * cos_a - dy * sin_a,
            pivot.y + dx * sin_a + dy * cos_a
        )

    def snap(self, step_x: float, step_y: float) -> Point:
        """
        Snaps the point to the nearest multiple of the grid steps.
        A coordinate exactly half way between two grid lines goes up.
        """
        return Point(_snap_coordinate(self.x, step_x), _snap_coordinate(self.y, step_y))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


def _snap_coordinate(value: float, step: float) -> float:
    remainder = value % step
    return value - remainder + (step if remainder >= step / 2.0 else 0.0)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned box. Callers keep left <= right and top <= bottom;
    the ordering is not enforced here.
    """
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_points(cls, a: Point, b: Point) -> Rect:
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def around_point(cls, center: Point, delta: float) -> Rect:
        """Square of half-size `delta` centred on `center`."""
        return cls(center.x - delta, center.y - delta, center.x + delta, center.y + delta)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def contains(self, point: Point) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom


PointLike = Union[Point, Tuple[float, float], Sequence[float]]
PointSequence = Union[Iterable[PointLike], "npt.NDArray[np.float64]"]


def as_points(points: PointSequence) -> List[Point]:
    """
    Normalises a polyline or Bezier path to a list of Points.

    Args:
        points: Sequence of Point objects, sequence of (x, y) pairs, or an
            array of shape (N, 2).

    Returns:
        A new list of Point objects in the same order.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            msg = f"Expected an array of shape (N, 2), got {arr.shape}"
            logger.error(msg)
            raise ValueError(msg)
        return [Point(float(x), float(y)) for x, y in arr]

    result: List[Point] = []
    for p in points:
        if isinstance(p, Point):
            result.append(p)
        else:
            x, y = p
            result.append(Point(float(x), float(y)))
    return result
