"""
Line intersection and orthogonal projection.

Lines are infinite and given by two points each. Verticality and
parallelism are decided with the absolute tolerance `config.EPSILON`
on coordinate and slope differences.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import Optional

from pointgeometry.config import EPSILON, MIN_VALUE
from pointgeometry.model.geometry_primitives import Point
from pointgeometry.model.interval import closer_point

logger = logging.getLogger(__name__)

NAN_POINT = Point(math.nan, math.nan)
MIN_VALUE_POINT = Point(MIN_VALUE, MIN_VALUE)


class IntersectionKind(StrEnum):
    """Outcome of a line/line intersection query."""
    INTERSECTED = "intersected"
    # Near-parallel lines solved anyway because the caller accepts it
    DEGENERATE = "degenerate"
    PARALLEL = "parallel"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class LineIntersection:
    kind: IntersectionKind
    point: Optional[Point] = None
    accept_degenerate: bool = False

    @property
    def found(self) -> bool:
        return self.point is not None

    def sentinel(self) -> Point:
        return NAN_POINT if self.accept_degenerate else MIN_VALUE_POINT

    def to_point(self) -> Point:
        """
        The solved point, or the sentinel matching the caller's mode:
        (NaN, NaN) when degenerate results were accepted, (MIN_VALUE, MIN_VALUE) otherwise.
        """
        if self.point is None:
            return self.sentinel()
        return self.point


def is_sentinel(point: Point) -> bool:
    """True for either "no intersection" sentinel."""
    if math.isnan(point.x) and math.isnan(point.y):
        return True
    return point.x == MIN_VALUE and point.y == MIN_VALUE


def _slope_intercept(start: Point, end: Point) -> tuple[float, float]:
    dx = start.x - end.x
    slope = (start.y - end.y) / dx
    intercept = (start.x * end.y - end.x * start.y) / dx
    return slope, intercept


def find_lines_intersection(
    line1_start: Point,
    line1_end: Point,
    line2_start: Point,
    line2_end: Point,
    accept_degenerate: bool = False
) -> LineIntersection:
    """
    Intersection of two infinite 2D lines:
      L1 through line1_start->line1_end, L2 through line2_start->line2_end.

    Args:
        accept_degenerate: If True, lines with equal slopes are still solved by
            elimination (the result may be far away or non-finite) and the
            sentinel for a missing result is (NaN, NaN). If False, equal slopes
            give PARALLEL and the sentinel is (MIN_VALUE, MIN_VALUE).

    Returns:
        A LineIntersection. Both lines vertical always gives VERTICAL,
        without distinguishing parallel from coincident.
    """
    line1_vertical = abs(line1_start.x - line1_end.x) < EPSILON
    line2_vertical = abs(line2_start.x - line2_end.x) < EPSILON

    if line1_vertical and line2_vertical:
        logger.debug("Both lines are vertical; no unique intersection.")
        return LineIntersection(IntersectionKind.VERTICAL, None, accept_degenerate)

    if line1_vertical or line2_vertical:
        # Substitute the vertical line's x into the other line's equation
        if line1_vertical:
            x = line1_start.x
            slope, intercept = _slope_intercept(line2_start, line2_end)
        else:
            x = line2_start.x
            slope, intercept = _slope_intercept(line1_start, line1_end)
        return LineIntersection(
            IntersectionKind.INTERSECTED, Point(x, slope * x + intercept), accept_degenerate
        )

    slope1, intercept1 = _slope_intercept(line1_start, line1_end)
    slope2, intercept2 = _slope_intercept(line2_start, line2_end)
    denominator = slope1 - slope2

    if abs(denominator) >= EPSILON:
        kind = IntersectionKind.INTERSECTED
    elif accept_degenerate:
        kind = IntersectionKind.DEGENERATE
        logger.debug(f"Solving near-parallel lines (slope difference {denominator:g}).")
    else:
        logger.debug("Lines are parallel; no unique intersection.")
        return LineIntersection(IntersectionKind.PARALLEL, None, accept_degenerate)

    if denominator == 0.0:
        return LineIntersection(kind, NAN_POINT, accept_degenerate)

    x = (intercept2 - intercept1) / denominator
    y = slope1 * (intercept2 - intercept1) / denominator + intercept1
    return LineIntersection(kind, Point(x, y), accept_degenerate)


def lines_intersection_point(
    line1_start: Point,
    line1_end: Point,
    line2_start: Point,
    line2_end: Point,
    accept_degenerate: bool = False
) -> Point:
    """Same as find_lines_intersection, flattened to a point or sentinel."""
    return find_lines_intersection(
        line1_start, line1_end, line2_start, line2_end, accept_degenerate
    ).to_point()


def project_point_on_line(point: Point, line_start: Point, line_end: Point) -> Point:
    """
    Orthogonal projection of `point` onto the infinite line through
    line_start/line_end.

    The perpendicular through `point` is intersected with the line. If that
    yields no usable point (a zero-length line) the answer falls back to
    line_end. The result is then the nearer to `point` of line_start and the
    nearer of (intersection, line_end), so exact distance ties resolve to an
    endpoint rather than the raw intersection.
    """
    normal = (line_start - line_end).perpendicular()
    line2_end = point + normal
    intersection = lines_intersection_point(line_start, line_end, point, line2_end, True)

    if math.isnan(intersection.x):
        candidate = line_end
    else:
        candidate = closer_point(point, intersection, line_end)
    return closer_point(point, line_start, candidate)
