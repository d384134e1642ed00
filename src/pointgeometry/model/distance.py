"""
Point-to-line, point-to-segment and point-to-polyline distances.

`distance_to_polyline` is a true minimum over all segments, while
`distance_to_line_segment_with_threshold` is a hit test that stops at the
first segment close enough to the point.
"""
from __future__ import annotations

import logging
import math
import sys
from typing import List, Tuple

from pointgeometry.config import EPSILON
from pointgeometry.model.geometry_primitives import Point, PointSequence, Rect, as_points
from pointgeometry.model.geometry_utils import project_point_on_line
from pointgeometry.model.interval import between_or_equal, closer_with_other, distance_squared

logger = logging.getLogger(__name__)


def _polyline(polyline: PointSequence, strict: bool) -> List[Point]:
    points = as_points(polyline)
    if strict and len(points) < 2:
        msg = f"A polyline needs at least 2 points, got {len(points)}"
        logger.error(msg)
        raise ValueError(msg)
    return points


def distance_to_line(point: Point, a: Point, b: Point) -> float:
    """Distance from `point` to the infinite line through a and b."""
    return point.distance_to(project_point_on_line(point, a, b))


def distance_to_line_squared(point: Point, a: Point, b: Point) -> float:
    """
    Squared perpendicular distance to the infinite line through a and b,
    from the cross product. Collapses to point-to-point when a == b.
    """
    if a == b:
        return distance_squared(point, a)
    dx = b.x - a.x
    dy = b.y - a.y
    cross = (point.y - a.y) * dx - (point.x - a.x) * dy
    return cross * cross / (dx * dx + dy * dy)


def distance_to_segment_squared(point: Point, a: Point, b: Point) -> float:
    """
    Squared distance to the segment [a, b]. A projection falling before a
    (or past b) measures to that endpoint instead.
    """
    if a == b:
        return distance_squared(point, a)
    dx = b.x - a.x
    dy = b.y - a.y
    if (point.x - a.x) * dx + (point.y - a.y) * dy < 0.0:
        return distance_squared(a, point)
    if (b.x - point.x) * dx + (b.y - point.y) * dy < 0.0:
        return distance_squared(b, point)
    return distance_to_line_squared(point, a, b)


def closest_point_on_segment(point: Point, a: Point, b: Point) -> Point:
    """Nearest point of the segment [a, b], using the same endpoint clamps."""
    if a == b:
        return a
    dx = b.x - a.x
    dy = b.y - a.y
    along = (point.x - a.x) * dx + (point.y - a.y) * dy
    if along < 0.0:
        return a
    if (b.x - point.x) * dx + (b.y - point.y) * dy < 0.0:
        return b
    t = along / (dx * dx + dy * dy)
    return Point(a.x + t * dx, a.y + t * dy)


def distance_to_polyline(
    point: Point,
    polyline: PointSequence,
    strict: bool = False
) -> Tuple[float, int]:
    """
    Minimum line distance over every consecutive pair of the polyline.

    Args:
        point: Query point.
        polyline: Ordered points; consecutive pairs are the segments.
        strict: Raise ValueError for fewer than 2 points instead of
            returning (sys.float_info.max, 0).

    Returns:
        (distance, closest_segment_index). Each segment is measured as an
        infinite line, and the first segment wins on ties.
    """
    points = _polyline(polyline, strict)
    best = sys.float_info.max
    closest_segment = 0
    for index in range(len(points) - 1):
        d = distance_to_line(point, points[index], points[index + 1])
        if d < best:
            best = d
            closest_segment = index
    return best, closest_segment


def is_within_delta(center: Point, point: Point, delta: float) -> bool:
    """True when `point` lies in the square of half-size delta around `center`."""
    return Rect.around_point(center, delta).contains(point)


def distance_to_line_segment_with_threshold(
    point: Point,
    polyline: PointSequence,
    delta: float,
    strict: bool = False
) -> float:
    """
    Hit test of a point against a polyline.

    Segments are visited in order. A segment matches when the point is closer
    than `delta` to its line and falls within its span (checked on Y for a
    near-vertical segment, on X otherwise), or when the point is within
    `delta` of the segment start. The first match's line distance is
    returned; NaN when nothing matches.
    """
    points = _polyline(polyline, strict)
    for index in range(len(points) - 1):
        start = points[index]
        end = points[index + 1]
        d = distance_to_line(point, start, end)
        if abs(start.x - end.x) < EPSILON:
            in_span = point.is_y_between(start, end)
        else:
            in_span = point.is_x_between(start, end)
        if (d < delta and in_span) or is_within_delta(start, point, delta):
            return d
    return math.nan


def _select_coordinate(value: float, bound1: float, bound2: float) -> float:
    nearest, other = closer_with_other(value, bound1, bound2)
    if not between_or_equal(value, nearest, other):
        return nearest
    return value


def closest_point_on_rect(point: Point, rect: Rect) -> Point:
    return Point(
        _select_coordinate(point.x, rect.left, rect.right),
        _select_coordinate(point.y, rect.top, rect.bottom)
    )


def distance_to_rect(point: Point, rect: Rect) -> float:
    """Distance to the rectangle; 0 for points inside or on the border."""
    return point.distance_to(closest_point_on_rect(point, rect))
