"""
Closest point on a piecewise cubic Bezier path.

A path is a flat list of 3k+1 points: segment i uses points 3i..3i+3, the
outer two being endpoints shared with the neighbours. Each segment is
rewritten as a cubic polynomial over u in [-1, 1] (u = -1 at the first
control point, u = 1 at the last) and solved in two passes:

1. Coarse scan: sample u from -1 in steps of BEZIER_SCAN_STEP and keep the
   sample with the smallest squared distance s(u).
2. Refinement: secant iteration on z(u), the tangent dotted with the offset
   from the query point (half the derivative of s), starting next to the
   best coarse sample.

The result is a locally converged minimum. Curves with cusps or
self-intersections may converge to a non-global minimum.

Refinement stops as soon as s(u) < EPSILON, a squared distance. A point
lying on the curve between two scan samples can therefore come back with
a distance of up to sqrt(EPSILON), about 1e-3, rather than 0. Only a
point hit exactly by a scan sample is reported as 0 straight away.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import NamedTuple, Tuple

from pointgeometry.config import (
    BEZIER_MAX_REFINEMENT_STEPS,
    BEZIER_NO_SEGMENTS_DISTANCE,
    BEZIER_REFINEMENT_FALLBACK_U,
    BEZIER_SCAN_STEP,
    EPSILON,
)
from pointgeometry.model.geometry_primitives import Point, PointSequence, as_points

logger = logging.getLogger(__name__)


class BezierCoefficients(NamedTuple):
    """
    x(u) = a0 + u*a1 + u^2*a2 + u^3*a3 and y(u) likewise with b0..b3.
    """
    a0: float
    a1: float
    a2: float
    a3: float
    b0: float
    b1: float
    b2: float
    b3: float

    @classmethod
    def from_control_points(cls, p1: Point, p2: Point, p3: Point, p4: Point) -> BezierCoefficients:
        a3 = (p4.x - p1.x + 3.0 * (p2.x - p3.x)) / 8.0
        b3 = (p4.y - p1.y + 3.0 * (p2.y - p3.y)) / 8.0
        a2 = (p4.x + p1.x - p2.x - p3.x) * 3.0 / 8.0
        b2 = (p4.y + p1.y - p2.y - p3.y) * 3.0 / 8.0
        a1 = (p4.x - p1.x) / 2.0 - a3
        b1 = (p4.y - p1.y) / 2.0 - b3
        a0 = (p4.x + p1.x) / 2.0 - a2
        b0 = (p4.y + p1.y) / 2.0 - b2
        return cls(a0, a1, a2, a3, b0, b1, b2, b3)

    def position(self, u: float) -> Point:
        return Point(
            self.a0 + u * (self.a1 + u * (self.a2 + u * self.a3)),
            self.b0 + u * (self.b1 + u * (self.b2 + u * self.b3))
        )

    def sample(self, u: float, point: Point) -> Tuple[float, float]:
        """Returns (s, z): squared distance to `point` and tangent . (curve - point)."""
        dx = self.a0 + u * (self.a1 + u * (self.a2 + u * self.a3)) - point.x
        dy = self.b0 + u * (self.b1 + u * (self.b2 + u * self.b3)) - point.y
        tx = self.a1 + u * (2.0 * self.a2 + 3.0 * u * self.a3)
        ty = self.b1 + u * (2.0 * self.b2 + 3.0 * u * self.b3)
        return dx * dx + dy * dy, tx * dx + ty * dy


class _Sample(NamedTuple):
    u: float
    s: float
    z: float


@dataclass(frozen=True)
class BezierClosestPoint:
    distance: float
    point: Point
    segment_index: int
    u: float


def evaluate_bezier_segment(p1: Point, p2: Point, p3: Point, p4: Point, u: float) -> Point:
    """Position on one cubic segment, u in [-1, 1]."""
    return BezierCoefficients.from_control_points(p1, p2, p3, p4).position(u)


def _coarse_scan(coefficients: BezierCoefficients, point: Point) -> Tuple[_Sample, _Sample]:
    """Returns (best sample, last evaluated sample)."""
    best = _Sample(-1.0, 0.0, 0.0)
    last = best
    u = -1.0
    while u < 1.0:
        s, z = coefficients.sample(u, point)
        last = _Sample(u, s, z)
        if abs(s) < EPSILON:
            return last, last
        # The left boundary always seeds the minimum
        if abs(u + 1.0) < EPSILON or s < best.s:
            best = last
        u += BEZIER_SCAN_STEP
    return best, last


def _refine(coefficients: BezierCoefficients, point: Point, best: _Sample) -> _Sample:
    """Secant iteration on z(u); returns the last evaluated sample."""
    previous_u, previous_z = best.u, best.z
    u = best.u + BEZIER_SCAN_STEP
    if u > 1.0:
        u = BEZIER_REFINEMENT_FALLBACK_U

    last = best
    for _ in range(BEZIER_MAX_REFINEMENT_STEPS):
        s, z = coefficients.sample(u, point)
        last = _Sample(u, s, z)
        if abs(s) < EPSILON or abs(z) < EPSILON:
            break

        dz = z - previous_z
        if abs(dz) <= EPSILON:
            next_u = (previous_u + u) / 2.0
        else:
            next_u = (z * previous_u - previous_z * u) / dz
        next_u = min(1.0, max(-1.0, next_u))

        if abs(next_u - u) < EPSILON:
            break
        previous_u, previous_z = u, z
        u = next_u
    else:
        logger.debug(f"Bezier refinement stopped after {BEZIER_MAX_REFINEMENT_STEPS} steps at u={u:.6f}.")
    return last


def _segment_count(n_points: int, strict: bool) -> int:
    leftover = (n_points - 1) % 3 if n_points > 0 else 0
    if strict and (n_points < 4 or leftover != 0):
        msg = f"A Bezier path needs 3k+1 points (k >= 1), got {n_points}"
        logger.error(msg)
        raise ValueError(msg)
    if leftover != 0:
        logger.warning(f"Ignoring {leftover} trailing point(s) of a {n_points}-point Bezier path.")
    return max(0, (n_points - 1) // 3)


def closest_point_on_bezier_curve(
    point: Point,
    bezier_points: PointSequence,
    strict: bool = False
) -> BezierClosestPoint:
    """
    Finds the minimum distance from `point` to a piecewise cubic Bezier path.

    Args:
        point: Query point.
        bezier_points: 3k+1 points; sequence of Points, (x, y) pairs or an (N, 2) array.
        strict: If True, a length other than 3k+1 (k >= 1) raises ValueError.
            Otherwise a trailing partial segment is dropped.

    Returns:
        BezierClosestPoint with the distance, the curve point where it was
        measured, its segment index and the segment parameter u. Once a
        segment comes within EPSILON of the point, the search stops and the
        distance is reported as exactly 0. Without a complete segment the
        distance is BEZIER_NO_SEGMENTS_DISTANCE and the point is `point` itself.
    """
    points = as_points(bezier_points)
    n_segments = _segment_count(len(points), strict)

    result = BezierClosestPoint(BEZIER_NO_SEGMENTS_DISTANCE, point, -1, math.nan)
    for index in range(n_segments):
        coefficients = BezierCoefficients.from_control_points(*points[index * 3:index * 3 + 4])

        best, last = _coarse_scan(coefficients, point)
        if abs(best.s) > EPSILON:
            last = _refine(coefficients, point, best)

        distance = math.sqrt(last.s)
        if result.distance > distance:
            result = BezierClosestPoint(distance, coefficients.position(last.u), index, last.u)
        if abs(result.distance) < EPSILON:
            return BezierClosestPoint(0.0, result.point, result.segment_index, result.u)
    return result


def distance_to_bezier_curve(point: Point, bezier_points: PointSequence, strict: bool = False) -> float:
    return closest_point_on_bezier_curve(point, bezier_points, strict).distance
