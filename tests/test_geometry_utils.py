"""Test line intersection and orthogonal projection.

Tests for pointgeometry.model.geometry_utils:
    - Vertical / horizontal intersection is exact
    - One vertical line substitutes into the other line's equation
    - Both vertical -> VERTICAL, never solved
    - Equal slopes -> PARALLEL, or DEGENERATE when accepted
    - Sentinel flattening matches the caller's accept_degenerate mode
    - Projection onto axis-aligned, diagonal and zero-length lines

Run:
    pytest tests/test_geometry_utils.py -v
"""
import logging
import math

import pytest

from pointgeometry.config import MIN_VALUE
from pointgeometry.model.geometry_primitives import Point
from pointgeometry.model.geometry_utils import (
    IntersectionKind,
    find_lines_intersection,
    is_sentinel,
    lines_intersection_point,
    project_point_on_line,
)


# ============================================================================
# INTERSECTION
# ============================================================================

def test_vertical_and_horizontal_intersect_exactly():
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(0.0, 10.0), Point(-5.0, 5.0), Point(5.0, 5.0)
    )

    assert result.kind == IntersectionKind.INTERSECTED
    assert result.found
    assert result.point == Point(0.0, 5.0)


def test_second_line_vertical():
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(4.0, 2.0), Point(2.0, -5.0), Point(2.0, 5.0)
    )

    assert result.kind == IntersectionKind.INTERSECTED
    assert result.point == Point(2.0, 1.0)


def test_crossing_diagonals():
    point = lines_intersection_point(
        Point(0.0, 0.0), Point(2.0, 2.0), Point(0.0, 2.0), Point(2.0, 0.0)
    )

    assert point.x == pytest.approx(1.0)
    assert point.y == pytest.approx(1.0)


def test_parallel_lines_return_min_value_sentinel():
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0), Point(1.0, 2.0),
        accept_degenerate=False
    )

    assert result.kind == IntersectionKind.PARALLEL
    assert not result.found
    assert result.to_point() == Point(MIN_VALUE, MIN_VALUE)
    assert is_sentinel(result.to_point())


def test_parallel_lines_accepted_as_degenerate():
    """Exactly equal slopes still produce a NaN point instead of raising."""
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0), Point(1.0, 2.0),
        accept_degenerate=True
    )

    assert result.kind == IntersectionKind.DEGENERATE
    assert result.found
    assert math.isnan(result.to_point().x)
    assert is_sentinel(result.to_point())


def test_nearly_parallel_lines_solved_when_accepted():
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0), Point(1.0, 2.0 + 1e-7),
        accept_degenerate=True
    )

    assert result.kind == IntersectionKind.DEGENERATE
    assert math.isfinite(result.point.x)
    assert abs(result.point.x) > 1e6


@pytest.mark.parametrize("accept_degenerate", [True, False])
def test_both_vertical(accept_degenerate):
    result = find_lines_intersection(
        Point(0.0, 0.0), Point(0.0, 1.0), Point(3.0, 0.0), Point(3.0 + 1e-7, 1.0),
        accept_degenerate=accept_degenerate
    )

    assert result.kind == IntersectionKind.VERTICAL
    assert result.point is None
    if accept_degenerate:
        assert math.isnan(result.to_point().x) and math.isnan(result.to_point().y)
    else:
        assert result.to_point() == Point(MIN_VALUE, MIN_VALUE)


def test_is_sentinel_rejects_real_points():
    assert not is_sentinel(Point(1.0, 2.0))
    assert not is_sentinel(Point(math.nan, 0.0))


def test_parallel_logs_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="pointgeometry.model.geometry_utils")
    find_lines_intersection(Point(0.0, 0.0), Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0))

    assert "parallel" in caplog.text


# ============================================================================
# PROJECTION
# ============================================================================

def test_project_onto_horizontal_line():
    projected = project_point_on_line(Point(3.0, 4.0), Point(0.0, 0.0), Point(10.0, 0.0))

    assert projected.x == pytest.approx(3.0)
    assert projected.y == pytest.approx(0.0)


def test_project_onto_vertical_line():
    projected = project_point_on_line(Point(-2.0, 7.0), Point(1.0, 0.0), Point(1.0, 10.0))

    assert projected.x == pytest.approx(1.0)
    assert projected.y == pytest.approx(7.0)


def test_project_onto_diagonal():
    projected = project_point_on_line(Point(0.0, 2.0), Point(0.0, 0.0), Point(2.0, 2.0))

    assert projected.x == pytest.approx(1.0)
    assert projected.y == pytest.approx(1.0)


def test_project_beyond_segment_stays_on_infinite_line():
    projected = project_point_on_line(Point(20.0, 5.0), Point(0.0, 0.0), Point(10.0, 0.0))

    assert projected.x == pytest.approx(20.0)
    assert projected.y == pytest.approx(0.0)


def test_project_point_already_on_line():
    point = Point(2.5, 5.0)
    projected = project_point_on_line(point, Point(0.0, 0.0), Point(4.0, 8.0))

    assert projected.x == pytest.approx(point.x, abs=1e-9)
    assert projected.y == pytest.approx(point.y, abs=1e-9)


def test_project_onto_zero_length_line_falls_back_to_endpoint():
    """A zero-length line has no direction; the endpoint is the answer."""
    a = Point(1.0, 1.0)
    projected = project_point_on_line(Point(5.0, 4.0), a, Point(1.0, 1.0))

    assert projected == a
