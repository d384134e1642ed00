"""
pointgeometry
=============
Distance and closest-point queries from a point to lines, segments,
polylines and piecewise cubic Bezier paths in the plane.

Every query is a pure function of its arguments, so the functions may be
called from any number of threads without locking.
"""
import logging

from pointgeometry.model.geometry_primitives import Point, Rect, Vector, as_points
from pointgeometry.model.interval import (
    between_or_equal,
    closer,
    closer_point,
    closer_with_other,
    distance_squared,
    is_equal,
    sort_pair,
)
from pointgeometry.model.geometry_utils import (
    IntersectionKind,
    LineIntersection,
    find_lines_intersection,
    is_sentinel,
    lines_intersection_point,
    project_point_on_line,
)
from pointgeometry.model.distance import (
    closest_point_on_rect,
    closest_point_on_segment,
    distance_to_line,
    distance_to_line_segment_with_threshold,
    distance_to_line_squared,
    distance_to_polyline,
    distance_to_rect,
    distance_to_segment_squared,
    is_within_delta,
)
from pointgeometry.model.bezier import (
    BezierClosestPoint,
    BezierCoefficients,
    closest_point_on_bezier_curve,
    distance_to_bezier_curve,
    evaluate_bezier_segment,
)
from pointgeometry.logging_config import setup_logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Point',
    'Rect',
    'Vector',
    'as_points',
    'between_or_equal',
    'closer',
    'closer_point',
    'closer_with_other',
    'distance_squared',
    'is_equal',
    'sort_pair',
    'IntersectionKind',
    'LineIntersection',
    'find_lines_intersection',
    'is_sentinel',
    'lines_intersection_point',
    'project_point_on_line',
    'closest_point_on_rect',
    'closest_point_on_segment',
    'distance_to_line',
    'distance_to_line_segment_with_threshold',
    'distance_to_line_squared',
    'distance_to_polyline',
    'distance_to_rect',
    'distance_to_segment_squared',
    'is_within_delta',
    'BezierClosestPoint',
    'BezierCoefficients',
    'closest_point_on_bezier_curve',
    'distance_to_bezier_curve',
    'evaluate_bezier_segment',
    'setup_logging',
]
