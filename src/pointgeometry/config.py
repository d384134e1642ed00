"""
Configuration & Numeric Constants
=================================
This module serves as the central registry for the numeric constants used by
the distance and closest-point engine.

Why is this file needed?
------------------------
1. Auditability: Tolerances and iteration caps live in one place instead of
   being scattered as literals through the solvers.
2. Compatibility: Existing callers depend on these exact values. They are not
   call parameters and should not be tuned per call.

Exports:
    EPSILON (float): Absolute tolerance for every "equal" / "zero" test.
    MIN_VALUE (float): Coordinate of the non-NaN "no intersection" sentinel.
    BEZIER_SCAN_STEP (float): Coarse scan increment of the curve parameter.
    BEZIER_MAX_REFINEMENT_STEPS (int): Cap on secant refinement iterations.
    BEZIER_REFINEMENT_FALLBACK_U (float): Refinement start when the first
        guess would leave the parameter range.
    BEZIER_NO_SEGMENTS_DISTANCE (float): Distance reported for a path without
        a complete cubic segment.
"""
import sys

# Global Constants
EPSILON: float = 1e-6
MIN_VALUE: float = -sys.float_info.max

# Bezier solver. The curve parameter runs over [-1, 1].
BEZIER_SCAN_STEP: float = 2.0 / 9.0
BEZIER_MAX_REFINEMENT_STEPS: int = 20
BEZIER_REFINEMENT_FALLBACK_U: float = 7.0 / 9.0
BEZIER_NO_SEGMENTS_DISTANCE: float = 1000000.0
