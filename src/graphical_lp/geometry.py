"""
Plane geometry helpers for the graphical method.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .data_models import ConstraintLine, LPConstraint, Point

EPSILON = 1e-9
LINE_RANGE = (0.0, 20.0)
LINE_STEP = 0.5


def intersection(c1: LPConstraint, c2: LPConstraint, eps: float = EPSILON) -> Optional[Point]:
    """
    Intersection of the boundary lines of two constraints (Cramer's rule).

    Returns:
        The point, or None for parallel lines (|det| < eps)
    """
    a, b, c = c1.coeff_a, c1.coeff_b, c1.rhs
    d, e, f = c2.coeff_a, c2.coeff_b, c2.rhs

    det = a * e - b * d
    if abs(det) < eps:
        return None

    x = (c * e - b * f) / det
    y = (a * f - c * d) / det
    # + 0.0 turns -0.0 into 0.0
    return (x + 0.0, y + 0.0)


def is_feasible(point: Point, constraints: Sequence[LPConstraint], eps: float = EPSILON) -> bool:
    """True if the point satisfies every constraint within eps."""
    coeffs = np.array([[c.coeff_a, c.coeff_b] for c in constraints], dtype=float)
    values = coeffs @ np.asarray(point, dtype=float)
    for c, val in zip(constraints, values):
        if c.relation == "<=" and val > c.rhs + eps:
            return False
        if c.relation == ">=" and val < c.rhs - eps:
            return False
        if c.relation == "=" and abs(val - c.rhs) > eps:
            return False
    return True


def unique_points(points: Sequence[Point], eps: float = EPSILON) -> List[Point]:
    """Drop points lying within eps of an earlier one, keeping the first."""
    kept: List[Point] = []
    for p in points:
        if not any(abs(p[0] - q[0]) <= eps and abs(p[1] - q[1]) <= eps for q in kept):
            kept.append(p)
    return kept


def line_points(c: LPConstraint, value_range: Tuple[float, float] = LINE_RANGE,
                step: float = LINE_STEP) -> ConstraintLine:
    """
    Sample the boundary line of a constraint for plotting.

    y is solved for every sampled x; a vertical line (coeff_b == 0) is
    sampled over y at its fixed x instead.
    """
    samples = np.arange(value_range[0], value_range[1] + step / 2, step)
    a, b = c.coeff_a, c.coeff_b
    if b != 0:
        ys = (c.rhs - a * samples) / b
        points = [(float(x), float(y)) for x, y in zip(samples, ys)]
    elif a != 0:
        x = c.rhs / a
        points = [(float(x), float(y)) for y in samples]
    else:
        points = []
    return ConstraintLine(constraint=c.label(), points=points)


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: Sequence[Point]) -> List[Point]:
    """
    Andrew's monotone chain.

    Points are sorted by x then y; both chains drop the middle point of any
    non-left turn (cross product <= 0). Returns the hull counter-clockwise
    starting from the lowest-x point.
    """
    if len(points) <= 1:
        return list(points)

    ordered = sorted(points)

    lower: List[Point] = []
    for p in ordered:
        while len(lower) >= 2 and _cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Point] = []
    for p in reversed(ordered):
        while len(upper) >= 2 and _cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    return lower[:-1] + upper[:-1]
