"""
Graphical method package for two-variable linear programs.

Modules:
    data_models: Constraint, input and result types
    geometry: Line intersection, feasibility, line sampling, convex hull
    graphical_solver: Vertex-enumeration solver
"""

from .data_models import (ConstraintLine, EvaluatedPoint, GraphicalSolution,
                          LPConstraint, LPError, LPInput, PlotData)
from .geometry import EPSILON, convex_hull, intersection, is_feasible, line_points
from .graphical_solver import solve_graphical

METHODS = [
    {"key": "graph", "label": "Graphical Method"},
    {"key": "simplex", "label": "Simplex Method"},
]

__all__ = [
    "ConstraintLine",
    "EvaluatedPoint",
    "GraphicalSolution",
    "LPConstraint",
    "LPError",
    "LPInput",
    "PlotData",
    "EPSILON",
    "convex_hull",
    "intersection",
    "is_feasible",
    "line_points",
    "solve_graphical",
    "METHODS",
]
