"""
Assignment problem package (Hungarian algorithm).
"""

from .data_models import UNASSIGNED, AssignmentResult
from .hungarian import assignment_problem, hungarian, pad_cost_matrix

METHODS = [
    {"key": "hungarian", "label": "Hungarian Method"},
]

__all__ = [
    "UNASSIGNED",
    "AssignmentResult",
    "assignment_problem",
    "hungarian",
    "pad_cost_matrix",
    "METHODS",
]
