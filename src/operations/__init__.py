"""
Operations package: the dispatch table the UI consumes, plus a CLI.
"""

from .dispatch import (OPERATIONS, ProblemKind, assignment_problem_op, get_operation,
                       linear_programming_problem, network_flow_problem, resolve_kind,
                       run_operation, transportation_problem)

__all__ = [
    "OPERATIONS",
    "ProblemKind",
    "assignment_problem_op",
    "get_operation",
    "linear_programming_problem",
    "network_flow_problem",
    "resolve_kind",
    "run_operation",
    "transportation_problem",
]
