"""
Hungarian algorithm for the (possibly rectangular) assignment problem.

The cost matrix is padded with zero-cost dummy rows/columns to a square
n x n matrix, then solved with the potential-based O(n^3) formulation:
rows are inserted one at a time and an augmenting path is grown over the
columns using row potentials u, column potentials v and the minimum slack
minv of every column. Bookkeeping is 1-indexed; index 0 is the virtual
column holding the row currently being inserted.
"""

import logging
from typing import Sequence

import numpy as np

from transportation.utils import InvalidInputError, validate_cost_matrix

from .data_models import UNASSIGNED, AssignmentResult

logger = logging.getLogger(__name__)


def pad_cost_matrix(cost_matrix: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Square, 1-indexed copy of the cost matrix.

    Returns:
        (n + 1) x (n + 1) array with n = max(rows, cols); row 0 and column 0
        are unused, dummy entries are 0
    """
    rows, cols = len(cost_matrix), len(cost_matrix[0])
    n = max(rows, cols)
    a = np.zeros((n + 1, n + 1), dtype=float)
    a[1:rows + 1, 1:cols + 1] = np.asarray(cost_matrix, dtype=float)
    return a


def hungarian(a: np.ndarray) -> np.ndarray:
    """
    Solve a padded square matrix.

    Returns:
        p where p[j] is the row matched to column j (1-indexed, p[0] unused)
    """
    n = a.shape[0] - 1
    u = np.zeros(n + 1)
    v = np.zeros(n + 1)
    p = np.zeros(n + 1, dtype=int)
    way = np.zeros(n + 1, dtype=int)

    for i in range(1, n + 1):
        p[0] = i
        j0 = 0
        minv = np.full(n + 1, np.inf)
        used = np.zeros(n + 1, dtype=bool)

        while True:
            used[j0] = True
            i0 = p[j0]

            # relax every free column against row i0
            free = ~used[1:]
            cur = a[i0, 1:] - u[i0] - v[1:]
            improve = free & (cur < minv[1:])
            minv[1:][improve] = cur[improve]
            way[1:][improve] = j0

            slack = np.where(free, minv[1:], np.inf)
            j1 = int(np.argmin(slack)) + 1
            delta = slack[j1 - 1]

            u[p[used]] += delta
            v[used] -= delta
            minv[~used] -= delta

            j0 = j1
            if p[j0] == 0:
                break

        # augment along the alternating path
        while True:
            j1 = way[j0]
            p[j0] = p[j1]
            j0 = j1
            if j0 == 0:
                break

        logger.debug(f"Hungarian: row {i} inserted")

    return p


def assignment_problem(agents: int, tasks: int, cost_matrix: Sequence[Sequence[float]]) -> AssignmentResult:
    """
    Minimum-cost assignment of agents (rows) to tasks (columns).

    The counts are checked against the matrix, never inferred from it: a
    mismatch is rejected instead of silently solving a differently shaped
    problem. Callers holding only a matrix pass its shape, as
    assignment_problem_op does when the counts are omitted.

    Args:
        agents: Number of agents; must equal the number of matrix rows
        tasks: Number of tasks; must equal the number of matrix columns
        cost_matrix: agents x tasks matrix of finite costs

    Returns:
        AssignmentResult; agents matched to a dummy task are UNASSIGNED

    Raises:
        InvalidInputError: on an empty, ragged or non-finite matrix, or when
            agents/tasks disagree with its shape
    """
    rows, cols = validate_cost_matrix(cost_matrix)
    if agents != rows or tasks != cols:
        raise InvalidInputError(
            f"Cost matrix is {rows}x{cols} but {agents} agents and {tasks} tasks were given."
        )

    p = hungarian(pad_cost_matrix(cost_matrix))

    assignment = [UNASSIGNED] * rows
    for j in range(1, len(p)):
        i = p[j]
        if 1 <= i <= rows and j <= cols:
            assignment[i - 1] = j - 1

    total = 0
    assigned = 0
    for i, j in enumerate(assignment):
        if j != UNASSIGNED:
            total += cost_matrix[i][j]
            assigned += 1

    result = AssignmentResult(
        assignment=assignment,
        total_cost=total,
        is_perfect=assigned == rows and rows <= cols,
    )
    logger.info(f"Assignment {rows}x{cols}: cost={total}, perfect={result.is_perfect}")
    return result
