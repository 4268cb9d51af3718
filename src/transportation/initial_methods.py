"""
Initial basic feasible solutions for the transportation problem.

- North-West Corner: ignores costs, walks the table from the top-left cell
- Least-Cost: repeatedly fills the cheapest open cell
- Vogel's Approximation: fills the cheapest cell of the row/column with the
  largest penalty (difference between its two cheapest open costs)

All three work on copies of supply and demand and return allocations in the
order they were made. Zero-amount allocations are never recorded.
"""

import logging
from typing import List, Sequence

from .data_models import Allocation

logger = logging.getLogger(__name__)


def north_west_corner(cost: Sequence[Sequence[float]], supply: Sequence[float],
                      demand: Sequence[float]) -> List[Allocation]:
    """
    North-West Corner rule.

    Args:
        cost: Cost matrix (unused, kept for a uniform signature)
        supply: Supply per row
        demand: Demand per column

    Returns:
        Allocations in the order they were made
    """
    allocations: List[Allocation] = []
    s = list(supply)
    d = list(demand)
    i = j = 0

    while i < len(s) and j < len(d):
        qty = min(s[i], d[j])
        if qty > 0:
            allocations.append(Allocation(i, j, qty))
            s[i] -= qty
            d[j] -= qty

        # both may be exhausted at once (degenerate step)
        row_done = s[i] == 0
        col_done = d[j] == 0
        if row_done:
            i += 1
        if col_done:
            j += 1

    return allocations


def least_cost_method(cost: Sequence[Sequence[float]], supply: Sequence[float],
                      demand: Sequence[float]) -> List[Allocation]:
    """
    Least-Cost (matrix minimum) rule.

    Ties are broken by the first cell in row-major order.
    """
    allocations: List[Allocation] = []
    s = list(supply)
    d = list(demand)
    rows, cols = len(s), len(d)

    while True:
        best = None
        min_cost = float("inf")
        for i in range(rows):
            if s[i] == 0:
                continue
            for j in range(cols):
                if d[j] == 0:
                    continue
                if cost[i][j] < min_cost:
                    min_cost = cost[i][j]
                    best = (i, j)

        if best is None:
            break

        i, j = best
        qty = min(s[i], d[j])
        allocations.append(Allocation(i, j, qty))
        s[i] -= qty
        d[j] -= qty

    return allocations


def _penalty(costs: List[float]) -> float:
    """Second smallest minus smallest; a single open cost is its own penalty."""
    costs = sorted(costs)
    if len(costs) > 1:
        return costs[1] - costs[0]
    return costs[0]


def vogels_approximation_method(cost: Sequence[Sequence[float]], supply: Sequence[float],
                                demand: Sequence[float]) -> List[Allocation]:
    """
    Vogel's Approximation Method.

    The row or column with the largest penalty is served first; on equal
    penalties rows win over columns and lower indices over higher ones.
    """
    allocations: List[Allocation] = []
    s = list(supply)
    d = list(demand)
    rows, cols = len(s), len(d)

    row_done = [q == 0 for q in s]
    col_done = [q == 0 for q in d]

    while not all(row_done) and not all(col_done):
        open_rows = [i for i in range(rows) if not row_done[i]]
        open_cols = [j for j in range(cols) if not col_done[j]]

        row_penalties = {i: _penalty([cost[i][j] for j in open_cols]) for i in open_rows}
        col_penalties = {j: _penalty([cost[i][j] for i in open_rows]) for j in open_cols}

        best_row = max(open_rows, key=lambda i: row_penalties[i])
        best_col = max(open_cols, key=lambda j: col_penalties[j])

        if row_penalties[best_row] >= col_penalties[best_col]:
            i = best_row
            j = min(open_cols, key=lambda c: cost[i][c])
        else:
            j = best_col
            i = min(open_rows, key=lambda r: cost[r][j])

        qty = min(s[i], d[j])
        logger.debug(f"VAM: cell ({i}, {j}) <- {qty}")
        allocations.append(Allocation(i, j, qty))
        s[i] -= qty
        d[j] -= qty
        if s[i] == 0:
            row_done[i] = True
        if d[j] == 0:
            col_done[j] = True

    return allocations
