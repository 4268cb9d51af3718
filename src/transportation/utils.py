"""
Utility functions for the transportation solvers.

This module provides input validation, objective computation, the optional
balancing helper and the basis bookkeeping used by the MODI refinement.
"""

import logging
import math
import numbers
from typing import Dict, Iterable, List, Sequence, Set, Tuple

from networkx.utils import UnionFind

from .data_models import Allocation, Cell

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a solver receives malformed numeric input."""


def is_finite_number(x) -> bool:
    """Real, finite and not a bool; numpy scalars count."""
    return isinstance(x, numbers.Real) and not isinstance(x, bool) and math.isfinite(x)


def validate_cost_matrix(cost: Sequence[Sequence[float]], name: str = "costMatrix") -> Tuple[int, int]:
    """
    Check that a cost matrix is non-empty, rectangular and finite.

    Returns:
        Tuple of (rows, cols)
    """
    if cost is None or len(cost) == 0:
        raise InvalidInputError(f"{name} must be a non-empty 2D array.")
    cols = len(cost[0])
    if cols == 0:
        raise InvalidInputError(f"{name} must be a non-empty 2D array.")
    for row in cost:
        if len(row) != cols:
            raise InvalidInputError(f"All rows in {name} must have the same length.")
        if not all(is_finite_number(c) for c in row):
            raise InvalidInputError("All costs must be finite numbers.")
    return len(cost), cols


def validate_quantities(values: Sequence[float], name: str, expected: int) -> None:
    if values is None or len(values) == 0:
        raise InvalidInputError(f"{name} must be a non-empty list.")
    if len(values) != expected:
        raise InvalidInputError(f"{name} has {len(values)} entries, expected {expected}.")
    for q in values:
        if not is_finite_number(q) or q < 0:
            raise InvalidInputError(f"{name} values must be finite and non-negative.")


def validate_transport_input(cost, supply, demand) -> Tuple[int, int]:
    """
    Validate a transportation instance.

    Balance is not enforced; see balance_problem().

    Returns:
        Tuple of (rows, cols)
    """
    if cost is None or supply is None or demand is None:
        raise InvalidInputError("Cost matrix, supply and demand must be provided")
    rows, cols = validate_cost_matrix(cost)
    validate_quantities(supply, "Supply", rows)
    validate_quantities(demand, "Demand", cols)
    if sum(supply) != sum(demand):
        logger.debug(f"Unbalanced instance: supply={sum(supply)}, demand={sum(demand)}")
    return rows, cols


def total_cost(allocations: Iterable[Allocation], cost: Sequence[Sequence[float]]) -> float:
    """Sum of amount * unit cost over the allocations."""
    return sum(a.amount * cost[a.row][a.col] for a in allocations)


def balance_problem(cost, supply, demand):
    """
    Return a balanced copy of a transportation instance.

    A zero-cost dummy column (excess supply) or dummy row (excess demand)
    absorbs the difference. The inputs are not modified.

    Returns:
        Tuple of (cost, supply, demand, dummy) where dummy is None for an
        already balanced instance, otherwise ("demand", diff) or ("supply", diff)
    """
    a = list(supply)
    b = list(demand)
    c = [list(row) for row in cost]
    diff = sum(a) - sum(b)
    if diff == 0:
        return c, a, b, None
    if diff > 0:
        for row in c:
            row.append(0)
        b.append(diff)
        return c, a, b, ("demand", diff)
    c.append([0] * len(b))
    a.append(-diff)
    return c, a, b, ("supply", -diff)


def merge_allocations(allocations: Iterable[Allocation]) -> Dict[Cell, float]:
    """Collapse allocations into a cell -> amount map, keeping positive amounts."""
    amounts: Dict[Cell, float] = {}
    for a in allocations:
        amounts[(a.row, a.col)] = amounts.get((a.row, a.col), 0) + a.amount
    return {cell: q for cell, q in amounts.items() if q > 0}


def positive_allocations(amounts: Dict[Cell, float]) -> List[Allocation]:
    """Allocations with positive amount in row-major order."""
    return [Allocation(i, j, q) for (i, j), q in sorted(amounts.items()) if q > 0]


def complete_basis(
    cost: Sequence[Sequence[float]],
    cells: Iterable[Cell],
    rows: int,
    cols: int
) -> Set[Cell]:
    """
    Extend a set of basic cells to a spanning tree of the row/column graph.

    Rows and columns are the nodes, cells the edges. Missing edges are added
    cheapest first (row-major on ties) as long as they join two different
    components, so the result always holds exactly rows + cols - 1 cells.

    Raises:
        InvalidInputError: if the given cells already contain a loop
    """
    basis: Set[Cell] = set()
    forest = UnionFind()
    for i, j in sorted(cells):
        if forest[("R", i)] == forest[("C", j)]:
            raise InvalidInputError("Allocation is not a basic solution: its cells form a loop.")
        forest.union(("R", i), ("C", j))
        basis.add((i, j))

    needed = rows + cols - 1
    if len(basis) < needed:
        candidates = sorted(
            (cost[i][j], i, j)
            for i in range(rows) for j in range(cols)
            if (i, j) not in basis
        )
        for _, i, j in candidates:
            if len(basis) == needed:
                break
            if forest[("R", i)] != forest[("C", j)]:
                forest.union(("R", i), ("C", j))
                basis.add((i, j))
                logger.debug(f"Degenerate basis completed with zero cell ({i}, {j})")
    return basis

