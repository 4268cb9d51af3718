"""
MODI (modified distribution / method of potentials) refinement.

Starting from an initial basic solution (Vogel's by default) the method
repeatedly:
 1. resolves the potentials u, v from cost[i][j] = u[i] + v[j] on basic cells,
 2. computes reduced costs cost[i][j] - u[i] - v[j] for every cell,
 3. lets the most negative non-basic cell enter the basis,
 4. shifts theta units around the loop closed by the entering cell.

The basis is kept as a spanning tree of the bipartite row/column graph, so
the loop of an entering cell is the unique tree path between its row and
column. Degenerate plans are completed with zero-amount basic cells.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set, Tuple

import networkx as nx

from .data_models import Allocation, Cell, LoopCell, ModiIteration, Potentials, TransportSolution, PLUS, MINUS
from .initial_methods import vogels_approximation_method
from .utils import complete_basis, merge_allocations, positive_allocations, total_cost

logger = logging.getLogger(__name__)

MAX_MODI_ITERATIONS = 100
TOLERANCE = 1e-9


def compute_potentials(cost: Sequence[Sequence[float]], basis: Set[Cell],
                       rows: int, cols: int) -> Potentials:
    """
    Resolve u, v by propagation from u[0] = 0 through the basic cells.

    Sweeps over the basis until no further value can be resolved. Potentials
    that cannot be reached stay None.
    """
    u: List[Optional[float]] = [None] * rows
    v: List[Optional[float]] = [None] * cols
    u[0] = 0

    cells = sorted(basis)
    changed = True
    while changed:
        changed = False
        for i, j in cells:
            if u[i] is not None and v[j] is None:
                v[j] = cost[i][j] - u[i]
                changed = True
            elif u[i] is None and v[j] is not None:
                u[i] = cost[i][j] - v[j]
                changed = True

    return Potentials(u=u, v=v)


def compute_reduced_costs(cost: Sequence[Sequence[float]],
                          potentials: Potentials) -> List[List[Optional[float]]]:
    """reduced[i][j] = cost[i][j] - u[i] - v[j]; None where a potential is unresolved."""
    reduced: List[List[Optional[float]]] = []
    for i, row in enumerate(cost):
        ui = potentials.u[i]
        reduced.append([
            None if ui is None or potentials.v[j] is None else c - ui - potentials.v[j]
            for j, c in enumerate(row)
        ])
    return reduced


def find_entering_cell(reduced: List[List[Optional[float]]], basis: Set[Cell],
                       tolerance: float = TOLERANCE) -> Optional[Cell]:
    """Most negative reduced cost among non-basic cells, first in row-major order on ties."""
    best: Optional[Cell] = None
    best_value = -tolerance
    for i, row in enumerate(reduced):
        for j, value in enumerate(row):
            if (i, j) in basis or value is None:
                continue
            if value < best_value:
                best_value = value
                best = (i, j)
    return best


def find_loop(basis: Set[Cell], entering: Cell) -> List[LoopCell]:
    """
    Closed plus/minus loop through the entering cell and basic cells.

    Rows and columns are nodes, basic cells are edges. Adding the entering
    cell to the tree closes exactly one cycle: the entering edge plus the
    tree path from its row node to its column node.
    """
    graph = nx.Graph()
    for i, j in basis:
        graph.add_edge(("R", i), ("C", j))

    i0, j0 = entering
    try:
        path = nx.shortest_path(graph, ("R", i0), ("C", j0))
    except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
        raise RuntimeError(f"No loop through entering cell {entering}: basis is not spanning") from e

    loop = [LoopCell(i0, j0, PLUS)]
    for k in range(len(path) - 1):
        a, b = path[k], path[k + 1]
        i, j = (a[1], b[1]) if a[0] == "R" else (b[1], a[1])
        loop.append(LoopCell(i, j, MINUS if k % 2 == 0 else PLUS))
    return loop


def find_theta(amounts: Dict[Cell, float], loop: List[LoopCell]) -> Tuple[float, Optional[Cell]]:
    """
    Smallest amount over the minus cells and the first minus cell holding it.
    """
    theta = float("inf")
    leaving: Optional[Cell] = None
    for cell in loop:
        if cell.sign != MINUS:
            continue
        q = amounts.get((cell.row, cell.col), 0)
        if q < theta:
            theta = q
            leaving = (cell.row, cell.col)
    if leaving is None:
        return 0, None
    return theta, leaving


def apply_loop(amounts: Dict[Cell, float], basis: Set[Cell], loop: List[LoopCell],
               theta: float, leaving: Cell) -> None:
    """Shift theta around the loop in place; the entering cell replaces the leaving one."""
    for cell in loop:
        key = (cell.row, cell.col)
        if cell.sign == PLUS:
            amounts[key] = amounts.get(key, 0) + theta
        else:
            amounts[key] = amounts[key] - theta
    entering = (loop[0].row, loop[0].col)
    basis.add(entering)
    basis.discard(leaving)
    amounts.pop(leaving, None)


def modi_method(
    cost: Sequence[Sequence[float]],
    supply: Sequence[float],
    demand: Sequence[float],
    initial: Optional[Sequence[Allocation]] = None,
    max_iterations: int = MAX_MODI_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> TransportSolution:
    """
    Refine a transportation plan to optimality with the MODI method.

    Args:
        cost: Cost matrix
        supply: Supply per row
        demand: Demand per column
        initial: Starting allocations; Vogel's approximation when omitted
        max_iterations: Pivot limit, reached only on cycling
        tolerance: Reduced costs above -tolerance count as non-negative

    Returns:
        TransportSolution with one ModiIteration per step. optimal is False
        when the pivot limit was hit.
    """
    rows, cols = len(supply), len(demand)
    if initial is None:
        initial = vogels_approximation_method(cost, supply, demand)

    amounts = merge_allocations(initial)
    basis = complete_basis(cost, amounts.keys(), rows, cols)
    for cell in basis:
        amounts.setdefault(cell, 0)

    iterations: List[ModiIteration] = []

    for step in range(max_iterations):
        potentials = compute_potentials(cost, basis, rows, cols)
        reduced = compute_reduced_costs(cost, potentials)
        entering = find_entering_cell(reduced, basis, tolerance)

        current = positive_allocations(amounts)
        snapshot = ModiIteration(
            step=step,
            allocations=current,
            u=list(potentials.u),
            v=list(potentials.v),
            reduced_costs=reduced,
            total_cost=total_cost(current, cost),
        )
        iterations.append(snapshot)

        if entering is None:
            alternatives = [
                (i, j)
                for i in range(rows) for j in range(cols)
                if (i, j) not in basis and reduced[i][j] is not None and abs(reduced[i][j]) <= tolerance
            ]
            logger.info(f"MODI optimal after {step} pivot(s), cost={snapshot.total_cost}")
            return TransportSolution(
                allocations=current,
                total_cost=snapshot.total_cost,
                method="modi",
                iterations=iterations,
                optimal=True,
                alternative_optima=alternatives,
            )

        loop = find_loop(basis, entering)
        theta, leaving = find_theta(amounts, loop)
        snapshot.entering_cell = entering
        snapshot.loop = loop
        snapshot.theta = theta
        logger.debug(f"MODI step {step}: enter {entering} "
                     f"(reduced cost {reduced[entering[0]][entering[1]]}), "
                     f"leave {leaving}, theta={theta}")

        apply_loop(amounts, basis, loop, theta, leaving)

    final = positive_allocations(amounts)
    logger.warning(f"MODI stopped after {max_iterations} iterations without proving optimality")
    return TransportSolution(
        allocations=final,
        total_cost=total_cost(final, cost),
        method="modi",
        iterations=iterations,
        optimal=False,
    )
