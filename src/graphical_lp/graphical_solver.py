"""
Graphical method for linear programs in two variables.

Every optimum of a bounded two-variable LP lies on a vertex of the feasible
region, and every vertex is the intersection of two constraint boundaries.
The solver therefore enumerates all pairwise intersections (non-negativity
included), keeps the feasible ones and evaluates the objective on them.
"""

import logging
from itertools import combinations
from typing import List, Union

from .data_models import EvaluatedPoint, GraphicalSolution, LPConstraint, LPError, LPInput, PlotData
from .geometry import EPSILON, convex_hull, intersection, is_feasible, line_points, unique_points

logger = logging.getLogger(__name__)

NON_NEGATIVITY = (
    LPConstraint(1.0, 0.0, ">=", 0.0),  # x >= 0
    LPConstraint(0.0, 1.0, ">=", 0.0),  # y >= 0
)


def solve_graphical(lp: LPInput, eps: float = EPSILON) -> Union[GraphicalSolution, LPError]:
    """
    Solve a two-variable LP by vertex enumeration.

    Args:
        lp: Problem with at most 2 variables
        eps: Tolerance for parallel lines, feasibility and duplicate vertices

    Returns:
        GraphicalSolution, or LPError for more than 2 variables or an empty
        feasible region
    """
    if lp.variable_count > 2:
        return LPError("Graphical method supports only 2 variables. Please use Simplex for >2 variables.")

    constraints: List[LPConstraint] = list(lp.constraints) + list(NON_NEGATIVITY)

    intersections = []
    for c1, c2 in combinations(constraints, 2):
        p = intersection(c1, c2, eps)
        if p is not None:
            intersections.append(p)

    feasible = unique_points([p for p in intersections if is_feasible(p, constraints, eps)], eps)
    logger.debug(f"{len(intersections)} intersections, {len(feasible)} feasible vertices")

    if not feasible:
        logger.warning("Graphical method: no feasible region")
        return LPError("No feasible region found.")

    objective = list(lp.objective) + [0.0] * (2 - len(lp.objective))
    evaluated = [EvaluatedPoint(p, objective[0] * p[0] + objective[1] * p[1]) for p in feasible]

    best = evaluated[0]
    for candidate in evaluated[1:]:
        if (candidate.value > best.value) if lp.maximize else (candidate.value < best.value):
            best = candidate

    plot = PlotData(
        constraint_lines=[line_points(c) for c in constraints],
        feasible_region=convex_hull(feasible),
        optimal_point=best.point,
    )
    logger.info(f"Graphical method: best point {best.point}, value={best.value}")
    return GraphicalSolution(
        feasible_points=evaluated,
        best_solution=best,
        objective_type="Maximization" if lp.maximize else "Minimization",
        plot_data=plot,
    )
