"""
Strategy selection for the transportation problem.
"""

import logging
from typing import Dict, List, Sequence

from .data_models import TransportSolution
from .initial_methods import least_cost_method, north_west_corner, vogels_approximation_method
from .modi import MAX_MODI_ITERATIONS, TOLERANCE, modi_method
from .utils import total_cost, validate_transport_input

logger = logging.getLogger(__name__)

METHODS: List[Dict[str, str]] = [
    {"key": "northWest", "label": "North-West Method"},
    {"key": "leastCost", "label": "Least Cost Method"},
    {"key": "vogels", "label": "Vogel's Approximation Method"},
    {"key": "modi", "label": "MODI Method (Optimal Solution)"},
]

_ALIASES = {
    "northWest": "northWest",
    "north_west": "northWest",
    "leastCost": "leastCost",
    "least_cost": "leastCost",
    "vogels": "vogels",
    "vogel": "vogels",
    "modi": "modi",
}

_INITIAL_METHODS = {
    "northWest": north_west_corner,
    "leastCost": least_cost_method,
    "vogels": vogels_approximation_method,
}


def normalize_method(method: str) -> str:
    """Map a strategy key or alias to its canonical key; raises ValueError if unknown."""
    try:
        return _ALIASES[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}") from None


def solve_transportation(
    method: str,
    cost: Sequence[Sequence[float]],
    supply: Sequence[float],
    demand: Sequence[float],
    max_iterations: int = MAX_MODI_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> TransportSolution:
    """
    Solve a transportation instance with the chosen strategy.

    Raises:
        InvalidInputError: on missing, ragged or non-finite input
        ValueError: on an unknown method
    """
    key = normalize_method(method)
    rows, cols = validate_transport_input(cost, supply, demand)
    logger.info(f"Solving {rows}x{cols} transportation problem with {key}")

    if key == "modi":
        return modi_method(cost, supply, demand, max_iterations=max_iterations, tolerance=tolerance)

    allocations = _INITIAL_METHODS[key](cost, supply, demand)
    return TransportSolution(
        allocations=allocations,
        total_cost=total_cost(allocations, cost),
        method=key,
    )
