"""
Transportation problem package.

This package provides:
- North-West Corner, Least-Cost and Vogel's Approximation initial solutions
- MODI (method of potentials) refinement to an optimal plan
"""

from .data_models import Allocation, LoopCell, ModiIteration, Potentials, TransportSolution
from .initial_methods import least_cost_method, north_west_corner, vogels_approximation_method
from .modi import (compute_potentials, compute_reduced_costs, find_entering_cell,
                   find_loop, modi_method)
from .solver import METHODS, solve_transportation
from .utils import InvalidInputError, balance_problem, total_cost

__all__ = [
    "Allocation",
    "LoopCell",
    "ModiIteration",
    "Potentials",
    "TransportSolution",
    "north_west_corner",
    "least_cost_method",
    "vogels_approximation_method",
    "compute_potentials",
    "compute_reduced_costs",
    "find_entering_cell",
    "find_loop",
    "modi_method",
    "METHODS",
    "solve_transportation",
    "InvalidInputError",
    "balance_problem",
    "total_cost",
]
