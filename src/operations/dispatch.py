"""
Dispatch table between the UI and the solvers.

Each entry point follows the same describe-then-solve protocol: called with
no arguments it returns {"prompt": ..., "methods": [{"key", "label"}, ...]};
called with inputs it returns the solver result. Malformed input comes back
as a descriptive string, never as an exception.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Union

import assignment
import graphical_lp
import network_flow
import transportation
from assignment import AssignmentResult, assignment_problem
from graphical_lp import GraphicalSolution, LPConstraint, LPError, LPInput, solve_graphical
from network_flow import Activity, NetworkFlowResult, network_flow as analyze_network
from transportation import InvalidInputError, TransportSolution, solve_transportation
from transportation.modi import MAX_MODI_ITERATIONS, TOLERANCE
from transportation.solver import normalize_method
from transportation.utils import is_finite_number

logger = logging.getLogger(__name__)

# errors raised while coercing UI input
INPUT_ERRORS = (InvalidInputError, ValueError, TypeError)


class ProblemKind(Enum):
    TRANSPORTATION = "transportation"
    ASSIGNMENT = "assignment"
    LINEAR_PROGRAMMING = "linear_programming"
    NETWORK_FLOW = "network_flow"


# names used by the mobile UI navigation
UI_NAMES = {
    "transportationProblem": ProblemKind.TRANSPORTATION,
    "assignmentProblem": ProblemKind.ASSIGNMENT,
    "linearProgrammingProblem": ProblemKind.LINEAR_PROGRAMMING,
    "networkFlowProblem": ProblemKind.NETWORK_FLOW,
}


def _describe(problem: str, methods) -> Dict[str, Any]:
    return {
        "prompt": f"Choose a method to solve the {problem}:",
        "methods": [dict(m) for m in methods],
    }


def transportation_problem(
    method: Optional[str] = None,
    cost: Optional[Sequence[Sequence[float]]] = None,
    supply: Optional[Sequence[float]] = None,
    demand: Optional[Sequence[float]] = None,
    max_iterations: int = MAX_MODI_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> Union[Dict[str, Any], TransportSolution, str]:
    if method is None:
        return _describe("Transportation Problem", transportation.METHODS)
    if cost is None or supply is None or demand is None:
        return "Cost matrix, supply and demand must be provided"
    try:
        normalize_method(method)
    except ValueError:
        return "Invalid or unknown method"
    try:
        return solve_transportation(method, cost, supply, demand,
                                    max_iterations=max_iterations, tolerance=tolerance)
    except INPUT_ERRORS as e:
        logger.warning(f"Transportation input rejected: {e}")
        return str(e)


def assignment_problem_op(
    agents: Optional[int] = None,
    tasks: Optional[int] = None,
    cost_matrix: Optional[Sequence[Sequence[float]]] = None,
) -> Union[Dict[str, Any], AssignmentResult, str]:
    if agents is None and tasks is None and cost_matrix is None:
        return _describe("Assignment Problem", assignment.METHODS)
    if cost_matrix is None:
        return "costMatrix must be a non-empty 2D array."
    try:
        if agents is None:
            agents = len(cost_matrix)
        if tasks is None:
            tasks = len(cost_matrix[0]) if len(cost_matrix) else 0
        return assignment_problem(int(agents), int(tasks), cost_matrix)
    except INPUT_ERRORS as e:
        logger.warning(f"Assignment input rejected: {e}")
        return str(e)


def linear_programming_problem(
    method: Optional[str] = None,
    variable_count: Optional[int] = None,
    objective: Optional[Sequence[float]] = None,
    maximize: bool = True,
    constraints: Optional[Sequence[Any]] = None,
) -> Union[Dict[str, Any], GraphicalSolution, LPError, str]:
    if method is None:
        return _describe("Linear Programming Problem", graphical_lp.METHODS)
    if method == "simplex":
        return "Simplex method is not implemented yet. Please use the Graphical method for 2 variables."
    if method != "graph":
        return "Invalid or unknown method"
    if variable_count is None or objective is None:
        return "Number of variables and objective coefficients must be provided"
    try:
        coefficients = [float(x) for x in objective]
        if not all(is_finite_number(x) for x in coefficients):
            raise InvalidInputError("Objective coefficients must be finite numbers.")
        parsed = [c if isinstance(c, LPConstraint) else LPConstraint.from_dict(c) for c in constraints or []]
        lp = LPInput(
            variable_count=int(variable_count),
            objective=coefficients,
            maximize=bool(maximize),
            constraints=parsed,
        )
    except INPUT_ERRORS as e:
        logger.warning(f"LP input rejected: {e}")
        return str(e)
    return solve_graphical(lp)


def network_flow_problem(
    activities: Optional[Sequence[Any]] = None,
) -> Union[Dict[str, Any], NetworkFlowResult, str]:
    if activities is None:
        return _describe("Network Flow Problem", network_flow.METHODS)
    try:
        parsed = [a if isinstance(a, Activity) else Activity.from_dict(a) for a in activities]
    except INPUT_ERRORS as e:
        logger.warning(f"Network input rejected: {e}")
        return str(e)
    return analyze_network(parsed)


OPERATIONS: Dict[ProblemKind, Callable[..., Any]] = {
    ProblemKind.TRANSPORTATION: transportation_problem,
    ProblemKind.ASSIGNMENT: assignment_problem_op,
    ProblemKind.LINEAR_PROGRAMMING: linear_programming_problem,
    ProblemKind.NETWORK_FLOW: network_flow_problem,
}


def resolve_kind(name: Union[str, ProblemKind]) -> Optional[ProblemKind]:
    """Accept a ProblemKind, its value or a UI name."""
    if isinstance(name, ProblemKind):
        return name
    if name in UI_NAMES:
        return UI_NAMES[name]
    try:
        return ProblemKind(name)
    except ValueError:
        return None


def get_operation(name: Union[str, ProblemKind]) -> Optional[Callable[..., Any]]:
    kind = resolve_kind(name)
    return OPERATIONS[kind] if kind is not None else None


def run_operation(name: Union[str, ProblemKind], *args, **kwargs) -> Any:
    """
    Look up and call an entry point.

    Unknown names yield {"error": "Operation not found"}.
    """
    operation = get_operation(name)
    if operation is None:
        return {"error": "Operation not found"}
    return operation(*args, **kwargs)
