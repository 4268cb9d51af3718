import numpy as np
import pytest

from assignment import AssignmentResult
from graphical_lp import GraphicalSolution, LPError
from network_flow import NetworkFlowResult
from operations import (OPERATIONS, ProblemKind, assignment_problem_op, get_operation,
                        linear_programming_problem, network_flow_problem, resolve_kind,
                        run_operation, transportation_problem)
from transportation import TransportSolution

COST = [[19, 30, 50, 10], [70, 30, 40, 60], [40, 8, 70, 20]]
SUPPLY = [7, 9, 18]
DEMAND = [5, 8, 7, 14]


@pytest.mark.parametrize("operation,problem,keys", [
    (transportation_problem, "Transportation Problem", ["northWest", "leastCost", "vogels", "modi"]),
    (assignment_problem_op, "Assignment Problem", ["hungarian"]),
    (linear_programming_problem, "Linear Programming Problem", ["graph", "simplex"]),
    (network_flow_problem, "Network Flow Problem", ["topological"]),
])
def test_describe(operation, problem, keys):
    description = operation()
    assert description["prompt"] == f"Choose a method to solve the {problem}:"
    assert [m["key"] for m in description["methods"]] == keys
    assert all(m["label"] for m in description["methods"])


def test_describe_returns_a_copy():
    transportation_problem()["methods"][0]["label"] = "changed"
    assert transportation_problem()["methods"][0]["label"] == "North-West Method"


def test_transportation_solves():
    result = transportation_problem("vogels", COST, SUPPLY, DEMAND)
    assert isinstance(result, TransportSolution)
    assert result.total_cost == 779


def test_transportation_errors_are_strings():
    assert transportation_problem("simplex", COST, SUPPLY, DEMAND) == "Invalid or unknown method"
    assert transportation_problem("modi", COST, None, DEMAND) == "Cost matrix, supply and demand must be provided"
    message = transportation_problem("modi", [[1, 2], [3]], [1, 1], [1, 1])
    assert isinstance(message, str)
    assert "same length" in message


def test_transportation_iteration_options():
    result = transportation_problem("modi", COST, SUPPLY, DEMAND, max_iterations=1)
    assert result.optimal is False


def test_assignment_defaults_shape_from_matrix():
    result = assignment_problem_op(cost_matrix=[[4, 1, 3], [2, 0, 5], [3, 2, 2]])
    assert isinstance(result, AssignmentResult)
    assert result.assignment == [1, 0, 2]


def test_assignment_errors_are_strings():
    assert isinstance(assignment_problem_op(3, 2, [[1, 2], [3, 4]]), str)
    assert assignment_problem_op(2, 2) == "costMatrix must be a non-empty 2D array."


def test_lp_with_dict_constraints():
    result = linear_programming_problem(
        "graph", 2, [3, 2], True,
        [{"coeffs": [1, 0], "type": "<=", "rhs": 4}, {"coeffs": [0, 1], "type": "<=", "rhs": 3}],
    )
    assert isinstance(result, GraphicalSolution)
    assert result.best_solution.point == (4.0, 3.0)


def test_lp_simplex_is_not_available():
    message = linear_programming_problem("simplex", 3, [1, 1, 1], True, [])
    assert message.startswith("Simplex method is not implemented yet")


def test_lp_errors():
    assert linear_programming_problem("dual", 2, [1, 1]) == "Invalid or unknown method"
    assert isinstance(linear_programming_problem("graph", 3, [1, 1, 1], True, []), LPError)
    bad = linear_programming_problem("graph", 2, [1, 1], True, [{"coeffs": [1, 1], "type": "<>", "rhs": 1}])
    assert isinstance(bad, str)


def test_network_flow_with_dicts():
    result = network_flow_problem([
        {"activity": "A", "predecessors": []},
        {"activity": "B", "predecessors": ["A"]},
    ])
    assert isinstance(result, NetworkFlowResult)
    assert result.topological_order == ["A", "B"]


def test_network_flow_error_is_string():
    assert isinstance(network_flow_problem([{"activity": "", "predecessors": []}]), str)


def test_resolve_kind():
    assert resolve_kind("transportationProblem") is ProblemKind.TRANSPORTATION
    assert resolve_kind("network_flow") is ProblemKind.NETWORK_FLOW
    assert resolve_kind(ProblemKind.ASSIGNMENT) is ProblemKind.ASSIGNMENT
    assert resolve_kind("nope") is None
    assert get_operation("assignmentProblem") is OPERATIONS[ProblemKind.ASSIGNMENT]


def test_run_operation():
    assert run_operation("unknownProblem") == {"error": "Operation not found"}
    assert run_operation("linearProgrammingProblem")["methods"][0]["key"] == "graph"
    assert run_operation("transportationProblem", "northWest", COST, SUPPLY, DEMAND).total_cost == 1015


@pytest.mark.parametrize("entry", [[1, 0, "<=", 4], "x <= 4", 4])
def test_lp_constraint_must_be_an_object(entry):
    message = linear_programming_problem("graph", 2, [1, 1], True, [entry])
    assert isinstance(message, str)
    assert "Constraint must be an object" in message


@pytest.mark.parametrize("activities", [["A", "B"], [["A", []]], [None]])
def test_activity_must_be_an_object(activities):
    message = network_flow_problem(activities)
    assert isinstance(message, str)
    assert "Activity must be an object" in message


@pytest.mark.parametrize("objective", [[float("nan"), 1], [1, float("inf")], [1, "nan"]])
def test_lp_objective_must_be_finite(objective):
    message = linear_programming_problem("graph", 2, objective, True, [])
    assert message == "Objective coefficients must be finite numbers."


def test_lp_constraint_must_be_finite():
    message = linear_programming_problem(
        "graph", 2, [3, 2], True,
        [{"coeffs": [1, 0], "type": "<=", "rhs": float("nan")}, {"coeffs": [0, 1], "type": "<=", "rhs": 3}],
    )
    assert isinstance(message, str)
    assert "finite" in message


def test_numpy_transportation_input():
    cost = np.array(COST)
    result = transportation_problem("vogels", cost, np.array(SUPPLY), np.array(DEMAND))
    assert isinstance(result, TransportSolution)
    assert result.total_cost == 779


def test_numpy_assignment_matrix():
    result = assignment_problem_op(None, None, np.array([[4.0, 1.0], [2.0, 3.0]]))
    assert isinstance(result, AssignmentResult)
    assert result.assignment == [1, 0]
    assert result.total_cost == 3
