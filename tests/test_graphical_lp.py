import pytest
from scipy.optimize import linprog

from graphical_lp import (GraphicalSolution, LPConstraint, LPError, LPInput, convex_hull,
                          intersection, is_feasible, line_points, solve_graphical)
from transportation import InvalidInputError


def box_problem(maximize=True):
    return LPInput(
        variable_count=2,
        objective=[3, 2],
        maximize=maximize,
        constraints=[
            LPConstraint(1, 0, "<=", 4),
            LPConstraint(0, 1, "<=", 3),
        ],
    )


def test_box_maximization():
    result = solve_graphical(box_problem())
    assert isinstance(result, GraphicalSolution)
    points = {p.point for p in result.feasible_points}
    assert points == {(0.0, 0.0), (4.0, 0.0), (0.0, 3.0), (4.0, 3.0)}
    assert result.best_solution.point == (4.0, 3.0)
    assert result.best_solution.value == 18
    assert result.objective_type == "Maximization"
    assert set(result.plot_data.feasible_region) == points
    assert len(result.plot_data.feasible_region) == 4
    assert result.plot_data.optimal_point == (4.0, 3.0)


def test_box_minimization():
    result = solve_graphical(box_problem(maximize=False))
    assert result.best_solution.point == (0.0, 0.0)
    assert result.best_solution.value == 0
    assert result.objective_type == "Minimization"


def test_more_than_two_variables_is_rejected():
    lp = LPInput(variable_count=3, objective=[1, 1, 1], maximize=True, constraints=[])
    result = solve_graphical(lp)
    assert isinstance(result, LPError)
    assert "only 2 variables" in result.error


def test_infeasible_region():
    lp = LPInput(
        variable_count=2,
        objective=[1, 1],
        maximize=True,
        constraints=[LPConstraint(1, 1, "<=", 2), LPConstraint(1, 1, ">=", 5)],
    )
    result = solve_graphical(lp)
    assert isinstance(result, LPError)
    assert result.error == "No feasible region found."


def test_equality_constraint():
    lp = LPInput(
        variable_count=2,
        objective=[1, 2],
        maximize=True,
        constraints=[LPConstraint(1, 1, "=", 4)],
    )
    result = solve_graphical(lp)
    assert {p.point for p in result.feasible_points} == {(4.0, 0.0), (0.0, 4.0)}
    assert result.best_solution.point == (0.0, 4.0)


def test_ties_keep_first_point():
    lp = LPInput(
        variable_count=2,
        objective=[1, 1],
        maximize=True,
        constraints=[LPConstraint(1, 1, "<=", 4)],
    )
    result = solve_graphical(lp)
    # (0, 4) and (4, 0) both score 4; (0, 4) is found first
    assert [p.point for p in result.feasible_points][:2] == [(0.0, 4.0), (4.0, 0.0)]
    assert result.best_solution.point == (0.0, 4.0)


def test_duplicate_vertices_are_merged():
    lp = LPInput(
        variable_count=2,
        objective=[1, 1],
        maximize=True,
        constraints=[LPConstraint(1, 0, "<=", 2), LPConstraint(1, 1, "<=", 2)],
    )
    result = solve_graphical(lp)
    points = [p.point for p in result.feasible_points]
    assert len(points) == len(set(points))


def test_matches_linprog():
    constraints = [
        LPConstraint(2, 1, "<=", 18),
        LPConstraint(2, 3, "<=", 42),
        LPConstraint(3, 1, "<=", 24),
    ]
    lp = LPInput(variable_count=2, objective=[3, 2], maximize=True, constraints=constraints)
    result = solve_graphical(lp)
    reference = linprog([-3, -2], A_ub=[[2, 1], [2, 3], [3, 1]], b_ub=[18, 42, 24],
                        bounds=[(0, None), (0, None)], method="highs")
    assert result.best_solution.value == pytest.approx(-reference.fun)
    assert result.best_solution.point == pytest.approx((3.0, 12.0))


def test_intersection_parallel_lines():
    assert intersection(LPConstraint(1, 1, "<=", 2), LPConstraint(2, 2, "<=", 8)) is None
    assert intersection(LPConstraint(1, 0, "<=", 2), LPConstraint(0, 1, "<=", 5)) == (2.0, 5.0)


def test_is_feasible_tolerance():
    constraints = [LPConstraint(1, 0, "<=", 1)]
    assert is_feasible((1 + 1e-12, 0), constraints)
    assert not is_feasible((1.1, 0), constraints)


def test_convex_hull_drops_interior_and_collinear_points():
    points = [(0, 0), (2, 0), (1, 0), (2, 2), (0, 2), (1, 1)]
    assert convex_hull(points) == [(0, 0), (2, 0), (2, 2), (0, 2)]


def test_convex_hull_small_inputs():
    assert convex_hull([]) == []
    assert convex_hull([(1, 1)]) == [(1, 1)]
    assert convex_hull([(1, 1), (0, 0)]) == [(0, 0), (1, 1)]


def test_line_points_sampling():
    line = line_points(LPConstraint(1, 2, "<=", 10))
    assert line.constraint == "1x + 2y <= 10"
    assert len(line.points) == 41
    assert line.points[0] == (0.0, 5.0)
    assert line.points[-1] == (20.0, -5.0)


def test_line_points_vertical_line():
    line = line_points(LPConstraint(2, 0, "<=", 8))
    assert all(x == 4.0 for x, _ in line.points)


def test_constraint_from_dict():
    c = LPConstraint.from_dict({"coeffs": [1, 2], "type": "==", "rhs": 3})
    assert c == LPConstraint(1.0, 2.0, "=", 3.0)
    with pytest.raises(InvalidInputError):
        LPConstraint(1, 1, "<>", 3)


def test_to_dict_shape():
    data = solve_graphical(box_problem()).to_dict()
    assert data["method"] == "Graphical Method"
    assert data["bestSolution"] == {"point": [4.0, 3.0], "value": 18.0}
    assert {"x": 4.0, "y": 3.0} in data["plotData"]["feasibleRegion"]
    assert len(data["plotData"]["constraintLines"]) == 4


@pytest.mark.parametrize("a,b,rhs", [
    (1, 0, float("nan")),
    (float("inf"), 1, 3),
    (1, float("nan"), 3),
])
def test_constraint_rejects_non_finite_values(a, b, rhs):
    with pytest.raises(InvalidInputError):
        LPConstraint(a, b, "<=", rhs)


def test_constraint_from_dict_requires_a_mapping():
    with pytest.raises(InvalidInputError):
        LPConstraint.from_dict([1, 0, "<=", 4])
