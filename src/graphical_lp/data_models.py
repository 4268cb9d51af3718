"""
Data models for the two-variable graphical LP method.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from transportation.utils import InvalidInputError, is_finite_number

Point = Tuple[float, float]

_RELATION_ALIASES = {"<=": "<=", "≤": "<=", ">=": ">=", "≥": ">=", "=": "=", "==": "="}


@dataclass(frozen=True)
class LPConstraint:
    """
    coeff_a * x + coeff_b * y (relation) rhs
    """
    coeff_a: float
    coeff_b: float
    relation: str
    rhs: float

    def __post_init__(self):
        relation = _RELATION_ALIASES.get(self.relation)
        if relation is None:
            raise InvalidInputError(f"Unknown constraint relation: {self.relation!r}")
        if not all(is_finite_number(x) for x in (self.coeff_a, self.coeff_b, self.rhs)):
            raise InvalidInputError("Constraint coefficients and right-hand side must be finite numbers.")
        object.__setattr__(self, "relation", relation)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LPConstraint":
        """Build from the UI shape {"coeffs": [a, b], "type": "<=", "rhs": r}."""
        if not isinstance(data, dict):
            raise InvalidInputError(f"Constraint must be an object with coeffs, type and rhs, got {data!r}")
        coeffs = list(data.get("coeffs", []))
        if len(coeffs) > 2:
            raise InvalidInputError("Graphical constraints take at most 2 coefficients.")
        coeffs += [0] * (2 - len(coeffs))
        return cls(float(coeffs[0]), float(coeffs[1]), data.get("type", "<="), float(data.get("rhs", 0)))

    def label(self) -> str:
        return f"{self.coeff_a}x + {self.coeff_b}y {self.relation} {self.rhs}"


@dataclass
class LPInput:
    variable_count: int
    objective: Sequence[float]
    maximize: bool
    constraints: List[LPConstraint] = field(default_factory=list)


@dataclass
class EvaluatedPoint:
    point: Point
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"point": list(self.point), "value": self.value}


@dataclass
class ConstraintLine:
    constraint: str
    points: List[Point]

    def to_dict(self) -> Dict[str, Any]:
        return {"constraint": self.constraint, "points": [{"x": x, "y": y} for x, y in self.points]}


@dataclass
class PlotData:
    """Rendering-ready projection of the solved geometry."""
    constraint_lines: List[ConstraintLine]
    feasible_region: List[Point]
    optimal_point: Point

    def to_dict(self) -> Dict[str, Any]:
        return {
            "constraintLines": [line.to_dict() for line in self.constraint_lines],
            "feasibleRegion": [{"x": x, "y": y} for x, y in self.feasible_region],
            "optimalPoint": list(self.optimal_point),
        }


@dataclass
class GraphicalSolution:
    feasible_points: List[EvaluatedPoint]
    best_solution: EvaluatedPoint
    objective_type: str
    plot_data: PlotData
    method: str = "Graphical Method"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "feasiblePoints": [p.to_dict() for p in self.feasible_points],
            "bestSolution": self.best_solution.to_dict(),
            "objectiveType": self.objective_type,
            "plotData": self.plot_data.to_dict(),
        }


@dataclass
class LPError:
    """Structured failure: unsupported input or no feasible region."""
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}
