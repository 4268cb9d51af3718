"""
Data models for the transportation problem.

A transportation plan is a list of allocations (row, col, amount). The MODI
refinement additionally records one snapshot per step so the caller can replay
how the plan moved towards optimality.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

Cell = Tuple[int, int]

PLUS = "plus"
MINUS = "minus"


@dataclass(frozen=True)
class Allocation:
    """
    Flow shipped from a supply row to a demand column.
    """
    row: int
    col: int
    amount: float

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "amount": self.amount}


@dataclass(frozen=True)
class LoopCell:
    """
    A cell of the redistribution loop together with its sign.
    """
    row: int
    col: int
    sign: str  # PLUS or MINUS

    def to_dict(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "type": self.sign}


@dataclass
class Potentials:
    """
    Row (u) and column (v) dual values. None marks an unresolved potential.
    """
    u: List[Optional[float]]
    v: List[Optional[float]]

    def is_resolved(self) -> bool:
        return all(x is not None for x in self.u) and all(x is not None for x in self.v)


@dataclass
class ModiIteration:
    """
    Snapshot of one MODI refinement step, taken before the pivot is applied.
    """
    step: int
    allocations: List[Allocation]
    u: List[Optional[float]]
    v: List[Optional[float]]
    reduced_costs: List[List[Optional[float]]]
    total_cost: float
    entering_cell: Optional[Cell] = None
    loop: List[LoopCell] = field(default_factory=list)
    theta: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        entering = None
        if self.entering_cell is not None:
            entering = {"row": self.entering_cell[0], "col": self.entering_cell[1]}
        return {
            "step": self.step,
            "allocation": [a.to_dict() for a in self.allocations],
            "u": list(self.u),
            "v": list(self.v),
            "reducedCosts": [list(row) for row in self.reduced_costs],
            "enteringCell": entering,
            "loop": [c.to_dict() for c in self.loop],
            "theta": self.theta,
            "totalCost": self.total_cost,
        }


@dataclass
class TransportSolution:
    """
    Final solution of a transportation problem.

    iterations and optimal are only populated by the MODI strategy.
    """
    allocations: List[Allocation]
    total_cost: float
    method: str = ""
    iterations: Optional[List[ModiIteration]] = None
    optimal: Optional[bool] = None
    alternative_optima: List[Cell] = field(default_factory=list)

    def to_matrix(self, rows: int, cols: int) -> List[List[float]]:
        """Dense rows x cols view of the plan."""
        matrix = [[0 for _ in range(cols)] for _ in range(rows)]
        for a in self.allocations:
            matrix[a.row][a.col] += a.amount
        return matrix

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "method": self.method,
            "allocation": [a.to_dict() for a in self.allocations],
            "totalCost": self.total_cost,
        }
        if self.iterations is not None:
            result["iterations"] = [it.to_dict() for it in self.iterations]
        if self.optimal is not None:
            result["optimal"] = self.optimal
            result["alternativeOptima"] = [{"row": i, "col": j} for i, j in self.alternative_optima]
        return result

    def __repr__(self) -> str:
        extra = ""
        if self.optimal is not None:
            extra = f", optimal={self.optimal}, iters={len(self.iterations or [])}"
        return (f"TransportSolution(method={self.method}, cells={len(self.allocations)}, "
                f"cost={self.total_cost}{extra})")
