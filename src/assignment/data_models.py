"""
Data models for the assignment problem.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

UNASSIGNED = -1


@dataclass
class AssignmentResult:
    """
    Minimum-cost matching of agents to tasks.

    Attributes:
        assignment: assignment[agent] = task index, or UNASSIGNED when the
            agent was matched to a dummy task
        total_cost: Sum of original costs over real (agent, task) pairs
        is_perfect: True iff every agent received a real task
    """
    assignment: List[int]
    total_cost: float
    is_perfect: bool

    def pairs(self) -> List[tuple]:
        return [(agent, task) for agent, task in enumerate(self.assignment) if task != UNASSIGNED]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "assignment": list(self.assignment),
            "totalCost": self.total_cost,
            "isPerfect": self.is_perfect,
        }
