"""
Data models for activity precedence networks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from transportation.utils import InvalidInputError


@dataclass(frozen=True)
class Activity:
    """
    An activity and the names of the activities that must precede it.
    """
    name: str
    predecessors: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("Every activity needs a non-empty name.")
        # de-duplicate, keep first occurrence order
        names = (str(p).strip() for p in self.predecessors if p is not None)
        preds = tuple(dict.fromkeys(n for n in names if n))
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "predecessors", preds)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Activity":
        """Build from the UI shape {"activity": "B", "predecessors": ["A"]}."""
        if not isinstance(data, dict):
            raise InvalidInputError(f"Activity must be an object with activity and predecessors, got {data!r}")
        preds = data.get("predecessors") or []
        if isinstance(preds, str):
            preds = preds.split(",")
        return cls(data.get("activity", data.get("name", "")), tuple(preds))


@dataclass(frozen=True)
class VisualNode:
    name: str
    x: float
    y: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.name, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class VisualEdge:
    source: str
    target: str

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target}


@dataclass
class NetworkFlowResult:
    is_cyclic: bool
    adjacency_list: Dict[str, List[str]]
    message: str
    topological_order: Optional[List[str]] = None
    layers: Dict[str, int] = field(default_factory=dict)
    visual_nodes: List[VisualNode] = field(default_factory=list)
    visual_edges: List[VisualEdge] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isCyclic": self.is_cyclic,
            "adjacencyList": {k: list(v) for k, v in self.adjacency_list.items()},
            "topologicalOrder": list(self.topological_order) if self.topological_order is not None else None,
            "layers": dict(self.layers),
            "message": self.message,
            "visualNodes": [n.to_dict() for n in self.visual_nodes],
            "visualEdges": [e.to_dict() for e in self.visual_edges],
        }
