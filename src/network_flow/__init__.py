"""
Precedence (activity network) analysis package.

This package builds the successor graph of an activity list, detects
cycles, computes a topological order and lays the nodes out in layers.
"""

from .data_models import Activity, NetworkFlowResult, VisualEdge, VisualNode
from .layout import assign_layers, grid_layout
from .precedence import build_adjacency, network_flow, topological_sort

METHODS = [
    {"key": "topological", "label": "Precedence Network (Topological Order)"},
]

__all__ = [
    "Activity",
    "NetworkFlowResult",
    "VisualEdge",
    "VisualNode",
    "assign_layers",
    "grid_layout",
    "build_adjacency",
    "network_flow",
    "topological_sort",
    "METHODS",
]
