"""
Layered grid layout for precedence networks.
"""

from typing import Dict, List, Sequence

from .data_models import VisualNode

NODE_WIDTH = 100
NODE_GAP = 40
LAYER_HEIGHT = 120


def assign_layers(order: Sequence[str], predecessors: Dict[str, List[str]]) -> Dict[str, int]:
    """
    layer = 0 without predecessors, else 1 + max(layer of predecessors).

    order must be topological so every predecessor is placed first.
    """
    layers: Dict[str, int] = {}
    for name in order:
        preds = predecessors.get(name, [])
        layers[name] = 1 + max(layers[p] for p in preds) if preds else 0
    return layers


def grid_layout(order: Sequence[str], layers: Dict[str, int],
                node_width: float = NODE_WIDTH, node_gap: float = NODE_GAP,
                layer_height: float = LAYER_HEIGHT) -> List[VisualNode]:
    """Place each layer on its own row, nodes left to right in topological order."""
    grouped: Dict[int, List[str]] = {}
    for name in order:
        grouped.setdefault(layers[name], []).append(name)

    nodes: List[VisualNode] = []
    for layer in sorted(grouped):
        for i, name in enumerate(grouped[layer]):
            nodes.append(VisualNode(name, i * (node_width + node_gap), layer * layer_height))
    return nodes
