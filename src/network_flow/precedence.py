"""
Precedence network analysis: adjacency list, cycle detection, topological order.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from .data_models import Activity, NetworkFlowResult, VisualEdge
from .layout import assign_layers, grid_layout

logger = logging.getLogger(__name__)

ACYCLIC_MESSAGE = "Valid network flow. Topological order computed."
CYCLIC_MESSAGE = "The network contains a cycle. Fix dependencies."


def build_adjacency(activities: Sequence[Activity]) -> Dict[str, List[str]]:
    """
    Successor lists derived from predecessor lists.

    Every activity and every named predecessor gets an entry, in order of
    first appearance; each activity is appended to the list of each of its
    predecessors.
    """
    adjacency: Dict[str, List[str]] = {}
    for activity in activities:
        adjacency.setdefault(activity.name, [])
        for pred in activity.predecessors:
            successors = adjacency.setdefault(pred, [])
            if activity.name not in successors:
                successors.append(activity.name)
    return adjacency


def predecessor_map(activities: Sequence[Activity]) -> Dict[str, List[str]]:
    """name -> predecessors, merging repeated declarations of the same activity."""
    preds: Dict[str, List[str]] = {}
    for activity in activities:
        merged = preds.setdefault(activity.name, [])
        merged.extend(p for p in activity.predecessors if p not in merged)
    return preds


def topological_sort(adjacency: Dict[str, List[str]]) -> Tuple[bool, List[str]]:
    """
    Depth-first search from every unvisited node.

    A node is prepended to the order once all its successors are finished.
    Meeting a node that is still on the search stack means a back edge,
    i.e. a cycle. The stack is explicit, so long chains do not hit the
    interpreter recursion limit.

    Returns:
        (is_cyclic, order); order is only meaningful when is_cyclic is False
    """
    visited = set()
    on_stack = set()
    finished: List[str] = []
    cyclic = False

    for root in adjacency:
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack = [(root, iter(adjacency.get(root, [])))]
        while stack:
            node, successors = stack[-1]
            for succ in successors:
                if succ not in visited:
                    visited.add(succ)
                    on_stack.add(succ)
                    stack.append((succ, iter(adjacency.get(succ, []))))
                    break
                if succ in on_stack:
                    cyclic = True
            else:
                stack.pop()
                on_stack.discard(node)
                finished.append(node)

    finished.reverse()
    return cyclic, finished


def network_flow(activities: Sequence[Activity]) -> NetworkFlowResult:
    """
    Analyse an activity list.

    Returns:
        NetworkFlowResult. For a cyclic network topological_order is None and
        no node layout is produced.
    """
    adjacency = build_adjacency(activities)
    cyclic, order = topological_sort(adjacency)

    edges = [VisualEdge(source, target) for source, targets in adjacency.items() for target in targets]

    if cyclic:
        logger.warning(f"Precedence network with {len(adjacency)} activities contains a cycle")
        return NetworkFlowResult(
            is_cyclic=True,
            adjacency_list=adjacency,
            message=CYCLIC_MESSAGE,
            visual_edges=edges,
        )

    layers = assign_layers(order, predecessor_map(activities))
    logger.info(f"Topological order: {' -> '.join(order)}")
    return NetworkFlowResult(
        is_cyclic=False,
        adjacency_list=adjacency,
        message=ACYCLIC_MESSAGE,
        topological_order=order,
        layers=layers,
        visual_nodes=grid_layout(order, layers),
        visual_edges=edges,
    )
