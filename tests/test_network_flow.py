import networkx as nx
import pytest

from network_flow import (Activity, assign_layers, build_adjacency, grid_layout, network_flow,
                          topological_sort)
from transportation import InvalidInputError

DIAMOND = [
    Activity("A", ()),
    Activity("B", ("A",)),
    Activity("C", ("A",)),
    Activity("D", ("B", "C")),
]


def as_digraph(adjacency):
    graph = nx.DiGraph()
    graph.add_nodes_from(adjacency)
    graph.add_edges_from((u, v) for u, targets in adjacency.items() for v in targets)
    return graph


def test_adjacency_list():
    assert build_adjacency(DIAMOND) == {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}


def test_diamond_order_and_layers():
    result = network_flow(DIAMOND)
    assert result.is_cyclic is False
    assert result.topological_order[0] == "A"
    assert result.topological_order[-1] == "D"
    assert result.topological_order == ["A", "C", "B", "D"]
    assert result.layers == {"A": 0, "B": 1, "C": 1, "D": 2}


def test_diamond_layout():
    result = network_flow(DIAMOND)
    nodes = {n.name: (n.x, n.y) for n in result.visual_nodes}
    assert nodes == {"A": (0, 0), "C": (0, 120), "B": (140, 120), "D": (0, 240)}
    edges = {(e.source, e.target) for e in result.visual_edges}
    assert edges == {("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")}


def test_order_respects_every_edge():
    activities = [
        Activity("E", ("C", "D")),
        Activity("D", ("B",)),
        Activity("C", ("A",)),
        Activity("B", ("A",)),
        Activity("A", ()),
        Activity("F", ()),
    ]
    result = network_flow(activities)
    position = {name: i for i, name in enumerate(result.topological_order)}
    for activity in activities:
        for pred in activity.predecessors:
            assert position[pred] < position[activity.name]
    assert nx.is_directed_acyclic_graph(as_digraph(result.adjacency_list))
    assert sorted(result.topological_order) == ["A", "B", "C", "D", "E", "F"]


def test_two_node_cycle():
    result = network_flow([Activity("A", ("B",)), Activity("B", ("A",))])
    assert result.is_cyclic is True
    assert result.topological_order is None
    assert result.visual_nodes == []
    assert "cycle" in result.message


def test_self_loop_is_a_cycle():
    result = network_flow([Activity("A", ("A",))])
    assert result.is_cyclic is True


def test_cycle_detection_agrees_with_networkx():
    activities = [
        Activity("A", ()),
        Activity("B", ("A", "D")),
        Activity("C", ("B",)),
        Activity("D", ("C",)),
    ]
    result = network_flow(activities)
    assert result.is_cyclic is True
    assert not nx.is_directed_acyclic_graph(as_digraph(result.adjacency_list))


def test_undeclared_predecessor_becomes_root():
    result = network_flow([Activity("B", ("A",))])
    assert result.topological_order == ["A", "B"]
    assert result.layers == {"A": 0, "B": 1}


def test_topological_sort_empty():
    assert topological_sort({}) == (False, [])


def test_assign_layers_and_grid_layout():
    layers = assign_layers(["A", "B"], {"B": ["A"]})
    nodes = grid_layout(["A", "B"], layers, node_width=10, node_gap=0, layer_height=5)
    assert [(n.name, n.x, n.y) for n in nodes] == [("A", 0, 0), ("B", 0, 5)]


def test_activity_normalises_predecessors():
    activity = Activity.from_dict({"activity": " C ", "predecessors": "A, B, A"})
    assert activity.name == "C"
    assert activity.predecessors == ("A", "B")


def test_activity_requires_name():
    with pytest.raises(InvalidInputError):
        Activity("", ())


def test_to_dict_shape():
    data = network_flow(DIAMOND).to_dict()
    assert data["isCyclic"] is False
    assert data["visualNodes"][0] == {"id": "A", "x": 0, "y": 0}
    assert {"from": "A", "to": "B"} in data["visualEdges"]


def test_idempotent():
    assert network_flow(DIAMOND).to_dict() == network_flow(DIAMOND).to_dict()


def test_long_chain_does_not_recurse():
    names = [f"T{k}" for k in range(5000)]
    activities = [Activity(names[0], ())] + [Activity(n, (p,)) for p, n in zip(names, names[1:])]
    result = network_flow(activities)
    assert result.is_cyclic is False
    assert result.topological_order == names
    assert result.layers[names[-1]] == 4999


def test_long_cycle_is_detected():
    names = [f"T{k}" for k in range(5000)]
    activities = [Activity(n, (p,)) for p, n in zip(names, names[1:] + names[:1])]
    assert network_flow(activities).is_cyclic is True


def test_activity_from_dict_requires_a_mapping():
    with pytest.raises(InvalidInputError):
        Activity.from_dict("A")
