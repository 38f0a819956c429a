"""
Unit tests for the Graph container: validated mutation, undo,
adjacency snapshots, serialisation and the random generator.
"""

import random

import pytest

from graph import Edge, Graph, check_weight
from graph.errors import InvalidReference, InvalidWeight


def _line(n=3):
    g = Graph()
    for i in range(n):
        g.add_node(i * 10, 0)
    return g


def test_add_node_hands_out_sequential_ids():
    g = Graph()
    assert g.add_node(5, 5) == 0
    assert g.add_node(6, 6) == 1
    assert g.node_ids() == [0, 1]
    assert g.get_node(1).label == "1"


def test_add_edge_rejects_unknown_endpoints_without_mutating():
    g = _line(2)
    with pytest.raises(InvalidReference):
        g.add_edge(0, 7, 1)
    with pytest.raises(InvalidReference):
        g.add_edge(-1, 0, 1)
    assert g.edge_count() == 0


@pytest.mark.parametrize("weight", [0, -3, 1.5, "2", None, True])
def test_add_edge_rejects_bad_weights(weight):
    g = _line(2)
    with pytest.raises(InvalidWeight):
        g.add_edge(0, 1, weight)
    assert g.edge_count() == 0


def test_check_weight_accepts_integral_floats():
    assert check_weight(3.0) == 3
    assert isinstance(check_weight(3.0), int)


def test_invalid_errors_are_value_errors():
    g = _line(1)
    with pytest.raises(ValueError):
        g.add_edge(0, 4)


def test_parallel_edges_and_self_loops_are_legal():
    g = _line(2)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 2)
    g.add_edge(1, 1, 1)
    assert g.edge_count() == 3
    assert g.edges[2].is_self_loop
    idx, edge = g.edge_between(0, 1)
    assert idx == 1 and edge.weight == 2


def test_remove_last_edge_picks_most_recent_match():
    g = _line(3)
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 1, 9)

    removed = g.remove_last_edge(0, 1)

    assert removed == Edge(0, 1, 9)
    assert [e.to_dict() for e in g.edges] == [
        {"from": 0, "to": 1, "weight": 4},
        {"from": 1, "to": 2, "weight": 1},
    ]


def test_remove_last_edge_is_noop_when_missing():
    g = _line(2)
    assert g.remove_last_edge(1, 0) is None
    assert g.undo_last_edge() is None


def test_undo_last_edge_follows_drawing_order():
    g = _line(3)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    assert g.undo_last_edge() == Edge(1, 2, 1)
    assert g.undo_last_edge() == Edge(0, 1, 1)
    assert g.edge_count() == 0


def test_set_weight_validates_index_and_weight():
    g = _line(2)
    g.add_edge(0, 1, 3)
    with pytest.raises(InvalidWeight):
        g.set_weight(0, 0)
    assert g.edges[0].weight == 3
    with pytest.raises(InvalidReference):
        g.set_weight(4, 2)
    assert g.set_weight(0, 8).weight == 8


def test_randomize_weights_stays_in_range():
    g = Graph.generate_random(num_nodes=6, edge_probability=0.5, seed=1)
    g.randomize_weights(random.Random(3), low=2, high=4)
    assert all(2 <= e.weight <= 4 for e in g.edges)


def test_adjacency_preserves_insertion_order():
    g = _line(3)
    g.add_edge(0, 2, 7)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 1, 2)
    adj = g.adjacency()
    assert adj[0] == [(0, 2, 7), (2, 1, 2)]
    assert adj[1] == [(1, 2, 1)]
    assert adj[2] == []
    assert [idx for idx, _ in g.edges_from(0)] == [0, 2]


def test_dict_round_trip_keeps_nodes_edges_and_undo():
    g = _line(3)
    g.nodes[2].label = "goal"
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 2)

    copy = Graph.from_dict(g.to_dict())

    assert copy.to_dict() == g.to_dict()
    assert copy.get_node(2).label == "goal"
    assert copy.undo_last_edge() == Edge(1, 2, 2)


def test_from_dict_requires_dense_ids():
    data = {"nodes": [{"id": 0, "x": 0, "y": 0}, {"id": 2, "x": 1, "y": 1}], "edges": []}
    with pytest.raises(InvalidReference):
        Graph.from_dict(data)


def test_from_dict_accepts_shuffled_ids():
    data = {
        "nodes": [{"id": 1, "x": 5, "y": 5}, {"id": 0, "x": 0, "y": 0}],
        "edges": [{"from": 1, "to": 0, "weight": 3}],
    }
    g = Graph.from_dict(data)
    assert g.get_node(1).x == 5
    assert g.edges[0] == Edge(1, 0, 3)


def test_from_dict_rejects_bad_edges():
    data = {"nodes": [{"id": 0}], "edges": [{"from": 0, "to": 3, "weight": 1}]}
    with pytest.raises(InvalidReference):
        Graph.from_dict(data)


def test_generate_random_is_seeded():
    a = Graph.generate_random(num_nodes=7, seed=11)
    b = Graph.generate_random(num_nodes=7, seed=11)
    assert a.to_dict() == b.to_dict()
    assert a.node_count() == 7
    assert all(1 <= e.weight <= 9 for e in a.edges)


def test_clear_empties_everything():
    g = _line(2)
    g.add_edge(0, 1)
    g.clear()
    assert g.node_count() == 0
    assert g.edge_count() == 0
    assert g.undo_last_edge() is None


@pytest.mark.parametrize("bad_id", [1.9, 0.6, True, "one", None])
def test_from_dict_rejects_non_integer_node_ids(bad_id):
    data = {"nodes": [{"id": 0}, {"id": bad_id}], "edges": []}
    with pytest.raises(InvalidReference):
        Graph.from_dict(data)


def test_from_dict_rejects_fractional_edge_endpoints():
    data = {"nodes": [{"id": 0}, {"id": 1}], "edges": [{"from": 0.9, "to": 1, "weight": 2}]}
    with pytest.raises(InvalidReference):
        Graph.from_dict(data)


def test_from_dict_accepts_integral_ids_in_any_spelling():
    data = {"nodes": [{"id": 0.0}, {"id": "1"}], "edges": [{"from": "0", "to": 1.0, "weight": 2}]}
    g = Graph.from_dict(data)
    assert g.node_ids() == [0, 1]
    assert g.edges[0] == Edge(0, 1, 2)


@pytest.mark.parametrize("index", [True, False])
def test_set_weight_rejects_bool_index(index):
    g = _line(3)
    g.add_edge(0, 1, 3)
    g.add_edge(1, 2, 3)
    with pytest.raises(InvalidReference):
        g.set_weight(index, 5)
    assert [e.weight for e in g.edges] == [3, 3]
