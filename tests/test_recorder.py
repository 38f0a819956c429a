"""
Unit tests for Recorder analytics, export and run comparison.
"""

import json

import pytest

from graph import Graph
from graph.errors import InvalidSource
from engine import Recorder, compare


def _graph():
    g = Graph()
    for i in range(4):
        g.add_node(i * 30, 0)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 2, 1)
    g.add_edge(2, 1, 1)
    return g


def _recorded(source, target, graph=None):
    rec = Recorder()
    rec.start(graph or _graph(), source, target)
    rec.run_to_completion()
    return rec


def test_metrics_for_reachable_target():
    rec = _recorded(0, 1)
    m = rec.get_metrics()

    assert m.nodes_visited == 3
    assert m.edges_examined == 3
    assert m.distance_updates == 3
    assert m.total_events == 10
    assert m.path_found
    assert m.path_length == 2
    assert m.path_cost == 2
    assert m.unreachable_nodes == 1
    assert [n.id for n in rec.path] == [0, 2, 1]


def test_metrics_for_unreachable_target():
    rec = _recorded(0, 3)
    assert not rec.metrics.path_found
    assert rec.path == []
    assert rec.metrics.path_cost == 0


def test_start_validates_eagerly():
    rec = Recorder()
    with pytest.raises(InvalidSource):
        rec.start(_graph(), 9, 0)
    assert rec.stepper is None


def test_run_to_completion_requires_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export_is_json_serialisable():
    data = _recorded(0, 3).export()
    text = json.dumps(data, allow_nan=False)
    assert '"kind": "done"' in text
    assert data["path"] == []
    assert data["events"][1]["current_distance"] is None


def test_compare_same_graph_different_sources():
    g = _graph()
    left = _recorded(0, 1, g)
    right = _recorded(2, 1, g)

    result = compare(left, right)

    assert result.winner_nodes == "2→1"
    assert result.winner_edges == "2→1"
    assert result.winner_path == "2→1"


def test_compare_unreachable_never_wins_on_cost():
    g = _graph()
    result = compare(_recorded(0, 3, g), _recorded(0, 0, g))
    assert result.winner_path == "0→0"


def test_compare_tie():
    g = _graph()
    result = compare(_recorded(0, 1, g), _recorded(0, 1, g))
    assert result.winner_nodes == "tie"
    assert result.winner_path == "tie"
