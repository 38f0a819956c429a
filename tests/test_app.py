"""
Integration tests for the Flask app, driven through the test client.
"""

import pytest

from main import app


@pytest.fixture
def client():
    app.config.update(TESTING=True, SECRET_KEY="test")
    with app.test_client() as c:
        yield c


def _triangle(client):
    """Reset and draw nodes 0..2 with edges 0→1 (4), 0→2 (1), 2→1 (1)."""
    client.post("/api/graph/reset")
    for x in (100, 200, 300):
        client.post("/api/graph/node", json={"x": x, "y": 100})
    for a, b, w in ((0, 1, 4), (0, 2, 1), (2, 1, 1)):
        resp = client.post("/api/graph/edge", json={"from": a, "to": b, "weight": w})
        assert resp.status_code == 200
    resp = client.post("/api/config/source_target", json={"source": 0, "target": 1})
    assert resp.status_code == 200


def test_index_renders(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"Run Dijkstra" in resp.data
    assert b'id="graph-svg"' in resp.data


def test_default_graph_in_state(client):
    data = client.get("/api/state").get_json()
    assert len(data["graph"]["nodes"]) == app.config["RANDOM_GRAPH_NODES"]
    assert data["has_run"] is False


def test_run_and_navigate(client):
    _triangle(client)

    data = client.post("/api/run").get_json()
    assert data["current_step"] == 0
    assert data["total_steps"] == 10
    assert data["path"] == [0, 2, 1]
    assert data["frame"]["distances"]["1"] is None

    data = client.post("/api/step/next").get_json()
    assert data["current_step"] == 1
    assert "Visiting node 0" in data["log"]

    data = client.post("/api/step/end").get_json()
    assert data["is_final"]
    assert data["frame"]["path"] == [0, 2, 1]
    assert data["frame"]["distances"] == {"0": 0, "1": 2, "2": 1}

    assert client.post("/api/step/next").status_code == 400

    data = client.post("/api/step/prev").get_json()
    assert data["current_step"] == 9

    data = client.post("/api/step/goto", json={"index": 3}).get_json()
    assert data["frame"]["distances"]["1"] == 4
    assert client.post("/api/step/goto", json={"index": 99}).status_code == 400


def test_stepping_before_run_is_rejected(client):
    _triangle(client)
    resp = client.post("/api/step/next")
    assert resp.status_code == 400


def test_graph_edit_abandons_run(client):
    _triangle(client)
    client.post("/api/run")
    client.post("/api/step/next")
    client.post("/api/graph/node", json={"x": 50, "y": 50})

    state = client.get("/api/state").get_json()
    assert state["has_run"] is False
    assert state["current_step"] == 0


def test_invalid_weight_is_a_400(client):
    _triangle(client)
    resp = client.post("/api/graph/edge", json={"from": 0, "to": 1, "weight": 0})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidWeight"


def test_invalid_reference_is_a_400(client):
    _triangle(client)
    resp = client.post("/api/graph/edge", json={"from": 0, "to": 42, "weight": 1})
    assert resp.get_json()["kind"] == "InvalidReference"


def test_invalid_source_leaves_selection_alone(client):
    _triangle(client)
    resp = client.post("/api/config/source_target", json={"source": 7})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidSource"
    assert client.get("/api/state").get_json()["source"] == 0


def test_set_weight_and_undo(client):
    _triangle(client)
    resp = client.post("/api/graph/weight", json={"index": 0, "weight": 1})
    assert resp.get_json()["edge"] == {"from": 0, "to": 1, "weight": 1}

    resp = client.post("/api/graph/undo")
    assert resp.get_json()["removed"] == {"from": 2, "to": 1, "weight": 1}
    assert len(resp.get_json()["graph"]["edges"]) == 2


def test_edge_without_weight_gets_one_in_range(client):
    _triangle(client)
    edge = client.post("/api/graph/edge", json={"from": 1, "to": 2}).get_json()["edge"]
    assert app.config["WEIGHT_LOW"] <= edge["weight"] <= app.config["WEIGHT_HIGH"]


def test_export_then_import(client):
    _triangle(client)
    resp = client.get("/api/graph/export")
    assert "attachment" in resp.headers["Content-Disposition"]
    exported = resp.get_json()

    client.post("/api/graph/reset")
    data = client.post("/api/graph/import", json=exported).get_json()
    assert data["graph"] == exported


def test_import_rejects_garbage(client):
    assert client.post("/api/graph/import", json={"edges": []}).status_code == 400
    resp = client.post("/api/graph/import", json={"nodes": [{"id": 3}]})
    assert resp.get_json()["kind"] == "InvalidReference"


def test_generate_random_graph(client):
    data = client.post("/api/graph/generate", json={"nodes": 5, "prob": 0.5, "seed": 1}).get_json()
    assert data["node_ids"] == [0, 1, 2, 3, 4]


def test_speed_presets_and_custom_delay(client):
    assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["delay_ms"] == 150
    assert client.post("/api/config/speed", json={"delay_ms": 25}).get_json()["speed"] == "custom"
    assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400
    assert client.post("/api/config/speed", json={"delay_ms": -5}).status_code == 400


def test_play_toggle_requires_run(client):
    _triangle(client)
    assert client.post("/api/step/play").get_json()["is_playing"] is False
    client.post("/api/run")
    assert client.post("/api/step/play").get_json()["is_playing"] is True
    assert client.post("/api/step/play").get_json()["is_playing"] is False


def test_compare_two_sources(client):
    _triangle(client)
    data = client.post("/api/compare", json={
        "left": {"source": 0, "target": 1},
        "right": {"source": 2, "target": 1},
    }).get_json()
    assert data["winner_path"] == "2→1"
    assert "Comparison" in data["comparison"]


@pytest.mark.parametrize("endpoints", [
    {"from": 0.9, "to": 1.7},
    {"from": True, "to": 1},
    {"from": 0, "to": "x"},
])
def test_edge_endpoints_must_be_integers(client, endpoints):
    _triangle(client)
    resp = client.post("/api/graph/edge", json={**endpoints, "weight": 3})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "BadRequest"
    assert len(client.get("/api/state").get_json()["graph"]["edges"]) == 3


def test_import_rejects_fractional_ids(client):
    resp = client.post("/api/graph/import", json={"nodes": [{"id": 0.6}, {"id": 1.9}], "edges": []})
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "InvalidReference"


@pytest.mark.parametrize("url,payload", [
    ("/api/graph/generate", {"prob": "abc"}),
    ("/api/graph/generate", {"seed": [1]}),
    ("/api/graph/randomize", {"seed": {"a": 1}}),
    ("/api/compare", {"left": [0, 1]}),
    ("/api/graph/weight", {"index": True, "weight": 2}),
])
def test_malformed_fields_are_json_400s(client, url, payload):
    _triangle(client)
    resp = client.post(url, json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["kind"] == "BadRequest"
