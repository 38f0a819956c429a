"""
main.py — Dijkstra Visualizer Flask App
=========================================
The web server that powers the visualizer.

Routes:
  GET  /                         – main UI
  GET  /api/state                – current session state + graph
  POST /api/graph/node           – add a node at (x, y)
  POST /api/graph/edge           – add a directed edge
  POST /api/graph/weight         – change one edge's weight
  POST /api/graph/undo           – remove the last drawn edge
  POST /api/graph/randomize      – random weights on every edge
  POST /api/graph/reset          – empty graph
  POST /api/graph/generate       – random graph
  GET  /api/graph/export         – download graph.json
  POST /api/graph/import         – load graph.json
  POST /api/config/source_target – pick source / target
  POST /api/config/speed         – playback speed preset or delay
  POST /api/run                  – start a run (shows the Init frame)
  POST /api/step/next            – advance one event
  POST /api/step/prev            – rewind one event
  POST /api/step/goto            – jump to frame N
  POST /api/step/end             – jump to the final frame
  POST /api/step/play            – toggle play/pause
  POST /api/compare              – metrics of two runs side by side

State management:
  The Flask session holds only what the user authored:
    • graph           – serialised Graph
    • source / target
    • current_step / total_steps / has_run
    • speed / delay_ms
  Runs are never stored.  Every step request replays the run from Init
  up to the requested frame.  Runs are deterministic, so the replay is
  identical to what the user saw before.  Any graph edit abandons the
  current run.
"""

import json
import logging
import os
import random
import secrets

from flask import Flask, Response, abort, jsonify, render_template_string, request, session

from graph import Graph
from graph.errors import InternalInconsistency, ShortestPathError
from algorithms import PSEUDOCODE, run_shortest_path
from engine import Recorder, SPEED_PRESETS, Stepper, compare
from ui import (
    render_canvas,
    playback_controls,
    graph_tools,
    source_target_picker,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    log_panel,
)

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_mapping(
    SECRET_KEY=secrets.token_hex(32),
    DEFAULT_SPEED="medium",
    WEIGHT_LOW=1,
    WEIGHT_HIGH=9,
    RANDOM_GRAPH_NODES=8,
    RANDOM_GRAPH_PROB=0.3,
    RANDOM_GRAPH_SEED=42,
)
# e.g. DIJKSTRA_VIZ_WEIGHT_HIGH=20 or DIJKSTRA_VIZ_SECRET_KEY=…
app.config.from_prefixed_env("DIJKSTRA_VIZ")


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(ShortestPathError)
def handle_graph_error(err: ShortestPathError):
    return jsonify({"error": str(err), "kind": type(err).__name__}), 400


@app.errorhandler(InternalInconsistency)
def handle_internal_inconsistency(err: InternalInconsistency):
    logger.error("engine invariant violated: %s", err)
    return jsonify({"error": str(err), "kind": "InternalInconsistency"}), 500


@app.errorhandler(400)
def handle_bad_request(err):
    return jsonify({"error": err.description, "kind": "BadRequest"}), 400


def _payload() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_field(data: dict, key: str, default=None) -> int:
    value = data.get(key, default)
    if value is None:
        abort(400, description=f"Missing field '{key}'")
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        abort(400, description=f"Field '{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        abort(400, description=f"Field '{key}' must be an integer, got {value!r}")


def _float_field(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool):
        abort(400, description=f"Field '{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        abort(400, description=f"Field '{key}' must be a number, got {value!r}")


def _seed_field(data: dict):
    """Optional integer seed; None means 'unseeded'."""
    if data.get("seed") is None:
        return None
    return _int_field(data, "seed")


def _dict_field(data: dict, key: str) -> dict:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        abort(400, description=f"Field '{key}' must be an object, got {value!r}")
    return value


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or create the default one."""
    if "graph" not in session:
        session["graph"] = Graph.generate_random(
            num_nodes=app.config["RANDOM_GRAPH_NODES"],
            edge_probability=app.config["RANDOM_GRAPH_PROB"],
            weight_range=(app.config["WEIGHT_LOW"], app.config["WEIGHT_HIGH"]),
            seed=app.config["RANDOM_GRAPH_SEED"],
        ).to_dict()
    return Graph.from_dict(session["graph"])


def save_graph(graph: Graph):
    """Store the graph and abandon whatever run was on screen."""
    session["graph"] = graph.to_dict()
    ids = graph.node_ids()
    if session.get("source") not in ids:
        session["source"] = ids[0] if ids else None
    if session.get("target") not in ids:
        session["target"] = ids[-1] if ids else None
    set_state(has_run=False, current_step=0, total_steps=0, is_playing=False)


def get_state():
    """Return current app state as a dict."""
    return {
        "source":       session.get("source"),
        "target":       session.get("target"),
        "has_run":      session.get("has_run", False),
        "current_step": session.get("current_step", 0),
        "total_steps":  session.get("total_steps", 0),
        "is_playing":   session.get("is_playing", False),
        "speed":        session.get("speed", app.config["DEFAULT_SPEED"]),
        "delay_ms":     session.get("delay_ms", SPEED_PRESETS.get(app.config["DEFAULT_SPEED"], 400)),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _ensure_endpoints(graph: Graph) -> None:
    ids = graph.node_ids()
    if len(ids) >= 1 and (session.get("source") not in ids or session.get("target") not in ids):
        set_state(source=ids[0], target=ids[-1])


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------
def _graph_payload(graph: Graph) -> dict:
    state = get_state()
    return {
        "svg":      render_canvas(graph, None, show_overlays=False,
                                  source=state["source"], target=state["target"]),
        "node_ids": graph.node_ids(),
        "picker":   source_target_picker(graph.node_ids(), state["source"], state["target"]),
        "graph":    graph.to_dict(),
    }


def _replay(graph: Graph, idx: int) -> Stepper:
    """Re-run from Init and stop on frame `idx`."""
    state = get_state()
    stepper = Stepper()
    stepper.start(run_shortest_path(graph, state["source"], state["target"]))
    stepper.goto_step(idx)
    return stepper


def _frame_payload(graph: Graph, stepper: Stepper) -> dict:
    state = get_state()
    frame = stepper.current_frame
    return {
        "svg":          render_canvas(graph, frame, show_overlays=True,
                                      source=state["source"], target=state["target"]),
        "pseudocode":   pseudocode_viewer(PSEUDOCODE, frame.pseudocode_line),
        "explanation":  explanation_panel(frame.explanation),
        "log":          log_panel(stepper.log.lines[:stepper.current_idx]),
        "frame":        frame.to_dict(),
        "current_step": stepper.current_idx,
        "total_steps":  state["total_steps"],
        "is_final":     frame.is_final,
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    graph = get_graph()
    _ensure_endpoints(graph)
    state = get_state()

    svg = render_canvas(graph, None, show_overlays=False,
                        source=state["source"], target=state["target"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=svg,
        playback=playback_controls(
            is_playing=state["is_playing"],
            current_step=state["current_step"],
            total_steps=state["total_steps"],
            speed=state["speed"],
        ),
        tools=graph_tools(),
        picker=source_target_picker(graph.node_ids(), state["source"], state["target"]),
        analytics=analytics_panel(),
        comparison=comparison_panel(),
        pseudocode=pseudocode_viewer(PSEUDOCODE),
        explanation=explanation_panel(),
        log=log_panel([]),
        delay_ms=state["delay_ms"],
    )
    return html


@app.route("/api/state")
def api_state():
    graph = get_graph()
    return jsonify({**get_state(), "graph": graph.to_dict()})


# ---------------------------------------------------------------------------
# API: Graph Authoring
# ---------------------------------------------------------------------------
@app.route("/api/graph/node", methods=["POST"])
def api_graph_node():
    data = _payload()
    graph = get_graph()
    try:
        x, y = float(data["x"]), float(data["y"])
    except (KeyError, TypeError, ValueError):
        abort(400, description="Fields 'x' and 'y' must be numbers")
    node_id = graph.add_node(x, y)
    save_graph(graph)
    logger.debug("node %d added at (%.1f, %.1f)", node_id, x, y)
    return jsonify({"id": node_id, **_graph_payload(graph)})


@app.route("/api/graph/edge", methods=["POST"])
def api_graph_edge():
    data = _payload()
    graph = get_graph()
    source = _int_field(data, "from")
    target = _int_field(data, "to")
    if "weight" in data:
        weight = data["weight"]
    else:
        weight = random.randint(app.config["WEIGHT_LOW"], app.config["WEIGHT_HIGH"])
    edge = graph.add_edge(source, target, weight)
    save_graph(graph)
    return jsonify({"edge": edge.to_dict(), "index": graph.edge_count() - 1, **_graph_payload(graph)})


@app.route("/api/graph/weight", methods=["POST"])
def api_graph_weight():
    data = _payload()
    graph = get_graph()
    edge = graph.set_weight(_int_field(data, "index"), data.get("weight"))
    save_graph(graph)
    return jsonify({"edge": edge.to_dict(), **_graph_payload(graph)})


@app.route("/api/graph/undo", methods=["POST"])
def api_graph_undo():
    graph = get_graph()
    removed = graph.undo_last_edge()
    save_graph(graph)
    return jsonify({"removed": removed.to_dict() if removed else None, **_graph_payload(graph)})


@app.route("/api/graph/randomize", methods=["POST"])
def api_graph_randomize():
    data = _payload()
    graph = get_graph()
    seed = _seed_field(data)
    rng = random.Random(seed) if seed is not None else None
    graph.randomize_weights(rng, low=app.config["WEIGHT_LOW"], high=app.config["WEIGHT_HIGH"])
    save_graph(graph)
    return jsonify(_graph_payload(graph))


@app.route("/api/graph/reset", methods=["POST"])
def api_graph_reset():
    graph = get_graph()
    graph.clear()
    save_graph(graph)
    return jsonify(_graph_payload(graph))


@app.route("/api/graph/generate", methods=["POST"])
def api_graph_generate():
    data = _payload()
    g = Graph.generate_random(
        num_nodes=_int_field(data, "nodes", app.config["RANDOM_GRAPH_NODES"]),
        edge_probability=_float_field(data, "prob", app.config["RANDOM_GRAPH_PROB"]),
        weight_range=(app.config["WEIGHT_LOW"], app.config["WEIGHT_HIGH"]),
        seed=_seed_field(data),
    )
    save_graph(g)
    return jsonify(_graph_payload(g))


@app.route("/api/graph/export")
def api_graph_export():
    graph = get_graph()
    return Response(
        json.dumps(graph.to_dict(), indent=2),
        mimetype="application/json",
        headers={"Content-Disposition": "attachment; filename=graph.json"},
    )


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data = _payload()
    if "nodes" not in data:
        abort(400, description="Invalid graph JSON: missing 'nodes'")
    try:
        g = Graph.from_dict(data)
    except ShortestPathError:
        raise
    except (KeyError, TypeError, ValueError) as e:
        abort(400, description=f"Invalid graph JSON: {e}")
    save_graph(g)
    logger.info("imported graph: %s", g)
    return jsonify(_graph_payload(g))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/source_target", methods=["POST"])
def api_config_source_target():
    data = _payload()
    graph = get_graph()
    state = get_state()
    source = _int_field(data, "source", state["source"])
    target = _int_field(data, "target", state["target"])
    # validates both ids before touching the session
    run_shortest_path(graph, source, target)
    set_state(source=source, target=target, has_run=False, current_step=0, total_steps=0)
    return jsonify({"source": source, "target": target})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data = _payload()
    stepper = Stepper()
    if "delay_ms" in data:
        try:
            stepper.set_delay(float(data["delay_ms"]))
        except (TypeError, ValueError) as e:
            abort(400, description=str(e))
        speed = "custom"
    else:
        speed = data.get("speed", "medium")
        if speed not in SPEED_PRESETS:
            abort(400, description=f"Unknown speed preset '{speed}'")
        stepper.set_speed(speed)
    set_state(speed=speed, delay_ms=stepper.delay_ms)
    return jsonify({"speed": speed, "delay_ms": stepper.delay_ms})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    graph = get_graph()
    state = get_state()
    if state["source"] is None or state["target"] is None:
        abort(400, description="Add nodes and set source and target first")

    rec = Recorder()
    rec.start(graph, state["source"], state["target"])
    rec.run_to_completion()
    rec.stepper.rewind()

    set_state(has_run=True, current_step=0, total_steps=len(rec.events), is_playing=False)
    return jsonify({
        **_frame_payload(graph, rec.stepper),
        "analytics": analytics_panel(rec.metrics),
        "path": [n.id for n in rec.path],
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
def _goto(idx: int):
    state = get_state()
    if not state["has_run"]:
        abort(400, description="Run the algorithm first")
    if not (0 <= idx <= state["total_steps"]):
        abort(400, description=f"Step {idx} is outside 0..{state['total_steps']}")
    graph = get_graph()
    stepper = _replay(graph, idx)
    set_state(current_step=idx)
    return jsonify(_frame_payload(graph, stepper))


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    state = get_state()
    if state["has_run"] and state["current_step"] >= state["total_steps"]:
        set_state(is_playing=False)
        return jsonify({"error": "Already at last step"}), 400
    return _goto(state["current_step"] + 1)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    state = get_state()
    if state["current_step"] <= 0:
        return jsonify({"error": "Already at first step"}), 400
    return _goto(state["current_step"] - 1)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    return _goto(_int_field(_payload(), "index", 0))


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    return _goto(get_state()["total_steps"])


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    state = get_state()
    playing = not state["is_playing"] and state["has_run"]
    set_state(is_playing=playing)
    return jsonify({"is_playing": playing, "delay_ms": state["delay_ms"]})


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = _payload()
    graph = get_graph()
    state = get_state()

    recorders = []
    for side in ("left", "right"):
        picked = _dict_field(data, side)
        rec = Recorder()
        rec.start(graph, _int_field(picked, "source", state["source"]), _int_field(picked, "target", state["target"]))
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(*recorders)
    return jsonify({
        "comparison": comparison_panel(result),
        "winner_nodes": result.winner_nodes,
        "winner_edges": result.winner_edges,
        "winner_path": result.winner_path,
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Dijkstra Visualizer</title>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 340px;
      overflow: hidden;
    }

    #bottom-panel > div {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      overflow-y: auto;
    }

    #bottom-panel h3, .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 12px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--accent-cyan);
    }

    .code-block {
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 12px;
      line-height: 1.5;
    }
    .code-line { padding: 2px 8px; border-radius: 4px; white-space: pre; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      box-shadow: 0 0 20px var(--glow-cyan);
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }
    .log-output { font-family: 'JetBrains Mono', monospace; font-size: 12px; color: var(--text-secondary); white-space: pre-wrap; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }
    .panel table { width: 100%; font-size: 13px; }
    .hint, .placeholder { color: var(--text-secondary); font-size: 12px; margin-bottom: 10px; }

    .button-row { display: flex; gap: 8px; margin: 8px 0; flex-wrap: wrap; }

    button, .btn-secondary {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 8px 14px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      text-decoration: none;
    }
    .btn-primary { background: linear-gradient(135deg, var(--accent-emerald), #059669); margin-bottom: 8px; }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }

    select, input[type="number"], input[type="range"] {
      width: 100%;
      padding: 8px 10px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }
  </style>
</head>
<body>
  <div id="sidebar">
    {{ playback|safe }}
    <div id="picker">{{ picker|safe }}</div>
    {{ tools|safe }}
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div>
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div>
        <h3>Step Explanation</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
      <div>
        <h3>Log</h3>
        <div id="log">{{ log|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let delayMs = {{ delay_ms }};
    let timer = null;
    let pendingNode = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function show(data) {
      if (data.error) { console.warn(data.error); return false; }
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.picker) document.getElementById('picker').innerHTML = data.picker;
      if (data.pseudocode) document.getElementById('pseudocode').innerHTML = data.pseudocode;
      if (data.explanation) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.log !== undefined) document.getElementById('log').innerHTML = data.log;
      if (data.analytics) document.getElementById('analytics').innerHTML = data.analytics;
      if (data.current_step !== undefined) document.getElementById('current-step').textContent = data.current_step;
      if (data.total_steps !== undefined) document.getElementById('total-steps').textContent = data.total_steps;
      return true;
    }

    function stopPlaying() {
      if (timer) { clearTimeout(timer); timer = null; }
    }

    async function playLoop() {
      const data = await post('/api/step/next');
      if (!show(data) || data.is_final) { stopPlaying(); await post('/api/step/play'); return; }
      timer = setTimeout(playLoop, delayMs);
    }

    // Authoring: click empty canvas → node; click node, then node → edge
    document.getElementById('canvas-svg').addEventListener('click', async (e) => {
      const svg = document.getElementById('graph-svg');
      const nodeEl = e.target.closest('.node');
      if (nodeEl) {
        const id = +nodeEl.dataset.id;
        if (pendingNode === null) { pendingNode = id; return; }
        if (pendingNode !== id) show(await post('/api/graph/edge', {from: pendingNode, to: id}));
        pendingNode = null;
        return;
      }
      const pt = svg.createSVGPoint();
      pt.x = e.clientX; pt.y = e.clientY;
      const p = pt.matrixTransform(svg.getScreenCTM().inverse());
      stopPlaying();
      show(await post('/api/graph/node', {x: Math.round(p.x), y: Math.round(p.y)}));
    });

    document.getElementById('btn-run')?.addEventListener('click', async () => { stopPlaying(); show(await post('/api/run')); });
    document.getElementById('btn-next')?.addEventListener('click', async () => show(await post('/api/step/next')));
    document.getElementById('btn-prev')?.addEventListener('click', async () => show(await post('/api/step/prev')));
    document.getElementById('btn-rewind')?.addEventListener('click', async () => show(await post('/api/step/goto', {index: 0})));
    document.getElementById('btn-end')?.addEventListener('click', async () => show(await post('/api/step/end')));
    document.getElementById('btn-play')?.addEventListener('click', async () => {
      const data = await post('/api/step/play');
      delayMs = data.delay_ms;
      if (data.is_playing) playLoop(); else stopPlaying();
    });

    document.getElementById('btn-undo')?.addEventListener('click', async () => { stopPlaying(); show(await post('/api/graph/undo')); });
    document.getElementById('btn-randomize')?.addEventListener('click', async () => { stopPlaying(); show(await post('/api/graph/randomize')); });
    document.getElementById('btn-reset')?.addEventListener('click', async () => {
      stopPlaying();
      show(await post('/api/graph/reset'));
      document.getElementById('log').innerHTML = '';
    });
    document.getElementById('btn-gen-random')?.addEventListener('click', async () => {
      stopPlaying();
      show(await post('/api/graph/generate', {
        nodes: +document.getElementById('rand-nodes').value,
        prob: +document.getElementById('rand-prob').value,
      }));
    });
    document.getElementById('rand-prob')?.addEventListener('input', (e) => {
      document.getElementById('rand-prob-val').textContent = e.target.value;
    });
    document.getElementById('import-file')?.addEventListener('change', async (e) => {
      const file = e.target.files[0];
      if (!file) return;
      try {
        show(await post('/api/graph/import', JSON.parse(await file.text())));
      } catch (err) {
        alert('Invalid JSON format');
      }
    });

    document.getElementById('speed-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/config/speed', {speed: e.target.value});
      delayMs = data.delay_ms;
    });
    document.addEventListener('change', async (e) => {
      if (e.target.id === 'source-selector') await post('/api/config/source_target', {source: +e.target.value});
      if (e.target.id === 'target-selector') await post('/api/config/source_target', {target: +e.target.value});
    });
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Dijkstra Visualizer — open http://localhost:5000")
    app.run(debug=os.environ.get("FLASK_DEBUG") == "1")
