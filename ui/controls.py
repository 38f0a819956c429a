"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls       – play/pause/next/prev/rewind/speed
  • graph_tools             – random graph, undo edge, random weights, reset, import/export
  • source_target_picker    – dropdowns for the run's source and target
  • analytics_panel         – nodes visited, edges examined, path cost, …
  • comparison_panel        – side-by-side metrics of two runs
  • pseudocode_viewer       – with live line highlighting
  • explanation_panel       – "why this step happened"
  • log_panel               – the textual event log

Design decisions:
  - No panel keeps state; whatever it shows arrives as arguments.
  - Panels return HTML fragments as plain strings.  main.py drops them
    into the page template, and the JSON API sends the same fragments
    back for the browser to swap in.
  - User-controlled text (labels, log lines, explanations) is escaped.
"""

from html import escape
from typing import List, Optional

from engine import RunMetrics, ComparisonResult, SPEED_PRESETS


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    current_step: int = 0,
    total_steps: int = 0,
    speed: str = "medium",
    is_finished: bool = False,
) -> str:
    play_icon = "⏸" if is_playing else "▶"
    play_label = "Pause" if is_playing else "Play"

    options = []
    for name, ms in SPEED_PRESETS.items():
        sel = 'selected' if name == speed else ''
        options.append(f'<option value="{name}" {sel}>{name.capitalize()} ({ms} ms)</option>')

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <button id="btn-run" class="btn-primary">▶ Run Dijkstra</button>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step">◀</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Next step">▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{current_step}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">FINISHED</span>' if is_finished else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Graph Tools
# ---------------------------------------------------------------------------
def graph_tools() -> str:
    return """
    <div class="panel graph-tools">
      <h3>🌐 Graph</h3>
      <p class="hint">Click the canvas to add a node. Click one node, then another, to draw an edge.</p>
      <div class="button-row">
        <button id="btn-undo" class="btn-secondary">↶ Undo Edge</button>
        <button id="btn-randomize" class="btn-secondary">🎲 Random Weights</button>
        <button id="btn-reset" class="btn-secondary">✖ Reset</button>
      </div>
      <label>Nodes: <input type="number" id="rand-nodes" value="8" min="2" max="30"></label>
      <label>Edge Prob: <input type="range" id="rand-prob" min="0" max="1" step="0.05" value="0.3">
             <span id="rand-prob-val">0.3</span></label>
      <button id="btn-gen-random" class="btn-secondary">Generate Random</button>
      <div class="button-row">
        <a id="btn-export" class="btn-secondary" href="/api/graph/export" download="graph.json">⬇ Export JSON</a>
        <label class="btn-secondary">⬆ Import JSON <input type="file" id="import-file" accept="application/json" hidden></label>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Source / Target Picker
# ---------------------------------------------------------------------------
def source_target_picker(
    node_ids: List[int],
    source: Optional[int] = None,
    target: Optional[int] = None,
) -> str:
    src_options = []
    tgt_options = []

    for nid in node_ids:
        src_sel = 'selected' if nid == source else ''
        tgt_sel = 'selected' if nid == target else ''
        src_options.append(f'<option value="{nid}" {src_sel}>{nid}</option>')
        tgt_options.append(f'<option value="{nid}" {tgt_sel}>{nid}</option>')

    return f"""
    <div class="panel source-target-picker">
      <h3>🎯 Source & Target</h3>
      <label>Source:
        <select id="source-selector">
          {''.join(src_options)}
        </select>
      </label>
      <label>Target:
        <select id="target-selector">
          {''.join(tgt_options)}
        </select>
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run Dijkstra to see metrics.</p>
        </div>
        """

    path_status = "✅ Found" if metrics.path_found else "❌ Unreachable"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.source} → {metrics.target}</h3>
      <table>
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Edges Examined:</td><td><strong>{metrics.edges_examined}</strong></td></tr>
        <tr><td>Distance Updates:</td><td><strong>{metrics.distance_updates}</strong></td></tr>
        <tr><td>Path Length:</td><td><strong>{metrics.path_length} edges</strong></td></tr>
        <tr><td>Path Cost:</td><td><strong>{metrics.path_cost:g}</strong></td></tr>
        <tr><td>Unreachable Nodes:</td><td><strong>{metrics.unreachable_nodes}</strong></td></tr>
        <tr><td>Total Events:</td><td><strong>{metrics.total_events}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison</h3>
          <p class="placeholder">Compare two runs on the same graph.</p>
        </div>
        """

    left = comp.left
    right = comp.right
    l_label = f"{left.source} → {left.target}"
    r_label = f"{right.source} → {right.target}"

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {winner_label}"

    def cost(m: RunMetrics) -> str:
        return f"{m.path_cost:g}" if m.path_found else "∞"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {l_label} vs {r_label}</h3>
      <table class="comparison-table">
        <thead>
          <tr><th>Metric</th><th>{l_label}</th><th>{r_label}</th><th>Winner</th></tr>
        </thead>
        <tbody>
          <tr>
            <td>Nodes Visited</td>
            <td>{left.nodes_visited}</td>
            <td>{right.nodes_visited}</td>
            <td>{winner_badge(comp.winner_nodes)}</td>
          </tr>
          <tr>
            <td>Edges Examined</td>
            <td>{left.edges_examined}</td>
            <td>{right.edges_examined}</td>
            <td>{winner_badge(comp.winner_edges)}</td>
          </tr>
          <tr>
            <td>Path Cost</td>
            <td>{cost(left)}</td>
            <td>{cost(right)}</td>
            <td>{winner_badge(comp.winner_path)}</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(pseudocode_lines: List[str], current_line: int = -1) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return (
            '<div class="explanation-text">▶ Click <strong>Run Dijkstra</strong> to step '
            'through every visit, edge check and distance update.</div>'
        )
    return f'<div class="explanation-text">{escape(explanation)}</div>'


# ---------------------------------------------------------------------------
# Log Panel
# ---------------------------------------------------------------------------
def log_panel(lines: List[str]) -> str:
    body = "\n".join(escape(line) for line in lines)
    return f'<pre id="log-output" class="log-output">{body}</pre>'
