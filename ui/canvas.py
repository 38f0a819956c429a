"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: Graph + Frame → SVG string.

The renderer consumes:
  • graph      – the Graph object (node positions, edges)
  • frame      – the current Frame snapshot (node/edge states, distances)
  • config     – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - State-based coloring is a simple dict lookup: state value → hex color.
  - Every edge is directed, so every edge gets an arrowhead and a weight
    label.  Self-loops are drawn as a small circle above their node.
  - Each node carries a `d=…` label with its tentative distance.
"""

from html import escape
from typing import Dict, List, Optional
import math

from graph import Graph, Node, Edge, NodeState, EdgeState
from engine.frame import Frame
from engine.log import fmt_distance


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 600
    bg:     str = "#0d1117"
    grid_spacing: int = 25
    grid_color:   str = "#161b22"

    # node colors (state → fill)
    node_colors: Dict[str, str] = {
        "unvisited":  "#1c2128",   # dark grey
        "frontier":   "#0ea5e9",   # cyan blue
        "visited":    "#10b981",   # emerald green
        "current":    "#06b6d4",   # bright teal — current highlight
        "path":       "#a855f7",   # purple — final path
        "source":     "#0ea5e9",   # cyan
        "target":     "#ec4899",   # pink
    }

    # edge colors
    edge_colors: Dict[str, str] = {
        "default":  "#30363d",   # medium grey
        "relaxed":  "#06b6d4",   # teal — improved its destination
        "chosen":   "#facc15",   # yellow — on the path
        "ignored":  "#21262d",   # faded grey
        "active":   "#f97316",   # orange — being examined now
    }

    # node
    node_radius:        int = 15
    node_stroke:        str = "#30363d"
    node_stroke_width:  int = 2
    node_label_color:   str = "#e6edf3"
    node_label_size:    int = 12
    node_label_weight:  str = "600"
    distance_color:     str = "#ffd700"
    distance_size:      int = 10

    # edge
    edge_width:         int = 2
    edge_width_chosen:  int = 4
    edge_arrow_size:    int = 10
    edge_weight_color:  str = "#e6edf3"
    edge_weight_size:   int = 12
    edge_weight_bg:     str = "#161b22"

    # overlay panels
    overlay_bg:         str = "#161b22"
    overlay_border:     str = "#30363d"
    overlay_text:       str = "#7d8590"
    overlay_header:     str = "#e6edf3"
    overlay_accent:     str = "#0ea5e9"
    overlay_font_size:  int = 13


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    frame: Optional[Frame] = None,
    config: CanvasConfig = CONFIG,
    show_overlays: bool = True,
    source: Optional[int] = None,
    target: Optional[int] = None,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph         : The graph to render.
        frame         : Current run frame (or None for the bare graph).
        config        : Visual config.
        show_overlays : If True, render the distance / frontier panel.
        source/target : Outlined in their own colours when given.
    """

    svg_parts = [
        f'<svg id="graph-svg" width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
        _render_grid(config),
    ]

    # -- edges (draw first so nodes sit on top) --
    for idx, edge in enumerate(graph.edges):
        svg_parts.append(_render_edge(graph, idx, edge, frame, config))

    # -- nodes --
    for node in graph.nodes:
        svg_parts.append(_render_node(node, frame, config, source, target))

    # -- overlays --
    if show_overlays and frame:
        svg_parts.append(_render_overlays(frame, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def _render_grid(config: CanvasConfig) -> str:
    parts = ['<g class="grid">']
    for x in range(0, config.width, config.grid_spacing):
        parts.append(f'  <line x1="{x}" y1="0" x2="{x}" y2="{config.height}" stroke="{config.grid_color}" stroke-width="0.5"/>')
    for y in range(0, config.height, config.grid_spacing):
        parts.append(f'  <line x1="0" y1="{y}" x2="{config.width}" y2="{y}" stroke="{config.grid_color}" stroke-width="0.5"/>')
    parts.append('</g>')
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(
    node: Node,
    frame: Optional[Frame],
    config: CanvasConfig,
    source: Optional[int],
    target: Optional[int],
) -> str:
    state_key = NodeState.UNVISITED.value
    if frame and node.id in frame.node_states:
        state_key = frame.node_states[node.id]

    fill = config.node_colors.get(state_key, config.node_colors["unvisited"])

    stroke = config.node_stroke
    stroke_width = config.node_stroke_width
    if node.id == source:
        stroke, stroke_width = config.node_colors["source"], 3
    elif node.id == target:
        stroke, stroke_width = config.node_colors["target"], 3

    glow = ""
    if frame and frame.current_node == node.id:
        glow = (
            f'<circle cx="{node.x}" cy="{node.y}" r="{config.node_radius + 8}" fill="none" '
            f'stroke="{config.node_colors["current"]}" stroke-width="2" opacity="0.3"/>'
        )

    distance = frame.distances.get(node.id, math.inf) if frame else math.inf
    cx, cy = node.x, node.y
    r = config.node_radius

    parts = [
        f'<g class="node" data-id="{node.id}">',
        glow,
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <text x="{cx}" y="{cy + 4}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}">{escape(node.label)}</text>',
        f'  <text x="{cx}" y="{cy + r + 14}" text-anchor="middle" '
        f'font-size="{config.distance_size}" font-family="monospace" '
        f'fill="{config.distance_color}">d={fmt_distance(distance)}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _edge_style(idx: int, frame: Optional[Frame], config: CanvasConfig):
    state_key = EdgeState.DEFAULT.value
    if frame and idx in frame.edge_states:
        state_key = frame.edge_states[idx]
    stroke = config.edge_colors.get(state_key, config.edge_colors["default"])
    stroke_width = config.edge_width_chosen if state_key == EdgeState.CHOSEN.value else config.edge_width
    if frame and frame.current_edge == idx:
        stroke = config.edge_colors["active"]
        stroke_width = 4
    return stroke, stroke_width


def _render_edge(graph: Graph, idx: int, edge: Edge, frame: Optional[Frame], config: CanvasConfig) -> str:
    src_node = graph.nodes[edge.source]
    tgt_node = graph.nodes[edge.target]
    stroke, stroke_width = _edge_style(idx, frame, config)

    if edge.is_self_loop:
        return _render_self_loop(src_node, idx, edge, stroke, stroke_width, config)

    # compute line endpoints (adjusted for node radius so line doesn't overlap circle)
    x1, y1 = src_node.x, src_node.y
    x2, y2 = tgt_node.x, tgt_node.y
    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate edge

    ux, uy = dx / dist, dy / dist
    r = config.node_radius

    x1_adj = x1 + ux * r
    y1_adj = y1 + uy * r
    x2_adj = x2 - ux * r
    y2_adj = y2 - uy * r

    parts = [f'<g class="edge" data-index="{idx}">']
    parts.append(
        f'  <line x1="{x1_adj}" y1="{y1_adj}" x2="{x2_adj}" y2="{y2_adj}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>'
    )
    parts.append(_render_arrow(x2_adj, y2_adj, ux, uy, stroke, config))

    # weight label at the midpoint, offset perpendicular to the edge
    mx = (x1 + x2) / 2 - uy * 12
    my = (y1 + y2) / 2 + ux * 12
    parts.append(_render_weight(mx, my, edge.weight, config))
    parts.append('</g>')
    return "\n".join(parts)


def _render_self_loop(node: Node, idx: int, edge: Edge, stroke: str, stroke_width: int, config: CanvasConfig) -> str:
    r = config.node_radius
    cy = node.y - r - 8
    return "\n".join([
        f'<g class="edge self-loop" data-index="{idx}">',
        f'  <circle cx="{node.x}" cy="{cy}" r="10" fill="none" stroke="{stroke}" stroke-width="{stroke_width}"/>',
        _render_weight(node.x, cy - 18, edge.weight, config),
        '</g>',
    ])


def _render_weight(x: float, y: float, weight: int, config: CanvasConfig) -> str:
    return (
        f'  <circle cx="{x}" cy="{y}" r="10" fill="{config.edge_weight_bg}" opacity="0.9"/>\n'
        f'  <text x="{x}" y="{y + 4}" text-anchor="middle" '
        f'font-size="{config.edge_weight_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.edge_weight_color}" font-weight="600">{weight}</text>'
    )


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    # perpendicular
    px, py = -uy, ux
    # two points of the triangle
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'  <polygon points="{x},{y} {p1_x},{p1_y} {p2_x},{p2_y}" fill="{color}"/>'


# ---------------------------------------------------------------------------
# Overlay Panels
# ---------------------------------------------------------------------------
def _render_overlays(frame: Frame, config: CanvasConfig) -> str:
    """Frontier list (top-right) and distance table (below it)."""
    return "\n".join([
        '<g class="overlays">',
        _render_frontier_panel(frame.frontier, frame.distances, config, x=config.width - 200, y=20),
        _render_distances_panel(frame.distances, config, x=config.width - 200, y=200),
        '</g>',
    ])


def _render_frontier_panel(frontier: List[int], distances: Dict[int, float], config: CanvasConfig, x: int, y: int) -> str:
    parts = [
        f'<g class="frontier-panel" transform="translate({x},{y})">',
        f'  <rect width="180" height="165" fill="{config.overlay_bg}" stroke="{config.overlay_border}" stroke-width="1" rx="8" opacity="0.95"/>',
        f'  <text x="12" y="22" font-size="13" font-weight="700" fill="{config.overlay_accent}" font-family="\'DM Sans\', sans-serif">Frontier</text>',
    ]
    # show top 7 entries
    for i, nid in enumerate(frontier[:7]):
        parts.append(
            f'  <text x="16" y="{46 + i * 16}" font-size="{config.overlay_font_size}" '
            f'font-family="\'JetBrains Mono\', monospace" fill="{config.overlay_text}">'
            f'({fmt_distance(distances[nid])}, {nid})</text>'
        )
    if len(frontier) > 7:
        parts.append(
            f'  <text x="16" y="{46 + 7 * 16}" font-size="11" fill="#484f58">… +{len(frontier) - 7} more</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)


def _render_distances_panel(distances: Dict[int, float], config: CanvasConfig, x: int, y: int) -> str:
    parts = [
        f'<g class="distances-panel" transform="translate({x},{y})">',
        f'  <rect width="180" height="330" fill="{config.overlay_bg}" rx="6" opacity="0.95"/>',
        f'  <text x="10" y="20" font-size="14" font-weight="700" fill="{config.overlay_header}">Distances</text>',
    ]
    # sort by distance
    items = sorted(distances.items(), key=lambda kv: (kv[1], kv[0]))
    for i, (nid, d) in enumerate(items[:18]):
        parts.append(
            f'  <text x="15" y="{40 + i * 16}" font-size="{config.overlay_font_size}" '
            f'font-family="monospace" fill="{config.overlay_text}">{nid}: {fmt_distance(d)}</text>'
        )
    if len(items) > 18:
        parts.append(
            f'  <text x="15" y="{40 + 18 * 16}" font-size="12" fill="#6b7280">… +{len(items) - 18} more</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
