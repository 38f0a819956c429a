"""
Unit tests for the SVG renderer and the HTML panels.
"""

from graph import Graph
from algorithms import PSEUDOCODE, run_shortest_path
from engine import Stepper
from ui import explanation_panel, log_panel, pseudocode_viewer, render_canvas, source_target_picker


def _graph():
    g = Graph()
    g.add_node(100, 100)
    g.add_node(200, 100, label="<b>")
    g.add_edge(0, 1, 3)
    g.add_edge(1, 1, 2)
    return g


def test_bare_graph_renders_every_node_and_weight():
    svg = render_canvas(_graph(), source=0, target=1)
    assert svg.startswith('<svg id="graph-svg"')
    assert svg.count('class="node"') == 2
    assert "&lt;b&gt;" in svg
    assert "<b>" not in svg
    assert "d=∞" in svg


def test_final_frame_shows_distances():
    g = _graph()
    stepper = Stepper()
    stepper.start(run_shortest_path(g, 0, 1))
    stepper.jump_to_end()

    svg = render_canvas(g, stepper.current_frame)

    assert "d=0" in svg
    assert "d=3" in svg


def test_pseudocode_highlights_one_line():
    html = pseudocode_viewer(PSEUDOCODE, 7)
    assert html.count("highlight") == 1
    assert 'data-line="7"' in html


def test_panels_escape_text():
    assert "&lt;script&gt;" in explanation_panel("<script>")
    assert "&amp;" in log_panel(["a & b"])


def test_picker_selects_current_endpoints():
    html = source_target_picker([0, 1, 2], source=1, target=2)
    assert '<option value="1" selected>' in html
    assert '<option value="2" selected>' in html
