"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, graph_tools, …
"""

from ui.canvas import render_canvas, CanvasConfig

from ui.controls import (
    playback_controls,
    graph_tools,
    source_target_picker,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
    log_panel,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "playback_controls",
    "graph_tools",
    "source_target_picker",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
    "log_panel",
]
