"""
frame.py — Render Frame Snapshot
=================================
The stepper yields bare events; the renderer wants a picture.  A Frame
is a frozen-in-time picture of everything the visualizer needs to draw
the graph after the first `step_number` events of a run:

    • Which nodes are visited / frontier / current / on-path
    • Which edges are active / relaxed / ignored / chosen
    • The tentative distance of every node (the `d=…` labels)
    • Which line of pseudocode produced the last event
    • A plain-English line explaining that event

Design decisions:
  - Frame is a plain frozen dataclass.  FrameBuilder is the only writer;
    the stepper / renderer / web layer are pure readers.
  - FrameBuilder folds events into its own RunState replica, so a Frame
    can be rebuilt from nothing but the event list (that's how the web
    layer replays a run without storing it).
  - Edge states accumulate: an edge keeps its last verdict (relaxed /
    ignored) for the rest of the run, and becomes "chosen" if it ends up
    on the reconstructed path.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from graph import Graph, NodeState, EdgeState
from graph.errors import Unreachable
from algorithms.events import (
    AlgorithmEvent,
    DistanceUpdated,
    Done,
    EdgeExamined,
    NodeVisited,
    NoUpdate,
)
from algorithms.path import path_ids
from algorithms.run_state import INFINITY, RunState
from engine.log import describe, fmt_distance


@dataclass(frozen=True)
class Frame:
    """
    Attributes:
        step_number     : number of events applied (0 = right after Init).
        current_node    : node whose edges are being examined.
        current_edge    : index of the edge being examined right now.
        node_states     : {node_id: NodeState value}
        edge_states     : {edge_index: EdgeState value} — only touched edges.
        distances       : {node_id: float} — tentative distances.
        visited_order   : node ids in visit order.
        frontier        : reached-but-unvisited node ids, closest first.
        path            : reconstructed path (set on the final frame only).
        pseudocode_line : index into algorithms.dijkstra.PSEUDOCODE.
        explanation     : narration of the last event.
        is_final        : True once Done has been applied.
    """

    step_number:      int                          = 0
    current_node:     Optional[int]                = None
    current_edge:     Optional[int]                = None
    node_states:      Dict[int, str]               = field(default_factory=dict)
    edge_states:      Dict[int, str]               = field(default_factory=dict)
    distances:        Dict[int, float]             = field(default_factory=dict)
    visited_order:    List[int]                    = field(default_factory=list)
    frontier:         List[int]                    = field(default_factory=list)
    path:             List[int]                    = field(default_factory=list)
    pseudocode_line:  int                          = 0
    explanation:      str                          = ""
    is_final:         bool                         = False

    def to_dict(self) -> dict:
        """JSON-safe view (∞ becomes None)."""
        return {
            "step_number":     self.step_number,
            "current_node":    self.current_node,
            "current_edge":    self.current_edge,
            "node_states":     {str(k): v for k, v in self.node_states.items()},
            "edge_states":     {str(k): v for k, v in self.edge_states.items()},
            "distances":       {str(k): (None if d == INFINITY else d) for k, d in self.distances.items()},
            "visited_order":   list(self.visited_order),
            "frontier":        list(self.frontier),
            "path":            list(self.path),
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Builder — folds events into Frames
# ---------------------------------------------------------------------------
class FrameBuilder:
    """
    Usage:
        fb = FrameBuilder(graph, source=0, target=3)
        frames = [fb.build()]
        for event in run:
            frames.append(fb.apply(event))
    """

    def __init__(self, graph: Graph, source: int, target: int):
        self.graph  = graph
        self.source = source
        self.target = target
        self.reset()

    def reset(self):
        self.state:            RunState               = RunState(self.graph.node_count(), self.source)
        self.step_number:      int                    = 0
        self.current_node:     Optional[int]          = None
        self.current_edge:     Optional[int]          = None
        self.edge_states:      Dict[int, str]         = {}
        self.tree_edges:       Dict[int, int]         = {}      # node_id → edge that set its distance
        self.path:             List[int]              = []
        self.pseudocode_line:  int                    = 3
        self.explanation:      str                    = (
            f"Initialise: every distance = ∞ except source {self.source} = 0. "
            f"Push the source into the priority queue."
        )
        self.is_final:         bool                   = False
        self._examined:        Optional[EdgeExamined] = None

    # -- folding --
    def apply(self, event: AlgorithmEvent) -> Frame:
        state = self.state

        if isinstance(event, NodeVisited):
            state.visited[event.node_id] = True
            state.order.append(event.node_id)
            self.current_node = event.node_id
            self.current_edge = None
        elif isinstance(event, EdgeExamined):
            self._examined = event
            self.current_edge = event.edge_index
            self.edge_states[event.edge_index] = EdgeState.ACTIVE.value
        elif isinstance(event, DistanceUpdated):
            state.distance[event.node_id] = event.new_distance
            if self._examined is not None:
                state.previous[event.node_id] = self._examined.from_id
                self.tree_edges[event.node_id] = self._examined.edge_index
                self.edge_states[self._examined.edge_index] = EdgeState.RELAXED.value
        elif isinstance(event, NoUpdate):
            if self._examined is not None:
                self.edge_states[self._examined.edge_index] = EdgeState.IGNORED.value
        elif isinstance(event, Done):
            self._finish()

        self.explanation = describe(event, self._examined)
        self.pseudocode_line = event.pseudocode_line
        self.step_number += 1
        return self.build()

    def _finish(self) -> None:
        self.is_final = True
        self.current_node = None
        self.current_edge = None
        try:
            self.path = path_ids(self.state, self.target)
        except Unreachable:
            self.path = []
            return
        for node_id in self.path[1:]:
            self.edge_states[self.tree_edges[node_id]] = EdgeState.CHOSEN.value

    def _node_states(self) -> Dict[int, str]:
        states: Dict[int, str] = {}
        on_path = set(self.path)
        for node_id, dist in enumerate(self.state.distance):
            if node_id in on_path:
                states[node_id] = NodeState.PATH.value
            elif node_id == self.current_node:
                states[node_id] = NodeState.CURRENT.value
            elif self.state.visited[node_id]:
                states[node_id] = NodeState.VISITED.value
            elif dist != INFINITY:
                states[node_id] = NodeState.FRONTIER.value
            else:
                states[node_id] = NodeState.UNVISITED.value
        return states

    def build(self) -> Frame:
        explanation = self.explanation
        if self.is_final:
            if self.path:
                cost = fmt_distance(self.state.distance[self.target])
                explanation += f" Shortest path to {self.target}: {' → '.join(map(str, self.path))} (cost {cost})."
            else:
                explanation += f" Node {self.target} is not reachable from {self.source}."
        return Frame(
            step_number=self.step_number,
            current_node=self.current_node,
            current_edge=self.current_edge,
            node_states=self._node_states(),
            edge_states=dict(self.edge_states),
            distances=self.state.distances(),
            visited_order=list(self.state.order),
            frontier=self.state.frontier(),
            path=list(self.path),
            pseudocode_line=self.pseudocode_line,
            explanation=explanation,
            is_final=self.is_final,
        )
