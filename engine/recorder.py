"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete run (all events, zero delay), then computes the
analytics the UI shows in its Analytics panel.

Usage:
    rec = Recorder()
    rec.start(graph=g, source=0, target=3)
    rec.run_to_completion()          # exhausts the run
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-safe snapshot of the run

Comparison:
    Runs are independent objects, so two Recorders can run on the SAME
    graph (e.g. from different sources) and compare(rec1, rec2) puts
    their metrics side by side.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from graph import Graph, Node
from graph.errors import Unreachable
from algorithms.dijkstra import ShortestPathRun, run_shortest_path
from algorithms.events import AlgorithmEvent, DistanceUpdated, EdgeExamined, NodeVisited
from algorithms.path import path_cost
from algorithms.run_state import INFINITY
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    source:            int   = 0
    target:            int   = 0
    nodes_visited:     int   = 0
    edges_examined:    int   = 0
    distance_updates:  int   = 0
    total_events:      int   = 0
    path_length:       int   = 0          # number of edges on the final path
    path_cost:         float = 0.0        # total weight of the final path
    path_found:        bool  = False
    unreachable_nodes: int   = 0
    wall_time_ms:      float = 0.0


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_nodes:  str = ""   # which run visited fewer nodes
    winner_edges:  str = ""
    winner_path:   str = ""   # which run found the cheaper path


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        events  : Full list of events from the run.
        path    : Reconstructed path (empty if the target is unreachable).
        metrics : Computed RunMetrics (available after run_to_completion).
        stepper : The underlying Stepper (for frame-by-frame access).
    """

    def __init__(self):
        self.events:    List[AlgorithmEvent]  = []
        self.path:      List[Node]            = []
        self.metrics:   Optional[RunMetrics]  = None
        self.stepper:   Optional[Stepper]     = None

        self._graph:      Optional[Graph] = None
        self._run:        Optional[ShortestPathRun] = None
        self._source:     int             = 0
        self._target:     int             = 0

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, graph: Graph, source: int, target: int) -> None:
        """Initialise a fresh run.  Raises InvalidSource / InvalidTarget."""
        run = run_shortest_path(graph, source, target)

        self._graph   = graph
        self._source  = source
        self._target  = target
        self.events   = []
        self.path     = []
        self.metrics  = None

        self.stepper = Stepper()
        self.stepper.start(run)
        self._run = run

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the run, record every event, compute metrics."""
        if self.stepper is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.stepper.jump_to_end()
        self.events = list(self.stepper.events)
        wall_ms = (time.monotonic() - started) * 1000

        try:
            self.path = self._run.path()
        except Unreachable:
            self.path = []

        self.metrics = self._compute_metrics(wall_ms)
        logger.info("recorded run %s → %s: %d events, path_found=%s",
                    self._source, self._target, self.metrics.total_events, self.metrics.path_found)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "source":  self._source,
            "target":  self._target,
            "graph":   self._graph.to_dict() if self._graph else {},
            "metrics": asdict(self.metrics) if self.metrics else {},
            "path":    [n.id for n in self.path],
            "events":  [_json_safe(e.to_dict()) for e in self.events],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        state = self._run.state
        return RunMetrics(
            source=self._source,
            target=self._target,
            nodes_visited=sum(isinstance(e, NodeVisited) for e in self.events),
            edges_examined=sum(isinstance(e, EdgeExamined) for e in self.events),
            distance_updates=sum(isinstance(e, DistanceUpdated) for e in self.events),
            total_events=len(self.events),
            path_length=len(self.path) - 1 if len(self.path) > 1 else 0,
            path_cost=path_cost(self._graph, self.path) if self.path else 0.0,
            path_found=bool(self.path),
            unreachable_nodes=sum(d == INFINITY for d in state.distance),
            wall_time_ms=round(wall_ms, 2),
        )


def _json_safe(data: Dict[str, Any]) -> Dict[str, Any]:
    """∞ is not valid JSON — send it as null."""
    return {k: (None if v == INFINITY else v) for k, v in data.items()}


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()
    l_key = f"{l.source}→{l.target}"
    r_key = f"{r.source}→{r.target}"

    def winner(l_val, r_val, lower_is_better=True):
        if l_val == r_val:
            return "tie"
        if lower_is_better:
            return l_key if l_val < r_val else r_key
        return l_key if l_val > r_val else r_key

    # an unreachable target never wins on cost
    l_cost = l.path_cost if l.path_found else INFINITY
    r_cost = r.path_cost if r.path_found else INFINITY

    return ComparisonResult(
        left=l,
        right=r,
        winner_nodes=winner(l.nodes_visited, r.nodes_visited),
        winner_edges=winner(l.edges_examined, r.edges_examined),
        winner_path =winner(l_cost, r_cost),
    )
