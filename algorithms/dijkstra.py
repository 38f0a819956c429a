"""
dijkstra.py — Dijkstra's Shortest-Path Stepper
================================================
Generator-based Dijkstra over a DistanceQueue (heapq).

    run = run_shortest_path(graph, source=0, target=3)
    for event in run:          # NodeVisited, EdgeExamined, … , Done
        ...
    run.path()                 # [Node, …] source → target

Phases:
  1. Init      – validate ids, snapshot the adjacency, fresh RunState,
                 push the source.  Happens inside run_shortest_path() so
                 a bad source / target raises at the call, not at the
                 first next().
  2. Relaxing  – pop min; stale entries for visited nodes are dropped
                 silently; otherwise visit and examine outgoing edges.
  3. Done      – queue empty.  The run keeps going past the target so
                 the final RunState holds the whole shortest-path tree.

Correctness note: requires positive weights (the Graph enforces it).
A visited node is never reopened, so its NodeVisited distance is final.
"""

import logging
from typing import Iterator, List, Optional

from graph import Graph, Node
from graph.errors import InvalidSource, InvalidTarget
from algorithms.events import (
    AlgorithmEvent,
    DistanceUpdated,
    Done,
    EdgeExamined,
    NodeVisited,
    NoUpdate,
)
from algorithms.priority_queue import DistanceQueue
from algorithms.run_state import RunState
from algorithms.path import reconstruct_path

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                          # 0
    "    for v in V: dist[v] ← ∞; prev[v] ← null",           # 1
    "    dist[source] ← 0",                                  # 2
    "    pq ← [(0, source)]",                                # 3
    "    while pq is not empty:",                            # 4
    "        u ← pq.pop_min()",                              # 5
    "        if visited[u]: continue",                       # 6
    "        visited[u] ← true",                             # 7
    "        for (u → v, w) where not visited[v]:",          # 8
    "            candidate ← dist[u] + w",                   # 9
    "            if candidate < dist[v]:",                   # 10
    "                dist[v] ← candidate",                   # 11
    "                prev[v] ← u",                           # 12
    "                pq.push((candidate, v))",               # 13
    "            else: keep dist[v]",                        # 14
    "    return dist, prev",                                 # 15
]


# ---------------------------------------------------------------------------
# Run context
# ---------------------------------------------------------------------------
class ShortestPathRun:
    """
    One Init → Relaxing → Done pass.  Iterating yields AlgorithmEvents;
    the iterator is single-use — start a new run to replay.

    Attributes:
        graph    : the Graph the run was started on (read for geometry only).
        source   : source node id.
        target   : target node id (used by path()).
        state    : the run's RunState — authoritative once `finished`.
        queue    : the run's DistanceQueue.
        finished : True once Done has been yielded.
    """

    def __init__(self, graph: Graph, source: int, target: int):
        if not graph.has_node(source):
            raise InvalidSource(f"Source {source!r} is not a node id (graph has {graph.node_count()} nodes)")
        if not graph.has_node(target):
            raise InvalidTarget(f"Target {target!r} is not a node id (graph has {graph.node_count()} nodes)")

        self.graph     = graph
        self.source    = source
        self.target    = target
        self.finished  = False

        # Init
        self._adjacency = graph.adjacency()
        self.state      = RunState(graph.node_count(), source)
        self.queue      = DistanceQueue()
        self.queue.push(source, 0)
        self._events    = self._relax()

        logger.debug("run initialised: source=%s target=%s nodes=%s edges=%s",
                     source, target, graph.node_count(), graph.edge_count())

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> "ShortestPathRun":
        return self

    def __next__(self) -> AlgorithmEvent:
        return next(self._events)

    # ------------------------------------------------------------------
    # Relaxing → Done
    # ------------------------------------------------------------------
    def _relax(self) -> Iterator[AlgorithmEvent]:
        state, queue = self.state, self.queue

        while queue:
            _, node = queue.pop_min()
            if state.visited[node]:
                continue                                   # stale duplicate

            state.visited[node] = True
            state.order.append(node)
            yield NodeVisited(node_id=node, distance=state.distance[node])

            for edge_index, nbr, weight in self._adjacency[node]:
                if state.visited[nbr]:
                    continue                               # finalised, incl. self-loops

                current   = state.distance[nbr]
                candidate = state.distance[node] + weight
                yield EdgeExamined(
                    from_id=node,
                    to_id=nbr,
                    weight=weight,
                    current_distance=current,
                    candidate_distance=candidate,
                    edge_index=edge_index,
                )

                if candidate < current:
                    state.distance[nbr] = candidate
                    state.previous[nbr] = node
                    queue.push(nbr, candidate)
                    yield DistanceUpdated(node_id=nbr, old_distance=current, new_distance=candidate)
                else:
                    yield NoUpdate(node_id=nbr)

        self.finished = True
        logger.debug("run finished: %d nodes visited", len(state.order))
        yield Done()

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------
    def run_to_end(self) -> List[AlgorithmEvent]:
        """Drain the remaining events (zero delay) and return them."""
        return list(self)

    def path(self, target: Optional[int] = None) -> List[Node]:
        """
        Reconstructed path to `target` (defaults to the run's target).
        Only the final predecessor chain is meaningful, so the run must
        have yielded Done first.
        """
        if not self.finished:
            raise RuntimeError("Run is not finished; drain it before reconstructing a path.")
        return reconstruct_path(self.graph, self.state, self.target if target is None else target)


def run_shortest_path(graph: Graph, source: int, target: int) -> ShortestPathRun:
    """Start a fresh run.  Raises InvalidSource / InvalidTarget immediately."""
    return ShortestPathRun(graph, source, target)
