"""
algorithms/
-----------
The shortest-path engine.  Public API:

    from algorithms import run_shortest_path, reconstruct_path
    from algorithms import NodeVisited, EdgeExamined, DistanceUpdated, NoUpdate, Done

Nothing in here does I/O, sleeps or renders.  Drive a run with a plain
for-loop (tests do) or hand it to engine.Stepper for paced playback.
"""

from algorithms.events import (
    AlgorithmEvent,
    DistanceUpdated,
    Done,
    EdgeExamined,
    NodeVisited,
    NoUpdate,
)
from algorithms.priority_queue import DistanceQueue
from algorithms.run_state import INFINITY, RunState
from algorithms.path import path_cost, path_ids, reconstruct_path
from algorithms.dijkstra import PSEUDOCODE, ShortestPathRun, run_shortest_path

__all__ = [
    "AlgorithmEvent",
    "NodeVisited",
    "EdgeExamined",
    "DistanceUpdated",
    "NoUpdate",
    "Done",
    "DistanceQueue",
    "INFINITY",
    "RunState",
    "reconstruct_path",
    "path_ids",
    "path_cost",
    "PSEUDOCODE",
    "ShortestPathRun",
    "run_shortest_path",
]
