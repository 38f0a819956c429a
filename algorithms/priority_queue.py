"""
priority_queue.py — Min-Distance Queue
=======================================
heapq-backed queue of (distance, node_id) entries.

Design decisions:
  - Ties on distance are broken by the lower node id.  Tuples compare
    lexicographically, so this falls out of the entry layout for free
    and makes every run's event trace reproducible.
  - A node may sit in the queue several times at different distances
    (it was improved before being popped).  The queue does NOT dedupe;
    the stepper skips entries for already-visited nodes.
"""

import heapq
from typing import List, Tuple

from graph.errors import EmptyQueue


class DistanceQueue:

    def __init__(self):
        self._heap: List[Tuple[float, int]] = []

    def push(self, node_id: int, distance: float) -> None:
        heapq.heappush(self._heap, (distance, node_id))

    def pop_min(self) -> Tuple[float, int]:
        """Remove and return the (distance, node_id) entry with the smallest distance."""
        if not self._heap:
            raise EmptyQueue("pop_min() on an empty queue")
        return heapq.heappop(self._heap)

    def snapshot(self) -> List[Tuple[float, int]]:
        """All entries in pop order — for overlays, never for the algorithm."""
        return sorted(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"DistanceQueue({self.snapshot()})"
