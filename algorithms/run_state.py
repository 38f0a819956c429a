"""
run_state.py — Per-Run Algorithm State
=======================================
The distance / visited / previous table for ONE shortest-path run,
kept apart from the graph so several runs over the same graph can
coexist and a cancelled run never touches the graph itself.

All three columns are plain lists indexed by node id.
"""

from typing import List, Optional

INFINITY = float("inf")


class RunState:
    """
    Attributes:
        source   : id of the run's source node.
        distance : [float]  tentative distance, INFINITY until reached.
        visited  : [bool]   True once the distance is final.
        previous : [int | None]  predecessor on the best known path.
        order    : [int]    node ids in the order they were visited.
    """

    __slots__ = ("source", "distance", "visited", "previous", "order")

    def __init__(self, node_count: int, source: int):
        self.reset(node_count, source)

    def reset(self, node_count: int, source: int) -> None:
        """Init: everything unreached, source at distance 0."""
        self.source: int                     = source
        self.distance: List[float]           = [INFINITY] * node_count
        self.visited: List[bool]             = [False] * node_count
        self.previous: List[Optional[int]]   = [None] * node_count
        self.order: List[int]                = []
        if node_count:
            self.distance[source] = 0

    def __len__(self) -> int:
        return len(self.distance)

    def is_reachable(self, node_id: int) -> bool:
        return self.distance[node_id] != INFINITY

    def distances(self) -> dict:
        """{node_id: distance} copy, handy for overlays and assertions."""
        return dict(enumerate(self.distance))

    def frontier(self) -> List[int]:
        """Reached but not yet visited, closest first."""
        pending = [n for n, d in enumerate(self.distance) if d != INFINITY and not self.visited[n]]
        return sorted(pending, key=lambda n: (self.distance[n], n))
