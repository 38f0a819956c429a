"""
log.py — Event Log Sink
========================
Turns algorithm events into the one-line narration shown in the log
panel, e.g.

    Visiting node 2 (distance 1)
    → Checking node 1 via 2→1 (weight 1): 1 + 1 = 2
    ✔ Updating distance of node 1: 4 → 2

NoUpdate carries only the node id, so the log remembers the last
EdgeExamined to say what the comparison was.
"""

import logging
from typing import List, Optional

from algorithms.events import (
    AlgorithmEvent,
    DistanceUpdated,
    Done,
    EdgeExamined,
    NodeVisited,
    NoUpdate,
)

logger = logging.getLogger(__name__)


def fmt_distance(value: float) -> str:
    if value == float("inf"):
        return "∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def describe(event: AlgorithmEvent, examined: Optional[EdgeExamined] = None) -> str:
    """One human-readable line for `event`."""
    if isinstance(event, NodeVisited):
        return f"Visiting node {event.node_id} (distance {fmt_distance(event.distance)})"
    if isinstance(event, EdgeExamined):
        return (
            f"→ Checking node {event.to_id} via {event.from_id}→{event.to_id} "
            f"(weight {event.weight}): "
            f"{fmt_distance(event.candidate_distance - event.weight)} + {event.weight} = "
            f"{fmt_distance(event.candidate_distance)}"
        )
    if isinstance(event, DistanceUpdated):
        return (
            f"✔ Updating distance of node {event.node_id}: "
            f"{fmt_distance(event.old_distance)} → {fmt_distance(event.new_distance)}"
        )
    if isinstance(event, NoUpdate):
        if examined is not None and examined.to_id == event.node_id:
            return (
                f"⛔ No update for node {event.node_id} "
                f"(current {fmt_distance(examined.current_distance)}, "
                f"candidate {fmt_distance(examined.candidate_distance)})"
            )
        return f"⛔ No update for node {event.node_id}"
    if isinstance(event, Done):
        return "✅ Dijkstra complete — every reachable distance is final."
    raise TypeError(f"Unknown event type: {type(event).__name__}")


class EventLog:
    """
    Collects narration lines for one run.  Each line is also sent to the
    module logger at DEBUG so a console run shows the same trace.
    """

    def __init__(self):
        self.lines: List[str] = []
        self._last_examined: Optional[EdgeExamined] = None

    def write(self, event: AlgorithmEvent) -> str:
        line = describe(event, self._last_examined)
        if isinstance(event, EdgeExamined):
            self._last_examined = event
        self.lines.append(line)
        logger.debug(line)
        return line

    def clear(self) -> None:
        self.lines.clear()
        self._last_examined = None

    def text(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
