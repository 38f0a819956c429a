"""
events.py — Algorithm Events
=============================
The stepper is a generator that yields one event per algorithm decision.
Each event is a small frozen dataclass tagged with `kind`; consumers
(FrameBuilder, EventLog, Recorder, the JSON API) dispatch on the type or
the tag and never reach back into the stepper.

    NodeVisited      – node popped with its final distance
    EdgeExamined     – outgoing edge to an unvisited node considered
    DistanceUpdated  – the examination improved the destination
    NoUpdate         – the examination did not
    Done             – queue exhausted, run is over

`pseudocode_line` points into algorithms.dijkstra.PSEUDOCODE so the UI can
highlight the line that produced the event.
"""

from dataclasses import asdict, dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class NodeVisited:
    kind:            ClassVar[str] = "node_visited"
    pseudocode_line: ClassVar[int] = 7

    node_id:   int
    distance:  float

    def to_dict(self) -> dict:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class EdgeExamined:
    """
    current_distance is the DESTINATION's tentative distance before the
    comparison; candidate_distance is dist[from_id] + weight.
    """
    kind:            ClassVar[str] = "edge_examined"
    pseudocode_line: ClassVar[int] = 9

    from_id:            int
    to_id:              int
    weight:             int
    current_distance:   float
    candidate_distance: float
    edge_index:         int = -1

    def to_dict(self) -> dict:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class DistanceUpdated:
    kind:            ClassVar[str] = "distance_updated"
    pseudocode_line: ClassVar[int] = 11

    node_id:      int
    old_distance: float
    new_distance: float

    def to_dict(self) -> dict:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class NoUpdate:
    kind:            ClassVar[str] = "no_update"
    pseudocode_line: ClassVar[int] = 14

    node_id: int

    def to_dict(self) -> dict:
        return {"kind": self.kind, **asdict(self)}


@dataclass(frozen=True)
class Done:
    kind:            ClassVar[str] = "done"
    pseudocode_line: ClassVar[int] = 15

    def to_dict(self) -> dict:
        return {"kind": self.kind}


AlgorithmEvent = Union[NodeVisited, EdgeExamined, DistanceUpdated, NoUpdate, Done]
