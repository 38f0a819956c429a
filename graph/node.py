import numbers
from enum import Enum
from typing import Optional

from graph.errors import InvalidReference


# ---------------------------------------------------------------------------
# Node State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED  = "unvisited"   # default
    FRONTIER   = "frontier"    # finite tentative distance, not yet visited
    VISITED    = "visited"     # distance is final
    CURRENT    = "current"     # the node being expanded RIGHT NOW
    PATH       = "path"        # on the reconstructed shortest path
    SOURCE     = "source"
    TARGET     = "target"


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Identity and geometry only.  Algorithm state (distance / visited /
    previous) lives in algorithms.run_state.RunState, keyed by `id`.

    Attributes:
        id     : Dense integer id, equal to the node's index in Graph.nodes.
        label  : Text drawn on the canvas (defaults to str(id)).
        x, y   : Canvas coordinates.  Never interpreted by the algorithm.
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        node_id: int,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
    ):
        self.id: int     = node_id
        self.label: str  = label if label is not None else str(node_id)
        self.x: float    = x
        self.y: float    = y

    # ------------------------------------------------------------------
    # Serialisation  (for save / export / import)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = {"id": self.id, "x": self.x, "y": self.y}
        if self.label != str(self.id):
            data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=parse_node_id(data["id"]),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def parse_node_id(value) -> int:
    """
    Node id from imported JSON.  Integers, integral floats (1.0) and
    digit strings ("1") are accepted; bools and fractions are not.
    """
    if isinstance(value, bool):
        raise InvalidReference(f"Node id must be an integer, got {value!r}")
    if isinstance(value, numbers.Real):
        if isinstance(value, float) and not value.is_integer():
            raise InvalidReference(f"Node id must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise InvalidReference(f"Node id must be an integer, got {value!r}")
