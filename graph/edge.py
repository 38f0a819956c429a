"""
edge.py — Directed Weighted Edge
================================
Design decisions:
  - `source` and `target` are node ids, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Weights are positive integers.  The Graph validates them; Edge itself
    is a dumb record so the JSON importer and the stepper's adjacency
    snapshot can build it cheaply.
  - Parallel edges and self-loops are legal.  Edges have no id of their
    own — their index in Graph.edges identifies them.
"""

from enum import Enum


# ---------------------------------------------------------------------------
# Edge State Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    DEFAULT  = "default"   # thin, neutral grey
    RELAXED  = "relaxed"   # examined and improved the destination
    CHOSEN   = "chosen"    # on the reconstructed path
    IGNORED  = "ignored"   # examined, no improvement
    ACTIVE   = "active"    # being examined RIGHT NOW


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        source : id of the tail node.
        target : id of the head node.
        weight : positive integer cost.
    """

    __slots__ = ("source", "target", "weight")

    def __init__(self, source: int, target: int, weight: int = 1):
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    def connects(self, node_a: int, node_b: int) -> bool:
        """True if this edge goes node_a → node_b."""
        return self.source == node_a and self.target == node_b

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and (self.source, self.target, self.weight) == (other.source, other.target, other.weight)
        )
