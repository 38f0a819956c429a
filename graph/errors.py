"""
errors.py — Error Kinds
========================
Every failure the graph model and the shortest-path engine can report.

    ShortestPathError
      ├── InvalidReference        edge endpoint / edge index does not exist
      ├── InvalidWeight           weight is not a positive integer
      ├── InvalidSource           source id out of range
      ├── InvalidTarget           target id out of range
      ├── EmptyQueue              pop from an empty priority queue
      ├── Unreachable             target has no path from the source
      └── InternalInconsistency   predecessor cycle / broken invariant

Structural errors double as ValueError so callers that only know the
builtin hierarchy still catch them.  Unreachable is an expected outcome;
InternalInconsistency means an engine bug and must never be swallowed.
"""


class ShortestPathError(Exception):
    """Base class for everything raised by graph/ and algorithms/."""


class InvalidReference(ShortestPathError, ValueError):
    pass


class InvalidWeight(ShortestPathError, ValueError):
    pass


class InvalidSource(ShortestPathError, ValueError):
    pass


class InvalidTarget(ShortestPathError, ValueError):
    pass


class EmptyQueue(ShortestPathError, IndexError):
    pass


class Unreachable(ShortestPathError):
    def __init__(self, node_id: int):
        super().__init__(f"Node {node_id} is not reachable from the source")
        self.node_id = node_id


class InternalInconsistency(ShortestPathError, AssertionError):
    pass
