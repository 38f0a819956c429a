"""
path.py — Path Reconstruction
==============================
Walk `previous` links from the target back to the source and reverse.

The walk is bounded by the node count: a predecessor cycle can only mean
the RunState was corrupted, so it is reported as InternalInconsistency
rather than looping forever.
"""

from typing import List

from graph import Graph, Node
from graph.errors import InternalInconsistency, InvalidTarget, Unreachable
from algorithms.run_state import RunState


def reconstruct_path(graph: Graph, state: RunState, target: int) -> List[Node]:
    """Nodes from the run's source to `target`, both inclusive."""
    return [graph.nodes[n] for n in path_ids(state, target)]


def path_ids(state: RunState, target: int) -> List[int]:
    """Same as reconstruct_path, on ids only (no graph needed)."""
    if not (isinstance(target, int) and 0 <= target < len(state)):
        raise InvalidTarget(f"Target {target!r} is not a node id")

    if state.previous[target] is None and target != state.source:
        raise Unreachable(target)

    path = [target]
    cur = target
    for _ in range(len(state)):
        if cur == state.source:
            path.reverse()
            return path
        prev = state.previous[cur]
        if prev is None:
            raise InternalInconsistency(
                f"Predecessor chain from {target} stops at {cur}, which is not the source {state.source}"
            )
        path.append(prev)
        cur = prev

    raise InternalInconsistency(f"Predecessor cycle detected while walking back from {target}")


def path_cost(graph: Graph, path: List[Node]) -> int:
    """Sum of edge weights along `path`, using the cheapest parallel edge."""
    total = 0
    for a, b in zip(path, path[1:]):
        found = graph.edge_between(a.id, b.id)
        if found is None:
            raise InternalInconsistency(f"Path step {a.id} → {b.id} has no edge")
        total += found[1].weight
    return total
