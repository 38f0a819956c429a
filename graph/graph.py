"""
graph.py — Graph Container & Generator
=======================================
Single source of truth for the user-authored graph.  The stepper reads
a snapshot of it, the renderer draws it, the web layer mutates it.

Responsibilities:
  1. Validated mutation                     (add node / edge, undo, reweight)
  2. Adjacency queries                      (edges_from, adjacency snapshot)
  3. Random graph generation                (seeded, for demos and tests)
  4. Serialisation round-trip               (to_dict / from_dict — the JSON format)

Design decisions:
  - Nodes live in a list; a node's id IS its index.  Ids are handed out
    sequentially and never reused, so the id doubles as the adjacency key.
  - Edges live in a list too, in insertion order.  Outgoing edges are
    always reported in that order, which is what makes runs reproducible.
  - Every mutator validates first and mutates second: a call that raises
    leaves the graph exactly as it was.
  - `_history` records (source, target) pairs in authoring order so the
    UI can undo the last drawn edge.
"""

import math
import numbers
import random
from typing import List, Optional, Tuple

from graph.edge import Edge
from graph.errors import InvalidReference, InvalidWeight
from graph.node import Node, parse_node_id


# (edge_index, target, weight) — one entry of the adjacency snapshot
AdjacencyEntry = Tuple[int, int, int]


def check_weight(weight) -> int:
    """Return `weight` as an int, or raise InvalidWeight."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeight(f"Edge weight must be a positive integer, got {weight!r}")
    if isinstance(weight, float):
        if not weight.is_integer():
            raise InvalidWeight(f"Edge weight must be a positive integer, got {weight!r}")
        weight = int(weight)
    if weight <= 0:
        raise InvalidWeight(f"Edge weight must be positive, got {weight}")
    return int(weight)


class Graph:
    """
    Attributes:
        nodes    : [Node]  — index == node id
        edges    : [Edge]  — index == edge index
        _history : [(source, target)] — edges in the order they were drawn
    """

    def __init__(self):
        self.nodes:    List[Node]             = []
        self.edges:    List[Edge]             = []
        self._history: List[Tuple[int, int]]  = []

    # ==================================================================
    # NODES
    # ==================================================================
    def add_node(self, x: float, y: float, label: Optional[str] = None) -> int:
        """Append a node with the next sequential id and return the id."""
        node_id = len(self.nodes)
        self.nodes.append(Node(node_id, x=x, y=y, label=label))
        return node_id

    def get_node(self, node_id: int) -> Node:
        if not self.has_node(node_id):
            raise InvalidReference(f"No node with id {node_id!r}")
        return self.nodes[node_id]

    def has_node(self, node_id) -> bool:
        return (
            isinstance(node_id, int)
            and not isinstance(node_id, bool)
            and 0 <= node_id < len(self.nodes)
        )

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, source: int, target: int, weight: int = 1) -> Edge:
        """Append a directed edge source → target."""
        for endpoint in (source, target):
            if not self.has_node(endpoint):
                raise InvalidReference(f"Edge endpoint {endpoint!r} is not a node id")
        edge = Edge(source, target, check_weight(weight))
        self.edges.append(edge)
        self._history.append((source, target))
        return edge

    def remove_last_edge(self, source: int, target: int) -> Optional[Edge]:
        """
        Remove the most recently added edge source → target.
        No-op (returns None) if there is none.
        """
        for idx in range(len(self.edges) - 1, -1, -1):
            if self.edges[idx].connects(source, target):
                edge = self.edges.pop(idx)
                self._forget(source, target)
                return edge
        return None

    def undo_last_edge(self) -> Optional[Edge]:
        """Undo the last edge drawn, whatever its endpoints."""
        if not self._history:
            return None
        source, target = self._history[-1]
        return self.remove_last_edge(source, target)

    def set_weight(self, edge_index: int, weight: int) -> Edge:
        if isinstance(edge_index, bool) or not (isinstance(edge_index, int) and 0 <= edge_index < len(self.edges)):
            raise InvalidReference(f"No edge with index {edge_index!r}")
        self.edges[edge_index].weight = check_weight(weight)
        return self.edges[edge_index]

    def randomize_weights(
        self,
        rng: Optional[random.Random] = None,
        low: int = 1,
        high: int = 9,
    ) -> None:
        """Give every edge a fresh weight drawn uniformly from [low, high]."""
        check_weight(low)
        if high < low:
            raise InvalidWeight(f"Empty weight range [{low}, {high}]")
        rng = rng or random.Random()
        for edge in self.edges:
            edge.weight = rng.randint(low, high)

    def _forget(self, source: int, target: int) -> None:
        for idx in range(len(self._history) - 1, -1, -1):
            if self._history[idx] == (source, target):
                del self._history[idx]
                return

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def edges_from(self, node_id: int) -> List[Tuple[int, Edge]]:
        """[(edge_index, edge)] for every edge leaving node_id, in insertion order."""
        return [(idx, e) for idx, e in enumerate(self.edges) if e.source == node_id]

    def adjacency(self) -> List[List[AdjacencyEntry]]:
        """
        Immutable snapshot of the outgoing edges of every node.
        adjacency()[u] == [(edge_index, v, weight), …] in insertion order.
        """
        return [
            [(idx, e.target, e.weight) for idx, e in self.edges_from(node.id)]
            for node in self.nodes
        ]

    def edge_between(self, source: int, target: int) -> Optional[Tuple[int, Edge]]:
        """Cheapest edge source → target (first one wins on ties)."""
        best: Optional[Tuple[int, Edge]] = None
        for idx, e in enumerate(self.edges):
            if e.connects(source, target) and (best is None or e.weight < best[1].weight):
                best = (idx, e)
        return best

    # ==================================================================
    # RESET
    # ==================================================================
    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._history.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Build a graph from the export format:

            {"nodes": [{"id": 0, "x": 10, "y": 20}, …],
             "edges": [{"from": 0, "to": 1, "weight": 4}, …]}

        Node ids must be exactly 0..N-1 (any order).  Edges go through
        add_edge, so bad endpoints / weights raise like they would live.
        """
        g = cls()
        raw_nodes = sorted(data.get("nodes", []), key=lambda nd: parse_node_id(nd["id"]))
        for expected, nd in enumerate(raw_nodes):
            node = Node.from_dict(nd)
            if node.id != expected:
                raise InvalidReference(
                    f"Node ids must be dense 0..{len(raw_nodes) - 1}; got {node.id} at position {expected}"
                )
            g.nodes.append(node)
        for ed in data.get("edges", []):
            g.add_edge(parse_node_id(ed["from"]), parse_node_id(ed["to"]), ed.get("weight", 1))
        return g

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        weight_range: Tuple[int, int] = (1, 9),
        seed: Optional[int] = None,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Erdős–Rényi style random directed graph.
        Each ordered pair (i, j), i != j, gets an edge with probability
        `edge_probability`; a shuffled chain is added on top so that most
        nodes are reachable from somewhere.
        """
        rng = random.Random(seed)
        g = cls()
        margin = 40

        # place nodes in a circle with jitter so it looks natural
        for i in range(num_nodes):
            angle  = 2 * math.pi * i / max(num_nodes, 1)
            radius = min(canvas_w, canvas_h) * 0.35
            cx, cy = canvas_w / 2, canvas_h / 2
            x = cx + radius * math.cos(angle) + rng.uniform(-30, 30)
            y = cy + radius * math.sin(angle) + rng.uniform(-30, 30)
            x = max(margin, min(canvas_w - margin, x))
            y = max(margin, min(canvas_h - margin, y))
            g.add_node(round(x, 1), round(y, 1))

        for i in range(num_nodes):
            for j in range(num_nodes):
                if i != j and rng.random() < edge_probability:
                    g.add_edge(i, j, rng.randint(*weight_range))

        chain = list(range(num_nodes))
        rng.shuffle(chain)
        for a, b in zip(chain, chain[1:]):
            if g.edge_between(a, b) is None:
                g.add_edge(a, b, rng.randint(*weight_range))

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes]

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
