"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
    from graph import errors
"""

from graph.node  import Node,  NodeState
from graph.edge  import Edge,  EdgeState
from graph.graph import Graph, check_weight
from graph import errors

__all__ = [
    "Node",      "NodeState",
    "Edge",      "EdgeState",
    "Graph",     "check_weight",
    "errors",
]
