"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
"""

from graph.node  import Node,  NodeState
from graph.edge  import Edge,  EdgeState, edge_id_for
from graph.graph import Graph

__all__ = [
    "Node",      "NodeState",
    "Edge",      "EdgeState",
    "Graph",     "edge_id_for",
]
