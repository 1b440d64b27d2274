"""
graph.py — Graph Container
==========================
Working copy of the caller's graph.  Algorithms and the step builder both
talk to this object.

Responsibilities:
  1. Build a private copy from caller arrays   (from_arrays / from_dict)
  2. Node & edge lookup                        (get_node, edges_between, …)
  3. Adjacency queries                         (neighbours, successors, …)
  4. Serialisation round-trip                  (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id; dict insertion order
    IS the caller's array order, which every algorithm relies on for its
    deterministic tie-breaks.
  - Two adjacency dicts are maintained incrementally as edges are added:
      _adj[node_id] → [(neighbour_id, edge_id)]   either endpoint
      _out[node_id] → [(successor_id, edge_id)]   source → target only
    so neighbour queries are O(degree), not O(E), and still come out in
    edge-array order.
  - `directed` is carried for callers (rendering); `neighbours()` is
    deliberately permissive and walks edges both ways.
  - `weighted` False means every weight reads as 1.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from graph.node import Node, NodeState
from graph.edge import Edge, EdgeState


NodeLike = Union[Node, Mapping[str, Any]]
EdgeLike = Union[Edge, Mapping[str, Any]]


class Graph:
    """
    Attributes:
        nodes      : {node_id: Node}    (caller order)
        edges      : {edge_id: Edge}    (caller order)
        directed   : bool – graph-level directedness (informational)
        weighted   : bool – whether weights are meaningful
        dropped_edges : ids of input edges skipped for naming an unknown node
    """

    def __init__(self, directed: bool = False, weighted: bool = True):
        self.nodes:    Dict[str, Node] = {}
        self.edges:    Dict[str, Edge] = {}
        self.directed: bool            = directed
        self.weighted: bool            = weighted
        self._adj:     Dict[str, List[Tuple[str, str]]] = {}
        self._out:     Dict[str, List[Tuple[str, str]]] = {}
        self.dropped_edges: List[str] = []

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @classmethod
    def from_arrays(
        cls,
        nodes: Iterable[NodeLike],
        edges: Iterable[EdgeLike],
        directed: bool = False,
        weighted: bool = True,
    ) -> "Graph":
        """
        Build a private working copy from caller-owned arrays.

        Entries may be Node / Edge objects or plain mappings (decoded JSON).
        Nothing the caller passed in is ever referenced afterwards, so the
        engine can overwrite states freely.  Every state starts neutral.

        Edges naming an unknown endpoint are left out of the copy and listed
        in `dropped_edges`.
        """
        g = cls(directed=directed, weighted=weighted)
        for n in nodes:
            node = n.copy() if isinstance(n, Node) else Node.from_dict(n, keep_state=False)
            node.reset()
            g.add_node(node)
        for e in edges:
            edge = e.copy() if isinstance(e, Edge) else Edge.from_dict(e, keep_state=False)
            if edge.source not in g.nodes or edge.target not in g.nodes:
                g.dropped_edges.append(edge.id)
                continue
            edge.reset()
            g.add_edge(edge)
        return g

    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        self._out.setdefault(node.id, [])
        return node

    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append((edge.target, edge.id))
        if edge.target != edge.source:
            self._adj.setdefault(edge.target, []).append((edge.source, edge.id))
        self._out.setdefault(edge.source, []).append((edge.target, edge.id))
        return edge

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def get_node(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def has_node(self, node_id: Optional[str]) -> bool:
        return node_id is not None and node_id in self.nodes

    def edges_between(self, a: str, b: str) -> List[Edge]:
        """Every edge joining a and b, in either direction."""
        return [self.edges[eid] for nbr, eid in self._adj.get(a, []) if nbr == b]

    def has_edge(self, source: str, target: str) -> bool:
        """Directed membership test: an explicit source → target edge exists."""
        return any(nbr == target for nbr, _ in self._out.get(source, []))

    def weight(self, edge: Edge) -> float:
        return edge.weight if self.weighted else 1

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """[(neighbour_id, edge)] walking every incident edge in either direction."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._adj.get(node_id, [])]

    def successors(self, node_id: str) -> List[Tuple[str, Edge]]:
        """[(successor_id, edge)] following only source → target."""
        return [(nbr, self.edges[eid]) for nbr, eid in self._out.get(node_id, [])]

    # ==================================================================
    # STATE
    # ==================================================================
    def set_node_state(self, node_id: str, state: NodeState) -> None:
        node = self.nodes.get(node_id)
        if node is not None:
            node.state = state

    def set_edge_state(self, edge_id: str, state: EdgeState) -> None:
        edge = self.edges.get(edge_id)
        if edge is not None:
            edge.state = state

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Graph":
        return cls.from_arrays(
            data.get("nodes", []),
            data.get("edges", []),
            directed=data.get("directed", False),
            weighted=data.get("weighted", True),
        )

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()}, directed={self.directed})"
