"""
edge.py — Graph Edge
====================
Connects two nodes. Carries a weight and its own visual state so the
player can colour-code edges exactly as the algorithm touches them.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - The default id is derived from (source, target), so it stays stable
    across a whole run and steps can be diffed by edge identity.
  - Edges carry no directedness of their own.  The caller supplies both
    directions when it wants undirected semantics.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Union


# ---------------------------------------------------------------------------
# Edge State Enum — visual encoding for the renderer
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    UNVISITED = "unvisited"   # thin, neutral grey
    VISITED   = "visited"     # traversed / relaxed / rejected
    CURRENT   = "current"     # the edge being examined RIGHT NOW
    PATH      = "path"        # on the final path / in the spanning tree


def edge_id_for(source: str, target: str) -> str:
    return f"edge-{source}-{target}"


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id       : Unique identifier (defaults to "edge-<source>-<target>").
        source   : ID of the tail node.
        target   : ID of the head node.
        weight   : Numeric cost (default 1). Can be negative for Bellman-Ford demos.
        state    : EdgeState for visual encoding.
    """

    __slots__ = ("id", "source", "target", "weight", "state")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
        state: Union[EdgeState, str] = EdgeState.UNVISITED,
    ):
        self.id:     str       = edge_id or edge_id_for(source, target)
        self.source: str       = source
        self.target: str       = target
        self.weight: float     = weight
        self.state:  EdgeState = EdgeState(state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.state = EdgeState.UNVISITED

    def copy(self) -> "Edge":
        return Edge(self.source, self.target, self.weight, self.id, self.state)

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a and node_b in either direction."""
        return (
            (self.source == node_a and self.target == node_b)
            or (self.source == node_b and self.target == node_a)
        )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "state":  self.state.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], keep_state: bool = True) -> "Edge":
        state = data.get("state", EdgeState.UNVISITED.value) if keep_state else EdgeState.UNVISITED
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
            edge_id=data.get("id"),
            state=state,
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight}, state={self.state.value})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Edge)
            and self.id == other.id
            and self.source == other.source
            and self.target == other.target
            and self.weight == other.weight
            and self.state == other.state
        )

    def __hash__(self) -> int:
        return hash(self.id)
