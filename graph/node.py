"""
node.py — Graph Node
====================
A node is an id plus fixed layout coordinates plus a visual state.

Design decisions:
  - `x` / `y` are supplied by the caller's layout and are never interpreted
    by the algorithms, except as heuristic input for A*.
  - `state` is the only field the engine ever writes, and only on private
    working copies (see Graph.from_arrays).
"""

from enum import Enum
from typing import Any, Mapping, Union


# ---------------------------------------------------------------------------
# Node State Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED  = "unvisited"   # default grey
    VISITED    = "visited"     # fully processed
    CURRENT    = "current"     # the node being expanded RIGHT NOW
    FRONTIER   = "frontier"    # seen but not yet processed
    PATH       = "path"        # on the reconstructed path / finished result


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id     : Unique identifier.
        x, y   : Layout coordinates (read-only as far as the engine cares).
        state  : Current NodeState for visual encoding.
    """

    __slots__ = ("id", "x", "y", "state")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        state: Union[NodeState, str] = NodeState.UNVISITED,
    ):
        self.id: str          = node_id
        self.x: float         = x
        self.y: float         = y
        self.state: NodeState = NodeState(state)

    def reset(self) -> None:
        """Back to the neutral state — called when a working copy is made."""
        self.state = NodeState.UNVISITED

    def copy(self) -> "Node":
        return Node(self.id, self.x, self.y, self.state)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def distance_to(self, other: "Node") -> float:
        """Euclidean distance — the default A* heuristic."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "x":     self.x,
            "y":     self.y,
            "state": self.state.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], keep_state: bool = True) -> "Node":
        """Decode a node record. With keep_state=False any incoming state is ignored."""
        state = data.get("state", NodeState.UNVISITED.value) if keep_state else NodeState.UNVISITED
        return cls(
            node_id=data["id"],
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            state=state,
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, state={self.state.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Node)
            and self.id == other.id
            and self.x == other.x
            and self.y == other.y
            and self.state == other.state
        )

    def __hash__(self) -> int:
        return hash(self.id)
