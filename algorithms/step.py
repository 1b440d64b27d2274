"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the player needs to
render one frame:

    • The state of EVERY node and edge (not a diff)
    • The algorithm's working data structure (queue, stack, distances, …)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Step is SELF-CONTAINED.  Nodes, edges and the data structure are deep
    copies taken at build time, so a player can jump to any index without
    replaying history, and later mutation of the working graph can never
    leak into an already-emitted step.
  - The algorithm owns exactly one mutable working Graph.  It applies small
    state patches to it (set_node, mark_between, …) and calls build() at
    every step boundary — "patch, then clone on snapshot".
  - `data_structure` is a free-form dict whose KEY NAMES are the contract
    with the data-structure panel (queue, stack, priorityQueue, …).
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from graph import Edge, EdgeState, Graph, Node, NodeState
from algorithms.pseudocode import get_pseudocode


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number      : 0-based index of this step in the run.
        nodes            : Snapshot of every node, in caller order.
        edges            : Snapshot of every edge, in caller order.
        data_structure   : Algorithm-specific working data (see each module).
        code             : The algorithm's fixed pseudocode listing.
        highlighted_line : 0-based index into `code`.
        explanation      : Human-readable "why" text.
    """

    step_number:      int                 = 0
    nodes:            Tuple[Node, ...]    = ()
    edges:            Tuple[Edge, ...]    = ()
    data_structure:   Dict[str, Any]      = field(default_factory=dict)
    code:             Tuple[str, ...]     = ()
    highlighted_line: int                 = 0
    explanation:      str                 = ""

    def node_state(self, node_id: str) -> Optional[NodeState]:
        for n in self.nodes:
            if n.id == node_id:
                return n.state
        return None

    def edge_state(self, edge_id: str) -> Optional[EdgeState]:
        for e in self.edges:
            if e.id == edge_id:
                return e.state
        return None

    def nodes_in(self, state: NodeState) -> List[str]:
        return [n.id for n in self.nodes if n.state == state]

    def edges_in(self, state: EdgeState) -> List[str]:
        return [e.id for e in self.edges if e.state == state]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stepNumber":    self.step_number,
            "nodes":         [n.to_dict() for n in self.nodes],
            "edges":         [e.to_dict() for e in self.edges],
            "dataStructure": copy.deepcopy(self.data_structure),
            "pseudocode": {
                "code":            list(self.code),
                "highlightedLine": self.highlighted_line,
            },
            "explanation":   self.explanation,
        }


# ---------------------------------------------------------------------------
# Builder — the single writer of the working graph's visual state
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that algorithms use to patch state and cut Steps.

    Usage inside an algorithm generator:
        sb = StepBuilder(graph, "bfs")
        sb.set_node("A", NodeState.CURRENT)
        sb.mark_between("A", "B", EdgeState.VISITED)
        yield sb.build(4, {"queue": ["B"]}, "Dequeue 'A'.")
    """

    def __init__(self, graph: Graph, algo_key: str):
        self.graph:   Graph           = graph
        self.code:    Tuple[str, ...] = get_pseudocode(algo_key).code
        self.step_no: int             = 0

    # -- node helpers --
    def set_node(self, node_id: str, state: NodeState) -> None:
        self.graph.set_node_state(node_id, state)

    def set_nodes(self, node_ids: Iterable[str], state: NodeState) -> None:
        for nid in node_ids:
            self.graph.set_node_state(nid, state)

    def only_current(self, node_id: str) -> None:
        """Make `node_id` the lone CURRENT node; every other node goes neutral."""
        for node in self.graph.nodes.values():
            node.state = NodeState.CURRENT if node.id == node_id else NodeState.UNVISITED

    def focus(self, node_id: str, settled: Iterable[str]) -> None:
        """
        Traversal refocus: `node_id` becomes CURRENT, FRONTIER nodes stay
        FRONTIER, members of `settled` read VISITED, the rest UNVISITED.
        """
        settled = set(settled)
        for node in self.graph.nodes.values():
            if node.id == node_id:
                node.state = NodeState.CURRENT
            elif node.state == NodeState.FRONTIER:
                continue
            elif node.id in settled:
                node.state = NodeState.VISITED
            else:
                node.state = NodeState.UNVISITED

    def demote_current(self, state: NodeState = NodeState.VISITED) -> None:
        for node in self.graph.nodes.values():
            if node.state == NodeState.CURRENT:
                node.state = state

    # -- edge helpers --
    def set_edge(self, edge_id: str, state: EdgeState) -> None:
        self.graph.set_edge_state(edge_id, state)

    def mark_between(self, a: str, b: str, state: EdgeState) -> None:
        """Mark every edge joining a and b, whichever way it points."""
        for edge in self.graph.edges_between(a, b):
            edge.state = state

    def mark_path(self, path: List[str]) -> None:
        for nid in path:
            self.set_node(nid, NodeState.PATH)
        for a, b in zip(path, path[1:]):
            self.mark_between(a, b, EdgeState.PATH)

    # -- snapshot --
    def build(
        self,
        line: int,
        data: Optional[Mapping[str, Any]] = None,
        explanation: str = "",
    ) -> Step:
        step = Step(
            step_number=self.step_no,
            nodes=tuple(n.copy() for n in self.graph.nodes.values()),
            edges=tuple(e.copy() for e in self.graph.edges.values()),
            data_structure=copy.deepcopy(dict(data or {})),
            code=self.code,
            highlighted_line=line,
            explanation=explanation,
        )
        self.step_no += 1
        return step


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def reconstruct_path(parent: Mapping[str, Optional[str]], target: str) -> List[str]:
    """
    Walk parent pointers from `target` back to the root (parent None).
    Returns [] when the pointers loop before reaching a root.
    """
    path: List[str] = []
    cur: Optional[str] = target
    seen = set()
    while cur is not None:
        if cur in seen:
            return []
        seen.add(cur)
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path


def has_parent(parent: Mapping[str, Optional[str]], node_id: Optional[str]) -> bool:
    """True when `node_id` was reached from somewhere (not the root, not unseen)."""
    return node_id is not None and parent.get(node_id) is not None


def join_path(path: List[str]) -> str:
    return " → ".join(path)
