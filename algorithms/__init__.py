"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict keyed by the algorithm tag callers pass to `run`:
    {
        "bfs": AlgoInfo(key, label, fn, tags, needs_start, needs_end, …),
        …
    }

Every generator takes (graph, source, target) and yields Steps.  The
flags on AlgoInfo tell the dispatcher which of those arguments matter:
  - needs_start   : source must name an existing node
  - needs_end     : target must name an existing node (A*)
  - is_global     : the whole graph is processed; source/target ignored
  - has_heuristic : accepts an extra `heuristic` keyword
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs            import bfs              as _bfs
from algorithms.dfs            import dfs              as _dfs
from algorithms.dijkstra       import dijkstra         as _dijkstra
from algorithms.astar          import astar            as _astar
from algorithms.prim           import prim             as _prim
from algorithms.kruskal        import kruskal          as _kruskal
from algorithms.topological    import topological_sort as _topological
from algorithms.bellman_ford   import bellman_ford     as _bf
from algorithms.floyd_warshall import floyd_warshall   as _fw
from algorithms.tarjan         import tarjan           as _tarjan
from algorithms.pseudocode     import get_pseudocode


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    tags:             List[str] = field(default_factory=list)   # e.g. ["unweighted", "shortest-path"]
    needs_start:      bool     = True
    needs_end:        bool     = False
    has_heuristic:    bool     = False       # A* — expose heuristic selector?
    is_global:        bool     = False       # ignores start / end entirely
    complexity_time:  str      = ""          # e.g. "O(V + E)"
    complexity_space: str      = ""          # e.g. "O(V)"
    description:      str      = ""          # one-liner for the algorithm card

    @property
    def pseudocode(self) -> List[str]:
        return list(get_pseudocode(self.key).code)

    def to_dict(self) -> dict:
        return {
            "key":             self.key,
            "label":           self.label,
            "tags":            list(self.tags),
            "needsStart":      self.needs_start,
            "needsEnd":        self.needs_end,
            "hasHeuristic":    self.has_heuristic,
            "isGlobal":        self.is_global,
            "complexityTime":  self.complexity_time,
            "complexitySpace": self.complexity_space,
            "description":     self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds shortest path by hop count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar,
        tags=["weighted", "shortest-path", "heuristic"],
        needs_end=True, has_heuristic=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra + heuristic guidance. Optimal when h is admissible.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's MST", fn=_prim,
        tags=["weighted", "spanning-tree"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows one tree from the start node by its cheapest outgoing edge.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's MST", fn=_kruskal,
        tags=["weighted", "spanning-tree", "union-find"],
        needs_start=False, is_global=True,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
    ),

    "topological": AlgoInfo(
        key="topological", label="Topological Sort", fn=_topological,
        tags=["directed", "ordering"],
        needs_start=False, is_global=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="DFS finish order, reversed. Only meaningful on a DAG.",
    ),

    "bellmanford": AlgoInfo(
        key="bellmanford", label="Bellman–Ford", fn=_bf,
        tags=["weighted", "shortest-path", "negative-edges", "directed"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Detects negative cycles. Slower than Dijkstra.",
    ),

    "floydwarshall": AlgoInfo(
        key="floydwarshall", label="Floyd–Warshall", fn=_fw,
        tags=["weighted", "all-pairs", "negative-edges"],
        needs_start=False, is_global=True,
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths via dynamic programming. Watch the matrix evolve!",
    ),

    "tarjan": AlgoInfo(
        key="tarjan", label="Tarjan's SCC", fn=_tarjan,
        tags=["directed", "components"],
        needs_start=False, is_global=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Finds strongly connected components in one DFS using low-links.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
