"""
astar.py — A* Search
=====================
Generator-based A* with a pluggable heuristic function.

Ships four built-in heuristics over layout coordinates:
  • euclidean   – √(Δx² + Δy²)          (the default)
  • manhattan   – |Δx| + |Δy|
  • octile      – max(|Δx|,|Δy|) + (√2-1)·min(|Δx|,|Δy|)
  • zero        – h = 0, A* degrades to Dijkstra

Admissibility is the caller's business: the coordinates only guide the
search if they roughly track real path cost.

Semantics worth knowing:
  - A node joins `visited` when it is EXPANDED, never as a closed-set
    guard.  A node whose score improves after expansion is pushed again
    and gets re-expanded.
  - Every improvement pushes a fresh open-set entry; old entries are left
    in place and simply reconsidered when popped.
  - A Step is emitted per successful relaxation only.
  - Expansions are capped at |V|·max(|E|, 1) + 1 so a negative cycle
    cannot spin forever.  Hitting the cap with work left emits one extra
    step flagged `expansionLimit`.

Data structure keys: openSet, gScore, fScore, parents, visited, path.
"""

import heapq
import itertools
import math
from typing import Callable, Dict, Generator, List, Optional, Tuple

from graph import EdgeState, Graph, Node, NodeState
from algorithms.step import Step, StepBuilder, has_parent, join_path, reconstruct_path
from algorithms.dijkstra import queue_snapshot


# ---------------------------------------------------------------------------
# Built-in heuristics  (all take two Node objects, return float)
# ---------------------------------------------------------------------------
def euclidean(a: Node, b: Node) -> float:
    return a.distance_to(b)

def manhattan(a: Node, b: Node) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)

def octile(a: Node, b: Node) -> float:
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return max(dx, dy) + (math.sqrt(2) - 1) * min(dx, dy)

def zero(a: Node, b: Node) -> float:
    """h=0 → A* degrades to Dijkstra.  Useful for teaching."""
    return 0.0

HEURISTICS: Dict[str, Callable[[Node, Node], float]] = {
    "euclidean": euclidean,
    "manhattan": manhattan,
    "octile":    octile,
    "zero":      zero,
}

DEFAULT_HEURISTIC = "euclidean"

INF = float("inf")


def expansion_limit(graph: Graph) -> int:
    return graph.node_count() * max(graph.edge_count(), 1) + 1


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    graph: Graph,
    source: str,
    target: str,
    heuristic: str = DEFAULT_HEURISTIC,
) -> Generator[Step, None, None]:
    """
    Args:
        graph     : Private working copy of the graph.
        source    : Start node id.
        target    : Goal node id (required — the heuristic aims at it).
        heuristic : Key into HEURISTICS; unknown keys fall back to euclidean.
    """

    h_fn        = HEURISTICS.get(heuristic, euclidean)
    target_node = graph.get_node(target)
    sb          = StepBuilder(graph, "astar")
    seq         = itertools.count()

    def h(node_id: str) -> float:
        return h_fn(graph.nodes[node_id], target_node)

    g_score: Dict[str, float]          = {nid: INF for nid in graph.nodes}
    f_score: Dict[str, float]          = {nid: INF for nid in graph.nodes}
    parent:  Dict[str, Optional[str]]  = {nid: None for nid in graph.nodes}
    visited: List[str]                 = []

    g_score[source] = 0
    f_score[source] = h(source)
    open_set: List[Tuple[float, int, str]] = [(f_score[source], next(seq), source)]

    def data(**extra):
        d = {
            "openSet": queue_snapshot(open_set),
            "gScore":  dict(g_score),
            "fScore":  dict(f_score),
            "parents": dict(parent),
            "visited": list(visited),
        }
        d.update(extra)
        return d

    # --- init step ---
    sb.only_current(source)
    yield sb.build(3, data(), (
        f"A* init: g(source)=0, h(source)={f_score[source]:.2f} (using {heuristic}), "
        f"f(source)={f_score[source]:.2f}. Push into open set."
    ))

    # --- main loop ---
    expansions = 0
    reached = False
    limit = expansion_limit(graph)
    while open_set and expansions < limit:
        _, _, node = heapq.heappop(open_set)
        expansions += 1

        sb.focus(node, visited)
        yield sb.build(5, data(), (
            f"Pop '{node}': g={g_score[node]:.2f}, h={h(node):.2f}, "
            f"f={f_score[node]:.2f} — lowest f in the open set."
        ))

        if node == target:
            visited.append(node)
            reached = True
            break

        if node not in visited:
            visited.append(node)

        for nbr, edge in graph.neighbours(node):
            tentative_g = g_score[node] + graph.weight(edge)
            if tentative_g >= g_score[nbr]:
                continue

            parent[nbr]  = node
            g_score[nbr] = tentative_g
            f_score[nbr] = tentative_g + h(nbr)
            heapq.heappush(open_set, (f_score[nbr], next(seq), nbr))

            sb.set_node(nbr, NodeState.FRONTIER)
            sb.mark_between(node, nbr, EdgeState.VISITED)
            yield sb.build(15, data(), (
                f"Relax {node}→{nbr}: g={tentative_g:.2f}, "
                f"h={h(nbr):.2f}, f={f_score[nbr]:.2f} — UPDATE!"
            ))

        sb.set_node(node, NodeState.VISITED)
        yield sb.build(4, data(), f"Finished expanding '{node}' — mark it VISITED.")

    if not reached and open_set and expansions >= limit:
        yield sb.build(4, data(expansionLimit=True), (
            f"⚠️ Stopped after {expansions} expansions. Scores keep improving, "
            f"which points at a negative cycle."
        ))

    # --- path ---
    if reached and has_parent(parent, target):
        path = reconstruct_path(parent, target)
        sb.mark_path(path)
        open_set.clear()
        yield sb.build(7, data(path=path), (
            f"🎯 Target '{target}' reached! Cost = {g_score[target]:.2f}. "
            f"Path: {join_path(path)}"
        ))
