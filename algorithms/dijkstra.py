"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based Dijkstra using a min-heap (heapq).

Yields a Step at:
  1. Initialise distances / push source
  2. Pop minimum-distance unvisited node  →  CURRENT
  3. Each unvisited neighbour examined  →  relaxed (FRONTIER) or unchanged
  4. Neighbours exhausted  →  node VISITED
  5. Target popped  →  path found, reconstruct

Heap entries are (priority, insertion_seq, node_id).  The sequence number
makes ties break by insertion order, exactly like a list that is stably
re-sorted before every extraction.  Stale duplicates of an already
visited node are discarded silently when popped.

Data structure keys: priorityQueue, distances, parents, visited, path.
"""

import heapq
import itertools
from typing import Dict, Generator, List, Optional, Tuple

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder, has_parent, join_path, reconstruct_path


INF = float("inf")


def dijkstra(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder(graph, "dijkstra")
    seq = itertools.count()

    dist:    Dict[str, float]         = {nid: INF for nid in graph.nodes}
    parent:  Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    visited: List[str]                = []
    dist[source] = 0
    pq: List[Tuple[float, int, str]] = [(0, next(seq), source)]

    def data(**extra):
        d = {
            "priorityQueue": queue_snapshot(pq),
            "distances":     dict(dist),
            "parents":       dict(parent),
            "visited":       list(visited),
        }
        d.update(extra)
        return d

    # --- init step ---
    sb.only_current(source)
    yield sb.build(2, data(), (
        f"Initialise: all distances = ∞ except source '{source}' = 0. "
        f"Push source into the priority queue."
    ))

    # --- main loop ---
    while pq:
        d, _, node = heapq.heappop(pq)

        # stale entry
        if node in visited:
            continue

        visited.append(node)
        sb.focus(node, visited)
        yield sb.build(8, data(), (
            f"Pop '{node}' with distance {d} — smallest in the priority queue. "
            f"This distance is now FINAL."
        ))

        if node == target:
            break

        for nbr, edge in graph.neighbours(node):
            if nbr in visited:
                continue
            w = graph.weight(edge)
            new_dist = dist[node] + w

            if new_dist < dist[nbr]:
                old = dist[nbr]
                dist[nbr]   = new_dist
                parent[nbr] = node
                heapq.heappush(pq, (new_dist, next(seq), nbr))
                sb.set_node(nbr, NodeState.FRONTIER)
                sb.mark_between(node, nbr, EdgeState.VISITED)
                yield sb.build(14, data(), (
                    f"Relax {node}→{nbr}: {dist[node]} + {w} = {new_dist} "
                    f"< current {old} → UPDATE!"
                ))
            else:
                yield sb.build(12, data(), (
                    f"Edge {node}→{nbr}: {dist[node]} + {w} = {new_dist} "
                    f"≥ current {dist[nbr]} → no improvement."
                ))

        sb.set_node(node, NodeState.VISITED)
        yield sb.build(4, data(), f"All neighbours of '{node}' relaxed — mark it VISITED.")

    # --- path ---
    if has_parent(parent, target):
        path = reconstruct_path(parent, target)
        sb.mark_path(path)
        pq.clear()
        yield sb.build(10, data(path=path), (
            f"🎯 Target '{target}' reached! Shortest distance = {dist[target]}. "
            f"Path: {join_path(path)}"
        ))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def queue_snapshot(heap: List[Tuple[float, int, str]]) -> List[Dict]:
    """Heap contents in extraction order, as [{id, priority}]."""
    return [{"id": nid, "priority": p} for p, _, nid in sorted(heap)]
