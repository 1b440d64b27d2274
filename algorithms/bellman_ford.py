"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The only single-source shortest-path algorithm that handles NEGATIVE edge
weights (but not negative cycles).

Structure:
  • Up to V-1 rounds of relaxing every edge in array order, source → target.
    A round with zero relaxations ends the loop early.
  • A V-th "detector" round that flags negative cycles.

Yields a Step for:
  1. Initialisation
  2. Each edge examined        →  edge CURRENT
  3. Each successful relaxation  →  edge VISITED, target FRONTIER
  4. Negative-cycle detection (offending edge PATH), which ends the run
  5. Otherwise a final "complete" step, with the path to the target
     highlighted when there is one

An examined edge that does not relax goes back to whatever state it had
before, so only edges that improved something stay coloured.  Edges out of
a node still at ∞ are examined but can never relax.

Data structure keys: distances, parents, iteration, edge, relaxed,
negativeCycle, complete, path.
"""

from typing import Dict, Generator, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder, has_parent, join_path, reconstruct_path


INF = float("inf")


def bellman_ford(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder(graph, "bellmanford")
    V  = graph.node_count()

    dist:   Dict[str, float]         = {nid: INF for nid in graph.nodes}
    parent: Dict[str, Optional[str]] = {nid: None for nid in graph.nodes}
    dist[source] = 0

    def data(**extra):
        d = {"distances": dict(dist), "parents": dict(parent)}
        d.update(extra)
        return d

    def can_relax(edge) -> bool:
        return dist[edge.source] != INF and dist[edge.source] + graph.weight(edge) < dist[edge.target]

    # -- init step --
    sb.only_current(source)
    yield sb.build(1, data(), (
        f"Bellman-Ford init: dist['{source}'] = 0, all others = ∞. "
        f"Up to {max(V - 1, 0)} rounds over all {graph.edge_count()} edges."
    ))

    # ==============================================================
    # MAIN ROUNDS
    # ==============================================================
    for round_idx in range(1, V):
        any_relaxed = False

        for edge in graph.edges.values():
            u, v, w = edge.source, edge.target, graph.weight(edge)
            previous = edge.state

            sb.set_edge(edge.id, EdgeState.CURRENT)
            yield sb.build(4, data(iteration=round_idx, edge=edge.id), (
                f"Round {round_idx}: examine {u}→{v} (w={w}), "
                f"dist[{u}] = {dist[u]}, dist[{v}] = {dist[v]}."
            ))

            if not can_relax(edge):
                sb.set_edge(edge.id, previous)
                continue

            old = dist[v]
            dist[v]   = dist[u] + w
            parent[v] = u
            any_relaxed = True

            sb.set_node(v, NodeState.FRONTIER)
            sb.set_edge(edge.id, EdgeState.VISITED)
            yield sb.build(5, data(iteration=round_idx, relaxed=edge.id), (
                f"Relax {u}→{v}: {dist[u]} + {w} = {dist[v]} < old {old} → UPDATE."
            ))

        if not any_relaxed:
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    for edge in graph.edges.values():
        if can_relax(edge):
            for node in graph.nodes.values():
                node.state = NodeState.VISITED if dist[node.id] != INF else NodeState.UNVISITED
            sb.set_edge(edge.id, EdgeState.PATH)
            yield sb.build(9, data(negativeCycle=True, edge=edge.id), (
                f"⚠️ NEGATIVE CYCLE detected via edge {edge.source}→{edge.target} "
                f"(w={graph.weight(edge)}): it can still be relaxed after every "
                f"round. Shortest paths are undefined!"
            ))
            return

    # ==============================================================
    # COMPLETE
    # ==============================================================
    for node in graph.nodes.values():
        node.state = NodeState.VISITED if dist[node.id] != INF else NodeState.UNVISITED

    if has_parent(parent, target):
        path = reconstruct_path(parent, target)
        sb.mark_path(path)
        yield sb.build(10, data(complete=True, path=path), (
            f"No negative cycle. Shortest distance to '{target}' = {dist[target]}. "
            f"Path: {join_path(path)}"
        ))
    else:
        reached = sum(1 for d in dist.values() if d != INF)
        yield sb.build(10, data(complete=True), (
            f"No negative cycle. Distances are final; {reached} of {V} node(s) reachable."
        ))
