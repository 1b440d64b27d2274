"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  Every step carries the full NxN
distance and next-hop matrices so the panel can render them as a live grid.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Yields a Step for:
  1. Initialisation (edges → matrix)
  2. Each new intermediate k
  3. EVERY (k, i, j) triple examined, then once more if it relaxed
  4. Final "complete" step

This is the densest trace the engine produces (O(V³) steps); there is no
condensed mode.

Matrix seeding:
  - Rows and columns follow node-array order; both matrices are dicts
    keyed by node id.
  - Edges are applied in array order, so a later parallel edge overwrites
    an earlier one.  Self-loops are ignored (the diagonal stays 0).
  - An edge u→v also fills v→u, unless an explicit v→u edge exists.

Data structure keys: dist, next, k, i, j, kId, iId, jId, relaxed, complete.
"""

from typing import Dict, Generator, Optional

from graph import Graph, NodeState
from algorithms.step import Step, StepBuilder


INF = float("inf")

Matrix = Dict[str, Dict[str, float]]
NextHop = Dict[str, Dict[str, Optional[str]]]


def floyd_warshall(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """`source` and `target` are accepted for a uniform signature and ignored."""

    sb  = StepBuilder(graph, "floydwarshall")
    ids = graph.node_ids()
    dist, nxt = initial_matrices(graph)

    def data(**extra):
        d = {"dist": dist, "next": nxt}
        d.update(extra)
        return d

    def paint(k_id: str, i_id: Optional[str] = None, j_id: Optional[str] = None) -> None:
        for node in graph.nodes.values():
            if node.id == k_id:
                node.state = NodeState.CURRENT
            elif node.id in (i_id, j_id):
                node.state = NodeState.FRONTIER
            else:
                node.state = NodeState.UNVISITED

    yield sb.build(1, data(k=0), (
        f"Seed the {len(ids)}×{len(ids)} matrix from the edges: 0 on the diagonal, "
        f"edge weights where an edge exists, ∞ elsewhere."
    ))

    # ==============================================================
    # MAIN TRIPLE LOOP
    # ==============================================================
    for k, k_id in enumerate(ids, start=1):
        paint(k_id)
        yield sb.build(2, data(k=k, kId=k_id), (
            f"Intermediate node k = '{k_id}': can any path get shorter by going through it?"
        ))

        for i, i_id in enumerate(ids, start=1):
            for j, j_id in enumerate(ids, start=1):
                coords = dict(k=k, i=i, j=j, kId=k_id, iId=i_id, jId=j_id)
                via_1, via_2 = dist[i_id][k_id], dist[k_id][j_id]

                paint(k_id, i_id, j_id)
                yield sb.build(5, data(**coords), (
                    f"Is dist[{i_id}][{k_id}] + dist[{k_id}][{j_id}] = "
                    f"{_fmt(via_1)} + {_fmt(via_2)} < dist[{i_id}][{j_id}] = "
                    f"{_fmt(dist[i_id][j_id])}?"
                ))

                if via_1 == INF or via_2 == INF or via_1 + via_2 >= dist[i_id][j_id]:
                    continue

                old = dist[i_id][j_id]
                dist[i_id][j_id] = via_1 + via_2
                nxt[i_id][j_id]  = nxt[i_id][k_id]
                yield sb.build(6, data(relaxed=True, **coords), (
                    f"Yes — dist[{i_id}][{j_id}]: {_fmt(old)} → {_fmt(dist[i_id][j_id])}, "
                    f"next hop '{nxt[i_id][j_id]}'."
                ))

    sb.set_nodes(ids, NodeState.VISITED)
    yield sb.build(8, data(complete=True), "All intermediates tried. Every entry is now a shortest distance.")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def initial_matrices(graph: Graph):
    """(dist, next) seeded from the edge list; see module docstring for the rules."""
    ids = graph.node_ids()
    dist: Matrix  = {u: {v: (0 if u == v else INF) for v in ids} for u in ids}
    nxt:  NextHop = {u: {v: None for v in ids} for u in ids}

    for edge in graph.edges.values():
        u, v, w = edge.source, edge.target, graph.weight(edge)
        if u == v:
            continue
        dist[u][v] = w
        nxt[u][v]  = v
        if not graph.has_edge(v, u):
            dist[v][u] = w
            nxt[v][u]  = u
    return dist, nxt


def extract_path(nxt: NextHop, u: str, v: str):
    """Follow next-hop pointers from u to v.  Empty list when v is unreachable."""
    if u == v:
        return [u]
    if nxt[u][v] is None:
        return []
    path = [u]
    while u != v:
        u = nxt[u][v]
        if u is None or u in path:
            return []
        path.append(u)
    return path


def _fmt(x: float) -> str:
    return "∞" if x == INF else f"{x:g}"
