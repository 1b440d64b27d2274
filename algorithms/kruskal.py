"""
kruskal.py — Kruskal's Minimum Spanning Forest
================================================
Scans every edge from lightest to heaviest and keeps the ones that join two
different trees, tracked with a disjoint-set forest.

Yields a Step at:
  1. Edges sorted, every node its own set
  2. Each edge picked up        →  edge CURRENT
  3. Edge accepted  (union)     →  edge PATH, MST-touched nodes VISITED
     or rejected    (same set)  →  edge VISITED

Design decisions:
  - Python's sort is stable, so equal weights keep array order.
  - `find` is iterative with full path compression; `union(a, b)` links
    find(a) under find(b).  The compressed parent map is what the panel
    shows, so its exact shape is part of the output.
  - No early exit at |V|-1 edges: every edge gets its verdict.  On a
    disconnected graph the result is a spanning forest.

Data structure keys: sortedEdges, mst, parent, currentEdge / addedEdge /
skippedEdge.
"""

from typing import Dict, Generator, List, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder


class DisjointSet:
    """Union-find over node ids.  `parent` is exposed for snapshots."""

    def __init__(self, ids):
        self.parent: Dict[str, str] = {i: i for i in ids}

    def find(self, x: str) -> str:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def union(self, a: str, b: str) -> None:
        self.parent[self.find(a)] = self.find(b)


def kruskal(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """`source` and `target` are accepted for a uniform signature and ignored."""

    sb = StepBuilder(graph, "kruskal")
    ordered = sorted(graph.edges.values(), key=graph.weight)
    sorted_ids = [e.id for e in ordered]
    dsu = DisjointSet(graph.nodes)
    mst: List[str] = []

    def data(**extra):
        d = {"sortedEdges": list(sorted_ids), "mst": list(mst), "parent": dict(dsu.parent)}
        d.update(extra)
        return d

    yield sb.build(1, data(), (
        f"Sort all {len(ordered)} edges by weight. "
        f"Every node starts in its own set."
    ))

    for edge in ordered:
        root_s = dsu.find(edge.source)
        root_t = dsu.find(edge.target)

        sb.set_edge(edge.id, EdgeState.CURRENT)
        yield sb.build(5, data(currentEdge=edge.id), (
            f"Consider {edge.source}–{edge.target} (w={graph.weight(edge)}): "
            f"find({edge.source})={root_s}, find({edge.target})={root_t}."
        ))

        if root_s != root_t:
            mst.append(edge.id)
            dsu.union(root_s, root_t)

            sb.set_edge(edge.id, EdgeState.PATH)
            touched = set()
            for eid in mst:
                touched.add(graph.edges[eid].source)
                touched.add(graph.edges[eid].target)
            for node in graph.nodes.values():
                node.state = NodeState.VISITED if node.id in touched else NodeState.UNVISITED
            yield sb.build(7, data(addedEdge=edge.id), (
                f"Different sets — accept {edge.source}–{edge.target} and merge the sets."
            ))
        else:
            sb.set_edge(edge.id, EdgeState.VISITED)
            yield sb.build(9, data(skippedEdge=edge.id), (
                f"Same set — {edge.source}–{edge.target} would close a cycle. Skip it."
            ))
