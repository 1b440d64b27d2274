"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows one tree outward from the start node, always adding the lightest
edge that crosses from the tree to the rest of the graph.

Yields a Step at:
  1. Start node placed in the tree
  2. Lightest crossing edge accepted  →  new node CURRENT, MST edges PATH
  3. New node settled  →  VISITED
  4. Final "return mst" step

Each round is a full scan of the edge array instead of a heap: it is O(V·E),
but the winner is always the FIRST strictly-lighter edge in array order,
which keeps ties reproducible.  Edge direction is ignored.

If the scan ever comes up empty the graph is disconnected and the partial
tree is returned as-is.

Data structure keys: visited, mst (edge ids).
"""

from typing import Generator, List, Optional

from graph import Edge, EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder


def prim(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder(graph, "prim")
    visited: List[str] = [source]
    in_tree = {source}
    mst:     List[str] = []

    def data():
        return {"visited": list(visited), "mst": list(mst)}

    sb.only_current(source)
    yield sb.build(1, data(), (
        f"Start the tree at '{source}'. Every round adds the cheapest edge "
        f"leaving the tree."
    ))

    while len(in_tree) < graph.node_count():
        best = _lightest_crossing_edge(graph, in_tree)
        if best is None:
            break

        new_node = best.target if best.source in in_tree else best.source
        visited.append(new_node)
        in_tree.add(new_node)
        mst.append(best.id)

        for node in graph.nodes.values():
            if node.id == new_node:
                node.state = NodeState.CURRENT
            elif node.id in in_tree:
                node.state = NodeState.VISITED
            else:
                node.state = NodeState.UNVISITED
        sb.set_edge(best.id, EdgeState.PATH)
        yield sb.build(7, data(), (
            f"Lightest crossing edge is {best.source}–{best.target} "
            f"(w={graph.weight(best)}). Add it to the MST."
        ))

        sb.set_node(new_node, NodeState.VISITED)
        yield sb.build(8, data(), f"'{new_node}' joins the tree.")

    if len(in_tree) < graph.node_count():
        explanation = (
            f"No edge leaves the tree — the graph is disconnected. "
            f"Partial MST spans {len(in_tree)} of {graph.node_count()} nodes."
        )
    else:
        total = sum(graph.weight(graph.edges[eid]) for eid in mst)
        explanation = f"All nodes reached. MST has {len(mst)} edge(s), total weight {total}."

    sb.demote_current()
    yield sb.build(9, data(), explanation)


def _lightest_crossing_edge(graph: Graph, in_tree: set) -> Optional[Edge]:
    best: Optional[Edge] = None
    best_w = float("inf")
    for edge in graph.edges.values():
        if (edge.source in in_tree) == (edge.target in in_tree):
            continue
        w = graph.weight(edge)
        if w < best_w:
            best, best_w = edge, w
    return best
