"""
tarjan.py — Tarjan's Strongly Connected Components
====================================================
One depth-first pass over outgoing edges.  Each node gets a discovery
index and a low-link (the smallest index reachable from its subtree
through nodes still on the stack).  A node whose low-link equals its own
index is the root of a component, and the component is everything above
it on the stack.

Yields a Step at:
  1. Start
  2. Node entered          →  CURRENT, nodes on the stack FRONTIER
  3. Successor not yet indexed, about to be explored  →  edge CURRENT
  4. Child finished, low-link folded into the parent
  5. Successor already on the stack, low-link folded with its index
  6. Successor already in a finished component  (nothing to fold)
  7. Component popped      →  members PATH, for the rest of the run

Design decisions:
  - No recursion: an explicit stack of [node, cursor, edge-to-child]
    frames stands in for strongConnect's call stack.
  - Roots are tried in node-array order, successors in edge-array order.
  - Once examined, an edge reads VISITED.  A tree edge stays CURRENT
    until its child's low-link has been folded back.

Data structure keys: indices, lowLinks, stack, components, exploring,
updated, newComponent.
"""

from typing import Dict, Generator, List, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder


def tarjan(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """`source` and `target` are accepted for a uniform signature and ignored."""

    sb = StepBuilder(graph, "tarjan")
    indices:    Dict[str, int]  = {}
    low:        Dict[str, int]  = {}
    stack:      List[str]       = []
    on_stack                    = set()
    done                        = set()
    components: List[List[str]] = []

    def data(**extra):
        d = {
            "indices":    dict(indices),
            "lowLinks":   dict(low),
            "stack":      list(stack),
            "components": [list(c) for c in components],
        }
        d.update(extra)
        return d

    def paint(current: str) -> None:
        for node in graph.nodes.values():
            if node.id == current:
                node.state = NodeState.CURRENT
            elif node.id in done:
                node.state = NodeState.PATH
            elif node.id in on_stack:
                node.state = NodeState.FRONTIER
            else:
                node.state = NodeState.UNVISITED

    def enter(node_id: str) -> Step:
        indices[node_id] = low[node_id] = len(indices)
        stack.append(node_id)
        on_stack.add(node_id)
        paint(node_id)
        return sb.build(13, data(), (
            f"Visit '{node_id}': index = lowLink = {indices[node_id]}. Push it on the stack."
        ))

    yield sb.build(5, data(), "No node has an index yet; the stack and the component list are empty.")

    for root in graph.node_ids():
        if root in indices:
            continue

        yield enter(root)
        # each frame: [node_id, next successor index, id of the tree edge being explored]
        frames = [[root, 0, None]]

        while frames:
            frame = frames[-1]
            node, cursor = frame[0], frame[1]
            succ = graph.successors(node)

            if cursor < len(succ):
                frame[1] += 1
                child, edge = succ[cursor]
                sb.set_edge(edge.id, EdgeState.CURRENT)

                if child not in indices:
                    frame[2] = edge.id
                    yield sb.build(16, data(exploring=child), (
                        f"'{child}' has no index yet — explore {node}→{child}."
                    ))
                    frames.append([child, 0, None])
                    yield enter(child)
                    continue

                if child in on_stack:
                    low[node] = min(low[node], indices[child])
                    yield sb.build(19, data(updated=node), (
                        f"'{child}' is on the stack: lowLink['{node}'] = "
                        f"min(lowLink, index['{child}']) = {low[node]}."
                    ))
                else:
                    yield sb.build(14, data(), (
                        f"'{child}' already belongs to a finished component — ignore {node}→{child}."
                    ))
                sb.set_edge(edge.id, EdgeState.VISITED)
                continue

            # every successor handled
            frames.pop()

            if low[node] == indices[node]:
                component: List[str] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    done.add(member)
                    component.append(member)
                    if member == node:
                        break
                components.append(component)
                sb.set_nodes(component, NodeState.PATH)
                yield sb.build(22, data(newComponent=list(component)), (
                    f"lowLink['{node}'] == index['{node}'] — '{node}' roots a component: "
                    f"{{{', '.join(component)}}}."
                ))

            if frames:
                parent = frames[-1]
                p = parent[0]
                low[p] = min(low[p], low[node])
                paint(p)
                yield sb.build(17, data(updated=p), (
                    f"Back from '{node}': lowLink['{p}'] = "
                    f"min(lowLink['{p}'], lowLink['{node}']) = {low[p]}."
                ))
                sb.set_edge(parent[2], EdgeState.VISITED)
