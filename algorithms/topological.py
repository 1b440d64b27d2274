"""
topological.py — Topological Sort (DFS post-order)
====================================================
Depth-first over outgoing edges; every node is pushed onto a finish stack
once all of its successors are done, and the reversed finish stack is the
topological order.

Yields a Step at:
  1. Start (empty visited set and finish stack)
  2. Node entered              →  CURRENT
  3. Tree edge about to be followed  →  edge CURRENT
  4. Node finished             →  pushed on the stack, PATH
  5. One step per node of the reversed stack, with its 1-based rank

Design decisions:
  - No recursion.  The DFS keeps an explicit stack of [node, cursor]
    frames, the cursor indexing into the node's successor list, so deep
    chains cannot hit Python's recursion limit.
  - A followed edge turns VISITED as soon as its child finishes, and the
    parent becomes CURRENT again.
  - Finished nodes keep the PATH colour for the rest of the run.
  - The trace never checks for cycles.  On a cyclic graph it still
    produces a finish order; `has_cycle` is there for callers that want
    to know.

Data structure keys: visited, stack, exploring, added, topologicalOrder,
currentOrder.
"""

from typing import Generator, List, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder


def topological_sort(
    graph: Graph,
    source: Optional[str] = None,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder(graph, "topological")
    visited: List[str] = []
    seen = set()
    stack:   List[str] = []

    def data(**extra):
        d = {"visited": list(visited), "stack": list(stack)}
        d.update(extra)
        return d

    def enter(node_id: str) -> None:
        for node in graph.nodes.values():
            if node.id == node_id:
                node.state = NodeState.CURRENT
            elif node.state == NodeState.PATH:
                continue
            elif node.id in seen:
                node.state = NodeState.VISITED
            else:
                node.state = NodeState.UNVISITED

    yield sb.build(2, data(), "Start with an empty visited set and an empty finish stack.")

    for root in graph.node_ids():
        if root in seen:
            continue

        seen.add(root)
        visited.append(root)
        enter(root)
        yield sb.build(9, data(), f"Enter '{root}' and mark it visited.")

        # each frame: [node_id, index of next successor to look at, edge being followed]
        frames = [[root, 0, None]]
        while frames:
            frame = frames[-1]
            node, cursor = frame[0], frame[1]
            succ = graph.successors(node)

            if cursor < len(succ):
                frame[1] += 1
                child, edge = succ[cursor]
                if child in seen:
                    continue

                sb.set_edge(edge.id, EdgeState.CURRENT)
                yield sb.build(12, data(exploring=child), (
                    f"'{child}' is unvisited — follow {node}→{child}."
                ))

                seen.add(child)
                visited.append(child)
                frames.append([child, 0, edge.id])
                enter(child)
                yield sb.build(9, data(), f"Enter '{child}' and mark it visited.")
                continue

            # all successors done
            frames.pop()
            stack.append(node)
            sb.set_node(node, NodeState.PATH)
            yield sb.build(13, data(added=node), (
                f"Every successor of '{node}' is finished — push '{node}' onto the stack."
            ))

            if frames:
                sb.set_edge(frame[2], EdgeState.VISITED)
                sb.set_node(frames[-1][0], NodeState.CURRENT)

    order = list(reversed(stack))
    for rank, node_id in enumerate(order, start=1):
        sb.set_node(node_id, NodeState.PATH)
        yield sb.build(6, data(topologicalOrder=list(order), currentOrder=rank), (
            f"Position {rank}: '{node_id}'."
        ))


def has_cycle(graph: Graph) -> bool:
    """True if following edge direction can lead back to a node on the current path."""
    WHITE, GREY, BLACK = 0, 1, 2
    colour = {nid: WHITE for nid in graph.nodes}

    for root in graph.node_ids():
        if colour[root] != WHITE:
            continue
        colour[root] = GREY
        frames = [(root, iter(graph.successors(root)))]
        while frames:
            node, it = frames[-1]
            for child, _ in it:
                if colour[child] == GREY:
                    return True
                if colour[child] == WHITE:
                    colour[child] = GREY
                    frames.append((child, iter(graph.successors(child))))
                    break
            else:
                colour[node] = BLACK
                frames.pop()
    return False
