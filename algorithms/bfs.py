"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a Step at every meaningful event:
  1. Initial state  →  start node CURRENT, queue = [start]
  2. Dequeue a node  →  mark it CURRENT
  3. Discover an unseen neighbour  →  FRONTIER, incident edge VISITED
  4. Neighbours exhausted  →  node VISITED
  5. Final step  →  reconstruct & highlight the shortest (hop-count) path

Stops early as soon as the end node is dequeued.  Neighbours are collected
from every incident edge, whichever way it points.

Data structure keys: queue, visited, parents, path.
"""

from collections import deque
from typing import Dict, Generator, List, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder, has_parent, join_path, reconstruct_path


def bfs(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during BFS execution.

    Args:
        graph  : Private working copy of the graph.
        source : Starting node id.
        target : Optional goal node id.
    """

    sb = StepBuilder(graph, "bfs")
    queue   = deque([source])
    visited: List[str] = [source]          # discovery order
    seen    = {source}
    parent:  Dict[str, Optional[str]] = {source: None}

    def data(**extra):
        d = {"queue": list(queue), "visited": list(visited), "parents": dict(parent)}
        d.update(extra)
        return d

    # --- initialisation step ---
    sb.only_current(source)
    yield sb.build(1, data(), (
        f"Initialise: source node '{source}' is placed into the queue "
        f"and marked as seen. BFS explores layer by layer from here."
    ))

    # --- main loop ---
    while queue:
        node = queue.popleft()

        sb.focus(node, seen)
        yield sb.build(4, data(), (
            f"Dequeue node '{node}' — it is now the CURRENT node being expanded. "
            f"BFS always dequeues the node that was discovered earliest (FIFO)."
        ))

        if node == target:
            break

        for nbr, _ in graph.neighbours(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            visited.append(nbr)
            queue.append(nbr)
            parent[nbr] = node

            sb.set_node(nbr, NodeState.FRONTIER)
            sb.mark_between(node, nbr, EdgeState.VISITED)
            yield sb.build(10, data(), (
                f"Enqueue '{nbr}' (parent = '{node}'). "
                f"It will be expanded after all nodes at the current depth."
            ))

        sb.set_node(node, NodeState.VISITED)
        yield sb.build(3, data(), f"All neighbours of '{node}' examined — mark it VISITED.")

    # --- path ---
    if has_parent(parent, target):
        path = reconstruct_path(parent, target)
        sb.mark_path(path)
        queue.clear()
        yield sb.build(6, data(path=path), (
            f"🎯 Target '{target}' reached! "
            f"The shortest path (by hop count) has {len(path) - 1} edge(s): {join_path(path)}"
        ))
