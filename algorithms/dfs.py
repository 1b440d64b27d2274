"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a Step at:
  1. Push source onto stack
  2. Pop an unvisited node  →  CURRENT
  3. Push each unvisited neighbour  →  FRONTIER, incident edge VISITED
  4. Neighbours exhausted  →  node VISITED
  5. Path found  →  reconstruct via parent map

Neighbours are pushed without checking the stack and filtered on pop
("mark on pop").  They are pushed in REVERSE adjacency order, so popping
reproduces the left-to-right order of a recursive DFS.  A node's parent is
whoever pushed it first.

Data structure keys: stack, visited, parents, path.
"""

from typing import Dict, Generator, List, Optional

from graph import EdgeState, Graph, NodeState
from algorithms.step import Step, StepBuilder, has_parent, join_path, reconstruct_path


def dfs(
    graph: Graph,
    source: str,
    target: Optional[str] = None,
) -> Generator[Step, None, None]:

    sb = StepBuilder(graph, "dfs")
    stack:   List[str] = [source]
    visited: List[str] = []
    parent:  Dict[str, Optional[str]] = {source: None}

    def data(**extra):
        d = {"stack": list(stack), "visited": list(visited), "parents": dict(parent)}
        d.update(extra)
        return d

    # --- init step ---
    sb.only_current(source)
    yield sb.build(1, data(), (
        f"Initialise: push source '{source}' onto the stack. "
        f"DFS dives as deep as possible before backtracking."
    ))

    # --- main loop ---
    while stack:
        node = stack.pop()

        # already visited (can happen because we mark-on-pop)
        if node in visited:
            continue

        visited.append(node)
        sb.focus(node, visited)
        yield sb.build(7, data(), (
            f"Pop '{node}' from stack and mark it visited. "
            f"DFS will now explore its neighbours before returning here."
        ))

        if node == target:
            break

        for nbr, _ in reversed(graph.neighbours(node)):
            if nbr in visited:
                continue
            stack.append(nbr)
            if nbr not in parent:
                parent[nbr] = node

            sb.set_node(nbr, NodeState.FRONTIER)
            sb.mark_between(node, nbr, EdgeState.VISITED)
            yield sb.build(12, data(), f"Push '{nbr}' onto stack (parent = '{parent[nbr]}').")

        sb.set_node(node, NodeState.VISITED)
        yield sb.build(3, data(), f"Every neighbour of '{node}' is on the stack or done — mark it VISITED.")

    # --- path ---
    if has_parent(parent, target):
        path = reconstruct_path(parent, target)
        sb.mark_path(path)
        stack.clear()
        yield sb.build(9, data(path=path), (
            f"🎯 Target '{target}' found! Path: {join_path(path)} "
            f"({len(path) - 1} edge(s))."
        ))
