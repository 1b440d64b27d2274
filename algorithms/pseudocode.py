"""
pseudocode.py — Static Pseudocode Listings
===========================================
One fixed, numbered listing per algorithm.  The algorithms never own this
text; every Step only carries a 0-based index into the listing, which the
side panel uses to highlight the executing line.

    from algorithms.pseudocode import get_pseudocode
    get_pseudocode("bfs").code[4]   # "    current = queue.dequeue()"
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Listing:
    title: str
    code:  Tuple[str, ...]


# ---------------------------------------------------------------------------
# Listings — index in `code` == highlighted_line
# ---------------------------------------------------------------------------
LISTINGS: Dict[str, Listing] = {

    "bfs": Listing("Breadth-First Search", (
        "function BFS(graph, start, end):",                 # 0
        "  queue = [start]",                                # 1
        "  visited = {start}",                              # 2
        "  while queue is not empty:",                      # 3
        "    current = queue.dequeue()",                    # 4
        "    if current == end:",                           # 5
        "      return reconstruct_path(end)",               # 6
        "    for each neighbor of current:",                # 7
        "      if neighbor not in visited:",                # 8
        "        visited.add(neighbor)",                    # 9
        "        queue.enqueue(neighbor)",                  # 10
        "  return no path exists",                          # 11
    )),

    "dfs": Listing("Depth-First Search", (
        "function DFS(graph, start, end):",                 # 0
        "  stack = [start]",                                # 1
        "  visited = {}",                                   # 2
        "  while stack is not empty:",                      # 3
        "    current = stack.pop()",                        # 4
        "    if current in visited:",                       # 5
        "      continue",                                   # 6
        "    visited.add(current)",                         # 7
        "    if current == end:",                           # 8
        "      return reconstruct_path(end)",               # 9
        "    for each neighbor of current (reversed):",     # 10
        "      if neighbor not in visited:",                # 11
        "        stack.push(neighbor)",                     # 12
        "  return no path exists",                          # 13
    )),

    "dijkstra": Listing("Dijkstra's Algorithm", (
        "function Dijkstra(graph, start, end):",                        # 0
        "  distances = {start: 0, all others: ∞}",                      # 1
        "  priorityQueue = [(start, 0)]",                               # 2
        "  visited = {}",                                               # 3
        "  while priorityQueue is not empty:",                          # 4
        "    current = priorityQueue.extractMin()",                     # 5
        "    if current in visited:",                                   # 6
        "      continue",                                               # 7
        "    visited.add(current)",                                     # 8
        "    if current == end:",                                       # 9
        "      return reconstruct_path(end)",                           # 10
        "    for each neighbor, weight of current:",                    # 11
        "      if distances[current] + weight < distances[neighbor]:",  # 12
        "        distances[neighbor] = distances[current] + weight",    # 13
        "        priorityQueue.insert((neighbor, distances[neighbor]))",# 14
        "  return distances",                                           # 15
    )),

    "astar": Listing("A* Search", (
        "function AStar(graph, start, end):",                           # 0
        "  openSet = [(start, h(start, end))]",                         # 1
        "  gScore = {start: 0, all others: ∞}",                         # 2
        "  fScore = {start: h(start, end), all others: ∞}",             # 3
        "  while openSet is not empty:",                                # 4
        "    current = openSet.extractMin()  // lowest fScore",         # 5
        "    if current == end:",                                       # 6
        "      return reconstruct_path(end)",                           # 7
        "    visited.add(current)",                                     # 8
        "    for each neighbor, weight of current:",                    # 9
        "      tentative = gScore[current] + weight",                   # 10
        "      if tentative < gScore[neighbor]:",                       # 11
        "        parent[neighbor] = current",                           # 12
        "        gScore[neighbor] = tentative",                         # 13
        "        fScore[neighbor] = tentative + h(neighbor, end)",      # 14
        "        openSet.insert((neighbor, fScore[neighbor]))",         # 15
        "  return no path exists",                                      # 16
    )),

    "prim": Listing("Prim's Minimum Spanning Tree", (
        "function Prim(graph, start):",                                 # 0
        "  visited = {start}",                                          # 1
        "  mst = []",                                                   # 2
        "  while visited.size < graph.nodes.size:",                     # 3
        "    minEdge = lightest edge with one endpoint in visited",     # 4
        "    if no such edge exists:",                                  # 5
        "      break  // graph is not connected",                       # 6
        "    mst.add(minEdge)",                                         # 7
        "    visited.add(unvisited endpoint of minEdge)",               # 8
        "  return mst",                                                 # 9
    )),

    "kruskal": Listing("Kruskal's Minimum Spanning Tree", (
        "function Kruskal(graph):",                                     # 0
        "  sortedEdges = sort edges by weight",                         # 1
        "  mst = []",                                                   # 2
        "  parent = {v: v for v in graph.nodes}",                       # 3
        "  for each edge (u, v) in sortedEdges:",                       # 4
        "    if find(u) != find(v):",                                   # 5
        "      mst.add(edge)",                                          # 6
        "      union(u, v)",                                            # 7
        "    else:",                                                    # 8
        "      skip edge  // would form a cycle",                       # 9
        "  return mst",                                                 # 10
    )),

    "topological": Listing("Topological Sort", (
        "function TopologicalSort(graph):",                             # 0
        "  visited = {}",                                               # 1
        "  stack = []",                                                 # 2
        "  for each node in graph:",                                    # 3
        "    if node not in visited:",                                  # 4
        "      dfs(node)",                                              # 5
        "  return reverse(stack)",                                      # 6
        "",                                                             # 7
        "function dfs(node):",                                          # 8
        "  visited.add(node)",                                          # 9
        "  for each successor of node:",                                # 10
        "    if successor not in visited:",                             # 11
        "      dfs(successor)",                                         # 12
        "  stack.push(node)",                                           # 13
    )),

    "bellmanford": Listing("Bellman-Ford", (
        "function BellmanFord(graph, start):",                          # 0
        "  distances = {start: 0, all others: ∞}",                      # 1
        "  for i = 1 to |V| - 1:",                                      # 2
        "    for each edge (u, v) with weight w:",                      # 3
        "      if distances[u] + w < distances[v]:",                    # 4
        "        distances[v] = distances[u] + w",                      # 5
        "    if no distance changed: break",                            # 6
        "  for each edge (u, v) with weight w:",                        # 7
        "    if distances[u] + w < distances[v]:",                      # 8
        "      return 'negative-weight cycle'",                         # 9
        "  return distances",                                           # 10
    )),

    "floydwarshall": Listing("Floyd-Warshall", (
        "function FloydWarshall(graph):",                               # 0
        "  dist, next = matrices from direct edges, 0 on diagonal",     # 1
        "  for k in graph.nodes:",                                      # 2
        "    for i in graph.nodes:",                                    # 3
        "      for j in graph.nodes:",                                  # 4
        "        if dist[i][k] + dist[k][j] < dist[i][j]:",             # 5
        "          dist[i][j] = dist[i][k] + dist[k][j]",               # 6
        "          next[i][j] = next[i][k]",                            # 7
        "  return dist, next",                                          # 8
    )),

    "tarjan": Listing("Tarjan's Strongly Connected Components", (
        "function Tarjan(graph):",                                      # 0
        "  index = 0",                                                  # 1
        "  stack = []",                                                 # 2
        "  indices = {}, lowLinks = {}",                                # 3
        "  onStack = {}",                                               # 4
        "  components = []",                                            # 5
        "  for each node in graph:",                                    # 6
        "    if node not in indices:",                                  # 7
        "      strongConnect(node)",                                    # 8
        "  return components",                                          # 9
        "",                                                             # 10
        "function strongConnect(node):",                                # 11
        "  indices[node] = lowLinks[node] = index++",                   # 12
        "  stack.push(node); onStack[node] = true",                     # 13
        "  for each successor of node:",                                # 14
        "    if successor not in indices:",                             # 15
        "      strongConnect(successor)",                               # 16
        "      lowLinks[node] = min(lowLinks[node], lowLinks[successor])",  # 17
        "    else if onStack[successor]:",                              # 18
        "      lowLinks[node] = min(lowLinks[node], indices[successor])",   # 19
        "  if lowLinks[node] == indices[node]:",                        # 20
        "    pop stack down to node into component",                    # 21
        "    components.add(component)",                                # 22
    )),
}

_FALLBACK = Listing("Algorithm", ("No pseudocode available for this algorithm.",))


def get_pseudocode(key: str) -> Listing:
    """Return the listing for `key`, or a one-line placeholder."""
    return LISTINGS.get(key, _FALLBACK)


def has_pseudocode(key: str) -> bool:
    return key in LISTINGS
