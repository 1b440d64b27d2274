"""
runner.py — Run Dispatcher & Diagnostics
==========================================
The one entry point callers use:

    from engine import run
    result = run("dijkstra", nodes, edges, start_id="A", end_id="F")
    result.steps          # tuple of Step, replayable frame by frame
    result.diagnostics    # what was odd about the input, if anything
    result.metrics        # RunMetrics card
    result.to_dict()      # JSON-ready envelope

Design decisions:
  - Degrade, don't throw.  Unknown algorithm, missing start node,
    disconnected graph, cyclic graph: the caller gets an empty or partial
    trace plus a Diagnostic, never an exception.  Malformed records
    (a node without an id) are still a KeyError from the graph model.
  - The generator is exhausted eagerly; `run` returns only when the whole
    trace exists.
  - Diagnostics never influence the steps.  They are worked out from the
    input graph and from flags the algorithm already put in its last
    step's data structure, after the trace is complete.
  - Each call builds its own working Graph, so the caller's arrays are
    never touched and concurrent calls share nothing.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from graph import Graph
from algorithms import AlgoInfo, get_algorithm
from algorithms.astar import DEFAULT_HEURISTIC
from algorithms.step import Step
from algorithms.topological import has_cycle


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Diagnostic kinds
# ---------------------------------------------------------------------------
UNKNOWN_ALGORITHM  = "unknown-algorithm"
MISSING_START_NODE = "missing-start-node"
MISSING_END_NODE   = "missing-end-node"
DISCONNECTED_GRAPH = "disconnected-graph"
CYCLIC_GRAPH       = "cyclic-graph"
NEGATIVE_CYCLE     = "negative-cycle"
EXPANSION_LIMIT    = "expansion-limit"
DANGLING_EDGE      = "dangling-edge"


@dataclass(frozen=True)
class Diagnostic:
    kind:   str
    detail: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "detail": self.detail}


# ---------------------------------------------------------------------------
# Metrics dataclass — the run's summary card
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:       str   = ""
    algo_label:     str   = ""
    source:         str   = ""
    target:         str   = ""
    total_steps:    int   = 0          # number of Steps yielded
    wall_time_ms:   float = 0.0        # wall-clock time to run to completion
    path_length:    int   = 0          # number of edges on the final path
    path_cost:      float = 0.0        # total weight of the final path
    path_found:     bool  = False
    negative_cycle: bool  = False
    heuristic:      str   = ""         # A* only

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":     self.algo_key,
            "label":         self.algo_label,
            "source":        self.source,
            "target":        self.target,
            "totalSteps":    self.total_steps,
            "wallTimeMs":    self.wall_time_ms,
            "pathLength":    self.path_length,
            "pathCost":      self.path_cost,
            "pathFound":     self.path_found,
            "negativeCycle": self.negative_cycle,
            "heuristic":     self.heuristic,
        }


# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RunResult:
    steps:       Tuple[Step, ...]       = ()
    diagnostics: Tuple[Diagnostic, ...] = ()
    metrics:     RunMetrics             = field(default_factory=RunMetrics)

    @property
    def path(self) -> List[str]:
        """Path highlighted by the final step, if the algorithm produced one."""
        if not self.steps:
            return []
        return list(self.steps[-1].data_structure.get("path", []))

    def has(self, kind: str) -> bool:
        return any(d.kind == kind for d in self.diagnostics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps":       [s.to_dict() for s in self.steps],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "metrics":     self.metrics.to_dict(),
            "path":        self.path,
        }


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------
def run(
    algorithm: str,
    nodes: Iterable[Any],
    edges: Iterable[Any],
    start_id: Optional[str] = None,
    end_id: Optional[str] = None,
    *,
    directed: bool = False,
    weighted: bool = True,
    heuristic: str = DEFAULT_HEURISTIC,
) -> RunResult:
    """
    Compute the full step trace of `algorithm` over (nodes, edges).

    Args:
        algorithm : Registry tag ("bfs", "dijkstra", "floydwarshall", …).
        nodes     : Node objects or mappings with id / x / y.
        edges     : Edge objects or mappings with source / target / weight.
        start_id  : Start node; required by every non-global algorithm.
        end_id    : Optional goal node (required by A*).
        directed  : Carried on the working graph; see Graph.
        weighted  : False reads every weight as 1.
        heuristic : A* heuristic key.
    """
    info = get_algorithm(algorithm)
    if info is None:
        log.warning("Unknown algorithm %r; returning an empty trace", algorithm)
        return RunResult(
            diagnostics=(Diagnostic(UNKNOWN_ALGORITHM, f"No algorithm named {algorithm!r}."),),
            metrics=RunMetrics(algo_key=str(algorithm)),
        )

    graph = Graph.from_arrays(nodes, edges, directed=directed, weighted=weighted)
    diagnostics: List[Diagnostic] = []

    if graph.dropped_edges:
        diagnostics.append(Diagnostic(
            DANGLING_EDGE,
            f"Ignored edge(s) naming an unknown node: {', '.join(graph.dropped_edges)}.",
        ))

    source = None if info.is_global else start_id
    target = None if info.is_global else end_id

    if info.needs_start and not graph.has_node(source):
        log.warning("%s needs a start node; %r is not in the graph", info.key, start_id)
        diagnostics.append(Diagnostic(MISSING_START_NODE, f"Start node {start_id!r} is not in the graph."))
        return _result(info, (), diagnostics, source, target, heuristic, 0.0)

    if target is not None and not graph.has_node(target):
        log.warning("End node %r is not in the graph; running %s without one", end_id, info.key)
        diagnostics.append(Diagnostic(MISSING_END_NODE, f"End node {end_id!r} is not in the graph."))
        target = None

    if info.needs_end and target is None:
        if not any(d.kind == MISSING_END_NODE for d in diagnostics):
            diagnostics.append(Diagnostic(MISSING_END_NODE, f"{info.label} needs an end node."))
        log.warning("%s needs an end node; returning an empty trace", info.key)
        return _result(info, (), diagnostics, source, target, heuristic, 0.0)

    kwargs: Dict[str, Any] = {"graph": graph, "source": source, "target": target}
    if info.has_heuristic:
        kwargs["heuristic"] = heuristic

    t0 = time.monotonic()
    steps = tuple(info.fn(**kwargs))
    wall_ms = (time.monotonic() - t0) * 1000

    diagnostics.extend(_inspect(info, graph, steps))
    result = _result(info, steps, diagnostics, source, target, heuristic, wall_ms, graph.weighted)

    log.debug(
        "%s: %d steps in %.2f ms (%d diagnostic(s))",
        info.key, len(steps), wall_ms, len(result.diagnostics),
    )
    return result


# ---------------------------------------------------------------------------
# Internal
# ---------------------------------------------------------------------------
def _inspect(info: AlgoInfo, graph: Graph, steps: Tuple[Step, ...]) -> List[Diagnostic]:
    """Post-run diagnostics read off the input graph and the finished trace."""
    found: List[Diagnostic] = []
    last = steps[-1].data_structure if steps else {}

    if last.get("negativeCycle"):
        found.append(Diagnostic(
            NEGATIVE_CYCLE,
            f"Edge {last.get('edge')} can still be relaxed after |V|-1 rounds.",
        ))

    if any(s.data_structure.get("expansionLimit") for s in steps):
        found.append(Diagnostic(
            EXPANSION_LIMIT,
            "Search stopped at its expansion cap; the graph likely has a negative cycle.",
        ))

    if info.key == "prim":
        spanned = len(last.get("visited", []))
        if spanned < graph.node_count():
            found.append(Diagnostic(
                DISCONNECTED_GRAPH,
                f"Spanning tree reaches {spanned} of {graph.node_count()} nodes.",
            ))

    if info.key == "topological" and has_cycle(graph):
        found.append(Diagnostic(
            CYCLIC_GRAPH,
            "The graph has a directed cycle; the finish order is not a topological order.",
        ))

    for d in found:
        log.warning("%s: %s (%s)", info.key, d.kind, d.detail)
    return found


def _result(
    info: AlgoInfo,
    steps: Tuple[Step, ...],
    diagnostics: List[Diagnostic],
    source: Optional[str],
    target: Optional[str],
    heuristic: str,
    wall_ms: float,
    weighted: bool = True,
) -> RunResult:
    path = list(steps[-1].data_structure.get("path", [])) if steps else []
    last_edges = {e.id: e for e in steps[-1].edges} if steps else {}
    metrics = RunMetrics(
        algo_key=info.key,
        algo_label=info.label,
        source=source or "",
        target=target or "",
        total_steps=len(steps),
        wall_time_ms=round(wall_ms, 2),
        path_length=len(path) - 1 if len(path) > 1 else 0,
        path_cost=_path_cost(path, last_edges.values(), weighted),
        path_found=len(path) > 1,
        negative_cycle=any(d.kind == NEGATIVE_CYCLE for d in diagnostics),
        heuristic=heuristic if info.has_heuristic else "",
    )
    return RunResult(steps=steps, diagnostics=tuple(diagnostics), metrics=metrics)


def _path_cost(path: List[str], edges, weighted: bool = True) -> float:
    """Sum of the cheapest edge joining each consecutive pair on the path."""
    edges = list(edges)
    cost = 0.0
    for a, b in zip(path, path[1:]):
        joining = [e.weight if weighted else 1 for e in edges if e.connects(a, b)]
        if joining:
            cost += min(joining)
    return cost
