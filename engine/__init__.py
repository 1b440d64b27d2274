"""
engine/
-------
Dispatch layer: turns (algorithm, nodes, edges, start, end) into a trace.

    from engine import run, RunResult, Diagnostic
"""

from engine.runner import Diagnostic, RunMetrics, RunResult, run

__all__ = [
    "run",
    "RunResult",
    "RunMetrics",
    "Diagnostic",
]
