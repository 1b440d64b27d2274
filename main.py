"""
main.py — Graph Algorithm Trace Server
========================================
Thin JSON surface over the engine.  A front-end posts a graph and gets the
complete step trace back in one response; playback happens client-side.

Routes:
  GET  /api/algorithms          – registry cards (key, label, flags, complexity)
  GET  /api/pseudocode/<key>    – fixed pseudocode listing for one algorithm
  POST /api/run                 – compute a full trace

Body of POST /api/run:
    {
        "algorithm":   "dijkstra",
        "nodes":       [{"id": "A", "x": 0, "y": 0}, …],
        "edges":       [{"source": "A", "target": "B", "weight": 4}, …],
        "startNodeId": "A",
        "endNodeId":   "F",              (optional)
        "directed":    false,            (optional)
        "weighted":    true,             (optional)
        "heuristic":   "euclidean"       (optional, A* only)
    }

The server keeps no state between requests.  JSON cannot carry Infinity,
so unreachable distances are spelled with config JSON_INFINITY.
"""

import logging
import math

from flask import Flask, jsonify, request

from config import Config
from algorithms import list_algorithms
from algorithms.astar import DEFAULT_HEURISTIC
from algorithms.pseudocode import get_pseudocode, has_pseudocode
from engine import run


log = logging.getLogger(__name__)


def create_app(config_class=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format=app.config["LOG_FORMAT"],
    )

    # -----------------------------------------------------------------------
    # API: Catalogue
    # -----------------------------------------------------------------------
    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})

    @app.route("/api/pseudocode/<key>", methods=["GET"])
    def api_pseudocode(key):
        if not has_pseudocode(key):
            return jsonify({"error": f"Unknown algorithm: {key}"}), 404
        listing = get_pseudocode(key)
        return jsonify({"key": key, "title": listing.title, "code": list(listing.code)})

    # -----------------------------------------------------------------------
    # API: Run Algorithm
    # -----------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        nodes = data.get("nodes", [])
        edges = data.get("edges", [])
        if not isinstance(nodes, list) or not isinstance(edges, list):
            return jsonify({"error": "'nodes' and 'edges' must be arrays"}), 400

        directed = data.get("directed", False)
        weighted = data.get("weighted", True)
        if not isinstance(directed, bool) or not isinstance(weighted, bool):
            return jsonify({"error": "'directed' and 'weighted' must be booleans"}), 400

        try:
            result = run(
                data.get("algorithm", ""),
                nodes,
                edges,
                start_id=data.get("startNodeId") or None,
                end_id=data.get("endNodeId") or None,
                directed=directed,
                weighted=weighted,
                heuristic=data.get("heuristic") or DEFAULT_HEURISTIC,
            )
        except (KeyError, TypeError, ValueError) as e:
            log.info("Rejected malformed graph: %s", e)
            return jsonify({"error": f"Malformed node or edge record: {e}"}), 400

        return jsonify(json_safe(result.to_dict(), app.config["JSON_INFINITY"]))

    return app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def json_safe(value, infinity: str = Config.JSON_INFINITY):
    """Recursively replace ±inf (and NaN) with strings so the payload is valid JSON."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return infinity if value > 0 else f"-{infinity}"
        return value
    if isinstance(value, dict):
        return {k: json_safe(v, infinity) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v, infinity) for v in value]
    return value


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    log.info("Graph algorithm trace server on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])
