"""Tests for the Flask JSON surface in main.py"""

import math

import pytest

from config import TestingConfig
from helpers import both_ways, make_nodes
from main import create_app, json_safe


@pytest.fixture
def client():
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client


class TestCatalogue:
    def test_algorithms(self, client):
        resp = client.get("/api/algorithms")
        assert resp.status_code == 200
        cards = resp.get_json()["algorithms"]
        assert len(cards) == 10
        assert cards[0]["key"] == "bfs"
        assert {"needsStart", "needsEnd", "isGlobal", "hasHeuristic"} <= set(cards[0])

    def test_pseudocode(self, client):
        resp = client.get("/api/pseudocode/tarjan")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["title"] == "Tarjan's Strongly Connected Components"
        assert len(body["code"]) == 23

    def test_pseudocode_unknown(self, client):
        assert client.get("/api/pseudocode/nope").status_code == 404


class TestRun:
    def _body(self, **extra):
        body = {
            "algorithm": "dijkstra",
            "nodes": make_nodes("A", "B", "C"),
            "edges": both_ways("A", "B", 2),
            "startNodeId": "A",
            "endNodeId": "B",
        }
        body.update(extra)
        return body

    def test_full_trace(self, client):
        resp = client.post("/api/run", json=self._body())
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["path"] == ["A", "B"]
        assert data["metrics"]["pathCost"] == 2
        assert data["steps"][0]["pseudocode"]["highlightedLine"] == 2

    def test_infinity_spelled_out(self, client):
        data = client.post("/api/run", json=self._body()).get_json()
        assert data["steps"][0]["dataStructure"]["distances"]["C"] == "∞"

    def test_empty_end_is_no_end(self, client):
        data = client.post("/api/run", json=self._body(endNodeId="")).get_json()
        assert data["diagnostics"] == []
        assert data["path"] == []

    def test_unknown_algorithm_is_not_an_error(self, client):
        resp = client.post("/api/run", json=self._body(algorithm="quicksort"))
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["steps"] == []
        assert data["diagnostics"][0]["kind"] == "unknown-algorithm"

    def test_bad_json(self, client):
        resp = client.post("/api/run", data="not json", content_type="application/json")
        assert resp.status_code == 400

    def test_nodes_must_be_a_list(self, client):
        resp = client.post("/api/run", json=self._body(nodes={"A": {}}))
        assert resp.status_code == 400

    @pytest.mark.parametrize("field", ["directed", "weighted"])
    def test_flags_must_be_booleans(self, client, field):
        resp = client.post("/api/run", json=self._body(**{field: "false"}))
        assert resp.status_code == 400
        assert "booleans" in resp.get_json()["error"]

    def test_unweighted_flag(self, client):
        edges = both_ways("A", "B", 2)
        data = client.post("/api/run", json=self._body(edges=edges, weighted=False)).get_json()
        assert data["metrics"]["pathCost"] == 1

    def test_malformed_node(self, client):
        resp = client.post("/api/run", json=self._body(nodes=[{"x": 1}]))
        assert resp.status_code == 400
        assert "error" in resp.get_json()


class TestJsonSafe:
    def test_nested(self):
        value = {"d": {"a": math.inf, "b": -math.inf}, "l": [1.5, (math.inf,)]}
        assert json_safe(value) == {"d": {"a": "∞", "b": "-∞"}, "l": [1.5, ["∞"]]}

    def test_custom_spelling(self):
        assert json_safe([math.inf], "Infinity") == ["Infinity"]
