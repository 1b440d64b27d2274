"""Tests for algorithms/step.py and algorithms/pseudocode.py"""

from algorithms.pseudocode import LISTINGS, get_pseudocode, has_pseudocode
from algorithms.step import StepBuilder, has_parent, join_path, reconstruct_path
from graph import EdgeState, Graph, NodeState
from helpers import make_edge, make_nodes


def _graph():
    return Graph.from_arrays(make_nodes("A", "B", "C"), [make_edge("A", "B"), make_edge("B", "C")])


class TestStepBuilder:
    def test_snapshots_do_not_share_state(self):
        sb = StepBuilder(_graph(), "bfs")
        sb.set_node("A", NodeState.CURRENT)
        first = sb.build(1)
        sb.set_node("A", NodeState.VISITED)
        sb.set_edge("edge-A-B", EdgeState.PATH)
        second = sb.build(3)

        assert first.node_state("A") == NodeState.CURRENT
        assert first.edge_state("edge-A-B") == EdgeState.UNVISITED
        assert second.node_state("A") == NodeState.VISITED
        assert (first.step_number, second.step_number) == (0, 1)

    def test_data_is_deep_copied(self):
        sb = StepBuilder(_graph(), "bfs")
        queue = ["A"]
        step = sb.build(1, {"queue": queue})
        queue.append("B")
        assert step.data_structure == {"queue": ["A"]}

    def test_focus_keeps_frontier(self):
        sb = StepBuilder(_graph(), "bfs")
        sb.set_node("C", NodeState.FRONTIER)
        sb.focus("B", settled=["A"])
        step = sb.build(4)
        assert step.nodes_in(NodeState.CURRENT) == ["B"]
        assert step.nodes_in(NodeState.VISITED) == ["A"]
        assert step.nodes_in(NodeState.FRONTIER) == ["C"]

    def test_mark_path(self):
        sb = StepBuilder(_graph(), "bfs")
        sb.mark_path(["A", "B", "C"])
        step = sb.build(6)
        assert step.nodes_in(NodeState.PATH) == ["A", "B", "C"]
        assert step.edges_in(EdgeState.PATH) == ["edge-A-B", "edge-B-C"]

    def test_to_dict_shape(self):
        step = StepBuilder(_graph(), "dfs").build(7, {"stack": []}, "why")
        d = step.to_dict()
        assert set(d) == {"stepNumber", "nodes", "edges", "dataStructure", "pseudocode", "explanation"}
        assert d["pseudocode"]["highlightedLine"] == 7
        assert d["pseudocode"]["code"] == list(get_pseudocode("dfs").code)
        assert d["nodes"][0] == {"id": "A", "x": 0.0, "y": 0.0, "state": "unvisited"}


class TestPathHelpers:
    def test_reconstruct(self):
        parent = {"A": None, "B": "A", "C": "B"}
        assert reconstruct_path(parent, "C") == ["A", "B", "C"]
        assert join_path(["A", "B"]) == "A → B"

    def test_reconstruct_gives_nothing_on_parent_cycle(self):
        parent = {"A": "B", "B": "A"}
        assert reconstruct_path(parent, "A") == []
        parent = {"S": None, "A": "B", "B": "A", "T": "B"}
        assert reconstruct_path(parent, "T") == []

    def test_has_parent(self):
        parent = {"A": None, "B": "A"}
        assert has_parent(parent, "B")
        assert not has_parent(parent, "A")
        assert not has_parent(parent, "Z")
        assert not has_parent(parent, None)


class TestPseudocode:
    def test_all_ten_listed(self):
        assert set(LISTINGS) == {
            "bfs", "dfs", "dijkstra", "astar", "prim",
            "kruskal", "topological", "bellmanford", "floydwarshall", "tarjan",
        }

    def test_unknown_key_falls_back(self):
        assert not has_pseudocode("nope")
        assert len(get_pseudocode("nope").code) == 1
