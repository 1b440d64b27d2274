"""Tests for graph/ — the working-copy model."""

import pytest

from engine import run
from graph import Edge, EdgeState, Graph, Node, NodeState, edge_id_for
from helpers import make_edge, make_nodes


class TestNodeAndEdge:
    def test_node_dict_round_trip(self):
        node = Node.from_dict({"id": "A", "x": 3, "y": 4, "state": "frontier"})
        assert node.state == NodeState.FRONTIER
        assert node.to_dict() == {"id": "A", "x": 3, "y": 4, "state": "frontier"}

    def test_node_distance(self):
        assert Node("A", 0, 0).distance_to(Node("B", 3, 4)) == 5

    def test_edge_default_id(self):
        edge = Edge("A", "B", 2)
        assert edge.id == "edge-A-B" == edge_id_for("A", "B")
        assert edge.state == EdgeState.UNVISITED

    def test_edge_connects_either_way(self):
        edge = Edge("A", "B")
        assert edge.connects("B", "A")

    def test_copy_is_independent(self):
        edge = Edge("A", "B")
        clone = edge.copy()
        clone.state = EdgeState.PATH
        assert edge.state == EdgeState.UNVISITED
        assert clone == Edge("A", "B", state=EdgeState.PATH)


class TestFromArrays:
    def test_states_start_neutral(self):
        nodes = [{"id": "A", "state": "visited"}, {"id": "B", "state": "path"}]
        edges = [dict(make_edge("A", "B"), state="current")]
        g = Graph.from_arrays(nodes, edges)
        assert all(n.state == NodeState.UNVISITED for n in g.nodes.values())
        assert g.edges["edge-A-B"].state == EdgeState.UNVISITED

    def test_caller_records_untouched(self):
        node = Node("A", state=NodeState.CURRENT)
        nodes = [node, {"id": "B", "state": "visited"}]
        g = Graph.from_arrays(nodes, [])
        g.set_node_state("A", NodeState.PATH)
        assert g.nodes["A"] is not node
        assert node.state == NodeState.CURRENT
        assert nodes[1] == {"id": "B", "state": "visited"}

    def test_caller_order_preserved(self):
        g = Graph.from_arrays(make_nodes("C", "A", "B"), [])
        assert g.node_ids() == ["C", "A", "B"]

    def test_dangling_edge_dropped(self):
        g = Graph.from_arrays(make_nodes("A"), [make_edge("A", "Z")])
        assert g.edge_count() == 0
        assert g.dropped_edges == ["edge-A-Z"]

    def test_unknown_incoming_state_ignored(self):
        nodes = [{"id": "A", "state": "glowing"}, {"id": "B", "state": "path"}]
        edges = [{"source": "A", "target": "B", "state": "highlighted"}]
        g = Graph.from_arrays(nodes, edges)
        assert g.nodes["A"].state == NodeState.UNVISITED
        assert g.nodes["B"].state == NodeState.UNVISITED
        assert g.edges["edge-A-B"].state == EdgeState.UNVISITED

    def test_unknown_state_still_runs(self):
        nodes = [{"id": "A", "state": "glowing"}, {"id": "B"}]
        edges = [{"source": "A", "target": "B", "state": "highlighted"}]
        assert run("bfs", nodes, edges, start_id="A", end_id="B").path == ["A", "B"]

    def test_missing_id_raises(self):
        with pytest.raises(KeyError):
            Graph.from_arrays([{"x": 1}], [])

    def test_missing_source_raises(self):
        with pytest.raises(KeyError):
            Graph.from_arrays(make_nodes("A"), [{"target": "A"}])


class TestAdjacency:
    def test_neighbours_walk_both_directions(self):
        g = Graph.from_arrays(make_nodes("A", "B"), [make_edge("A", "B")], directed=True)
        assert [n for n, _ in g.neighbours("B")] == ["A"]
        assert g.successors("B") == []
        assert [n for n, _ in g.successors("A")] == ["B"]

    def test_neighbours_follow_edge_order(self):
        edges = [make_edge("A", "C"), make_edge("B", "A"), make_edge("A", "B")]
        g = Graph.from_arrays(make_nodes("A", "B", "C"), edges)
        assert [n for n, _ in g.neighbours("A")] == ["C", "B", "B"]

    def test_self_loop_listed_once(self):
        g = Graph.from_arrays(make_nodes("A"), [make_edge("A", "A")])
        assert len(g.neighbours("A")) == 1

    def test_has_edge_is_directed(self):
        g = Graph.from_arrays(make_nodes("A", "B"), [make_edge("A", "B")])
        assert g.has_edge("A", "B")
        assert not g.has_edge("B", "A")
        assert len(g.edges_between("B", "A")) == 1

    def test_unweighted_reads_one(self):
        g = Graph.from_arrays(make_nodes("A", "B"), [make_edge("A", "B", 7)], weighted=False)
        assert g.weight(g.edges["edge-A-B"]) == 1

    def test_dict_round_trip(self):
        g = Graph.from_arrays(make_nodes("A", "B"), [make_edge("A", "B", -2)], directed=True)
        back = Graph.from_dict(g.to_dict())
        assert back.directed
        assert back.node_ids() == ["A", "B"]
        assert back.edges["edge-A-B"].weight == -2
