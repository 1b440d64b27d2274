"""Tests for algorithms/topological.py"""

from algorithms.topological import has_cycle, topological_sort
from graph import EdgeState, Graph, NodeState
from helpers import make_edge, make_nodes


class TestTopologicalSort:
    def test_diamond_order(self, diamond_dag):
        last = list(topological_sort(Graph.from_arrays(*diamond_dag)))[-1]
        assert last.data_structure["topologicalOrder"] == ["A", "C", "B", "D"]
        assert last.data_structure["currentOrder"] == 4

    def test_order_respects_every_edge(self, diamond_dag):
        g = Graph.from_arrays(*diamond_dag)
        order = list(topological_sort(g))[-1].data_structure["topologicalOrder"]
        for e in g.edges.values():
            assert order.index(e.source) < order.index(e.target)

    def test_finish_stack(self, diamond_dag):
        steps = list(topological_sort(Graph.from_arrays(*diamond_dag)))
        added = [s.data_structure["added"] for s in steps if "added" in s.data_structure]
        assert added == ["D", "B", "C", "A"]

    def test_tree_edge_visited_after_child_finishes(self, diamond_dag):
        steps = list(topological_sort(Graph.from_arrays(*diamond_dag)))
        explore = [s for s in steps if s.data_structure.get("exploring") == "B"][0]
        assert explore.edge_state("edge-A-B") == EdgeState.CURRENT
        assert steps[-1].edge_state("edge-A-B") == EdgeState.VISITED
        # C→D finds D already visited, so that edge is never followed
        assert steps[-1].edge_state("edge-C-D") == EdgeState.UNVISITED

    def test_parent_current_again_after_child(self, diamond_dag):
        steps = list(topological_sort(Graph.from_arrays(*diamond_dag)))
        finished_b = [s for s in steps if s.data_structure.get("added") == "B"][0]
        after = steps[steps.index(finished_b) + 1]
        assert after.node_state("A") == NodeState.CURRENT

    def test_roots_in_node_order(self):
        nodes = make_nodes("X", "Y", "Z")
        last = list(topological_sort(Graph.from_arrays(nodes, [])))[-1]
        assert last.data_structure["topologicalOrder"] == ["Z", "Y", "X"]
        assert last.nodes_in(NodeState.PATH) == ["X", "Y", "Z"]

    def test_cycle_still_yields_all_nodes(self):
        nodes = make_nodes("A", "B", "C")
        edges = [make_edge("A", "B"), make_edge("B", "C"), make_edge("C", "A")]
        last = list(topological_sort(Graph.from_arrays(nodes, edges)))[-1]
        assert sorted(last.data_structure["topologicalOrder"]) == ["A", "B", "C"]

    def test_deep_chain_does_not_recurse(self):
        ids = [f"n{i}" for i in range(1100)]
        edges = [make_edge(a, b) for a, b in zip(ids, ids[1:])]
        last = list(topological_sort(Graph.from_arrays(make_nodes(*ids), edges)))[-1]
        assert last.data_structure["topologicalOrder"] == ids


class TestHasCycle:
    def test_dag(self, diamond_dag):
        assert not has_cycle(Graph.from_arrays(*diamond_dag))

    def test_cycle(self):
        nodes = make_nodes("A", "B", "C")
        edges = [make_edge("A", "B"), make_edge("B", "C"), make_edge("C", "A")]
        assert has_cycle(Graph.from_arrays(nodes, edges))

    def test_self_loop(self):
        assert has_cycle(Graph.from_arrays(make_nodes("A"), [make_edge("A", "A")]))
