"""Tests for algorithms/prim.py and algorithms/kruskal.py"""

from algorithms.kruskal import DisjointSet, kruskal
from algorithms.prim import prim
from graph import EdgeState, Graph, NodeState
from helpers import both_ways, make_nodes


def _is_forest(edge_ids, graph):
    dsu = DisjointSet(graph.nodes)
    for eid in edge_ids:
        e = graph.edges[eid]
        if dsu.find(e.source) == dsu.find(e.target):
            return False
        dsu.union(e.source, e.target)
    return True


def _mst_weight(edge_ids, graph):
    return sum(graph.edges[eid].weight for eid in edge_ids)


class TestPrim:
    def test_picks_lightest_crossing_edges(self):
        nodes = make_nodes("A", "B", "C")
        edges = both_ways("A", "B", 1) + both_ways("B", "C", 2) + both_ways("A", "C", 3)
        steps = list(prim(Graph.from_arrays(nodes, edges), "A"))
        assert steps[-1].data_structure == {"visited": ["A", "B", "C"], "mst": ["edge-A-B", "edge-B-C"]}

    def test_step_sequence(self):
        nodes = make_nodes("A", "B")
        steps = list(prim(Graph.from_arrays(nodes, both_ways("A", "B", 1)), "A"))
        assert [s.highlighted_line for s in steps] == [1, 7, 8, 9]
        assert steps[1].node_state("B") == NodeState.CURRENT
        assert steps[1].edge_state("edge-A-B") == EdgeState.PATH
        assert steps[2].node_state("B") == NodeState.VISITED

    def test_tie_goes_to_first_edge(self):
        nodes = make_nodes("A", "B", "C")
        edges = both_ways("A", "C", 1) + both_ways("A", "B", 1)
        steps = list(prim(Graph.from_arrays(nodes, edges), "A"))
        assert steps[-1].data_structure["mst"][0] == "edge-A-C"

    def test_spanning_tree_of_weighted_graph(self, weighted_graph):
        g = Graph.from_arrays(*weighted_graph)
        mst = list(prim(g, "A"))[-1].data_structure["mst"]
        assert len(mst) == 4
        assert _is_forest(mst, g)
        assert _mst_weight(mst, g) == 7

    def test_disconnected_gives_partial_tree(self):
        nodes = make_nodes("A", "B", "C")
        steps = list(prim(Graph.from_arrays(nodes, both_ways("A", "B", 1)), "A"))
        last = steps[-1]
        assert last.data_structure == {"visited": ["A", "B"], "mst": ["edge-A-B"]}
        assert last.node_state("C") == NodeState.UNVISITED
        assert last.nodes_in(NodeState.CURRENT) == []


class TestKruskal:
    def test_mst_has_n_minus_one_acyclic_edges(self, weighted_graph):
        g = Graph.from_arrays(*weighted_graph)
        mst = list(kruskal(g))[-1].data_structure["mst"]
        assert len(mst) == g.node_count() - 1
        assert _is_forest(mst, g)
        assert _mst_weight(mst, g) == 7

    def test_scans_every_edge(self, weighted_graph):
        g = Graph.from_arrays(*weighted_graph)
        steps = list(kruskal(g))
        considered = [s for s in steps if s.highlighted_line == 5]
        assert len(considered) == g.edge_count()
        assert len(steps) == 1 + 2 * g.edge_count()

    def test_sort_is_stable(self):
        nodes = make_nodes("A", "B", "C")
        edges = both_ways("B", "C", 2) + both_ways("A", "B", 2)
        first = next(kruskal(Graph.from_arrays(nodes, edges)))
        assert first.data_structure["sortedEdges"] == ["edge-B-C", "edge-C-B", "edge-A-B", "edge-B-A"]

    def test_reverse_edge_rejected(self):
        nodes = make_nodes("A", "B")
        steps = list(kruskal(Graph.from_arrays(nodes, both_ways("A", "B", 1))))
        assert steps[2].data_structure["addedEdge"] == "edge-A-B"
        assert steps[4].data_structure["skippedEdge"] == "edge-B-A"
        assert steps[4].edge_state("edge-B-A") == EdgeState.VISITED
        assert steps[4].edge_state("edge-A-B") == EdgeState.PATH

    def test_union_links_first_root_under_second(self):
        nodes = make_nodes("A", "B")
        steps = list(kruskal(Graph.from_arrays(nodes, both_ways("A", "B", 1))))
        assert steps[2].data_structure["parent"] == {"A": "B", "B": "B"}

    def test_disjoint_set_compresses_paths(self):
        dsu = DisjointSet(["A", "B", "C", "D"])
        dsu.parent.update({"A": "B", "B": "C", "C": "D"})
        assert dsu.find("A") == "D"
        assert dsu.parent == {"A": "D", "B": "D", "C": "D", "D": "D"}

    def test_forest_on_disconnected_graph(self):
        nodes = make_nodes("A", "B", "C", "D")
        edges = both_ways("A", "B", 1) + both_ways("C", "D", 1)
        last = list(kruskal(Graph.from_arrays(nodes, edges)))[-1]
        assert last.data_structure["mst"] == ["edge-A-B", "edge-C-D"]
