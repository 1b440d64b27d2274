"""Shared graph fixtures.  Every fixture returns fresh (nodes, edges) lists."""

import pytest

from helpers import both_ways, make_edge, make_nodes


@pytest.fixture
def four_cycle():
    """Undirected 1-2-3-4-1."""
    nodes = make_nodes("1", "2", "3", "4")
    edges = both_ways("1", "2") + both_ways("2", "3") + both_ways("3", "4") + both_ways("4", "1")
    return nodes, edges


@pytest.fixture
def detour_triangle():
    """A-B costs 4 directly but 2 through C."""
    nodes = make_nodes("A", "B", "C")
    edges = both_ways("A", "B", 4) + both_ways("A", "C", 1) + both_ways("C", "B", 1)
    return nodes, edges


@pytest.fixture
def weighted_graph():
    """Small connected undirected graph with distinct weights."""
    nodes = make_nodes("A", "B", "C", "D", "E")
    edges = (
        both_ways("A", "B", 2)
        + both_ways("A", "C", 5)
        + both_ways("B", "C", 1)
        + both_ways("B", "D", 4)
        + both_ways("C", "E", 3)
        + both_ways("D", "E", 1)
    )
    return nodes, edges


@pytest.fixture
def diamond_dag():
    """A→B, A→C, B→D, C→D."""
    nodes = make_nodes("A", "B", "C", "D")
    edges = [make_edge("A", "B"), make_edge("A", "C"), make_edge("B", "D"), make_edge("C", "D")]
    return nodes, edges


@pytest.fixture
def scc_graph():
    """Components {A, B}, {C, D} and the singleton {E}."""
    nodes = make_nodes("A", "B", "C", "D", "E")
    edges = [
        make_edge("A", "B"),
        make_edge("B", "A"),
        make_edge("B", "C"),
        make_edge("C", "D"),
        make_edge("D", "C"),
        make_edge("D", "E"),
    ]
    return nodes, edges
