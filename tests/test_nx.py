"""Tests for fwstep.nx NetworkX conversion utilities."""

import math

import networkx as nx
import pytest

from fwstep.algorithms.floyd_warshall import FloydWarshallEngine
from fwstep.nx import NodeMap, from_networkx, to_networkx
from fwstep.types import INF


class TestNodeMap:
    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            NodeMap.from_names(["A", "A"])


class TestFromNetworkx:
    def test_digraph(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=3)
        G.add_edge("B", "C", weight=2)

        matrix, node_map = from_networkx(G)

        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert matrix == [
            [0, 3, INF],
            [INF, 0, 2],
            [INF, INF, 0],
        ]

    def test_undirected_fills_both_directions(self):
        G = nx.Graph()
        G.add_edge(0, 1, weight=5)
        matrix, _ = from_networkx(G)
        assert matrix[0][1] == 5
        assert matrix[1][0] == 5

    def test_multigraph_keeps_minimum(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", weight=9)
        G.add_edge("A", "B", weight=4)
        G.add_edge("A", "B", weight=6)
        matrix, _ = from_networkx(G)
        assert matrix[0][1] == 4

    def test_default_weight_and_custom_attribute(self):
        G = nx.DiGraph()
        G.add_edge("A", "B")
        G.add_edge("B", "A", cost=7)
        matrix, _ = from_networkx(G, weight="cost", default_weight=2)
        assert matrix[0][1] == 2
        assert matrix[1][0] == 7

    def test_self_loops_ignored(self):
        G = nx.DiGraph()
        G.add_edge("A", "A", weight=3)
        matrix, _ = from_networkx(G)
        assert matrix == [[0]]

    def test_explicit_node_order(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=1)
        matrix, node_map = from_networkx(G, nodes=["B", "A"])
        assert node_map.to_index == {"B": 0, "A": 1}
        assert matrix == [[0, INF], [1, 0]]

    def test_node_order_must_cover_graph(self):
        G = nx.DiGraph()
        G.add_edge("A", "B")
        with pytest.raises(ValueError, match="missing graph nodes"):
            from_networkx(G, nodes=["A"])


class TestToNetworkx:
    def test_skips_missing_edges_and_diagonal(self):
        G = to_networkx([[0, 1, None], [math.inf, 0, 2], [INF, INF, 0]])
        assert sorted(G.nodes) == [0, 1, 2]
        assert sorted(G.edges(data="weight")) == [(0, 1, 1), (1, 2, 2)]

    def test_restores_names(self):
        node_map = NodeMap.from_names(["x", "y"])
        G = to_networkx([[0, 4], [INF, 0]], node_map, weight="cost")
        assert list(G.edges(data="cost")) == [("x", "y", 4)]

    def test_round_trip(self, triangle):
        matrix, node_map = from_networkx(to_networkx(triangle))
        assert matrix == triangle
        assert node_map.to_index == {0: 0, 1: 1, 2: 2}


def test_engine_on_networkx_graph():
    G = nx.grid_2d_graph(3, 3)
    for u, v in G.edges:
        G.edges[u, v]["weight"] = 1
    matrix, node_map = from_networkx(G)

    engine = FloydWarshallEngine(matrix)
    engine.run()

    src, dst = node_map.to_index[(0, 0)], node_map.to_index[(2, 2)]
    assert engine.current_distance(src, dst) == 4
    route = [node_map.to_name[i] for i in engine.reconstruct_path(src, dst)]
    assert route[0] == (0, 0)
    assert route[-1] == (2, 2)
    assert len(route) == 5
