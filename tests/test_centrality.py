from fractions import Fraction

import networkx as nx
import pytest

from classes.network_graph import NetworkGraph
from metrics.centrality import (
    betweenness_centrality,
    betweenness_centrality_heterogeneity,
    betweenness_scale,
    closeness_centralities,
    closeness_centrality,
    source_dependencies,
)
from metrics.traversal import all_pairs_distances, bfs_distances


def from_networkx(nxG):
    mode = "directed" if nxG.is_directed() else "undirected"
    return NetworkGraph(list(nxG.nodes), list(nxG.edges), mode)


class TestCloseness:
    def test_path_graph(self):
        G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3)])
        C = closeness_centralities(all_pairs_distances(G.directed_adjacency()))
        assert C[1] == (Fraction(1, 3), Fraction(1, 3))
        assert C[2] == (Fraction(1, 2), Fraction(1, 2))

    def test_isolated_vertex_is_zero_over_one(self):
        raw, norm = closeness_centrality({7: 0}, 5)
        assert raw == Fraction(0, 1)
        assert norm == Fraction(0, 1)
        assert raw.denominator == 1

    def test_single_vertex_graph(self):
        raw, norm = closeness_centrality({1: 0}, 1)
        assert (raw, norm) == (Fraction(0), Fraction(0))

    def test_partial_reach_normalization(self):
        # two reachable vertices at distances 1 and 2 out of 4 others
        raw, norm = closeness_centrality({1: 0, 2: 1, 3: 2}, 5)
        assert raw == Fraction(1, 3)
        assert norm == Fraction(2, 4 * 3)

    def test_directed_follows_out_edges(self):
        G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3)], "directed")
        C = closeness_centralities(all_pairs_distances(G.directed_adjacency()))
        assert C[2] == (Fraction(1, 1), Fraction(1, 2))
        assert C[3] == (Fraction(0), Fraction(0))

    def test_raw_agrees_with_networkx_on_connected_graph(self):
        nxG = nx.convert_node_labels_to_integers(nx.petersen_graph(), first_label=1)
        G = from_networkx(nxG)
        C = closeness_centralities(all_pairs_distances(G.directed_adjacency()))
        expected = nx.closeness_centrality(nxG)
        n = G.vertex_count()
        for v, (raw, norm) in C.items():
            assert float(raw) * (n - 1) == pytest.approx(expected[v])
            # every vertex reaches all others, so R = V - 1
            assert norm == raw


class TestBetweenness:
    def test_path_graph(self):
        G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3)])
        raw, norm = betweenness_centrality(G.directed_adjacency(), directed=False)
        assert raw == {1: 0.0, 2: 1.0, 3: 0.0}
        assert norm == {1: 0.0, 2: 1.0, 3: 0.0}

    def test_triangle_is_zero(self):
        G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3), (1, 3)])
        raw, norm = betweenness_centrality(G.directed_adjacency(), directed=False)
        assert set(raw.values()) == {0.0}
        assert set(norm.values()) == {0.0}

    def test_directed_path(self):
        G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3)], "directed")
        raw, norm = betweenness_centrality(G.directed_adjacency(), directed=True)
        assert raw[2] == 1.0
        assert norm[2] == pytest.approx(0.5)
        assert raw[1] == raw[3] == 0.0

    def test_star_center(self):
        G = NetworkGraph([1, 2, 3, 4], [(1, 2), (1, 3), (1, 4)])
        raw, norm = betweenness_centrality(G.directed_adjacency(), directed=False)
        assert raw[1] == pytest.approx(3.0)
        assert norm[1] == pytest.approx(1.0)

    def test_split_paths_share_credit(self):
        G = NetworkGraph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4), (4, 1)])
        raw, _ = betweenness_centrality(G.directed_adjacency(), directed=False)
        assert raw == pytest.approx({1: 0.5, 2: 0.5, 3: 0.5, 4: 0.5})

    @pytest.mark.parametrize("seed", [1, 2, 3])
    @pytest.mark.parametrize("directed", [False, True])
    def test_matches_networkx(self, seed, directed):
        nxG = nx.convert_node_labels_to_integers(
            nx.gnp_random_graph(12, 0.3, seed=seed, directed=directed), first_label=1
        )
        G = from_networkx(nxG)
        raw, norm = betweenness_centrality(G.directed_adjacency(), directed)
        expected_raw = nx.betweenness_centrality(nxG, normalized=False)
        expected_norm = nx.betweenness_centrality(nxG, normalized=True)
        for v in G.vertex_ids():
            assert raw[v] >= 0.0
            assert raw[v] == pytest.approx(expected_raw[v])
            assert norm[v] == pytest.approx(expected_norm[v])

    def test_dependency_conservation(self):
        nxG = nx.convert_node_labels_to_integers(
            nx.gnp_random_graph(10, 0.3, seed=11, directed=True), first_label=1
        )
        G = from_networkx(nxG)
        adj = G.directed_adjacency()
        for s in G.vertex_ids():
            delta = source_dependencies(s, adj)
            dist = bfs_distances(s, adj)
            total = sum(d for w, d in delta.items() if w != s)
            assert total == pytest.approx(sum(d - 1 for t, d in dist.items() if t != s))

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_scale_guards_small_graphs(self, n):
        assert betweenness_scale(n, directed=True) == 0.0
        assert betweenness_scale(n, directed=False) == 0.0

    def test_scale(self):
        assert betweenness_scale(4, directed=True) == pytest.approx(1 / 6)
        assert betweenness_scale(4, directed=False) == pytest.approx(2 / 6)

    def test_heterogeneity(self):
        assert betweenness_centrality_heterogeneity({}) == 0.0
        assert betweenness_centrality_heterogeneity({1: 0.0, 2: 1.0, 3: 0.0}) == pytest.approx(2 / 9)
