import pytest

from classes.network_graph import NetworkGraph
from metrics.node_degree import (
    degree_distribution_var,
    degree_statistics,
    degrees,
    in_out_degrees,
    node_degree_var,
)


def test_degree_is_direction_agnostic():
    G = NetworkGraph([1, 2, 3], [(1, 2), (2, 1), (3, 2)], "directed")
    assert degrees(G) == {1: 1, 2: 2, 3: 1}


def test_in_out_degrees_directed():
    G = NetworkGraph([1, 2, 3], [(1, 2), (2, 3)], "directed")
    in_deg, out_deg = in_out_degrees(G)
    assert in_deg == {1: 0, 2: 1, 3: 1}
    assert out_deg == {1: 1, 2: 1, 3: 0}


def test_reciprocal_edges_count_twice_in_in_out():
    G = NetworkGraph([1, 2], [(1, 2), (2, 1)], "directed")
    in_deg, out_deg = in_out_degrees(G)
    assert degrees(G) == {1: 1, 2: 1}
    assert in_deg[1] + out_deg[1] == 2


def test_in_out_equal_degree_when_undirected():
    G = NetworkGraph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 1), (1, 4)])
    deg = degrees(G)
    in_deg, out_deg = in_out_degrees(G)
    assert in_deg == out_deg == deg


def test_degree_statistics():
    deg = {1: 3, 2: 1, 3: 1, 4: 1}
    stats = degree_statistics(deg)
    assert stats["average_degree"] == pytest.approx(1.5)
    assert stats["max_degree"] == 3
    assert stats["min_degree"] == 1
    assert stats["degree_distribution"] == {1: 3, 3: 1}
    assert stats["degree_variance"] == pytest.approx(0.75)


def test_degree_statistics_empty():
    stats = degree_statistics({})
    assert stats["average_degree"] == 0.0
    assert stats["degree_distribution"] == {}
    assert node_degree_var({}) == 0.0


def test_degree_distribution_var_regular_graph_is_zero():
    Hm, h, h2 = degree_distribution_var({1: 2, 2: 2, 3: 2, 4: 2})
    assert Hm == 0.0
    assert h == 0.0


def test_degree_distribution_var_is_bounded():
    Hm, _, _ = degree_distribution_var({1: 1, 2: 2, 3: 3, 4: 4, 5: 5})
    assert 0.0 < Hm <= 1.0 + 1e-9
