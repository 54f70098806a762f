from fractions import Fraction
from typing import Dict, Mapping, Tuple

import numpy as np

from classes.network_graph import Adjacency, VertexId
from metrics.traversal import shortest_path_dag


def _variance(values):
    values = np.asarray(values, dtype=float)
    if len(values) == 0:
        return 0.0
    mean = values.mean()
    return float(np.mean((values - mean) ** 2))


def closeness_centrality(
    dist: Mapping[VertexId, int],
    vertex_count: int,
) -> Tuple[Fraction, Fraction]:
    """
    Exact closeness of one source from its BFS distances.

    raw = 1/S and normalized = R / ((V-1) * S), where S is the distance sum
    over the R vertices reachable from the source. A source that reaches
    nothing gets 0/1 for both.
    """
    others = [d for d in dist.values() if d > 0]
    S = sum(others)
    if S == 0:
        return Fraction(0), Fraction(0)
    R = len(others)
    return Fraction(1, S), Fraction(R, max(vertex_count - 1, 1) * S)


def closeness_centralities(
    distances: Mapping[VertexId, Mapping[VertexId, int]],
) -> Dict[VertexId, Tuple[Fraction, Fraction]]:
    n = len(distances)
    return {v: closeness_centrality(dist, n) for v, dist in distances.items()}


def source_dependencies(source: VertexId, adjacency: Adjacency) -> Dict[VertexId, float]:
    """
    Dependency of ``source`` on every vertex it reaches, accumulated in
    reverse BFS order. The source's own entry is included.
    """
    dag = shortest_path_dag(source, adjacency)
    sigma = dag.sigma
    delta = dict.fromkeys(dag.order, 0.0)

    stack = list(dag.order)
    while stack:
        w = stack.pop()
        for v in dag.pred[w]:
            delta[v] += (sigma[v] / sigma[w]) * (1 + delta[w])
    return delta


def raw_betweenness(adjacency: Adjacency, directed: bool) -> Dict[VertexId, float]:
    """
    Brandes algorithm on an unweighted graph given as an ``Adjacency``.
    Undirected totals are halved since every pair is seen from both ends.
    """
    BC = dict.fromkeys(adjacency, 0.0)

    for s in adjacency:
        delta = source_dependencies(s, adjacency)
        for w, d in delta.items():
            if w != s:
                BC[w] += d

    if not directed:
        for v in BC:
            BC[v] /= 2
    return BC


def betweenness_scale(vertex_count: int, directed: bool) -> float:
    if vertex_count <= 2:
        return 0.0
    pairs = (vertex_count - 1) * (vertex_count - 2)
    return 1 / pairs if directed else 2 / pairs


def betweenness_centrality(
    adjacency: Adjacency,
    directed: bool,
) -> Tuple[Dict[VertexId, float], Dict[VertexId, float]]:
    """Returns (raw, normalized) betweenness per vertex."""
    raw = raw_betweenness(adjacency, directed)
    scale = betweenness_scale(len(adjacency), directed)
    normalized = {v: b * scale for v, b in raw.items()}
    return raw, normalized


def betweenness_centrality_heterogeneity(BC: Mapping[VertexId, float]) -> float:
    """Variance of the betweenness values."""
    return _variance(list(BC.values()))
