from itertools import combinations
from typing import Dict, Mapping

import numpy as np

from classes.network_graph import Adjacency, VertexId


def local_clustering(v: VertexId, adjacency: Adjacency) -> float:
    """
    Fraction of linked pairs among the neighbors of ``v``.
    Vertices with fewer than two neighbors have coefficient 0.
    """
    nbrs = adjacency[v]
    k = len(nbrs)
    if k < 2:
        return 0.0

    linked = 0
    for i, j in combinations(nbrs, 2):
        if j in adjacency[i]:
            linked += 1
    return linked / (k * (k - 1) / 2)


def clustering(adjacency: Adjacency) -> Dict[VertexId, float]:
    """Local clustering coefficient of every vertex (undirected view expected)."""
    return {v: local_clustering(v, adjacency) for v in adjacency}


def average_clustering(C: Mapping[VertexId, float]) -> float:
    if not C:
        return 0.0
    return float(np.mean(list(C.values())))


def clustering_heterogeneity(C: Mapping[VertexId, float]) -> float:
    """
    Clustering heterogeneity:
    H = (1/N) * sum_i (C_i - mean(C))^2
    """
    if not C:
        return 0.0
    values = np.array(list(C.values()), dtype=float)
    mean = values.mean()
    return float(np.mean((values - mean)**2))    # variance
