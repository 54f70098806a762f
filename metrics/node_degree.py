import math
from collections import Counter
from typing import Dict, Mapping, Tuple

import numpy as np

from classes.network_graph import NetworkGraph, VertexId


def degrees(graph: NetworkGraph) -> Dict[VertexId, int]:
    """Direction-agnostic degree: size of each vertex's undirected neighbor set."""
    adj = graph.undirected_adjacency()
    return {v: len(adj[v]) for v in adj}


def in_out_degrees(graph: NetworkGraph) -> Tuple[Dict[VertexId, int], Dict[VertexId, int]]:
    """
    (in_degree, out_degree) per vertex. Counted along edge direction in
    directed mode; both equal the plain degree in undirected mode.
    """
    if not graph.is_directed:
        deg = degrees(graph)
        return dict(deg), dict(deg)

    in_deg = dict.fromkeys(graph.vertex_ids(), 0)
    out_deg = dict.fromkeys(graph.vertex_ids(), 0)
    for u, v in graph.edges():
        out_deg[u] += 1
        in_deg[v] += 1
    return in_deg, out_deg


def node_degree_var(deg: Mapping[VertexId, int]) -> float:
    if not deg:
        return 0.0
    degs = np.array(list(deg.values()), dtype=float)
    return float(np.mean((degs - degs.mean())**2))


def degree_distribution_var(deg: Mapping[VertexId, int]):
    """
    Compute the normalized heterogeneity measure H_m
    Returns (H_m, h, h2).
    """
    N = len(deg)
    if N == 0:
        return 0.0, 0.0, 0.0

    counts = Counter(deg.values())
    Pk_vals = [c / N for c in counts.values()]

    h2 = (1.0 / N) * sum(p * (1.0 - p)**2 for p in Pk_vals)
    h = math.sqrt(h2)

    h_het2 = 1.0 - 3.0 / N + (N + 2.0) / (N**3)
    h_het = math.sqrt(h_het2) if h_het2 > 0 else 0.0

    # H_m = h / h_het
    Hm = h / h_het if h_het > 0 else 0.0
    return Hm, h, h2


def degree_statistics(deg: Mapping[VertexId, int]) -> Dict[str, object]:
    """Graph-level summary of a degree map."""
    if not deg:
        return {
            "average_degree": 0.0,
            "max_degree": 0,
            "min_degree": 0,
            "degree_distribution": {},
            "degree_variance": 0.0,
        }

    values = list(deg.values())
    return {
        "average_degree": float(np.mean(values)),
        "max_degree": max(values),
        "min_degree": min(values),
        "degree_distribution": dict(sorted(Counter(values).items())),
        "degree_variance": node_degree_var(deg),
    }
