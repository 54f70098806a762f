"""
analyzer.py

High-level interface for computing structural metrics on a NetworkGraph.
This module wraps together the low-level metric functions defined in the
`metrics` package and exposes them through a single unified class, plus
the `compute_metrics` entry point that turns raw vertex/edge lists into a
complete MetricsSnapshot.
"""

from typing import Dict, Iterable, Optional, Union

from classes.heterogeneity_metrics import HeterogeneityMetrics
from classes.metrics_config import MetricsConfig, default_metrics_config
from classes.metrics_snapshot import MetricsSnapshot, NodeMetrics
from classes.network_graph import Edge, GraphMode, NetworkGraph, VertexId
from manager.log import dbg, info
from metrics.centrality import (
    betweenness_centrality,
    betweenness_centrality_heterogeneity,
    closeness_centralities,
)
from metrics.clustering import (
    average_clustering,
    clustering,
    clustering_heterogeneity,
)
from metrics.node_degree import (
    degree_distribution_var,
    degree_statistics,
    degrees,
    in_out_degrees,
    node_degree_var,
)
from metrics.paths import PathStatistics, path_statistics
from metrics.traversal import all_pairs_distances


class NetworkAnalyzer:
    """
    Analyze the structure of one immutable NetworkGraph.

    Parameters
    ----------
    graph : NetworkGraph
        The graph to analyze.
    config : MetricsConfig, optional
        Controls whether the heterogeneity summary is computed.
    """

    def __init__(self, graph: NetworkGraph, config: Optional[MetricsConfig] = None):
        self.graph = graph
        self.config = config if config is not None else default_metrics_config

    # Metric groups

    def degree_metrics(self) -> Dict[str, object]:
        """Per-vertex degree, in/out-degree and the degree summary."""
        deg = degrees(self.graph)
        in_deg, out_deg = in_out_degrees(self.graph)
        return {
            "degree": deg,
            "in_degree": in_deg,
            "out_degree": out_deg,
            **degree_statistics(deg),
        }

    def clustering_metrics(self) -> Dict[str, object]:
        """Local clustering on the undirected view, and its mean."""
        C = clustering(self.graph.undirected_adjacency())
        return {
            "local_clustering": C,
            "average_clustering": average_clustering(C),
        }

    def path_metrics(self, distances=None) -> PathStatistics:
        if distances is None:
            distances = all_pairs_distances(self.graph.directed_adjacency())
        return path_statistics(distances, self.graph.is_directed)

    def centrality_metrics(self, distances=None) -> Dict[str, object]:
        """Closeness from BFS distances and Brandes betweenness."""
        if distances is None:
            distances = all_pairs_distances(self.graph.directed_adjacency())
        bc_raw, bc_norm = betweenness_centrality(
            self.graph.directed_adjacency(), self.graph.is_directed
        )
        return {
            "closeness": closeness_centralities(distances),
            "betweenness_raw": bc_raw,
            "betweenness_normalized": bc_norm,
        }

    def snapshot(self) -> MetricsSnapshot:
        """Compute every metric group and assemble a MetricsSnapshot."""
        G = self.graph
        dbg(
            f"[metrics] Computing snapshot: mode={G.mode().value}, "
            f"vertices={G.vertex_count()}, edges={G.edge_count()}"
        )

        deg = self.degree_metrics()
        clust = self.clustering_metrics()
        distances = all_pairs_distances(G.directed_adjacency())
        paths = self.path_metrics(distances)
        cent = self.centrality_metrics(distances)

        nodes = tuple(
            NodeMetrics(
                vertex=v,
                degree=deg["degree"][v],
                in_degree=deg["in_degree"][v],
                out_degree=deg["out_degree"][v],
                local_clustering=clust["local_clustering"][v],
                closeness_raw=cent["closeness"][v][0],
                closeness_normalized=cent["closeness"][v][1],
                betweenness_raw=cent["betweenness_raw"][v],
                betweenness_normalized=cent["betweenness_normalized"][v],
            )
            for v in G.vertex_ids()
        )

        heterogeneity = None
        if self.config.compute_heterogeneity:
            Hm, _, _ = degree_distribution_var(deg["degree"])
            heterogeneity = HeterogeneityMetrics(
                node_degree_het=node_degree_var(deg["degree"]),
                degree_distribution_het=Hm,
                clustering_het=clustering_heterogeneity(clust["local_clustering"]),
                centrality_het=betweenness_centrality_heterogeneity(
                    cent["betweenness_normalized"]
                ),
            )

        snap = MetricsSnapshot(
            mode=G.mode(),
            nodes=nodes,
            vertex_count=G.vertex_count(),
            edge_count=G.edge_count(),
            average_path_length=paths.average_path_length,
            average_clustering=clust["average_clustering"],
            diameter=paths.diameter,
            reachable_pair_count=paths.reachable_pair_count,
            all_pairs_count=paths.all_pairs_count,
            average_degree=deg["average_degree"],
            max_degree=deg["max_degree"],
            min_degree=deg["min_degree"],
            degree_distribution=deg["degree_distribution"],
            degree_variance=deg["degree_variance"],
            heterogeneity=heterogeneity,
        )

        info(
            f"[metrics] Snapshot ready: APL={snap.average_path_length:.3f}, "
            f"diameter={snap.diameter}, avg_clustering={snap.average_clustering:.3f}, "
            f"reachable={snap.reachable_pair_count}/{snap.all_pairs_count}"
        )
        return snap


def compute_metrics(
    vertices: Iterable[VertexId],
    edges: Iterable[Edge],
    mode: Union[GraphMode, str] = GraphMode.UNDIRECTED,
    config: Optional[MetricsConfig] = None,
) -> MetricsSnapshot:
    """
    Build an immutable graph from raw vertex/edge lists and compute its
    full metrics snapshot. Nothing is cached between calls.
    """
    graph = NetworkGraph(vertices, edges, mode, config=config)
    return NetworkAnalyzer(graph, config=config).snapshot()
