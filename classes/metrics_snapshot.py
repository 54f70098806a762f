from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from classes.heterogeneity_metrics import HeterogeneityMetrics
from classes.metrics_config import MetricsConfig, default_metrics_config
from classes.network_graph import GraphMode, VertexId
from helpers.formatting import format_decimal, format_fraction


@dataclass(frozen=True)
class NodeMetrics:
    vertex: VertexId
    degree: int
    in_degree: int
    out_degree: int
    local_clustering: float
    closeness_raw: Fraction
    closeness_normalized: Fraction
    betweenness_raw: float
    betweenness_normalized: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertex": self.vertex,
            "degree": self.degree,
            "in_degree": self.in_degree,
            "out_degree": self.out_degree,
            "local_clustering": self.local_clustering,
            "closeness_raw": format_fraction(self.closeness_raw),
            "closeness_normalized": format_fraction(self.closeness_normalized),
            "betweenness_raw": self.betweenness_raw,
            "betweenness_normalized": self.betweenness_normalized,
        }


@dataclass(frozen=True)
class MetricsSnapshot:
    """
    Every metric computed for one graph snapshot.

    ``nodes`` follows vertex insertion order. Graph-level path statistics
    only count reachable pairs; ``is_connected`` tells whether that is all
    of them.
    """

    mode: GraphMode
    nodes: Tuple[NodeMetrics, ...]
    vertex_count: int
    edge_count: int
    average_path_length: float
    average_clustering: float
    diameter: int
    reachable_pair_count: int
    all_pairs_count: int
    average_degree: float = 0.0
    max_degree: int = 0
    min_degree: int = 0
    degree_distribution: Optional[Mapping[int, int]] = None
    degree_variance: float = 0.0
    heterogeneity: Optional[HeterogeneityMetrics] = None

    @property
    def is_connected(self) -> bool:
        return self.reachable_pair_count == self.all_pairs_count

    @property
    def is_directed(self) -> bool:
        return self.mode.is_directed

    def node(self, vertex: VertexId) -> NodeMetrics:
        for rec in self.nodes:
            if rec.vertex == vertex:
                return rec
        raise KeyError(f"Unknown vertex: {vertex}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "average_path_length": self.average_path_length,
            "average_clustering": self.average_clustering,
            "diameter": self.diameter,
            "reachable_pair_count": self.reachable_pair_count,
            "all_pairs_count": self.all_pairs_count,
            "is_connected": self.is_connected,
            "average_degree": self.average_degree,
            "max_degree": self.max_degree,
            "min_degree": self.min_degree,
            "degree_distribution": dict(self.degree_distribution or {}),
            "degree_variance": self.degree_variance,
            "heterogeneity": self.heterogeneity.to_dict() if self.heterogeneity else None,
            "nodes": [rec.to_dict() for rec in self.nodes],
        }

    def to_rows(self, config: MetricsConfig = default_metrics_config) -> List[Dict[str, Any]]:
        """
        Display rows, one per vertex. Closeness is rendered as a fraction
        string and the real-valued metrics with ``config.decimals`` places.
        In/out-degree columns only appear for directed graphs.
        """
        rows = []
        for rec in self.nodes:
            row = {"vertex": rec.vertex, "degree": rec.degree}
            if self.is_directed:
                row["in_degree"] = rec.in_degree
                row["out_degree"] = rec.out_degree
            row.update({
                "clustering": format_decimal(rec.local_clustering, config.decimals),
                "closeness": format_fraction(rec.closeness_raw),
                "closeness_normalized": format_fraction(rec.closeness_normalized),
                "betweenness": format_decimal(rec.betweenness_raw, config.decimals),
                "betweenness_normalized": format_decimal(
                    rec.betweenness_normalized, config.decimals
                ),
            })
            rows.append(row)
        return rows

    def to_frame(self, config: MetricsConfig = default_metrics_config) -> pd.DataFrame:
        rows = self.to_rows(config)
        if not rows:
            return pd.DataFrame(columns=["degree"]).rename_axis("vertex")
        return pd.DataFrame(rows).set_index("vertex")

    def summary(self, config: MetricsConfig = default_metrics_config) -> Dict[str, str]:
        """Graph-level values rendered for display."""
        return {
            "mode": self.mode.value,
            "average_path_length": format_decimal(self.average_path_length, config.decimals),
            "average_clustering": format_decimal(self.average_clustering, config.decimals),
            "diameter": str(self.diameter),
            "reachable_pairs": f"{self.reachable_pair_count}/{self.all_pairs_count}",
            "connected": "yes" if self.is_connected else "no",
        }
