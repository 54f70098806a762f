from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class HeterogeneityMetrics:
    node_degree_het: float = 0.0
    degree_distribution_het: float = 0.0
    clustering_het: float = 0.0
    centrality_het: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "node_degree_het": self.node_degree_het,
            "degree_distribution_het": self.degree_distribution_het,
            "clustering_het": self.clustering_het,
            "centrality_het": self.centrality_het,
        }
