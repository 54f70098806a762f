from dataclasses import dataclass
from typing import Dict, Mapping

from classes.network_graph import VertexId


@dataclass(frozen=True)
class PathStatistics:
    average_path_length: float
    diameter: int
    reachable_pair_count: int
    all_pairs_count: int

    @property
    def is_connected(self) -> bool:
        return self.reachable_pair_count == self.all_pairs_count


def all_pairs_count(vertex_count: int, directed: bool) -> int:
    if vertex_count < 2:
        return 0
    pairs = vertex_count * (vertex_count - 1)
    return pairs if directed else pairs // 2


def path_statistics(
    distances: Mapping[VertexId, Mapping[VertexId, int]],
    directed: bool,
) -> PathStatistics:
    """
    Aggregate per-source BFS distances into average path length and diameter.

    Directed graphs count every reachable ordered pair once. Undirected
    graphs count each unordered pair once: only targets discovered after the
    source in vertex order contribute.
    """
    rank: Dict[VertexId, int] = {v: i for i, v in enumerate(distances)}

    total = 0
    count = 0
    diameter = 0
    for s, dist in distances.items():
        for t, d in dist.items():
            if t == s:
                continue
            if not directed and rank[t] < rank[s]:
                continue
            total += d
            count += 1
            if d > diameter:
                diameter = d

    return PathStatistics(
        average_path_length=total / count if count else 0.0,
        diameter=diameter,
        reachable_pair_count=count,
        all_pairs_count=all_pairs_count(len(distances), directed),
    )
