from typing import Dict, List, Optional, Tuple, Union

from analysis.analyzer import NetworkAnalyzer
from classes.errors import InvalidVertexReference
from classes.metrics_config import MetricsConfig, default_metrics_config
from classes.metrics_snapshot import MetricsSnapshot
from classes.network_graph import Edge, GraphMode, NetworkGraph, VertexId
from manager.log import dbg, info


def edge_key(a: VertexId, b: VertexId, mode: Union[GraphMode, str]) -> Edge:
    """Canonical edge identity: ordered in directed mode, (min, max) otherwise."""
    if GraphMode.parse(mode).is_directed:
        return (a, b)
    return (a, b) if a < b else (b, a)


class NetworkSession:
    """
    Mutable editing state behind the graph editor.

    Owns the vertex list, the edge set and the mode. Every call to
    ``snapshot()`` builds a fresh immutable NetworkGraph from the current
    state, so metrics never go stale.
    """

    def __init__(
        self,
        node_count: int = 0,
        mode: Union[GraphMode, str] = GraphMode.UNDIRECTED,
        config: Optional[MetricsConfig] = None,
    ):
        self.mode = GraphMode.parse(mode)
        self.config = config if config is not None else default_metrics_config
        self.vertices: List[VertexId] = []
        self._edges: Dict[Edge, None] = {}
        self.create_nodes(node_count)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def create_nodes(self, count: int) -> None:
        """Replace the network with ``count`` unconnected vertices 1..count."""
        if count < 0:
            raise ValueError(f"Node count must be non-negative, got {count}")
        self.vertices = list(range(1, count + 1))
        self._edges = {}
        info(f"[session] Created network with {count} nodes")

    def _require(self, v: VertexId) -> None:
        if v not in self.vertices:
            raise InvalidVertexReference(f"Vertex {v!r} is not in the network")

    def add_edge(self, a: VertexId, b: VertexId) -> bool:
        """
        Add an edge between two existing vertices. Returns False if the
        edge already exists or ``a == b``.
        """
        self._require(a)
        self._require(b)
        if a == b:
            dbg(f"[session] Ignoring self-loop on {a}")
            return False

        key = edge_key(a, b, self.mode)
        if key in self._edges:
            dbg(f"[session] Edge {key} already exists")
            return False
        self._edges[key] = None
        dbg(f"[session] Added edge {key}")
        return True

    def remove_edge(self, a: VertexId, b: VertexId) -> bool:
        key = edge_key(a, b, self.mode)
        if key not in self._edges:
            return False
        del self._edges[key]
        dbg(f"[session] Removed edge {key}")
        return True

    def has_edge(self, a: VertexId, b: VertexId) -> bool:
        return edge_key(a, b, self.mode) in self._edges

    def clear_edges(self) -> None:
        self._edges = {}
        info("[session] Cleared all edges")

    def set_mode(self, mode: Union[GraphMode, str]) -> None:
        """
        Switch mode and re-key every stored edge under the new mode's rule.
        Going undirected collapses reciprocal pairs onto one (min, max) edge.
        """
        mode = GraphMode.parse(mode)
        if mode is self.mode:
            return

        before = len(self._edges)
        rebuilt: Dict[Edge, None] = {}
        for a, b in self._edges:
            rebuilt[edge_key(a, b, mode)] = None
        self._edges = rebuilt
        self.mode = mode
        info(
            f"[session] Switched to {mode.value} mode: "
            f"{before} edges -> {len(rebuilt)} edges"
        )

    def graph(self) -> NetworkGraph:
        return NetworkGraph(self.vertices, self._edges, self.mode, config=self.config)

    def snapshot(self) -> MetricsSnapshot:
        return NetworkAnalyzer(self.graph(), config=self.config).snapshot()
