from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

import networkx as nx

from classes.errors import InvalidVertexId, InvalidVertexReference, SelfLoopError
from classes.metrics_config import MetricsConfig, default_metrics_config
from manager.log import dbg, warn

VertexId = int
Edge = Tuple[VertexId, VertexId]


class GraphMode(str, Enum):
    UNDIRECTED = "undirected"
    DIRECTED = "directed"

    @property
    def is_directed(self) -> bool:
        return self is GraphMode.DIRECTED

    @classmethod
    def parse(cls, value: Union["GraphMode", str]) -> "GraphMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown graph mode: {value!r}") from None


@dataclass(frozen=True)
class Adjacency:
    """
    Neighbor lists keyed by vertex, in vertex insertion order.

    ``vertices`` fixes iteration order; ``neighbor_lists[v]`` holds the
    neighbors of ``v`` in edge insertion order.
    """

    vertices: Tuple[VertexId, ...]
    neighbor_lists: Mapping[VertexId, Tuple[VertexId, ...]]

    @classmethod
    def from_networkx(cls, G: nx.Graph, vertices: Tuple[VertexId, ...]) -> "Adjacency":
        lists = nx.to_dict_of_lists(G, nodelist=vertices)
        return cls(
            vertices=vertices,
            neighbor_lists=MappingProxyType({v: tuple(lists[v]) for v in vertices}),
        )

    def __getitem__(self, v: VertexId) -> Tuple[VertexId, ...]:
        return self.neighbor_lists[v]

    def __contains__(self, v) -> bool:
        return v in self.neighbor_lists

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        """Number of directed arcs (an undirected edge counts twice)."""
        return sum(len(nbrs) for nbrs in self.neighbor_lists.values())


def _check_vertex_id(v) -> VertexId:
    if isinstance(v, bool) or not isinstance(v, Integral) or v <= 0:
        raise InvalidVertexId(f"Vertex ids must be positive integers, got {v!r}")
    return int(v)


class NetworkGraph:
    """
    Immutable graph snapshot: vertex ids, a deduplicated edge set and a mode.

    Parameters
    ----------
    vertices : iterable of int
        Positive integer vertex ids. Repeated ids collapse onto the first.
    edges : iterable of (int, int)
        Raw edge list. In undirected mode (a, b) and (b, a) are the same
        edge; in directed mode they are distinct.
    mode : GraphMode or str
        ``"undirected"`` or ``"directed"``.
    config : MetricsConfig, optional
        Decides whether dangling edges and self-loops are dropped or rejected.
    """

    def __init__(
        self,
        vertices: Iterable[VertexId],
        edges: Iterable[Edge] = (),
        mode: Union[GraphMode, str] = GraphMode.UNDIRECTED,
        config: Optional[MetricsConfig] = None,
    ):
        config = config if config is not None else default_metrics_config
        self._mode = GraphMode.parse(mode)

        G = nx.DiGraph() if self._mode.is_directed else nx.Graph()
        for v in vertices:
            G.add_node(_check_vertex_id(v))

        dropped = 0
        for a, b in edges:
            if a not in G or b not in G:
                msg = f"[graph] Edge ({a!r}, {b!r}) references a vertex outside the vertex set"
                if config.dangling_edges == "reject":
                    raise InvalidVertexReference(msg)
                warn(f"{msg}, dropping it")
                dropped += 1
                continue
            if a == b:
                msg = f"[graph] Self-loop on vertex {a!r}"
                if config.self_loops == "reject":
                    raise SelfLoopError(msg)
                warn(f"{msg}, dropping it")
                dropped += 1
                continue
            G.add_edge(int(a), int(b))

        self._G = nx.freeze(G)
        self._vertices: Tuple[VertexId, ...] = tuple(G.nodes)
        self._directed_adj = Adjacency.from_networkx(G, self._vertices)
        if self._mode.is_directed:
            self._undirected_adj = Adjacency.from_networkx(G.to_undirected(), self._vertices)
        else:
            self._undirected_adj = self._directed_adj

        dbg(
            f"[graph] Built {self._mode.value} graph: "
            f"{len(self._vertices)} vertices, {G.number_of_edges()} edges, {dropped} dropped"
        )

    def __repr__(self):
        return (
            f"NetworkGraph(mode={self._mode.value}, "
            f"vertices={len(self._vertices)}, edges={self.edge_count()})"
        )

    def mode(self) -> GraphMode:
        return self._mode

    @property
    def is_directed(self) -> bool:
        return self._mode.is_directed

    def vertex_ids(self) -> Tuple[VertexId, ...]:
        return self._vertices

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return self._G.number_of_edges()

    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._G.edges())

    def __contains__(self, v) -> bool:
        return v in self._directed_adj

    def _require(self, v: VertexId) -> None:
        if v not in self._directed_adj:
            raise InvalidVertexReference(f"Vertex {v!r} is not in the graph")

    def neighbors(self, v: VertexId, directed: bool) -> Tuple[VertexId, ...]:
        """
        Neighbors of ``v``. With ``directed=True`` follow edge direction
        (symmetric in undirected mode); otherwise every edge counts both ways.
        """
        self._require(v)
        if directed:
            return self._directed_adj[v]
        return self._undirected_adj[v]

    def directed_adjacency(self) -> Adjacency:
        return self._directed_adj

    def undirected_adjacency(self) -> Adjacency:
        return self._undirected_adj

    def in_degree(self, v: VertexId) -> int:
        self._require(v)
        if self._mode.is_directed:
            return self._G.in_degree(v)
        return len(self._undirected_adj[v])

    def out_degree(self, v: VertexId) -> int:
        self._require(v)
        if self._mode.is_directed:
            return self._G.out_degree(v)
        return len(self._undirected_adj[v])

    def to_networkx(self) -> nx.Graph:
        """Frozen networkx copy of the graph (``nx.DiGraph`` in directed mode)."""
        return nx.freeze(self._G.copy())
