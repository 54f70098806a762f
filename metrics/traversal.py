from collections import deque
from dataclasses import dataclass
from typing import Dict, List

from classes.errors import InvalidVertexReference
from classes.network_graph import Adjacency, VertexId


def bfs_distances(source: VertexId, adjacency: Adjacency) -> Dict[VertexId, int]:
    """
    Hop distance from ``source`` to every vertex reachable along ``adjacency``.
    Unreachable vertices are absent from the result; ``source`` maps to 0.
    """
    if source not in adjacency:
        raise InvalidVertexReference(f"BFS source {source!r} is not in the graph")

    dist = {source: 0}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w in adjacency[v]:
            if w not in dist:
                dist[w] = dist[v] + 1
                queue.append(w)
    return dist


def all_pairs_distances(adjacency: Adjacency) -> Dict[VertexId, Dict[VertexId, int]]:
    """One BFS per vertex, keyed by source in vertex order."""
    return {s: bfs_distances(s, adjacency) for s in adjacency}


@dataclass
class ShortestPathDag:
    """
    Single-source shortest-path structure used by Brandes' algorithm.

    order : vertices in the order BFS discovered them (source first)
    dist  : hop distance of each reached vertex
    sigma : number of shortest paths from the source to each reached vertex
    pred  : predecessors of each reached vertex on some shortest path
    """

    source: VertexId
    order: List[VertexId]
    dist: Dict[VertexId, int]
    sigma: Dict[VertexId, int]
    pred: Dict[VertexId, List[VertexId]]


def shortest_path_dag(source: VertexId, adjacency: Adjacency) -> ShortestPathDag:
    if source not in adjacency:
        raise InvalidVertexReference(f"BFS source {source!r} is not in the graph")

    order = []
    dist = {source: 0}
    sigma = {source: 1}
    pred = {source: []}

    queue = deque([source])
    while queue:
        v = queue.popleft()
        order.append(v)
        for w in adjacency[v]:
            if w not in dist:
                dist[w] = dist[v] + 1
                sigma[w] = 0
                pred[w] = []
                queue.append(w)
            if dist[w] == dist[v] + 1:
                sigma[w] += sigma[v]
                pred[w].append(v)

    return ShortestPathDag(source=source, order=order, dist=dist, sigma=sigma, pred=pred)
