"""
Heap-based DijkstraEngine implementation.

Drives the engine's own PriorityQueue/Heap to compute single-source shortest
paths over any Graph implementation. Only non-negative weights are
supported; edges without a weight are never traversed.
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional, Tuple, TypeVar

from algorithms import DijkstraEngine
from graph import Graph
from priority_queue import PriorityQueue
from settings import QueueStrategy, get_settings
from vertices import Edge, PathMap, Vertex, Visit

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine[T]):
    """
    Single-source Dijkstra over a PriorityQueue of vertices.

    The solve records, per reached vertex, only the cheapest edge arriving at
    it (a Visit). Distances are never stored: they are recomputed by walking
    predecessor edges back to the source, which keeps the output a small
    sparse map that any number of route/distance queries can reuse.

    Complexity:
        O(E log V) heap operations over the vertices reachable from the
        source; with the LIVE strategy each comparison also walks two
        predecessor chains.
    """

    def __init__(self, graph: Graph[T], strategy: Optional[QueueStrategy] = None) -> None:
        self._graph = graph
        self._strategy = strategy

    @property
    def graph(self) -> Graph[T]:
        return self._graph

    @property
    def strategy(self) -> QueueStrategy:
        """Explicit strategy if one was given, else the configured default."""
        if self._strategy is not None:
            return self._strategy
        return get_settings().solver.queue_strategy

    # --- Solving -------------------------------------------------------------

    def shortest_path_from(self, source: Vertex[T]) -> PathMap:
        """
        Compute the predecessor map for every vertex reachable from source.

        Each call builds its own queue and path map, so a graph can be
        solved from several sources without interference.
        """
        strategy = self.strategy
        if source not in self._graph:
            logger.warning("Solving from a vertex the graph does not contain: %s", source)
        logger.debug("Solving shortest paths from %s (strategy=%s)", source, strategy.value)

        if strategy is QueueStrategy.LAZY:
            paths, pops, relaxations = self._solve_lazy(source)
        else:
            paths, pops, relaxations = self._solve_live(source)

        logger.debug(
            "Solved from %s: %d reached, %d dequeued, %d relaxations",
            source,
            len(paths),
            pops,
            relaxations,
        )
        return paths

    def _solve_live(self, source: Vertex[T]) -> Tuple[PathMap, int, int]:
        paths: PathMap = {source: Visit.start()}
        # The comparator reads paths as it is at comparison time, so a vertex's
        # priority tracks relaxations made after it was enqueued. Improved
        # vertices are simply enqueued again; there is no decrease-key.
        queue: PriorityQueue[Vertex[T]] = PriorityQueue(
            sort=lambda a, b: self.distance(a, paths) < self.distance(b, paths)
        )
        queue.enqueue(source)
        pops = relaxations = 0

        while not queue.is_empty:
            vertex = queue.dequeue()
            pops += 1
            for edge in self._graph.edges(vertex):
                if edge.weight is None:
                    continue
                if (
                    edge.destination not in paths
                    or self.distance(vertex, paths) + edge.weight
                    < self.distance(edge.destination, paths)
                ):
                    paths[edge.destination] = Visit.via(edge)
                    queue.enqueue(edge.destination)
                    relaxations += 1

        return paths, pops, relaxations

    def _solve_lazy(self, source: Vertex[T]) -> Tuple[PathMap, int, int]:
        paths: PathMap = {source: Visit.start()}
        dist: Dict[Vertex[T], float] = {source: 0.0}
        # seq breaks distance ties in insertion order so vertices are never compared
        seq = itertools.count()
        queue: PriorityQueue[Tuple[float, int, Vertex[T]]] = PriorityQueue(
            sort=lambda a, b: (a[0], a[1]) < (b[0], b[1])
        )
        queue.enqueue((0.0, next(seq), source))
        pops = relaxations = 0

        while not queue.is_empty:
            d_u, _, vertex = queue.dequeue()
            pops += 1
            # Skip outdated entries
            if d_u > dist[vertex]:
                continue

            for edge in self._graph.edges(vertex):
                if edge.weight is None:
                    continue
                alt = d_u + edge.weight
                if edge.destination not in dist or alt < dist[edge.destination]:
                    dist[edge.destination] = alt
                    paths[edge.destination] = Visit.via(edge)
                    queue.enqueue((alt, next(seq), edge.destination))
                    relaxations += 1

        return paths, pops, relaxations

    # --- Queries over a solve ------------------------------------------------

    def shortest_path_to(self, destination: Vertex[T], paths: PathMap) -> List[Edge[T]]:
        return self.route(destination, paths)

    def route(self, destination: Vertex[T], paths: PathMap) -> List[Edge[T]]:
        """
        Walk predecessor edges from destination back to the source.

        Stops at the START visit or at a vertex with no entry, so an
        unreachable destination yields an empty route.
        """
        path: List[Edge[T]] = []
        vertex = destination
        visit = paths.get(vertex)
        while visit is not None and not visit.is_start:
            path.append(visit.edge)
            vertex = visit.edge.source
            visit = paths.get(vertex)
        path.reverse()
        return path

    def distance(self, destination: Vertex[T], paths: PathMap) -> float:
        return self.path_cost(self.route(destination, paths))

    def get_all_shortest_paths(self, source: Vertex[T]) -> Dict[Vertex[T], List[Edge[T]]]:
        paths = self.shortest_path_from(source)
        return {vertex: self.route(vertex, paths) for vertex in self._graph.vertices}

    def get_all_distances(self, source: Vertex[T]) -> Dict[Vertex[T], float]:
        """
        Cost from source to every reachable vertex, from one solve.

        Unreachable vertices are absent rather than reported as 0.0.
        """
        paths = self.shortest_path_from(source)
        return {vertex: self.distance(vertex, paths) for vertex in paths}
