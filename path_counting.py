"""
Exhaustive simple-path enumeration.

Depth-first backtracking over a Graph: every path that never revisits a
vertex is explored. Exponential in the worst case, so only meant for small
graphs, where it doubles as a brute-force reference for shortest paths.
"""

from typing import Iterator, List, Set, TypeVar

from graph import Graph
from vertices import Edge, Vertex

T = TypeVar("T")


def simple_paths(
    graph: Graph[T], source: Vertex[T], destination: Vertex[T]
) -> Iterator[List[Edge[T]]]:
    """
    Yield every simple path source -> destination as a list of edges.

    Edges without a weight are not traversed. When source == destination a
    single empty path is yielded.
    """
    visited: Set[Vertex[T]] = set()
    trail: List[Edge[T]] = []

    def walk(vertex: Vertex[T]) -> Iterator[List[Edge[T]]]:
        visited.add(vertex)
        if vertex == destination:
            yield list(trail)
        else:
            for edge in graph.edges(vertex):
                if edge.weight is None or edge.destination in visited:
                    continue
                trail.append(edge)
                yield from walk(edge.destination)
                trail.pop()
        # Un-mark so other branches may pass through this vertex.
        visited.discard(vertex)

    yield from walk(source)


def number_of_paths(graph: Graph[T], source: Vertex[T], destination: Vertex[T]) -> int:
    """
    Count simple paths from source to destination, ignoring weights.

    Unlike simple_paths this follows weightless edges too, since it only
    asks whether a connection exists.
    """
    visited: Set[Vertex[T]] = set()

    def count(vertex: Vertex[T]) -> int:
        if vertex == destination:
            return 1
        visited.add(vertex)
        total = 0
        for edge in graph.edges(vertex):
            if edge.destination not in visited:
                total += count(edge.destination)
        visited.discard(vertex)
        return total

    return count(source)
