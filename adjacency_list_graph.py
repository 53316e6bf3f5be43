"""
Concrete adjacency-list graph for the shortest-path engine.

Implements the Graph interface with a vertex -> [outgoing edges] mapping.
"""

from typing import Dict, List, Optional, TypeVar

from graph import Graph
from vertices import Edge, Vertex

T = TypeVar("T")


class AdjacencyListGraph(Graph[T]):
    """
    Directed graph backed by an ordered vertex -> edge-list mapping.

    Parallel edges are kept; edges() returns every one of them in insertion
    order while weight() only sees the first.
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex[T], List[Edge[T]]] = {}

    # --- Mutation API --------------------------------------------------------

    def create_vertex(self, data: T) -> Vertex[T]:
        vertex = Vertex(len(self._adj), data)
        self._adj[vertex] = []
        return vertex

    def add_directed_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float]
    ) -> None:
        self._require(source)
        self._require(destination)
        self._adj[source].append(Edge(source, destination, weight))

    # --- Graph interface -----------------------------------------------------

    @property
    def vertices(self) -> List[Vertex[T]]:
        return list(self._adj.keys())

    def edges(self, source: Vertex[T]) -> List[Edge[T]]:
        return list(self._adj.get(source, []))  # defensive copy

    def weight(self, source: Vertex[T], destination: Vertex[T]) -> Optional[float]:
        for edge in self._adj.get(source, []):
            if edge.destination == destination:
                return edge.weight
        return None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __str__(self) -> str:
        lines = []
        for vertex, edges in self._adj.items():
            targets = ", ".join(str(edge.destination) for edge in edges)
            lines.append(f"{vertex} ---> [ {targets} ]")
        return "\n".join(lines)
