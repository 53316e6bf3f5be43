"""
Weighted graph abstraction for the shortest-path engine.

Vertices are Vertex instances created by the graph itself.
Edges are directed: source -> destination with an optional float weight.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from errors import VertexNotFoundError
from vertices import Edge, EdgeType, Vertex

T = TypeVar("T")


class Graph(ABC, Generic[T]):
    """Directed, optionally weighted graph over Vertex objects."""

    @property
    @abstractmethod
    def vertices(self) -> List[Vertex[T]]:
        """All vertices in creation order."""
        raise NotImplementedError

    @abstractmethod
    def create_vertex(self, data: T) -> Vertex[T]:
        """
        Register a new vertex carrying data.

        The vertex index is the number of vertices created before it.
        """
        raise NotImplementedError

    @abstractmethod
    def add_directed_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float]
    ) -> None:
        """
        Add the edge source -> destination.

        Raises:
            VertexNotFoundError: if either endpoint was not created by this graph.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self, source: Vertex[T]) -> List[Edge[T]]:
        """
        Outgoing edges of source in insertion order.

        Returns an empty list for a vertex the graph does not know.
        """
        raise NotImplementedError

    @abstractmethod
    def weight(self, source: Vertex[T], destination: Vertex[T]) -> Optional[float]:
        """Weight of the first edge source -> destination, or None if there is none."""
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, vertex: object) -> bool:
        raise NotImplementedError

    # --- Derived operations --------------------------------------------------

    def add_undirected_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float]
    ) -> None:
        """
        Add source -> destination and destination -> source with the same weight.

        Both endpoints are checked up front so a bad vertex leaves the graph
        untouched rather than holding only one direction.
        """
        self._require(source)
        self._require(destination)
        self.add_directed_edge(source, destination, weight)
        self.add_directed_edge(destination, source, weight)

    def add(
        self,
        edge_type: EdgeType,
        source: Vertex[T],
        destination: Vertex[T],
        weight: Optional[float],
    ) -> None:
        """Add a directed or undirected connection depending on edge_type."""
        if edge_type is EdgeType.DIRECTED:
            self.add_directed_edge(source, destination, weight)
        else:
            self.add_undirected_edge(source, destination, weight)

    def _require(self, vertex: Vertex[T]) -> None:
        if vertex not in self:
            raise VertexNotFoundError(
                f"Vertex not in graph: {vertex}",
                vertex=vertex,
            )
