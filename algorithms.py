"""
Algorithm interfaces for shortest-path queries.

Keeps the solver contract separate from the graph stores it runs over.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Sequence, TypeVar

from graph import Graph
from vertices import Edge, PathMap, Vertex

T = TypeVar("T")


class DijkstraEngine(ABC, Generic[T]):
    """
    Interface for single-source shortest paths over a fixed graph.

    A solve produces a sparse PathMap; routes and distances are derived from
    it on demand so one solve can answer any number of destination queries.
    """

    @property
    @abstractmethod
    def graph(self) -> Graph[T]:
        """Graph the engine solves over (never mutated by the engine)."""
        raise NotImplementedError

    @abstractmethod
    def shortest_path_from(self, source: Vertex[T]) -> PathMap:
        """
        Solve from source.

        Returns:
            Mapping vertex -> Visit for every vertex reachable from source;
            source itself maps to Visit.start().
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path_to(self, destination: Vertex[T], paths: PathMap) -> List[Edge[T]]:
        """
        Edges from the solve's source to destination, in travel order.

        Empty when destination is the source or unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def distance(self, destination: Vertex[T], paths: PathMap) -> float:
        """Total weight of the route to destination (0.0 if there is none)."""
        raise NotImplementedError

    @abstractmethod
    def get_all_shortest_paths(self, source: Vertex[T]) -> Dict[Vertex[T], List[Edge[T]]]:
        """Route to every vertex of the graph from one solve."""
        raise NotImplementedError

    @staticmethod
    def path_cost(edges: Sequence[Edge[T]]) -> float:
        """Sum of edge weights; weightless edges contribute nothing."""
        return sum((edge.weight for edge in edges if edge.weight is not None), 0.0)
