"""
Dense adjacency-matrix graph for the shortest-path engine.

Stores weights in a square numpy array, NaN marking the absence of an edge.
Suited to graphs where most vertex pairs are connected.
"""

from typing import List, Optional, TypeVar

import numpy as np

from graph import Graph
from vertices import Edge, Vertex

T = TypeVar("T")


class AdjacencyMatrixGraph(Graph[T]):
    """
    Directed graph backed by an n x n weight matrix.

    Each ordered vertex pair holds at most one edge, so a second
    add_directed_edge between the same pair overwrites the first. A None
    weight clears the cell: the matrix cannot tell "no edge" apart from an
    edge without a weight, so edges() never yields weightless edges.
    """

    def __init__(self) -> None:
        self._vertices: List[Vertex[T]] = []
        self._weights: np.ndarray = np.empty((0, 0), dtype=float)

    # --- Mutation API --------------------------------------------------------

    def create_vertex(self, data: T) -> Vertex[T]:
        vertex = Vertex(len(self._vertices), data)
        self._vertices.append(vertex)
        # One new (empty) column for every existing row, plus a new empty row.
        self._weights = np.pad(
            self._weights, ((0, 1), (0, 1)), mode="constant", constant_values=np.nan
        )
        return vertex

    def add_directed_edge(
        self, source: Vertex[T], destination: Vertex[T], weight: Optional[float]
    ) -> None:
        self._require(source)
        self._require(destination)
        self._weights[source.index, destination.index] = (
            np.nan if weight is None else float(weight)
        )

    # --- Graph interface -----------------------------------------------------

    @property
    def vertices(self) -> List[Vertex[T]]:
        return list(self._vertices)

    def edges(self, source: Vertex[T]) -> List[Edge[T]]:
        if source not in self:
            return []
        row = self._weights[source.index]
        return [
            Edge(source, self._vertices[column], float(row[column]))
            for column in np.flatnonzero(~np.isnan(row))
        ]

    def weight(self, source: Vertex[T], destination: Vertex[T]) -> Optional[float]:
        if source not in self or destination not in self:
            return None
        value = self._weights[source.index, destination.index]
        if np.isnan(value):
            return None
        return float(value)

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, Vertex):
            return False
        return (
            0 <= vertex.index < len(self._vertices)
            and self._vertices[vertex.index] == vertex
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        vertices_description = "\n".join(str(v) for v in self._vertices)
        grid = []
        for row in self._weights:
            grid.append(
                "\t".join("ø" if np.isnan(value) else str(float(value)) for value in row)
            )
        return vertices_description + "\n\n" + "\n".join(grid)
