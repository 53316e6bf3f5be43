"""
Vertex, edge and visit-state records for the shortest-path engine.

Vertices and edges are immutable values owned by a graph. A vertex's index
is handed out by the graph at creation time and never reused.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Vertex(Generic[T]):
    """
    Graph node identified by its creation index, carrying arbitrary data.

    Hashing uses the index only, so data need not be hashable.
    """
    index: int
    data: T = field(hash=False)

    def __str__(self) -> str:
        return f"{self.index}: {self.data}"


@dataclass(frozen=True)
class Edge(Generic[T]):
    """
    Directed connection source -> destination.

    weight is None for an edge that exists but cannot be traversed when
    computing shortest paths.
    """
    source: Vertex[T]
    destination: Vertex[T]
    weight: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.source} --|{self.weight}|--> {self.destination}"


class EdgeType(Enum):
    """How Graph.add wires a new connection."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class VisitKind(Enum):
    START = "start"
    EDGE = "edge"


@dataclass(frozen=True)
class Visit(Generic[T]):
    """
    How a vertex was reached during a solve.

    START marks the source vertex; EDGE carries the cheapest known edge
    arriving at the vertex from its predecessor.
    """
    kind: VisitKind
    edge: Optional[Edge[T]] = None

    @classmethod
    def start(cls) -> "Visit[T]":
        return cls(VisitKind.START)

    @classmethod
    def via(cls, edge: Edge[T]) -> "Visit[T]":
        return cls(VisitKind.EDGE, edge)

    @property
    def is_start(self) -> bool:
        return self.kind is VisitKind.START

    def __str__(self) -> str:
        if self.is_start:
            return "start"
        return f"edge({self.edge})"


# Sparse predecessor map produced by a solve: only reached vertices appear.
PathMap = Dict[Vertex, Visit]
