"""
Queue contract and its heap-backed priority queue.

Algorithm code talks to the Queue interface and never sees heap internals
such as arbitrary-index removal.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Optional, TypeVar

from heap import Comparator, Heap

T = TypeVar("T")


class Queue(ABC, Generic[T]):
    """
    Minimal queue contract: enqueue, dequeue, peek.
    """

    @abstractmethod
    def enqueue(self, element: T) -> bool:
        """Add element; returns True once it is stored."""
        raise NotImplementedError

    @abstractmethod
    def dequeue(self) -> Optional[T]:
        """Remove and return the next element, or None when empty."""
        raise NotImplementedError

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    @abstractmethod
    def peek(self) -> Optional[T]:
        """Next element without removing it, or None when empty."""
        raise NotImplementedError


class PriorityQueue(Queue[T]):
    """
    Queue that always hands out its highest-priority element per sort.
    """

    def __init__(self, sort: Comparator, elements: Optional[Iterable[T]] = None) -> None:
        self._heap: Heap[T] = Heap(sort, elements)

    def enqueue(self, element: T) -> bool:
        self._heap.insert(element)
        return True

    def dequeue(self) -> Optional[T]:
        return self._heap.remove()

    @property
    def is_empty(self) -> bool:
        return self._heap.is_empty

    @property
    def peek(self) -> Optional[T]:
        return self._heap.peek()

    def __len__(self) -> int:
        return len(self._heap)
