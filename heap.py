"""
Array-backed binary heap driven by a comparator.

sort(a, b) returns True when a has priority over b: ``operator.lt`` gives a
min-heap, ``operator.gt`` a max-heap. The heap never re-reads its
comparator's inputs on its own, so a comparator whose answers change between
calls (see SimpleDijkstraEngine) is only consulted during sift operations.

Index layout for element i: left child 2i+1, right child 2i+2,
parent (i-1)//2.
"""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


class Heap(Generic[T]):
    """
    Binary heap over a dense list.

    Invariant: no child outranks its parent, i.e. for every present child c
    of index i, sort(elements[c], elements[i]) is False.
    """

    def __init__(self, sort: Comparator, elements: Optional[Iterable[T]] = None) -> None:
        self._sort = sort
        self._elements: List[T] = list(elements) if elements is not None else []
        self._heapify()

    # --- Queries -------------------------------------------------------------

    @property
    def elements(self) -> List[T]:
        """Backing list in heap order (copy)."""
        return list(self._elements)

    @property
    def is_empty(self) -> bool:
        return not self._elements

    @property
    def count(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def peek(self) -> Optional[T]:
        """Highest-priority element, or None when empty."""
        return self._elements[0] if self._elements else None

    def index_of(self, element: T, start: int = 0) -> Optional[int]:
        """
        Position of element in the backing list, searching the subtree at start.

        A subtree is abandoned as soon as element would outrank its root,
        since the heap property then rules out a match anywhere below it.
        Matching itself is by equality. Worst case O(n).
        """
        if start < 0 or start >= len(self._elements):
            return None
        if self._sort(element, self._elements[start]):
            return None
        if element == self._elements[start]:
            return start
        found = self.index_of(element, self._left(start))
        if found is not None:
            return found
        return self.index_of(element, self._right(start))

    def is_valid(self) -> bool:
        """Check the heap property for every parent/child pair."""
        for parent in range(len(self._elements) // 2):
            for child in (self._left(parent), self._right(parent)):
                if child < len(self._elements) and self._sort(
                    self._elements[child], self._elements[parent]
                ):
                    return False
        return True

    # --- Mutation ------------------------------------------------------------

    def insert(self, element: T) -> None:
        self._elements.append(element)
        self._sift_up(len(self._elements) - 1)

    def remove(self) -> Optional[T]:
        """Pop the highest-priority element, or None when empty."""
        if not self._elements:
            return None
        self._swap(0, len(self._elements) - 1)
        root = self._elements.pop()
        self._sift_down(0)
        return root

    def remove_at(self, index: int) -> Optional[T]:
        """
        Pop the element stored at index, or None when index is out of bounds.

        The last element takes the vacated slot and may belong either above
        or below it, so both sift directions run.
        """
        if index < 0 or index >= len(self._elements):
            return None
        last = len(self._elements) - 1
        if index == last:
            return self._elements.pop()
        self._swap(index, last)
        removed = self._elements.pop()
        self._sift_down(index)
        self._sift_up(index)
        return removed

    def merge(self, other: "Heap[T]") -> None:
        """Absorb other's elements; ordering follows this heap's comparator."""
        self._elements.extend(other._elements)
        self._heapify()

    # --- Internals -----------------------------------------------------------

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._elements[i], self._elements[j] = self._elements[j], self._elements[i]

    def _heapify(self) -> None:
        for index in range(len(self._elements) // 2 - 1, -1, -1):
            self._sift_down(index)

    def _sift_down(self, index: int) -> None:
        parent = index
        count = len(self._elements)
        while True:
            left = self._left(parent)
            right = self._right(parent)
            candidate = parent
            if left < count and self._sort(self._elements[left], self._elements[candidate]):
                candidate = left
            if right < count and self._sort(self._elements[right], self._elements[candidate]):
                candidate = right
            if candidate == parent:
                return
            self._swap(parent, candidate)
            parent = candidate

    def _sift_up(self, index: int) -> None:
        child = index
        parent = self._parent(child)
        while child > 0 and self._sort(self._elements[child], self._elements[parent]):
            self._swap(child, parent)
            child = parent
            parent = self._parent(child)

    def __repr__(self) -> str:
        return f"Heap({self._elements!r})"


def nth_smallest(n: int, elements: Iterable[T]) -> Optional[T]:
    """
    Return the n-th smallest element (1-based) by draining a min-heap.

    None when n is not in 1..len(elements).
    """
    if n < 1:
        return None
    heap: Heap[T] = Heap(operator.lt, elements)
    current = 1
    while not heap.is_empty:
        element = heap.remove()
        if current == n:
            return element
        current += 1
    return None
