"""
Unit tests for Heap and nth_smallest.
"""

import operator
import random

import pytest

from heap import Heap, nth_smallest


def _drain(heap):
    out = []
    while not heap.is_empty:
        out.append(heap.remove())
    return out


def test_empty_heap_returns_none():
    heap = Heap(operator.lt)

    assert heap.is_empty
    assert heap.peek() is None
    assert heap.remove() is None
    assert heap.remove_at(0) is None
    assert heap.index_of(1) is None
    assert len(heap) == 0


def test_max_heap_extracts_descending():
    heap = Heap(operator.gt, [1, 12, 3, 4, 1, 6, 8, 7])

    assert heap.is_valid()
    assert heap.peek() == 12
    assert _drain(heap) == [12, 8, 7, 6, 4, 3, 1, 1]


def test_min_heap_built_by_insertion():
    heap = Heap(operator.lt)
    for value in [3, 9, 5, 6, 7, 104, 1]:
        heap.insert(value)
        assert heap.is_valid()

    assert heap.peek() == 1
    assert heap.count == 7
    assert _drain(heap) == [1, 3, 5, 6, 7, 9, 104]


def test_remove_at_last_slot_pops_directly():
    heap = Heap(operator.lt, [1, 2, 3])
    last = heap.elements[-1]

    assert heap.remove_at(heap.count - 1) == last
    assert heap.is_valid()
    assert heap.count == 2


def test_remove_at_out_of_bounds():
    heap = Heap(operator.lt, [1, 2, 3])

    assert heap.remove_at(3) is None
    assert heap.remove_at(-1) is None
    assert heap.count == 3


def test_remove_at_needs_sift_up():
    # Replacement (the last element) is smaller than the vacated slot's parent
    # in a different subtree, so restoring order means moving it upwards.
    heap = Heap(operator.lt, [0, 10, 1, 11, 12, 2, 3])
    assert heap.elements == [0, 10, 1, 11, 12, 2, 3]

    removed = heap.remove_at(4)

    assert removed == 12
    assert heap.is_valid()
    assert heap.elements[1] == 3


def test_remove_at_needs_sift_down():
    heap = Heap(operator.lt, [0, 1, 5, 2, 3, 6, 7])

    assert heap.remove_at(1) == 1
    assert heap.is_valid()
    assert sorted(heap.elements) == [0, 2, 3, 5, 6, 7]


def test_index_of_finds_every_element():
    values = [21, 10, 18, 5, 3, 100, 1]
    heap = Heap(operator.lt, values)

    for value in values:
        index = heap.index_of(value)
        assert index is not None
        assert heap.elements[index] == value

    assert heap.index_of(4) is None
    assert heap.index_of(0) is None  # outranks the root: pruned immediately
    assert heap.index_of(1, start=heap.count) is None


def test_merge_keeps_invariant():
    left = Heap(operator.gt, [1, 5, 3])
    right = Heap(operator.gt, [4, 9])

    left.merge(right)

    assert left.is_valid()
    assert _drain(left) == [9, 5, 4, 3, 1]
    assert right.count == 2


def test_is_valid_detects_broken_order():
    heap = Heap(operator.lt, [1, 2, 3])
    heap._elements = [5, 1, 2]

    assert not heap.is_valid()


def test_invariant_holds_under_random_operations():
    rng = random.Random(1234)
    heap = Heap(operator.lt, [rng.randint(0, 50) for _ in range(20)])
    assert heap.is_valid()

    for _ in range(300):
        op = rng.random()
        if op < 0.45:
            heap.insert(rng.randint(0, 50))
        elif op < 0.7:
            heap.remove()
        elif heap.count:
            heap.remove_at(rng.randrange(heap.count))
        assert heap.is_valid()


def test_extraction_matches_sorted_multiset():
    rng = random.Random(99)
    values = [rng.randint(-20, 20) for _ in range(40)]

    assert _drain(Heap(operator.lt, values)) == sorted(values)
    assert _drain(Heap(operator.gt, values)) == sorted(values, reverse=True)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 3), (3, 10), (6, 100), (7, None), (0, None)],
)
def test_nth_smallest(n, expected):
    assert nth_smallest(n, [3, 10, 18, 5, 21, 100]) == expected
