"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import SimpleDijkstraEngine
from errors import VertexNotFoundError
from vertices import Edge, EdgeType, Vertex


def test_create_vertex_assigns_sequential_indices():
    g = AdjacencyListGraph()

    a = g.create_vertex("A")
    b = g.create_vertex("B")
    dup = g.create_vertex("A")  # no duplicate detection on data

    assert (a.index, b.index, dup.index) == (0, 1, 2)
    assert a != dup
    assert g.vertices == [a, b, dup]
    assert len(g) == 3


def test_add_nodes_and_edges():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")
    c = g.create_vertex("C")

    g.add_directed_edge(a, b, 1.0)
    g.add_directed_edge(a, c, 2.0)
    g.add_directed_edge(b, c, 3.0)

    assert g.edges(a) == [Edge(a, b, 1.0), Edge(a, c, 2.0)]
    assert g.edges(b) == [Edge(b, c, 3.0)]
    assert g.edges(c) == []


def test_edges_returns_copy():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")

    g.add_directed_edge(a, b, 1.0)

    out = g.edges(a)
    out.clear()

    # internal structure must remain intact
    assert g.edges(a) == [Edge(a, b, 1.0)]


def test_edges_of_unknown_vertex_is_empty():
    g = AdjacencyListGraph()
    g.create_vertex("A")

    assert g.edges(Vertex(7, "ghost")) == []


def test_undirected_edge_adds_both_directions():
    g = AdjacencyListGraph()
    e = g.create_vertex("E")
    c = g.create_vertex("C")

    g.add_undirected_edge(e, c, 8.0)

    assert g.edges(e) == [Edge(e, c, 8.0)]
    assert g.edges(c) == [Edge(c, e, 8.0)]


def test_add_dispatches_on_edge_type():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")

    g.add(EdgeType.DIRECTED, a, b, 1.0)
    g.add(EdgeType.UNDIRECTED, b, a, 2.0)

    assert g.edges(a) == [Edge(a, b, 1.0), Edge(a, b, 2.0)]
    assert g.edges(b) == [Edge(b, a, 2.0)]


def test_weight_sees_first_parallel_edge_only():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")

    g.add_directed_edge(a, b, 5.0)
    g.add_directed_edge(a, b, 1.0)

    assert g.weight(a, b) == 5.0
    assert len(g.edges(a)) == 2
    assert g.weight(b, a) is None


def test_weightless_edge_is_stored():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")

    g.add_directed_edge(a, b, None)

    assert g.edges(a) == [Edge(a, b, None)]
    assert g.weight(a, b) is None


def test_edge_to_foreign_vertex_raises_without_phantom_vertex():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    stranger = Vertex(5, "Z")

    with pytest.raises(VertexNotFoundError) as info:
        g.add_directed_edge(a, stranger, 1.0)

    assert info.value.vertex == stranger
    assert stranger not in g
    assert g.vertices == [a]
    assert g.edges(a) == []


def test_undirected_edge_is_all_or_nothing():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    stranger = Vertex(1, "B")  # never created by g

    with pytest.raises(VertexNotFoundError):
        g.add_undirected_edge(a, stranger, 3.0)

    assert g.edges(a) == []


def test_str_lists_destinations_per_vertex():
    g = AdjacencyListGraph()
    a = g.create_vertex("A")
    b = g.create_vertex("B")
    c = g.create_vertex("C")
    g.add_directed_edge(a, b, 1.0)
    g.add_directed_edge(a, c, 1.0)

    assert str(g).splitlines() == [
        "0: A ---> [ 1: B, 2: C ]",
        "1: B ---> [  ]",
        "2: C ---> [  ]",
    ]


def test_unhashable_payloads_can_be_solved_over():
    g = AdjacencyListGraph()
    a = g.create_vertex({"name": "A"})
    b = g.create_vertex(["B"])
    g.add_directed_edge(a, b, 4.0)

    engine = SimpleDijkstraEngine(g)
    paths = engine.shortest_path_from(a)

    assert g.vertices == [a, b]
    assert engine.shortest_path_to(b, paths) == [Edge(a, b, 4.0)]
    assert engine.distance(b, paths) == 4.0
