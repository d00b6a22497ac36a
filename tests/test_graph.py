import pytest

from dense_dijkstra.errors import GraphError
from dense_dijkstra.graph import INF, Edge, Graph


def test_from_edges_is_symmetric_with_inf_diagonal():
    g = Graph.from_edges(3, [(0, 1, 2), (1, 2, 5)])
    assert g.weight(0, 1) == g.weight(1, 0) == 2
    assert g.weight(0, 2) == INF
    assert all(g.weights[i][i] == INF for i in range(3))
    assert list(g.edges()) == [Edge(0, 1, 2), Edge(1, 2, 5)]


def test_matrix_round_trip_uses_none_for_missing_edges():
    g = Graph.from_matrix([[None, 3], [3, None]])
    assert g.to_matrix() == [[None, 3], [3, None]]
    assert Graph.from_matrix(g.to_matrix()) == g


def test_diagonal_is_never_an_edge():
    g = Graph([[7, 1], [1, 7]])
    assert g.weight(0, 0) == INF
    assert g.neighbors(0) == {1: 1}
    assert not g.has_edge(1, 1)


def test_rejects_asymmetric_matrix():
    with pytest.raises(GraphError):
        Graph([[None, 1], [2, None]])


def test_rejects_non_square_matrix():
    with pytest.raises(GraphError):
        Graph([[None, 1], [1]])


def test_rejects_negative_weight():
    with pytest.raises(GraphError):
        Graph.from_edges(2, [(0, 1, -1)])


def test_rejects_edge_outside_graph():
    with pytest.raises(GraphError):
        Graph.from_edges(2, [(0, 2, 1)])


def test_empty_graph():
    g = Graph.empty()
    assert g.node_count == 0
    assert list(g.edges()) == []
