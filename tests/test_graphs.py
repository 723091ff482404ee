import pytest

from algonotes.graphs import (
    Graph,
    WeightedGraph,
    adjacency_matrix,
    bfs,
    dfs,
    weighted_adjacency_matrix,
)


def _sample_graph():
    graph = Graph(directed=False)
    for u, v in [(1, 2), (1, 3), (2, 4), (3, 4), (5, 6)]:
        graph.add_edge(u, v)
    return graph


def test_undirected_edges_go_both_ways():
    graph = Graph(directed=False)
    graph.add_edge(1, 2)
    assert graph.neighbors(1) == [2]
    assert graph.neighbors(2) == [1]


def test_directed_edges_go_one_way():
    graph = Graph(directed=True)
    graph.add_edge(1, 2)
    assert graph.neighbors(1) == [2]
    assert graph.neighbors(2) == []


def test_format_adjacency():
    graph = Graph(directed=True)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    assert graph.format_adjacency() == "1->2  3  "


def test_weighted_graph_neighbors_and_format():
    graph = WeightedGraph(directed=False)
    graph.add_edge(1, 2, 7)
    assert graph.neighbors(2) == [(1, 7)]
    assert graph.format_adjacency().splitlines() == ["1 ---> (2 7) ", "2 ---> (1 7) "]


def test_weighted_directed_graph():
    graph = WeightedGraph(directed=True)
    graph.add_edge(3, 4, 9)
    assert graph.neighbors(3) == [(4, 9)]
    assert graph.neighbors(4) == []


def test_bfs_visits_every_node_once():
    order = bfs(_sample_graph(), 6)
    assert sorted(order) == [1, 2, 3, 4, 5, 6]
    assert order[0] == 1


def test_bfs_level_order():
    assert bfs(_sample_graph(), 6) == [1, 2, 3, 4, 5, 6]


def test_dfs_goes_deep_first():
    assert dfs(_sample_graph(), 6) == [1, 2, 4, 3, 5, 6]


def test_traversals_include_isolated_nodes():
    graph = Graph()
    graph.add_edge(1, 2)
    assert bfs(graph, 4) == [1, 2, 3, 4]
    assert dfs(graph, 4) == [1, 2, 3, 4]


def test_path_graph_orders_agree():
    graph = Graph()
    for u in range(1, 6):
        graph.add_edge(u, u + 1)
    assert bfs(graph, 6) == dfs(graph, 6) == list(range(1, 7))


def test_adjacency_matrix_undirected_is_symmetric():
    matrix = adjacency_matrix(4, [(1, 2), (2, 3), (4, 1)])
    assert all(matrix[i][j] == matrix[j][i] for i in range(4) for j in range(4))
    assert matrix[0][1] == 1
    assert matrix[0][2] == 0


def test_adjacency_matrix_directed():
    matrix = adjacency_matrix(3, [(1, 2)], directed=True)
    assert matrix[0][1] == 1
    assert matrix[1][0] == 0


def test_adjacency_matrix_rejects_unknown_node():
    with pytest.raises(ValueError):
        adjacency_matrix(3, [(1, 4)])


def test_weighted_adjacency_matrix():
    matrix = weighted_adjacency_matrix(3, [(1, 3, 5)])
    assert matrix[0][2] == 5
    assert matrix[2][0] == 5
    assert matrix[1] == [0, 0, 0]


def test_weighted_adjacency_matrix_rejects_zero_node():
    with pytest.raises(ValueError):
        weighted_adjacency_matrix(3, [(0, 1, 2)])