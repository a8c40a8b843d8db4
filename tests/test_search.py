import math

import pytest

from eliteai.geometry import Vector2
from eliteai.graph import Graph, GraphConnection, GraphNode
from eliteai.grid_graph import GridGraph
from eliteai.search import (
    BFS,
    AStar,
    NodeRecord,
    chebyshev,
    euclidean,
    manhattan,
    octile,
    sq_euclidean,
)


def path_cost(graph, path):
    return sum(
        graph.get_connection(a.id, b.id).cost for a, b in zip(path, path[1:])
    )


def assert_valid_path(graph, path, start, goal):
    assert path[0] is start
    assert path[-1] is goal
    for a, b in zip(path, path[1:]):
        assert graph.connection_exists(a.id, b.id)


def test_manhattan_and_euclidean():
    assert manhattan(3.0, 4.0) == 3.0 + 4.0
    assert euclidean(3.0, 4.0) == pytest.approx(5.0)


@pytest.mark.parametrize("x,y", [(0.0, 0.0), (1.0, 2.0), (5.5, 0.5)])
def test_heuristic_invariants(x, y):
    assert sq_euclidean(x, y) == pytest.approx(euclidean(x, y) ** 2)
    assert chebyshev(x, y) == max(x, y)
    assert octile(x, y) == octile(y, x)
    assert chebyshev(x, y) <= octile(x, y) <= manhattan(x, y) + 1e-9


def test_octile_diagonal_is_sqrt_two():
    assert octile(1.0, 1.0) == pytest.approx(math.sqrt(2))
    assert octile(4.0, 0.0) == 4.0


def test_node_record_orders_by_estimate():
    cheap = NodeRecord(None, None, 5.0, 1.0)
    dear = NodeRecord(None, None, 0.0, 2.0)
    assert cheap < dear
    assert min([dear, cheap]) is cheap


def test_astar_on_grid():
    grid = GridGraph(3, 3, 10, False, False)
    start, goal = grid.get_node(0), grid.get_node(8)
    path = AStar(grid, manhattan).find_path(start, goal)
    assert_valid_path(grid, path, start, goal)
    assert len(path) == 5


def test_astar_and_bfs_agree_on_uniform_grid():
    grid = GridGraph(4, 4, 10, False, False)
    start, goal = grid.get_node(0), grid.get_node(15)
    astar_path = AStar(grid, manhattan).find_path(start, goal)
    bfs_path = BFS(grid).find_path(start, goal)
    assert_valid_path(grid, bfs_path, start, goal)
    assert len(astar_path) == len(bfs_path)


def make_triangle_graph():
    graph = Graph(True)
    nodes = [GraphNode(Vector2(0, 0)) for _ in range(3)]
    for node in nodes:
        graph.add_node(node)
    graph.add_connection(GraphConnection(0, 2, 10.0))
    graph.add_connection(GraphConnection(0, 1, 1.0))
    graph.add_connection(GraphConnection(1, 2, 1.0))
    return graph, nodes


def test_astar_prefers_cheaper_route():
    graph, nodes = make_triangle_graph()
    path = AStar(graph, euclidean).find_path(nodes[0], nodes[2])
    assert path == nodes
    assert path_cost(graph, path) == 2.0


def test_bfs_prefers_fewest_connections():
    graph, nodes = make_triangle_graph()
    path = BFS(graph).find_path(nodes[0], nodes[2])
    assert path == [nodes[0], nodes[2]]


def test_start_equals_goal():
    graph, nodes = make_triangle_graph()
    assert AStar(graph, euclidean).find_path(nodes[1], nodes[1]) == [nodes[1]]
    assert BFS(graph).find_path(nodes[1], nodes[1]) == [nodes[1]]


def test_unreachable_goal():
    graph = Graph(False)
    a, b = GraphNode(Vector2(0, 0)), GraphNode(Vector2(10, 0))
    graph.add_node(a)
    graph.add_node(b)
    assert AStar(graph, euclidean).find_path(a, b) == []
    with pytest.raises(ValueError):
        BFS(graph).find_path(a, b)


def test_astar_diagonal_grid_finds_minimal_cost():
    grid = GridGraph(3, 3, 10, False, True, 1.0, 1.5)
    start, goal = grid.get_node(0), grid.get_node(8)
    path = AStar(grid, octile).find_path(start, goal)
    assert_valid_path(grid, path, start, goal)
    assert path_cost(grid, path) == pytest.approx(2 * 1.5)
    for other_path in (
        [grid.get_node(i) for i in (0, 1, 2, 5, 8)],
        [grid.get_node(i) for i in (0, 1, 4, 8)],
    ):
        assert path_cost(grid, path) <= path_cost(grid, other_path)