import pytest

from eliteai.geometry import Vector2
from eliteai.graph import (
    INVALID_NODE_ID,
    MUD_NODE_COLOR,
    WATER_NODE_COLOR,
    GROUND_NODE_COLOR,
    TerrainType,
)
from eliteai.grid_graph import (
    ConnectionCostCalculator,
    GridGraph,
    TerrainCostCalculator,
    TerrainGraphNode,
    TerrainGridGraph,
)


def make_grid(diagonal=False, directional=False):
    return GridGraph(3, 3, 10, directional, diagonal, 1.0, 1.5)


def test_node_count_matches_cells():
    grid = GridGraph(4, 3, 10, False, False)
    assert grid.amount_of_nodes == 4 * 3
    assert len(grid.all_nodes) == 4 * 3


def test_node_positions_match_node_pos():
    grid = make_grid()
    for node in grid.all_nodes:
        assert node.position == grid.node_pos(node.id)


def test_node_pos_is_cell_centre():
    grid = make_grid()
    assert grid.node_pos(0) == Vector2(5.0, 5.0)


def test_position_round_trip():
    grid = make_grid()
    for node in grid.all_nodes:
        assert grid.node_id_at_position(grid.node_pos(node.id)) == node.id
        assert grid.node_at_position(node.position) is node


def test_row_and_column_round_trip():
    grid = GridGraph(4, 3, 10, False, False)
    for row in range(3):
        for col in range(4):
            assert grid.row_and_column(grid.node_id(col, row)) == (row, col)
            assert grid.node_at(col, row).id == grid.node_id(col, row)


@pytest.mark.parametrize("position", [Vector2(-1, 5), Vector2(5, -1), Vector2(35, 5), Vector2(5, 35)])
def test_positions_outside_grid_are_invalid(position):
    grid = make_grid()
    assert grid.node_id_at_position(position) == INVALID_NODE_ID
    assert grid.node_at_position(position) is None


def test_within_bounds():
    grid = make_grid()
    assert grid.is_within_bounds(0, 0)
    assert grid.is_within_bounds(2, 2)
    assert not grid.is_within_bounds(3, 0)
    assert not grid.is_within_bounds(0, -1)


def test_connection_count_matches_stored_connections():
    for diagonal in (False, True):
        grid = make_grid(diagonal=diagonal)
        stored = sum(len(grid.connections_from_node(n.id)) for n in grid.all_nodes)
        assert grid.amount_of_connections == stored


def test_straight_grid_has_no_diagonals():
    grid = make_grid()
    assert grid.connection_exists(0, 1)
    assert grid.connection_exists(0, 3)
    assert not grid.connection_exists(0, 4)
    assert len(grid.connections_from_node(0)) == 2


def test_diagonal_costs():
    grid = make_grid(diagonal=True)
    assert grid.get_connection(0, 4).cost == 1.5
    assert grid.get_connection(0, 1).cost == 1.0
    assert grid.get_connection(4, 0).cost == 1.5


def test_directed_grid_connects_both_ways():
    grid = make_grid(directional=True)
    assert grid.connection_exists(0, 1)
    assert grid.connection_exists(1, 0)


def test_remove_and_re_add_connections():
    grid = make_grid()
    before = grid.amount_of_connections
    grid.remove_all_connections_with_node(4)
    assert grid.connections_from_node(4) == []
    assert not grid.connection_exists(1, 4)
    grid.add_connections_to_adjacent_cells(4)
    assert grid.amount_of_connections == before
    assert grid.connection_exists(1, 4)


class Doubling(ConnectionCostCalculator):
    def calculate_connection_cost(self, graph, from_node_id, to_node_id):
        return 2.0


def test_custom_cost_calculator_multiplies():
    grid = GridGraph(2, 2, 10, False, True, 1.0, 1.5, cost_calculator=Doubling())
    assert grid.get_connection(0, 1).cost == 2.0 * 1.0
    assert grid.get_connection(0, 3).cost == 2.0 * 1.5


def test_terrain_node_color_follows_terrain():
    node = TerrainGraphNode(Vector2(1, 2))
    assert node.terrain is TerrainType.GROUND
    assert node.color == GROUND_NODE_COLOR
    node.terrain = TerrainType.MUD
    assert node.color == MUD_NODE_COLOR
    node.terrain = TerrainType.WATER
    assert node.color == WATER_NODE_COLOR


def test_terrain_node_copy_keeps_terrain():
    node = TerrainGraphNode(Vector2(1, 2))
    node.terrain = TerrainType.MUD
    duplicate = node.copy()
    assert duplicate is not node
    assert duplicate.terrain is TerrainType.MUD
    assert duplicate.position == node.position


def test_terrain_grid_starts_as_ground():
    grid = TerrainGridGraph(3, 3, 10, False, False)
    assert [node.terrain for node in grid.all_nodes] == [TerrainType.GROUND] * 9
    assert all(node.color == GROUND_NODE_COLOR for node in grid.all_nodes)
    assert grid.cost_calculator.calculate_connection_cost(grid, 0, 1) == float(TerrainType.GROUND)
    assert grid.get_connection(0, 1).cost == 1.0


def test_mud_raises_cost():
    grid = TerrainGridGraph(3, 3, 10, False, False)
    grid.set_node_terrain_type(4, TerrainType.MUD)
    grid.remove_all_connections_with_node(4)
    grid.add_connections_to_adjacent_cells(4)
    assert grid.get_connection(4, 1).cost == float(TerrainType.MUD)
    assert grid.get_connection(1, 4).cost == float(TerrainType.MUD)


def test_water_isolates_node():
    grid = TerrainGridGraph(3, 3, 10, False, True)
    grid.set_node_terrain_type(4, TerrainType.WATER)
    grid.remove_all_connections_with_node(4)
    grid.add_connections_to_adjacent_cells(4)
    assert grid.connections_from_node(4) == []
    assert all(
        c.to_node_id != 4 for n in grid.all_nodes for c in grid.connections_from_node(n.id)
    )


def test_terrain_cost_calculator_takes_heavier_terrain():
    grid = TerrainGridGraph(2, 1, 10, False, False)
    grid.set_node_terrain_type(1, TerrainType.MUD)
    calculator = TerrainCostCalculator()
    assert calculator.calculate_connection_cost(grid, 0, 1) == float(TerrainType.MUD)
    assert calculator.calculate_connection_cost(grid, 0, 0) == float(TerrainType.GROUND)


def test_set_terrain_on_unknown_node_is_ignored():
    grid = TerrainGridGraph(2, 2, 10, False, False)
    grid.set_node_terrain_type(99, TerrainType.MUD)
    assert all(node.terrain is TerrainType.GROUND for node in grid.all_nodes)