"""Graphs laid out on a regular grid, with optional terrain-dependent costs."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

from eliteai.geometry import Vector2
from eliteai.graph import (
    GROUND_NODE_COLOR,
    INVALID_NODE_ID,
    MUD_NODE_COLOR,
    WATER_NODE_COLOR,
    Graph,
    GraphConnection,
    GraphNode,
    TerrainType,
)

_MAX_CONNECTION_COST = 100000

_STRAIGHT_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_DIAGONAL_DIRECTIONS = ((1, 1), (-1, 1), (-1, -1), (1, -1))


class ConnectionCostCalculator(ABC):
    """Supplies a cost factor for a connection between two nodes of a graph."""

    @abstractmethod
    def calculate_connection_cost(
        self, graph: Graph, from_node_id: int, to_node_id: int
    ) -> float:
        """The factor the default cost of the connection is multiplied by."""


class GridGraph(Graph):
    """A graph with one node in the centre of every cell of a grid."""

    def __init__(
        self,
        columns: int,
        rows: int,
        cell_size: int,
        is_directional: bool,
        is_connected_diagonally: bool,
        cost_straight: float = 1.0,
        cost_diagonal: float = 1.5,
        node_type: type[GraphNode] = GraphNode,
        cost_calculator: ConnectionCostCalculator | None = None,
    ) -> None:
        super().__init__(is_directional, node_type)
        self.columns = columns
        self.rows = rows
        self.cell_size = cell_size
        self.is_connected_diagonally = is_connected_diagonally
        self.cost_straight = cost_straight
        self.cost_diagonal = cost_diagonal
        self.cost_calculator = cost_calculator
        self._initialize_grid()

    def _initialize_grid(self) -> None:
        for row in range(self.rows):
            for col in range(self.columns):
                self.add_node(self.create_node(self.node_pos(self.node_id(col, row))))
        for row in range(self.rows):
            for col in range(self.columns):
                self.add_connections_to_adjacent_cells(self.node_id(col, row))

    # --- layout -----------------------------------------------------------

    def is_within_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def node_id(self, col: int, row: int) -> int:
        return row * self.columns + col

    def node_at(self, col: int, row: int) -> GraphNode | None:
        return self.get_node(self.node_id(col, row))

    def row_and_column(self, node_id: int) -> tuple[int, int]:
        """The ``(row, column)`` of a node id."""
        return divmod(node_id, self.columns)

    def node_pos(self, node_id: int) -> Vector2:
        """The centre of the cell that holds ``node_id``."""
        row, col = self.row_and_column(node_id)
        half = self.cell_size * 0.5
        return Vector2(col * self.cell_size + half, row * self.cell_size + half)

    def node_id_at_position(self, position: Vector2, error_margin: float = 1.0) -> int:
        """The id of the cell under ``position``; ``error_margin`` is not used."""
        if position.x < 0 or position.y < 0:
            return INVALID_NODE_ID
        col = int(position.x / self.cell_size)
        row = int(position.y / self.cell_size)
        if not self.is_within_bounds(col, row):
            return INVALID_NODE_ID
        return self.node_id(col, row)

    def node_at_position(
        self, position: Vector2, error_margin: float = 1.0
    ) -> GraphNode | None:
        return self.get_node(self.node_id_at_position(position))

    # --- connections ------------------------------------------------------

    def add_connections_to_adjacent_cells(self, node_id: int) -> None:
        """Connect a cell to its neighbours (diagonal ones too when enabled)."""
        row, col = self.row_and_column(node_id)
        self._add_connections_in_directions(node_id, col, row, _STRAIGHT_DIRECTIONS)
        if self.is_connected_diagonally:
            self._add_connections_in_directions(node_id, col, row, _DIAGONAL_DIRECTIONS)
        self._on_graph_modified(False, True)

    def _add_connections_in_directions(
        self, node_id: int, col: int, row: int, directions
    ) -> None:
        for dx, dy in directions:
            neighbor_col, neighbor_row = col + dx, row + dy
            if not self.is_within_bounds(neighbor_col, neighbor_row):
                continue
            neighbor_id = self.node_id(neighbor_col, neighbor_row)
            if not (self.is_node_valid(node_id) and self.is_node_valid(neighbor_id)):
                continue
            cost = self._calculate_connection_cost(node_id, neighbor_id)
            if not self.connection_exists(node_id, neighbor_id) and cost < _MAX_CONNECTION_COST:
                self.add_connection(GraphConnection(node_id, neighbor_id, cost))

    def _calculate_connection_cost(self, from_node_id: int, to_node_id: int) -> float:
        from_pos = self.get_node(from_node_id).position
        to_pos = self.get_node(to_node_id).position
        cost = self.cost_straight
        if int(from_pos.y) != int(to_pos.y) and int(from_pos.x) != int(to_pos.x):
            cost = self.cost_diagonal
        if self.cost_calculator is not None:
            cost *= self.cost_calculator.calculate_connection_cost(
                self, from_node_id, to_node_id
            )
        return cost


class TerrainGraphNode(GraphNode):
    """A grid node with a terrain type; its colour follows the terrain."""

    def __init__(self, position: Vector2 = Vector2()) -> None:
        super().__init__(position)
        self.terrain = TerrainType.GROUND

    @property
    def terrain(self) -> TerrainType:
        return self._terrain

    @terrain.setter
    def terrain(self, value: TerrainType) -> None:
        self._terrain = value
        if value is TerrainType.MUD:
            self.color = MUD_NODE_COLOR
        elif value is TerrainType.WATER:
            self.color = WATER_NODE_COLOR
        else:
            self.color = GROUND_NODE_COLOR

    def copy(self) -> TerrainGraphNode:
        """A shallow copy of this node, id and terrain included."""
        return copy.copy(self)


class TerrainCostCalculator(ConnectionCostCalculator):
    """Costs a connection by the heavier terrain of its two ends."""

    def calculate_connection_cost(
        self, graph: Graph, from_node_id: int, to_node_id: int
    ) -> float:
        from_node = graph.get_node(from_node_id)
        to_node = graph.get_node(to_node_id)
        return float(max(int(from_node.terrain), int(to_node.terrain)))


class TerrainGridGraph(GridGraph):
    """A grid graph of terrain nodes whose connection costs follow the terrain."""

    def __init__(
        self,
        columns: int,
        rows: int,
        cell_size: int,
        is_directional: bool,
        is_connected_diagonally: bool,
        cost_straight: float = 1.0,
        cost_diagonal: float = 1.5,
    ) -> None:
        super().__init__(
            columns,
            rows,
            cell_size,
            is_directional,
            is_connected_diagonally,
            cost_straight,
            cost_diagonal,
            TerrainGraphNode,
            TerrainCostCalculator(),
        )

    def set_node_terrain_type(self, node_id: int, terrain: TerrainType) -> None:
        """Change a node's terrain; unknown ids are ignored."""
        node = self.get_node(node_id)
        if isinstance(node, TerrainGraphNode):
            node.terrain = terrain