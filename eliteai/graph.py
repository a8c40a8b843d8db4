"""Graphs of positioned nodes joined by weighted connections."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from enum import IntEnum

from eliteai.geometry import Vector2, distance, distance_squared, project_on_line_segment

INVALID_NODE_ID = -1


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


DEFAULT_NODE_COLOR = Color(0.7, 0.7, 0.7)
DEFAULT_CONNECTION_COLOR = Color(0.2, 0.2, 0.2)
HIGHLIGHTED_NODE_COLOR = Color(0.0, 0.8, 0.1)
START_NODE_COLOR = Color(0.0, 1.0, 0.0)
END_NODE_COLOR = Color(1.0, 0.0, 0.0)
GROUND_NODE_COLOR = DEFAULT_NODE_COLOR
MUD_NODE_COLOR = Color(0.4, 0.2, 0.0)
WATER_NODE_COLOR = Color(0.5, 0.9, 0.9)

DEFAULT_NODE_RADIUS = 3.0


class TerrainType(IntEnum):
    """Terrain of a grid cell; values above 200000 are always isolated."""

    GROUND = 1
    MUD = 3
    WATER = 200001


class GraphNode:
    """A node at a position; its id is assigned by the graph that holds it."""

    def __init__(self, position: Vector2 = Vector2(), color: Color = DEFAULT_NODE_COLOR) -> None:
        self._id = INVALID_NODE_ID
        self.position = position
        self.color = color

    @property
    def id(self) -> int:
        return self._id

    def copy(self) -> GraphNode:
        """A shallow copy of this node, id included."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id}, position={self.position!r})"


@dataclass
class GraphConnection:
    from_node_id: int = INVALID_NODE_ID
    to_node_id: int = INVALID_NODE_ID
    cost: float = 1.0
    color: Color = DEFAULT_CONNECTION_COLOR

    def is_valid(self) -> bool:
        return self.from_node_id != INVALID_NODE_ID and self.to_node_id != INVALID_NODE_ID


class Graph:
    """A directed or undirected graph; undirected connections are stored both ways."""

    def __init__(self, is_directional: bool, node_type: type[GraphNode] = GraphNode) -> None:
        self.is_directional = is_directional
        self.node_type = node_type
        self._nodes: list[GraphNode | None] = []
        self._connections: list[list[GraphConnection]] = []
        self._active_nodes: list[GraphNode] = []
        self._next_node_id = 0
        self._amount_nodes = 0
        self._amount_connections = 0
        self._revision = 0

    # --- properties -------------------------------------------------------

    @property
    def next_node_id(self) -> int:
        return self._next_node_id

    @property
    def amount_of_nodes(self) -> int:
        return self._amount_nodes

    @property
    def amount_of_connections(self) -> int:
        return self._amount_connections

    @property
    def revision(self) -> int:
        """How many times connections were reported as modified."""
        return self._revision

    @property
    def all_nodes(self) -> list[GraphNode]:
        """The nodes currently in the graph, ordered by id."""
        return list(self._active_nodes)

    def clear(self) -> None:
        for node in self._nodes:
            if node is not None:
                node._id = INVALID_NODE_ID
        self._nodes = []
        self._connections = []
        self._active_nodes = []
        self._next_node_id = 0
        self._amount_nodes = 0
        self._amount_connections = 0

    def clone(self) -> Graph:
        """An independent copy with copied nodes and connections."""
        other = copy.copy(self)
        other._nodes = [None if node is None else node.copy() for node in self._nodes]
        other._connections = [[replace(c) for c in lst] for lst in self._connections]
        other._update_next_node_index()
        other._update_active_nodes()
        return other

    # --- nodes ------------------------------------------------------------

    def create_node(self, position: Vector2) -> GraphNode:
        """A new node of this graph's node type; it is not added."""
        return self.node_type(position)

    def get_node(self, node_id: int) -> GraphNode | None:
        if not self.is_node_valid(node_id):
            return None
        return self._nodes[node_id]

    def is_node_valid(self, node_id: int) -> bool:
        return 0 <= node_id < len(self._nodes) and self._nodes[node_id] is not None

    def add_node(self, node: GraphNode) -> int:
        """Add ``node`` at the lowest free id and return that id."""
        node_id = self._next_node_id
        node._id = node_id
        if len(self._nodes) < node_id + 1:
            missing = node_id + 1 - len(self._nodes)
            self._nodes.extend([None] * missing)
            self._connections.extend([] for _ in range(missing))
        self._nodes[node_id] = node
        self._amount_nodes += 1
        self._update_next_node_index()
        self._update_active_nodes()
        return node_id

    def remove_node(self, node_id: int) -> None:
        """Remove a node and its outgoing connections; unknown ids are ignored.

        In an undirected graph the mirrored connections are removed too.
        """
        if not self.is_node_valid(node_id):
            return
        node = self._nodes[node_id]
        node._id = INVALID_NODE_ID
        self._nodes[node_id] = None
        self._amount_nodes -= 1

        if not self.is_directional:
            for connection in self._connections[node_id]:
                if self._remove_first(connection.to_node_id, node_id):
                    self._amount_connections -= 1

        self._amount_connections -= len(self._connections[node_id])
        self._connections[node_id] = []
        self._update_next_node_index()
        self._update_active_nodes()

    def node_id_at_position(self, position: Vector2, error_margin: float = 1.0) -> int:
        node = self.node_at_position(position, error_margin)
        return INVALID_NODE_ID if node is None else node.id

    def node_at_position(self, position: Vector2, error_margin: float = 1.0) -> GraphNode | None:
        """The first node whose radius, scaled by ``error_margin``, covers ``position``."""
        radius_sq = DEFAULT_NODE_RADIUS**2 * error_margin**2
        return next(
            (
                node
                for node in self._active_nodes
                if node.id != INVALID_NODE_ID
                and (node.position - position).magnitude_squared() < radius_sq
            ),
            None,
        )

    def node_pos(self, node_id: int) -> Vector2:
        node = self.get_node(node_id)
        return Vector2(0.0, 0.0) if node is None else node.position

    # --- connections ------------------------------------------------------

    def add_connection(self, connection: GraphConnection) -> None:
        """Add a connection; an undirected graph also gets the opposite one."""
        if not (
            self.is_node_valid(connection.from_node_id)
            and self.is_node_valid(connection.to_node_id)
        ):
            raise ValueError("invalid node index in connection")
        self._connections[connection.from_node_id].append(connection)
        self._amount_connections += 1
        if not self.is_directional:
            opposite = GraphConnection(
                connection.to_node_id, connection.from_node_id, connection.cost, connection.color
            )
            self._connections[connection.to_node_id].append(opposite)
            self._amount_connections += 1

    def get_connection(self, from_node_id: int, to_node_id: int) -> GraphConnection | None:
        self._check_nodes(from_node_id, to_node_id)
        return next(
            (c for c in self._connections[from_node_id] if c.to_node_id == to_node_id), None
        )

    def remove_connection(self, from_node_id: int, to_node_id: int) -> None:
        """Remove the connection between two nodes (both ways when undirected)."""
        self._check_nodes(from_node_id, to_node_id)
        if not self.is_directional and self._remove_first(to_node_id, from_node_id):
            self._amount_connections -= 1
        if self._remove_first(from_node_id, to_node_id):
            self._amount_connections -= 1
        self._on_graph_modified(False, True)

    def remove_all_connections_with_node(self, node_id: int) -> None:
        """Remove every connection leaving or reaching ``node_id``."""
        self._amount_connections -= len(self._connections[node_id])
        self._connections[node_id] = []
        for index, connections in enumerate(self._connections):
            kept = [c for c in connections if c.to_node_id != node_id]
            self._amount_connections -= len(connections) - len(kept)
            self._connections[index] = kept
        self._on_graph_modified(False, True)

    def connections_from_node(self, node_id: int | GraphNode) -> list[GraphConnection]:
        if isinstance(node_id, GraphNode):
            node_id = node_id.id
        if not self.is_node_valid(node_id):
            raise ValueError(f"invalid node index {node_id}")
        return list(self._connections[node_id])

    def connection_exists(self, from_node_id: int, to_node_id: int) -> bool:
        return self.get_connection(from_node_id, to_node_id) is not None

    def connection_at_position(
        self, position: Vector2, max_dist: float = 1.0
    ) -> GraphConnection | None:
        """The connection closest to ``position`` within ``max_dist``, or None."""
        result: GraphConnection | None = None
        best_sq = max_dist * max_dist
        for connections in self._connections:
            for connection in connections:
                start = self.node_pos(connection.to_node_id)
                end = self.node_pos(connection.from_node_id)
                projected = project_on_line_segment(start, end, position)
                dist_sq = distance_squared(projected, position)
                if dist_sq < best_sq:
                    result = connection
                    best_sq = dist_sq
        return result

    def set_connection_costs_to_distances(self) -> None:
        for connections in self._connections:
            for connection in connections:
                connection.cost = abs(
                    distance(self.node_pos(connection.from_node_id), self.node_pos(connection.to_node_id))
                )

    # --- internals --------------------------------------------------------

    def _on_graph_modified(self, nodes_changed: bool, connections_changed: bool) -> None:
        """Record a modification; subclasses may extend this to refresh derived data."""
        if nodes_changed or connections_changed:
            self._revision += 1

    def _check_nodes(self, *node_ids: int) -> None:
        for node_id in node_ids:
            if not self.is_node_valid(node_id):
                raise ValueError(f"invalid node index {node_id}")

    def _remove_first(self, from_node_id: int, to_node_id: int) -> bool:
        connections = self._connections[from_node_id]
        for index, connection in enumerate(connections):
            if connection.to_node_id == to_node_id:
                del connections[index]
                return True
        return False

    def _update_next_node_index(self) -> None:
        self._next_node_id = next(
            (index for index, node in enumerate(self._nodes) if node is None), len(self._nodes)
        )

    def _update_active_nodes(self) -> None:
        self._active_nodes = [node for node in self._nodes if node is not None]