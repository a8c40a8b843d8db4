"""Navigation graphs built on the shared edges of a triangulated navigation mesh."""

from __future__ import annotations

import copy
from collections.abc import Iterable

from eliteai.geometry import Vector2
from eliteai.graph import INVALID_NODE_ID, Graph, GraphConnection, GraphNode
from eliteai.polygon import Polygon


class NavGraphNode(GraphNode):
    """A graph node placed on a line of the navigation mesh."""

    def __init__(self, position: Vector2 = Vector2(), line_index: int = 0) -> None:
        super().__init__(position)
        self.line_index = line_index

    def copy(self) -> NavGraphNode:
        """A shallow copy of this node, id and line index included."""
        return copy.copy(self)


class NavGraph(Graph):
    """An undirected graph with a node on every mesh line shared by two triangles."""

    def __init__(
        self,
        collider_shapes: Iterable[Polygon],
        width_world: float,
        height_world: float,
        player_radius: float = 1.0,
    ) -> None:
        super().__init__(False, NavGraphNode)
        half_width = width_world / 2.0
        half_height = height_world / 2.0
        self.nav_mesh_polygon = Polygon(
            [
                Vector2(-half_width, half_height),
                Vector2(-half_width, -half_height),
                Vector2(half_width, -half_height),
                Vector2(half_width, half_height),
            ]
        )
        for shape in collider_shapes:
            expanded = Polygon(shape.points, shape.children)
            expanded.expand_shape(player_radius)
            self.nav_mesh_polygon.add_child(expanded)

        self.nav_mesh_polygon.triangulate()
        self._create_navigation_graph()

    def clone(self) -> NavGraph:
        """An independent copy of the graph sharing the navigation mesh."""
        return super().clone()

    def node_id_from_line_index(self, line_index: int) -> int:
        """The id of the node on mesh line ``line_index``, or INVALID_NODE_ID."""
        return next(
            (
                node.id
                for node in self.all_nodes
                if isinstance(node, NavGraphNode) and node.line_index == line_index
            ),
            INVALID_NODE_ID,
        )

    def _create_navigation_graph(self) -> None:
        polygon = self.nav_mesh_polygon
        for line in polygon.lines:
            if len(polygon.triangles_from_line_index(line.index)) <= 1:
                continue
            center = (line.p2 + line.p1) / 2.0
            self.add_node(NavGraphNode(center, line.index))

        for triangle in polygon.triangles:
            node_ids = [
                node_id
                for node_id in map(self.node_id_from_line_index, triangle.index_lines)
                if node_id != INVALID_NODE_ID
            ]
            if len(node_ids) == 3:
                first, second, third = node_ids
                self.add_connection(GraphConnection(first, second, 0.0))
                self.add_connection(GraphConnection(second, third, 0.0))
                self.add_connection(GraphConnection(third, first, 0.0))
            elif len(node_ids) == 2:
                self.add_connection(GraphConnection(node_ids[0], node_ids[1], 0.0))

        self.set_connection_costs_to_distances()