"""Path finding on a navigation mesh with funnel-based path smoothing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from eliteai.geometry import Vector2, cross
from eliteai.graph import INVALID_NODE_ID, GraphConnection, GraphNode
from eliteai.navgraph import NavGraph, NavGraphNode
from eliteai.polygon import Polygon
from eliteai.search import AStar, chebyshev
from eliteai.shapes import Line


@dataclass
class Portal:
    """A mesh line the path passes through; ``p1`` is the right point."""

    line: Line = field(default_factory=Line)


@dataclass
class NavMeshPath:
    """A smoothed path and the intermediate results that produced it."""

    path: list[Vector2] = field(default_factory=list)
    debug_node_positions: list[Vector2] = field(default_factory=list)
    debug_portals: list[Portal] = field(default_factory=list)


def find_portals(
    node_path: Sequence[GraphNode], nav_mesh_polygon: Polygon
) -> list[Portal]:
    """Portals for every inner node of the path, between degenerate end portals."""
    if not node_path:
        raise ValueError("a node path is needed to find portals")

    first = node_path[0].position
    portals = [Portal(Line(first, first))]
    lines = nav_mesh_polygon.lines
    for previous_node, node in zip(node_path, node_path[1:-1]):
        line = lines[node.line_index]
        center = (line.p1 + line.p2) / 2.0
        previous = previous_node.position
        if cross(center - previous, line.p1 - previous) > 0:
            portals.append(Portal(Line(line.p2, line.p1)))
        else:
            portals.append(Portal(Line(line.p1, line.p2)))

    last = node_path[-1].position
    portals.append(Portal(Line(last, last)))
    return portals


def optimize_portals(portals: Sequence[Portal]) -> list[Vector2]:
    """Pull a path taut through the portals (simple stupid funnel algorithm)."""
    amount = len(portals)
    if amount < 2:
        raise ValueError("at least two portals are needed")

    left_index = right_index = 1
    apex = portals[0].line.p1
    right_leg = portals[right_index].line.p1 - apex
    left_leg = portals[left_index].line.p2 - apex
    path = [apex]

    portal_index = 1
    while portal_index < amount:
        portal = portals[portal_index]

        new_right_leg = portal.line.p1 - apex
        if cross(new_right_leg, right_leg) < 0:
            if cross(right_leg, left_leg) * cross(new_right_leg, left_leg) > 0:
                right_leg = new_right_leg
                right_index = portal_index
            else:
                apex = left_leg + apex
                portal_index = left_index + 1
                left_index = right_index = portal_index
                path.append(apex)
                if portal_index < amount:
                    right_leg = portals[right_index].line.p1 - apex
                    left_leg = portals[left_index].line.p2 - apex
                    portal_index += 1
                    continue

        new_left_leg = portal.line.p2 - apex
        if cross(new_left_leg, left_leg) > 0:
            if cross(left_leg, right_leg) * cross(new_left_leg, right_leg) > 0:
                left_leg = new_left_leg
                left_index = portal_index
            else:
                apex = right_leg + apex
                portal_index = right_index + 1
                right_index = left_index = portal_index
                path.append(apex)
                if portal_index < amount:
                    right_leg = portals[right_index].line.p1 - apex
                    left_leg = portals[left_index].line.p2 - apex
                    portal_index += 1
                    continue

        portal_index += 1

    path.append(portals[-1].line.p1)
    return path


def find_path_with_debug(
    start_pos: Vector2, end_pos: Vector2, nav_graph: NavGraph
) -> NavMeshPath:
    """Find a smoothed path and keep the A* node positions and portals used."""
    polygon = nav_graph.nav_mesh_polygon
    start_triangle = polygon.triangle_from_position(start_pos)
    end_triangle = polygon.triangle_from_position(end_pos)
    if start_triangle is None or end_triangle is None:
        return NavMeshPath()
    if start_triangle is end_triangle:
        return NavMeshPath([start_pos, end_pos])

    graph = nav_graph.clone()
    start_id = graph.add_node(NavGraphNode(start_pos, -1))
    _connect_to_triangle(graph, start_id, start_triangle.index_lines)
    end_id = graph.add_node(NavGraphNode(end_pos, -1))
    _connect_to_triangle(graph, end_id, end_triangle.index_lines)
    graph.set_connection_costs_to_distances()

    node_path = AStar(graph, chebyshev).find_path(
        graph.get_node(start_id), graph.get_node(end_id)
    )
    if not node_path:
        return NavMeshPath()

    positions = [node.position for node in node_path]
    portals = find_portals(node_path, polygon)
    return NavMeshPath(optimize_portals(portals), positions, portals)


def find_path(start_pos: Vector2, end_pos: Vector2, nav_graph: NavGraph) -> list[Vector2]:
    """A smoothed path from ``start_pos`` to ``end_pos``; empty if there is none."""
    return find_path_with_debug(start_pos, end_pos, nav_graph).path


def _connect_to_triangle(graph: NavGraph, node_id: int, line_indices: Sequence[int]) -> None:
    for line_index in line_indices:
        other = graph.node_id_from_line_index(line_index)
        if other != INVALID_NODE_ID:
            graph.add_connection(GraphConnection(node_id, other))