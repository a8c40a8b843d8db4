"""Path searches on graphs: A* with distance heuristics and breadth-first search."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from eliteai.graph import Graph, GraphConnection, GraphNode

Heuristic = Callable[[float, float], float]

_OCTILE_FACTOR = 0.414213562373095048801  # sqrt(2) - 1


def manhattan(x: float, y: float) -> float:
    return x + y


def euclidean(x: float, y: float) -> float:
    return math.sqrt(x * x + y * y)


def sq_euclidean(x: float, y: float) -> float:
    return x * x + y * y


def octile(x: float, y: float) -> float:
    return _OCTILE_FACTOR * x + y if x < y else _OCTILE_FACTOR * y + x


def chebyshev(x: float, y: float) -> float:
    return max(x, y)


@dataclass
class NodeRecord:
    """The best known connection into a node and its accumulated costs."""

    node: GraphNode | None = None
    connection: GraphConnection | None = None
    cost_so_far: float = 0.0
    estimated_total_cost: float = 0.0

    def __lt__(self, other: NodeRecord) -> bool:
        return self.estimated_total_cost < other.estimated_total_cost


class AStar:
    """A* search guided by a heuristic on the distance between node positions."""

    def __init__(self, graph: Graph, heuristic: Heuristic = euclidean) -> None:
        self.graph = graph
        self.heuristic = heuristic

    def _heuristic_cost(self, start: GraphNode, end: GraphNode) -> float:
        delta = self.graph.node_pos(end.id) - self.graph.node_pos(start.id)
        return self.heuristic(abs(delta.x), abs(delta.y))

    def find_path(self, start_node: GraphNode, goal_node: GraphNode) -> list[GraphNode]:
        """Nodes from start to goal along the cheapest path; empty if none."""
        open_records = [
            NodeRecord(start_node, None, 0.0, self._heuristic_cost(start_node, goal_node))
        ]
        closed_records: list[NodeRecord] = []

        while open_records:
            current = min(open_records)
            if current.node is goal_node:
                return self._reconstruct(current, closed_records, start_node)

            open_records.remove(current)
            closed_records.append(current)

            for connection in self.graph.connections_from_node(current.node.id):
                to_node = self.graph.get_node(connection.to_node_id)
                cost = current.cost_so_far + connection.cost

                closed = _find_record(closed_records, to_node)
                if closed is not None:
                    if cost >= closed.cost_so_far:
                        continue
                    closed_records.remove(closed)

                opened = _find_record(open_records, to_node)
                if opened is not None:
                    if cost >= opened.cost_so_far:
                        continue
                    open_records.remove(opened)

                open_records.append(
                    NodeRecord(
                        to_node,
                        connection,
                        cost,
                        cost + self._heuristic_cost(to_node, goal_node),
                    )
                )
        return []

    def _reconstruct(
        self, record: NodeRecord, closed: list[NodeRecord], start_node: GraphNode
    ) -> list[GraphNode]:
        path: list[GraphNode] = []
        while record.connection is not None:
            path.append(record.node)
            from_node = self.graph.get_node(record.connection.from_node_id)
            previous = _find_record(closed, from_node)
            if previous is None:
                break
            record = previous
        path.append(start_node)
        path.reverse()
        return path


def _find_record(records: list[NodeRecord], node: GraphNode | None) -> NodeRecord | None:
    return next((record for record in records if record.node is node), None)


class BFS:
    """Breadth-first search: the path with the fewest connections."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def find_path(self, start_node: GraphNode, goal_node: GraphNode) -> list[GraphNode]:
        """Nodes from start to goal; raises ValueError if the goal is unreachable."""
        open_nodes: deque[GraphNode] = deque([start_node])
        came_from: dict[GraphNode, GraphNode] = {}

        while open_nodes:
            current = open_nodes.popleft()
            if current is goal_node:
                break
            for connection in self.graph.connections_from_node(current.id):
                next_node = self.graph.get_node(connection.to_node_id)
                if next_node not in came_from:
                    open_nodes.append(next_node)
                    came_from[next_node] = current

        path: list[GraphNode] = []
        current = goal_node
        while current is not start_node:
            path.append(current)
            try:
                current = came_from[current]
            except KeyError:
                raise ValueError("the goal node cannot be reached") from None
        path.append(start_node)
        path.reverse()
        return path