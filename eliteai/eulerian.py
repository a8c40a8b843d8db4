"""Detection and construction of Eulerian trails and circuits."""

from __future__ import annotations

import random
from enum import Enum

from eliteai.graph import Graph, GraphNode


class Eulerianity(Enum):
    NOT_EULERIAN = 0
    SEMI_EULERIAN = 1
    EULERIAN = 2


class EulerianPath:
    """Finds a trail that uses every connection of a graph exactly once."""

    def __init__(self, graph: Graph, rng: random.Random | None = None) -> None:
        self.graph = graph
        self._rng = rng if rng is not None else random.Random()

    def is_connected(self) -> bool:
        """Whether every node can be reached from a randomly chosen node."""
        nodes = self.graph.all_nodes
        if not nodes:
            return False
        start = self._rng.choice(nodes).id
        visited = {start}
        pending = [start]
        while pending:
            node_id = pending.pop()
            for connection in self.graph.connections_from_node(node_id):
                neighbor = connection.to_node_id
                if neighbor not in visited and self.graph.is_node_valid(neighbor):
                    visited.add(neighbor)
                    pending.append(neighbor)
        return len(visited) == len(nodes)

    def is_eulerian(self) -> Eulerianity:
        """Classify the graph by connectedness and the number of odd-degree nodes."""
        if not self.is_connected():
            return Eulerianity.NOT_EULERIAN
        nodes = self.graph.all_nodes
        odd_count = sum(
            1 for node in nodes if len(self.graph.connections_from_node(node.id)) % 2
        )
        if odd_count > 2:
            return Eulerianity.NOT_EULERIAN
        if odd_count == 2 and len(nodes) != 2:
            return Eulerianity.SEMI_EULERIAN
        return Eulerianity.EULERIAN

    def find_path(self) -> tuple[Eulerianity, list[GraphNode]]:
        """The graph's classification and a trail over all its connections.

        The trail is empty when the graph is not Eulerian. The graph itself
        is left untouched; the search works on a copy.
        """
        eulerianity = self.is_eulerian()
        if eulerianity is Eulerianity.NOT_EULERIAN:
            return eulerianity, []

        work = self.graph.clone()
        if eulerianity is Eulerianity.SEMI_EULERIAN:
            index = next(
                node.id
                for node in work.all_nodes
                if len(work.connections_from_node(node.id)) % 2
            )
        else:
            index = self._rng.choice(work.all_nodes).id

        stack: list[int] = []
        path: list[GraphNode] = []
        while stack or work.connections_from_node(index):
            connections = work.connections_from_node(index)
            if connections:
                stack.append(index)
                chosen = connections[self._rng.randrange(len(connections))]
                work.remove_connection(chosen.from_node_id, chosen.to_node_id)
                index = chosen.to_node_id
            else:
                path.append(self.graph.get_node(index))
                index = stack.pop()

        path.append(self.graph.get_node(index))
        path.reverse()
        return eulerianity, path