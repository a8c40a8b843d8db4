"""Polygons with holes, their triangulation and the mesh lines between triangles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import combinations

from eliteai.geometry import (
    Vector2,
    Winding,
    distance_squared,
    get_polygon_winding,
    point_in_triangle,
    project_on_line_segment,
)
from eliteai.shapes import Line, Triangle
from eliteai.triangulation import ear_clip, merge_hole


class Polygon:
    """A closed shape given by its outline, with optional inner shapes (holes)."""

    def __init__(
        self,
        points: Iterable[Vector2] = (),
        children: Iterable[Polygon | Iterable[Vector2]] = (),
    ) -> None:
        self._points: list[Vector2] = list(points)
        self._children: list[Polygon] = []
        self._triangles: list[Triangle] = []
        self._lines: list[Line] = []
        self._is_triangulated = False
        for child in children:
            self.add_child(child)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._children == other._children and self._points == other._points

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"Polygon(points={self._points!r}, children={self._children!r})"

    def _clone(self) -> Polygon:
        return Polygon(self._points, self._children)

    @property
    def points(self) -> tuple[Vector2, ...]:
        return tuple(self._points)

    @property
    def children(self) -> tuple[Polygon, ...]:
        return tuple(self._children)

    @property
    def triangles(self) -> tuple[Triangle, ...]:
        return tuple(self._triangles)

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    @property
    def is_triangulated(self) -> bool:
        return self._is_triangulated

    # --- children ---------------------------------------------------------

    def add_child(self, child: Polygon | Iterable[Vector2]) -> Polygon:
        """Add an inner shape (a copy of it) and return the stored child."""
        stored = child._clone() if isinstance(child, Polygon) else Polygon(child)
        self._children.append(stored)
        return stored

    def remove_child(self, child: Polygon) -> None:
        """Remove the first child equal to ``child``; absent children are ignored."""
        if child in self._children:
            self._children.remove(child)

    # --- general information ---------------------------------------------

    def center(self) -> Vector2:
        """Average of the outline's vertices."""
        if not self._points:
            raise ValueError("an empty polygon has no center")
        total = sum(self._points, Vector2())
        return total / len(self._points)

    def max_x(self) -> float:
        return max((p.x for p in self._points), default=-math.inf)

    def max_y(self) -> float:
        return max((p.y for p in self._points), default=-math.inf)

    def min_x(self) -> float:
        return min((p.x for p in self._points), default=math.inf)

    def min_y(self) -> float:
        return min((p.y for p in self._points), default=math.inf)

    def overlapping_x_axis(self, other: Polygon) -> bool:
        left = self.min_x() < other.min_x() and self.max_x() > other.min_x()
        inside = self.min_x() >= other.min_x() and self.max_x() <= other.max_x()
        right = self.max_x() > other.max_x() and self.min_x() < other.max_x()
        return left or inside or right

    def overlapping_y_axis(self, other: Polygon) -> bool:
        bottom = self.max_y() < other.max_y() and self.max_y() > other.min_y()
        inside = self.min_y() >= other.min_y() and self.max_y() <= other.max_y()
        top = self.max_y() > other.max_y() and self.min_y() < other.max_y()
        return bottom or inside or top

    # --- triangle queries -------------------------------------------------

    def adjacent_triangles(self, triangle: Triangle) -> list[Triangle]:
        """Triangles sharing exactly two vertices with ``triangle``."""
        corners = triangle.points
        return [
            other
            for other in self._triangles
            if other is not triangle
            and sum(1 for corner in corners if corner in other.points) == 2
        ]

    def adjacent_triangles_on_line(self, triangle: Triangle, line: Line) -> list[Triangle]:
        """Other triangles bordering the mesh line equal to ``line`` (either way)."""
        reverse = Line(line.p2, line.p1)
        index = next(
            (mesh_line.index for mesh_line in self._lines if mesh_line in (line, reverse)),
            None,
        )
        if index is None:
            return []
        return [
            other
            for other in self._triangles
            if other is not triangle and index in other.index_lines
        ]

    def triangle_from_position(
        self, position: Vector2, on_line_allowed: bool = False
    ) -> Triangle | None:
        """The first triangle containing ``position``, or None."""
        return next(
            (
                triangle
                for triangle in self._triangles
                if point_in_triangle(position, *triangle.points, on_line_allowed)
            ),
            None,
        )

    def closest_triangle_from_position(
        self, position: Vector2
    ) -> tuple[Triangle | None, Vector2]:
        """The triangle at or nearest to ``position`` and the point used on it.

        Outside the mesh, ``position`` is projected on the closest mesh line.
        """
        containing = self.triangle_from_position(position, True)
        if containing is not None:
            return containing, position

        closest: Line | None = None
        closest_point = position
        closest_sq = 0.0
        for line in self._lines:
            point = project_on_line_segment(line.p1, line.p2, position)
            dist_sq = distance_squared(point, position)
            if closest is None or dist_sq < closest_sq:
                closest, closest_point, closest_sq = line, point, dist_sq

        if closest is None:
            return None, position
        triangle = next(
            (t for t in self._triangles if closest.index in t.index_lines), None
        )
        return triangle, closest_point

    def triangles_from_line_index(self, line_index: int) -> list[Triangle]:
        return [t for t in self._triangles if line_index in t.index_lines]

    # --- triangulation ----------------------------------------------------

    def triangulate(self) -> list[Triangle]:
        """Merge the holes into the outline and cut the result into triangles."""
        self.orientate_with_children(Winding.CCW)
        self._children.sort(key=lambda child: child.max_y(), reverse=True)
        backup = [child._clone() for child in self._children]

        children = self._children
        for i, j in combinations(range(len(children)), 2):
            first, second = children[i], children[j]
            if first.overlapping_y_axis(second) or first.max_y() < second.max_y():
                if first.max_x() < second.max_x():
                    children[i], children[j] = second, first

        try:
            while self._children:
                self._split()
            self._triangles = ear_clip(self._points)
        finally:
            self._children = backup

        self._is_triangulated = True
        self._generate_line_matrix()
        return list(self._triangles)

    def orientate_with_children(self, winding: Winding) -> None:
        """Give the outline ``winding`` and each nested level the opposite one."""
        if len(self._points) >= 2 and get_polygon_winding(self._points) is not winding:
            self._points.reverse()
        opposite = Winding.CW if winding is Winding.CCW else Winding.CCW
        for child in self._children:
            child.orientate_with_children(opposite)

    def expand_shape(self, amount: float) -> None:
        """Move every vertex along its vertex normal by about ``amount``."""
        points = self._points
        previous = points[-1:] + points[:-1]
        following = points[1:] + points[:1]
        adjusted: list[Vector2] = []
        for current, prev, nxt in zip(points, previous, following):
            dir_one = current - prev
            dir_two = nxt - current
            norm_one = Vector2(-dir_one.y, dir_one.x).normalized() * amount
            norm_two = Vector2(-dir_two.y, dir_two.x).normalized() * amount
            size = math.hypot(norm_one.magnitude(), norm_two.magnitude())
            vertex_normal = ((norm_one + norm_two) / 2.0).normalized() * size
            adjusted.append(current + vertex_normal)
        self._points = adjusted

    def _split(self) -> None:
        new_children: list[Polygon] = []
        for child in self._children:
            self._points = merge_hole(self._points, child._points)
            for grandchild in child._children:
                nested = grandchild._clone()
                nested.orientate_with_children(Winding.CW)
                new_children.append(nested)
        self._children = new_children

    def _generate_line_matrix(self) -> None:
        self._lines = []
        lookup: dict[tuple[Vector2, Vector2], int] = {}
        for triangle in self._triangles:
            edges = (
                (triangle.p1, triangle.p2),
                (triangle.p2, triangle.p3),
                (triangle.p3, triangle.p1),
            )
            found = [lookup.get(edge, lookup.get((edge[1], edge[0]), -1)) for edge in edges]
            for slot, (edge, index) in enumerate(zip(edges, found)):
                if index == -1:
                    index = len(self._lines)
                    self._lines.append(Line(edge[0], edge[1], index))
                    lookup[edge] = index
                triangle.index_lines[slot] = index