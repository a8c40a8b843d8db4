"""Ear-clipping triangulation of simple polygons and merging of holes."""

from __future__ import annotations

import math
from collections.abc import Sequence

from eliteai.geometry import (
    ZERO_VECTOR2,
    Vector2,
    cross,
    distance_squared,
    dot,
    is_convex,
    is_point_in_triangle,
    point_in_triangle,
)
from eliteai.shapes import Triangle


class TriangulationError(ValueError):
    """Raised when a polygon cannot be triangulated."""


def neighbours(points: Sequence[Vector2], index: int) -> tuple[Vector2, Vector2, Vector2]:
    """The point at ``index`` with its previous and next point, wrapping around.

    Returns ``(current, previous, next)``.
    """
    count = len(points)
    return points[index], points[index - 1], points[(index + 1) % count]


def is_convex_in_polygon(points: Sequence[Vector2], index: int) -> bool:
    """Whether the vertex at ``index`` is convex within the point loop."""
    current, prev, nxt = neighbours(points, index)
    return is_convex(current, prev, nxt)


def is_ear(points: Sequence[Vector2], index: int) -> bool:
    """Whether no other vertex lies in the triangle cut off at ``index``."""
    current, prev, nxt = neighbours(points, index)
    corners = (current, prev, nxt)
    return not any(
        is_point_in_triangle(point, current, prev, nxt)
        for point in points
        if point not in corners
    )


def ear_clip(points: Sequence[Vector2]) -> list[Triangle]:
    """Triangulate a counter-clockwise simple polygon by clipping ears."""
    remaining = list(points)
    if len(remaining) < 3:
        raise TriangulationError("a polygon needs at least three vertices")

    triangles: list[Triangle] = []
    while len(remaining) > 3:
        ear = next(
            (
                index
                for index in range(len(remaining))
                if is_convex_in_polygon(remaining, index) and is_ear(remaining, index)
            ),
            None,
        )
        if ear is None:
            raise TriangulationError("invalid polygon: no ear found")
        current, prev, nxt = neighbours(remaining, ear)
        triangles.append(Triangle(prev, current, nxt))
        remaining.remove(current)

    triangles.append(Triangle(remaining[0], remaining[1], remaining[2]))
    return triangles


def find_mutual_visible_vertices(
    outer: Sequence[Vector2], inner: Sequence[Vector2]
) -> tuple[int, int]:
    """Find a pair of mutually visible vertices of an outer shape and a hole.

    Returns ``(outer_index, inner_index)``.
    """
    if not outer or not inner:
        raise TriangulationError("both shapes need vertices")

    inner_index = max(range(len(inner)), key=lambda i: inner[i].x)
    m = inner[inner_index]
    ray_max_x = max(point.x for point in outer)

    r = Vector2(ray_max_x, m.y) - m
    hit = ZERO_VECTOR2
    hit_edge: tuple[int, int] | None = None

    for index in range(len(outer) - 1):
        start, end = outer[index], outer[index + 1]
        if start.x <= m.x:
            continue

        point1, point2 = (end, start) if end.y > start.y else (start, end)
        q = point1
        s = point2 - q

        cross_rs = cross(r, s)
        if cross_rs == 0:
            if cross(q - m, r) == 0:
                if start.x < end.x:
                    if hit.x >= start.x:
                        hit = start
                elif hit.x >= end.x:
                    hit = end
            continue

        t = cross(q - m, s) / cross_rs
        u = cross(q - m, r) / cross_rs
        if 0 <= t <= 1 and 0 <= u <= 1:
            candidate = m + t * r
            take = hit_edge is None or (
                distance_squared(m, candidate) <= distance_squared(m, hit)
            )
            if take:
                hit = candidate
                hit_edge = (index, index + 1)

    if hit in outer:
        return list(outer).index(hit), inner_index

    if hit_edge is None:
        raise TriangulationError("no outer edge is visible from the hole")

    first, second = hit_edge
    p_index = first if outer[first].x > outer[second].x else second
    p = outer[p_index]

    reflex = [
        point
        for index, point in enumerate(outer)
        if point != p and not is_convex_in_polygon(outer, index)
    ]
    blocking = [point for point in reflex if point_in_triangle(point, m, hit, p)]
    if not blocking:
        return p_index, inner_index

    r_length = r.magnitude()
    smallest_angle = 2 * math.pi
    best = Vector2()
    for point in blocking:
        segment = point - m
        cosine = dot(segment, r) / (segment.magnitude() * r_length)
        angle = math.acos(max(-1.0, min(1.0, cosine)))
        if angle < smallest_angle:
            smallest_angle = angle
            best = point
    return list(outer).index(best), inner_index


def merge_hole(outer: Sequence[Vector2], inner: Sequence[Vector2]) -> list[Vector2]:
    """Splice a clockwise hole into a counter-clockwise outer loop.

    The hole is entered and left through a bridge between two mutually
    visible vertices, both of which appear twice in the result.
    """
    outer_index, inner_index = find_mutual_visible_vertices(outer, inner)
    hole = list(inner[inner_index:]) + list(inner[:inner_index])
    bridge = hole + [inner[inner_index], outer[outer_index]]
    return list(outer[: outer_index + 1]) + bridge + list(outer[outer_index + 1 :])