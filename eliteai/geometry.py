"""Two-dimensional vectors and the geometric predicates built on them."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise

FLT_EPSILON = 1.1920928955078125e-07


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0.0:
            return Vector2()
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        return self.x * other.y - self.y * other.x

    def distance(self, other: Vector2) -> float:
        return (other - self).magnitude()

    def distance_squared(self, other: Vector2) -> float:
        return (other - self).magnitude_squared()


ZERO_VECTOR2 = Vector2()


class Winding(Enum):
    """Orientation of a polygon: outer shapes CCW, inner shapes CW."""

    CCW = 0
    CW = 1


def dot(a: Vector2, b: Vector2) -> float:
    return a.dot(b)


def cross(a: Vector2, b: Vector2) -> float:
    return a.cross(b)


def distance(a: Vector2, b: Vector2) -> float:
    return a.distance(b)


def distance_squared(a: Vector2, b: Vector2) -> float:
    return a.distance_squared(b)


def angle_between(a: Vector2, b: Vector2) -> float:
    """Signed angle that rotates ``a`` onto ``b``, in radians."""
    return math.atan2(cross(a, b), dot(a, b))


def get_polygon_winding(shape: Iterable[Vector2]) -> Winding:
    """Determine whether the points of ``shape`` are ordered CW or CCW."""
    points = list(shape)
    if len(points) < 2:
        raise ValueError("a winding needs at least two points")
    segments = [b - a for a, b in pairwise(points)]
    total = sum(
        angle_between(current, -previous)
        for previous, current in zip(segments, segments[1:] + segments[:1])
    )
    return Winding.CW if total <= 0 else Winding.CCW


def is_convex(tip: Vector2, prev: Vector2, next: Vector2) -> bool:
    """Whether ``tip`` lies on the convex side of the line prev -> next."""
    d = (tip.x - prev.x) * (next.y - prev.y) - (tip.y - prev.y) * (next.x - prev.x)
    return d > 0


def point_in_triangle_bounding_box(
    p: Vector2, tip: Vector2, prev: Vector2, next: Vector2
) -> bool:
    """Quick test of ``p`` against the triangle's bounding box."""
    x_min = min(tip.x, prev.x, next.x) - FLT_EPSILON
    x_max = max(tip.x, prev.x, next.x) + FLT_EPSILON
    y_min = min(tip.y, prev.y, next.y) - FLT_EPSILON
    y_max = max(tip.y, prev.y, next.y) + FLT_EPSILON
    return not (p.x < x_min or x_max < p.x or p.y < y_min or y_max < p.y)


def distance_square_point_to_line(p1: Vector2, p2: Vector2, point: Vector2) -> float:
    """Squared distance from ``point`` to the segment p1-p2."""
    segment_sq = distance_squared(p1, p2)
    if segment_sq == 0.0:
        return distance_squared(p2, point)
    dp = ((point.x - p1.x) * (p2.x - p1.x) + (point.y - p1.y) * (p2.y - p1.y)) / segment_sq
    if dp < 0:
        return distance_squared(p1, point)
    if dp <= 1:
        return distance_squared(point, p1) - dp * dp * segment_sq
    return distance_squared(p2, point)


def is_point_in_triangle(
    point: Vector2, tri1: Vector2, tri2: Vector2, tri3: Vector2
) -> bool:
    """Barycentric point-in-triangle test, edges included."""
    denominator = (tri2.y - tri3.y) * (tri1.x - tri3.x) + (tri3.x - tri2.x) * (tri1.y - tri3.y)
    if denominator == 0:
        return False
    a = ((tri2.y - tri3.y) * (point.x - tri3.x) + (tri3.x - tri2.x) * (point.y - tri3.y)) / denominator
    b = ((tri3.y - tri1.y) * (point.x - tri3.x) + (tri1.x - tri3.x) * (point.y - tri3.y)) / denominator
    c = 1 - a - b
    return 0 <= a <= 1 and 0 <= b <= 1 and 0 <= c <= 1


def point_in_triangle(
    point: Vector2,
    tip: Vector2,
    prev: Vector2,
    next: Vector2,
    on_line_allowed: bool = False,
) -> bool:
    """Point-in-triangle test; points on an edge count only when allowed."""
    if not point_in_triangle_bounding_box(point, tip, prev, next):
        return False

    v0 = prev - tip
    v1 = next - tip
    v2 = point - tip

    dot00 = dot(v0, v0)
    dot01 = dot(v0, v1)
    dot02 = dot(v0, v2)
    dot11 = dot(v1, v1)
    dot12 = dot(v1, v2)

    denom = dot00 * dot11 - dot01 * dot01
    inside = False
    if denom != 0:
        inv_denom = 1 / denom
        u = (dot11 * dot02 - dot01 * dot12) * inv_denom
        v = (dot00 * dot12 - dot01 * dot02) * inv_denom
        inside = not (u < 0 or v < 0 or u > 1 or v > 1 or (u + v) > 1)

    if inside:
        return True
    if on_line_allowed:
        return (
            distance_square_point_to_line(tip, next, point) <= FLT_EPSILON
            or distance_square_point_to_line(next, prev, point) <= FLT_EPSILON
            or distance_square_point_to_line(prev, tip, point) <= FLT_EPSILON
        )
    return False


def is_point_on_line(line_start: Vector2, line_end: Vector2, point: Vector2) -> bool:
    """Whether the projection of ``point`` falls within the line's unit span."""
    line = (line_end - line_start).normalized()
    proj = dot(point - line_start, line)
    if proj < 0:
        return False
    return not proj > dot(line, line)


def project_on_line_segment(
    segment_start: Vector2,
    segment_end: Vector2,
    point: Vector2,
    offset: float = 0.0,
) -> Vector2:
    """Project ``point`` onto the segment shortened by ``offset`` at both ends."""
    v_end = segment_end + (segment_start - segment_end).normalized() * offset
    v_start = segment_start + (segment_end - segment_start).normalized() * offset
    line = v_end - v_start

    proj = dot(point - v_start, line)
    if proj <= 0:
        return v_start
    vsq = dot(line, line)
    if proj >= vsq:
        return v_end
    return v_start + (proj / vsq) * line


def is_segment_intersecting_with_circle(
    start_segment: Vector2,
    end_segment: Vector2,
    circle_center: Vector2,
    circle_radius: float,
) -> bool:
    closest = project_on_line_segment(start_segment, end_segment, circle_center)
    return (circle_center - closest).magnitude_squared() <= circle_radius * circle_radius