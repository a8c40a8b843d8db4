"""Simple 2D shapes: lines, triangles and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from eliteai.geometry import Vector2


@dataclass(frozen=True)
class Line:
    """A segment between two points; ``index`` identifies it inside a mesh."""

    p1: Vector2 = Vector2()
    p2: Vector2 = Vector2()
    index: int = field(default=-1, compare=False)

    def __getitem__(self, position: int) -> Vector2:
        return self.p1 if position == 0 else self.p2

    def reversed(self) -> Line:
        """The same segment running the other way, keeping the index."""
        return Line(self.p2, self.p1, self.index)


def _no_lines() -> list[int]:
    return [-1, -1, -1]


@dataclass
class Triangle:
    """Three points plus the mesh indices of the lines along its edges."""

    p1: Vector2 = Vector2()
    p2: Vector2 = Vector2()
    p3: Vector2 = Vector2()
    index_lines: list[int] = field(default_factory=_no_lines, compare=False)

    def center(self) -> Vector2:
        return (self.p1 + self.p2 + self.p3) / 3.0

    @property
    def points(self) -> tuple[Vector2, Vector2, Vector2]:
        return (self.p1, self.p2, self.p3)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its bottom-left corner and size."""

    bottom_left: Vector2 = Vector2()
    width: float = 0.0
    height: float = 0.0


def is_overlapping(a: Rect, b: Rect) -> bool:
    """Whether two rectangles overlap; touching edges count as overlapping."""
    if (
        a.bottom_left.x + a.width < b.bottom_left.x
        or b.bottom_left.x + b.width < a.bottom_left.x
    ):
        return False
    if (
        a.bottom_left.y > b.bottom_left.y + b.height
        or b.bottom_left.y > a.bottom_left.y + a.height
    ):
        return False
    return True