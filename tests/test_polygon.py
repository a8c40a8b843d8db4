import pytest

from eliteai.geometry import Vector2, Winding, cross, get_polygon_winding, point_in_triangle
from eliteai.polygon import Polygon
from eliteai.shapes import Line, Triangle
from eliteai.triangulation import TriangulationError

SQUARE = [Vector2(0, 0), Vector2(1, 0), Vector2(1, 1), Vector2(0, 1)]
BIG = [Vector2(0, 0), Vector2(10, 0), Vector2(10, 10), Vector2(0, 10)]
HOLE = [Vector2(4, 4), Vector2(4, 6), Vector2(6, 6), Vector2(6, 4)]


def _area(triangle):
    return abs(cross(triangle.p2 - triangle.p1, triangle.p3 - triangle.p1)) / 2


def _shoelace(points):
    pairs = zip(points, points[1:] + points[:1])
    return abs(sum(a.x * b.y - b.x * a.y for a, b in pairs)) / 2


def test_center_of_square():
    assert Polygon(SQUARE).center() == Vector2(0.5, 0.5)


def test_center_of_empty_polygon_raises():
    with pytest.raises(ValueError):
        Polygon().center()


def test_extremes():
    poly = Polygon(BIG)
    assert (poly.min_x(), poly.max_x(), poly.min_y(), poly.max_y()) == (0, 10, 0, 10)


def test_overlapping_axes():
    big = Polygon(BIG)
    hole = Polygon(HOLE)
    far = Polygon([Vector2(20, 20), Vector2(30, 20), Vector2(30, 30)])
    assert hole.overlapping_x_axis(big)
    assert hole.overlapping_y_axis(big)
    assert not far.overlapping_x_axis(big)
    assert not far.overlapping_y_axis(big)


def test_add_and_remove_child():
    poly = Polygon(BIG)
    child = poly.add_child(HOLE)
    assert poly.children == (Polygon(HOLE),)
    poly.remove_child(child)
    assert poly.children == ()


def test_added_child_is_a_copy():
    original = Polygon(HOLE)
    poly = Polygon(BIG, [original])
    poly.orientate_with_children(Winding.CCW)
    assert original.points == tuple(HOLE)


def test_equality_includes_children():
    assert Polygon(BIG, [HOLE]) == Polygon(BIG, [HOLE])
    assert Polygon(BIG, [HOLE]) != Polygon(BIG)


def test_orientate_with_children():
    poly = Polygon(list(reversed(BIG)), [list(reversed(HOLE))])
    poly.orientate_with_children(Winding.CCW)
    assert get_polygon_winding(poly.points) is Winding.CCW
    assert get_polygon_winding(poly.children[0].points) is Winding.CW


def test_triangulate_square_covers_area():
    poly = Polygon(SQUARE)
    triangles = poly.triangulate()
    assert poly.is_triangulated
    assert sum(_area(t) for t in triangles) == pytest.approx(_shoelace(SQUARE))
    assert len(triangles) == len(SQUARE) - 2


def test_triangulate_with_hole_leaves_hole_out():
    poly = Polygon(BIG, [HOLE])
    triangles = poly.triangulate()
    expected = _shoelace(BIG) - _shoelace(HOLE)
    assert sum(_area(t) for t in triangles) == pytest.approx(expected)
    assert all(_area(t) > 0 for t in triangles)
    assert poly.children == (Polygon(HOLE),)
    assert poly.triangle_from_position(Vector2(5, 5)) is None


def test_triangulate_too_few_points_raises():
    with pytest.raises(TriangulationError):
        Polygon([Vector2(0, 0), Vector2(1, 0)]).triangulate()


def test_triangulate_collinear_points_raises():
    line = [Vector2(0, 0), Vector2(1, 0), Vector2(2, 0), Vector2(3, 0)]
    with pytest.raises(TriangulationError):
        Polygon(line).triangulate()


def test_line_matrix_matches_triangle_edges():
    poly = Polygon(SQUARE)
    poly.triangulate()
    lines = poly.lines
    for triangle in poly.triangles:
        edges = [
            (triangle.p1, triangle.p2),
            (triangle.p2, triangle.p3),
            (triangle.p3, triangle.p1),
        ]
        for edge, index in zip(edges, triangle.index_lines):
            line = lines[index]
            assert line.index == index
            assert {line.p1, line.p2} == set(edge)


def test_shared_line_belongs_to_two_triangles():
    poly = Polygon(SQUARE)
    first, second = poly.triangulate()
    shared = set(first.index_lines) & set(second.index_lines)
    assert len(shared) == 1
    (index,) = shared
    assert poly.triangles_from_line_index(index) == [first, second]


def test_adjacent_triangles():
    poly = Polygon(SQUARE)
    first, second = poly.triangulate()
    assert poly.adjacent_triangles(first) == [second]
    assert poly.adjacent_triangles(second) == [first]


def test_adjacent_triangles_on_line():
    poly = Polygon(SQUARE)
    first, second = poly.triangulate()
    (index,) = set(first.index_lines) & set(second.index_lines)
    shared = poly.lines[index]
    assert poly.adjacent_triangles_on_line(first, shared) == [second]
    assert poly.adjacent_triangles_on_line(first, shared.reversed()) == [second]


def test_adjacent_triangles_on_unknown_line_is_empty():
    poly = Polygon(SQUARE)
    first, _ = poly.triangulate()
    assert poly.adjacent_triangles_on_line(first, Line(Vector2(5, 5), Vector2(6, 6))) == []


def test_triangle_from_position():
    poly = Polygon(SQUARE)
    poly.triangulate()
    inside = Vector2(0.2, 0.3)
    found = poly.triangle_from_position(inside)
    assert found is not None
    assert point_in_triangle(inside, *found.points)
    assert poly.triangle_from_position(Vector2(3, 3)) is None


def test_closest_triangle_inside_keeps_position():
    poly = Polygon(SQUARE)
    poly.triangulate()
    position = Vector2(0.25, 0.25)
    triangle, point = poly.closest_triangle_from_position(position)
    assert point == position
    assert point_in_triangle(point, *triangle.points, True)


def test_closest_triangle_outside_projects_on_edge():
    poly = Polygon(SQUARE)
    poly.triangulate()
    triangle, point = poly.closest_triangle_from_position(Vector2(3, 0.5))
    assert point.x == pytest.approx(1)
    assert point.y == pytest.approx(0.5)
    assert isinstance(triangle, Triangle)
    assert point_in_triangle(point, *triangle.points, True)


def test_closest_triangle_without_triangulation():
    position = Vector2(3, 3)
    assert Polygon(SQUARE).closest_triangle_from_position(position) == (None, position)


def test_expand_clockwise_shape_grows():
    clockwise = list(reversed(SQUARE))
    poly = Polygon(clockwise)
    poly.expand_shape(1.0)
    assert len(poly) == len(clockwise)
    assert poly.min_x() < 0 and poly.max_x() > 1
    assert poly.min_y() < 0 and poly.max_y() > 1
    assert poly.center() == Polygon(clockwise).center()