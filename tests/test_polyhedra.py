import pytest

from polyshade.polyhedra import PolyHedra, RenderPoint3D, TexCorner
from polyshade.undex import Undex3D
from polyshade.vectors import Point2D, Point3D


def test_cube_counts():
    cube = PolyHedra.cube()
    assert len(cube.corners) == 8
    assert len(cube.face_indexes) == 12
    assert len(cube.to_buffer_data()) == 36


def test_cube_corner_bits_match_signs():
    cube = PolyHedra.cube(2.0)
    for idx, corner in enumerate(cube.corners):
        assert corner.x == (2.0 if idx & 1 else -2.0)
        assert corner.y == (2.0 if idx & 2 else -2.0)
        assert corner.z == (2.0 if idx & 4 else -2.0)


def test_cube_first_triangle():
    cube = PolyHedra.cube(3.0)
    data = cube.to_buffer_data()
    assert data[0].position == Point3D(-3.0, -3.0, -3.0)
    assert data[1].position == Point3D(-3.0, 3.0, -3.0)
    assert data[2].position == Point3D(3.0, -3.0, -3.0)
    assert data[1].normal == Point3D(0.0, 0.5, 0.0)
    assert all(v.texture == Point2D() for v in data)


def test_cube_triangles_lie_in_faces_and_are_not_degenerate():
    data = PolyHedra.cube(1.5).to_buffer_data()
    for start in range(0, len(data), 3):
        a, b, c = (v.position for v in data[start:start + 3])
        assert (b - a).cross(c - a).length() > 0
        assert any(
            getattr(a, axis) == getattr(b, axis) == getattr(c, axis)
            for axis in "xyz"
        )


def test_face4_splits_into_two_triangles():
    poly = PolyHedra()
    for p in (Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0), Point3D(1, 1, 0)):
        poly.add_corner(p)
    poly.add_face4(TexCorner(0), TexCorner(1), TexCorner(2), TexCorner(3))
    assert poly.face_indexes == [Undex3D(0, 1, 2), Undex3D(2, 1, 3)]


def test_face3_texture_becomes_normal():
    poly = PolyHedra()
    for p in (Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)):
        poly.add_corner(p)
    poly.add_face3(TexCorner(0, 0.1, 0.2), TexCorner(1, 0.3, 0.4), TexCorner(2, 0.5, 0.6))
    data = poly.to_buffer_data()
    assert [v.normal for v in data] == [
        Point3D(0.1, 0.2, 0.0),
        Point3D(0.3, 0.4, 0.0),
        Point3D(0.5, 0.6, 0.0),
    ]
    assert [v.position for v in data] == poly.corners


def test_face_color_channels():
    poly = PolyHedra()
    for p in (Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)):
        poly.add_corner(p)
    poly.add_face_color(0, 1, 2, 0xFF0000)
    poly.add_face_color(0, 1, 2, 0x0000FF)
    data = poly.to_buffer_data()
    assert all(v.normal == Point3D(1.0, 0.0, 0.0) for v in data[:3])
    assert all(v.normal == Point3D(0.0, 0.0, 1.0) for v in data[3:])


def test_add_corner_returns_index():
    poly = PolyHedra()
    assert poly.add_corner(Point3D(1, 2, 3)) == 0
    assert poly.add_corner(Point3D(4, 5, 6)) == 1


def test_missing_corner_raises():
    poly = PolyHedra()
    poly.add_corner(Point3D())
    poly.add_face3(TexCorner(0), TexCorner(0), TexCorner(5))
    with pytest.raises(IndexError):
        poly.to_buffer_data()


def test_tex_corner_tex_point():
    assert TexCorner(3, 0.25, 0.5).tex == Point2D(0.25, 0.5)


def test_render_point_defaults():
    point = RenderPoint3D()
    assert point.position == Point3D()
    assert point.texture == Point2D()