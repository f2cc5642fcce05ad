import pytest

from engine2d.bounds import Bounds
from engine2d.color import RED, WHITE
from engine2d.shapes import Grid, QuadShape, Shape
from engine2d.transform import Transform
from engine2d.vec import Vec2, Vec3

IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def test_shape_defaults_to_white():
    shape = Shape()
    assert shape.color == WHITE
    assert shape.transform is None


def test_quad_keeps_transform_and_color():
    transform = Transform.from_scale(0.5)
    quad = QuadShape(transform, RED)
    assert quad.transform is transform
    assert quad.color == RED


def test_unit_quad_has_identity_matrix():
    quad = QuadShape(Transform.from_scale(1.0))
    assert quad.model_matrix() == pytest.approx(IDENTITY)


def test_centered_quad_translation_is_position():
    quad = QuadShape(Transform(Vec2(0.3, -0.7), Vec2(2.0, 4.0)))
    matrix = quad.model_matrix()
    assert matrix[12] == pytest.approx(0.3)
    assert matrix[13] == pytest.approx(-0.7)
    assert matrix[0] == pytest.approx(2.0)
    assert matrix[5] == pytest.approx(4.0)


def test_uncentered_quad_is_shifted_by_half_its_size():
    quad = QuadShape(Transform(Vec2(1.0, 1.0), Vec2(2.0, 2.0), center_origin=False))
    matrix = quad.model_matrix()
    assert matrix[12] == pytest.approx(0.0)
    assert matrix[13] == pytest.approx(0.0)


def test_rotation_about_z_in_degrees():
    quad = QuadShape(Transform(Vec2(), Vec2(2.0, 3.0), Vec3(0.0, 0.0, 90.0)))
    matrix = quad.model_matrix()
    assert matrix[0] == pytest.approx(0.0, abs=1e-12)
    assert matrix[1] == pytest.approx(3.0)
    assert matrix[4] == pytest.approx(-2.0)
    assert matrix[5] == pytest.approx(0.0, abs=1e-12)


def test_model_matrix_without_transform_raises():
    with pytest.raises(ValueError):
        QuadShape().model_matrix()


def test_grid_defaults():
    grid = Grid(Transform.from_scale(1.0))
    assert grid.line_width == 1.0
    assert grid.max_vertices == 4096
    assert grid.interval == 0.0
    assert grid.color == WHITE


def test_grid_without_interval_draws_axes():
    grid = Grid(Transform.from_scale(1.0), WHITE, 0.0)
    bounds = Bounds(-2.0, 2.0, 1.5, -1.5)
    assert grid.line_vertices(bounds) == [
        Vec2(2.0, 0.0),
        Vec2(-2.0, 0.0),
        Vec2(0.0, 1.5),
        Vec2(0.0, -1.5),
    ]


def test_grid_lines_cover_bounds_at_interval():
    grid = Grid(Transform.from_scale(1.0), WHITE, 0.5)
    bounds = Bounds(-1.0, 1.0, 1.0, -1.0)
    vertices = grid.line_vertices(bounds)
    assert len(vertices) % 2 == 0
    pairs = list(zip(vertices[::2], vertices[1::2]))
    horizontal = [(a, b) for a, b in pairs if a.y == b.y and a.x == -1.0 and b.x == 1.0]
    vertical = [(a, b) for a, b in pairs if a.x == b.x and a.y == -1.0 and b.y == 1.0]
    assert len(horizontal) + len(vertical) == len(pairs)
    assert sorted(a.y for a, _ in horizontal) == pytest.approx([-1.0, -0.5, 0.0, 0.5, 1.0])
    assert sorted(a.x for a, _ in vertical) == pytest.approx([-1.0, -0.5, 0.0, 0.5, 1.0])


def test_grid_vertices_limited_by_max_vertices():
    grid = Grid(Transform.from_scale(1.0), WHITE, 0.5)
    grid.max_vertices = 5
    vertices = grid.line_vertices(Bounds(-1.0, 1.0, 1.0, -1.0))
    assert len(vertices) == 4
    assert vertices[0] == Vec2(-1.0, -1.0)


def test_grid_matrix_ignores_center_origin():
    transform = Transform(Vec2(0.25, 0.5), Vec2(1.0, 1.0), center_origin=False)
    matrix = Grid(transform).model_matrix()
    assert matrix[12] == pytest.approx(0.25)
    assert matrix[13] == pytest.approx(0.5)