import pytest

from engine2d.bounds import Bounds
from engine2d.transform import Transform
from engine2d.vec import Vec2, Vec3


def test_zero_is_default():
    zero = Transform.zero()
    assert zero == Transform()
    assert zero.position == Vec2.zero()
    assert zero.scale == Vec2.zero()
    assert zero.rotation == Vec3.zero()
    assert zero.center_origin is True
    assert zero.bounds == Bounds.zero()


def test_from_pos_variants():
    assert Transform.from_pos(Vec2(1, 2)).position == Vec2(1, 2)
    assert Transform.from_pos(1, 2).position == Vec2(1, 2)
    assert Transform.from_pos(3).position == Vec2.of(3)
    assert Transform.from_pos(1, 2).scale == Vec2.zero()


def test_from_scale_variants():
    assert Transform.from_scale(Vec2(4, 5)).scale == Vec2(4, 5)
    assert Transform.from_scale(4, 5).scale == Vec2(4, 5)
    assert Transform.from_scale(0.25).scale == Vec2.of(0.25)
    assert Transform.from_scale(4, 5).position == Vec2.zero()


def test_from_rotation_variants():
    assert Transform.from_rotation(Vec3(1, 2, 3)).rotation == Vec3(1, 2, 3)
    assert Transform.from_rotation(1, 2, 3).rotation == Vec3(1, 2, 3)
    assert Transform.from_rotation(45).rotation == Vec3.of(45)


def test_from_rotation_partial_components_raise():
    with pytest.raises(TypeError):
        Transform.from_rotation(1, 2)


def test_vector_with_extra_component_raises():
    with pytest.raises(TypeError):
        Transform.from_pos(Vec2(1, 2), 3)


def test_from_pos_does_not_alias_argument():
    pos = Vec2(1, 2)
    transform = Transform.from_pos(pos)
    transform.position.x += 5
    assert pos == Vec2(1, 2)


def test_instances_do_not_share_defaults():
    a, b = Transform(), Transform()
    a.position.y += 1
    assert b.position == Vec2.zero()


@pytest.mark.parametrize("centered", [True, False])
def test_update_bounds_matches_from_point(centered):
    transform = Transform(Vec2(1, 2), Vec2(4, 6), center_origin=centered)
    transform.update_bounds()
    assert transform.bounds == Bounds.from_point(Vec2(1, 2), Vec2(4, 6), centered)


def test_update_bounds_contains_position():
    transform = Transform(Vec2(3, -1), Vec2(2, 2))
    transform.update_bounds()
    assert transform.bounds.contains(transform.position)