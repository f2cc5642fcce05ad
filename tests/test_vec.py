import pytest

from engine2d.vec import Vec2, Vec3, Vec4


@pytest.mark.parametrize("cls", [Vec2, Vec3, Vec4])
def test_zero_equals_default_and_of_zero(cls):
    assert cls.zero() == cls()
    assert cls.zero() == cls.of(0)


@pytest.mark.parametrize("cls", [Vec2, Vec3, Vec4])
def test_of_fills_every_component(cls):
    vec = cls.of(3)
    assert all(component == 3 for component in vec)
    assert len(list(vec)) == len(list(cls()))


def test_components_are_floats():
    vec = Vec2(1, 2)
    assert isinstance(vec.x, float) and vec.x == 1
    assert isinstance(vec.y, float) and vec.y == 2


@pytest.mark.parametrize(
    "a, b",
    [
        (Vec2(1, 2), Vec2(3, 5)),
        (Vec3(1, 2, 3), Vec3(4, 6, 8)),
        (Vec4(1, 2, 3, 4), Vec4(5, 7, 9, 11)),
    ],
)
def test_add_sub_round_trip(a, b):
    assert (a + b) - b == a
    assert a + b == b + a


@pytest.mark.parametrize(
    "a, b",
    [
        (Vec2(1, 2), Vec2(4, 8)),
        (Vec3(1, 2, 3), Vec3(2, 4, 8)),
        (Vec4(1, 2, 3, 4), Vec4(2, 4, 8, 16)),
    ],
)
def test_mul_div_round_trip(a, b):
    assert (a * b) / b == a
    assert a * b == b * a


@pytest.mark.parametrize("vec", [Vec2(1, 2), Vec3(1, 2, 3), Vec4(1, 2, 3, 4)])
def test_scalar_operations(vec):
    assert vec * 2 == vec + vec
    assert (vec * 4) / 4 == vec
    assert (vec + 5) - 5 == vec
    assert vec - vec == type(vec).zero()


def test_elementwise_add_matches_components():
    a, b = Vec2(1, 2), Vec2(3, 4)
    result = a + b
    assert result == Vec2(a.x + b.x, a.y + b.y)


def test_mismatched_types_raise():
    with pytest.raises(TypeError):
        Vec2(1, 2) + Vec3(1, 2, 3)
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * "x"


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1, 1) / 0


def test_to_world_center_is_origin():
    assert Vec2.to_world(Vec2(200, 100), 400, 200, 2.0, 1.0) == Vec2.zero()


def test_to_world_corners_map_to_extents():
    ex, ey = 1.5, 1.0
    top_left = Vec2.to_world(Vec2(0, 0), 400, 400, ex, ey)
    bottom_right = Vec2.to_world(Vec2(400, 400), 400, 400, ex, ey)
    assert top_left == Vec2(-ex, ey)
    assert bottom_right == Vec2(ex, -ey)


def test_vectors_are_mutable():
    vec = Vec2.zero()
    vec.y += 1
    assert vec == Vec2(0, 1)