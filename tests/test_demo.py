import pytest

from engine2d.color import BLUE, PURPLE, RED, WHITE
from engine2d.demo import DemoScene
from engine2d.engine import Engine
from engine2d.inputs import Input, KeyAction
from engine2d.vec import Vec2

CODES = {
    "up": 1,
    "down": 2,
    "left": 3,
    "right": 4,
    "sprint": 5,
    "quit": 6,
    "reset": 7,
    "debug": 8,
}


def make_engine():
    engine = Engine()
    for name, code in CODES.items():
        engine.add_input(Input(name, {code}))
    engine.window_focused = True
    engine.reshape_viewport(400, 400)
    engine.update_world_bounds()
    return engine


def make_scene():
    engine = make_engine()
    scene = DemoScene(engine)
    engine.current_scene = scene
    return engine, scene


def test_scene_children_names():
    _, scene = make_scene()
    assert list(scene.children) == [
        "w", "a", "s", "d", "ls", "cursor", "player",
        "subGrid", "mainGrid", "axes",
        "etop", "ebottom", "eleft", "eright",
    ]
    assert all(child.scene is scene for child in scene.children.values())


def test_initial_colors():
    _, scene = make_scene()
    assert scene.player.color == PURPLE
    assert scene.cursor.color == RED
    assert scene.e_top.color == RED
    assert scene.axes.line_width == 2.0


def test_pressing_up_moves_player():
    engine, scene = make_scene()
    engine.handle_key(CODES["up"], KeyAction.PRESS)
    assert scene.up is True
    scene.update(0.0)
    assert scene.player.transform.position.y == pytest.approx(scene.speed)
    assert scene.player.transform.position.x == pytest.approx(0.0)
    assert scene.w_key.color == BLUE
    assert scene.a_key.color == WHITE


def test_sprint_doubles_the_step():
    engine, scene = make_scene()
    engine.handle_key(CODES["right"], KeyAction.PRESS)
    engine.handle_key(CODES["sprint"], KeyAction.PRESS)
    scene.update(0.0)
    assert scene.player.transform.position.x == pytest.approx(2 * scene.speed)
    assert scene.shift_key.color == BLUE


def test_release_stops_movement():
    engine, scene = make_scene()
    engine.handle_key(CODES["left"], KeyAction.PRESS)
    engine.handle_key(CODES["left"], KeyAction.RELEASE)
    scene.update(0.0)
    assert scene.player.transform.position == Vec2(0.0, 0.0)
    assert scene.a_key.color == WHITE


def test_unfocused_window_ignores_inputs():
    engine, scene = make_scene()
    engine.window_focused = False
    engine.handle_key(CODES["down"], KeyAction.PRESS)
    assert scene.down is False


def test_quit_input_sets_should_quit():
    engine, scene = make_scene()
    engine.handle_key(CODES["quit"], KeyAction.PRESS)
    assert scene.should_quit is True


def test_reset_returns_player_to_origin():
    engine, scene = make_scene()
    scene.player.transform.position = Vec2(0.4, -0.3)
    engine.handle_key(CODES["reset"], KeyAction.PRESS)
    assert scene.player.transform.position == Vec2.zero()


def test_cursor_follows_mouse():
    engine, scene = make_scene()
    engine.mouse_pos = Vec2(0.3, -0.2)
    scene.update(0.0)
    assert scene.cursor.transform.position == Vec2(0.3, -0.2)
    assert scene.cursor.transform.scale == Vec2.of(0.05)


def test_player_turns_blue_under_mouse():
    engine, scene = make_scene()
    engine.mouse_pos = Vec2(0.0, 0.0)
    scene.update_children()
    scene.update(0.0)
    assert scene.player.color == BLUE

    engine.mouse_pos = Vec2(0.9, 0.9)
    scene.update(0.0)
    assert scene.player.color == PURPLE


def test_compass_markers_sit_on_world_edges():
    engine, scene = make_scene()
    scene.update(0.0)
    wb = engine.world_bounds
    assert scene.e_top.transform.position == Vec2(0.0, wb.top)
    assert scene.e_bottom.transform.position == Vec2(0.0, wb.bottom)
    assert scene.e_left.transform.position == Vec2(wb.left, 0.0)
    assert scene.e_right.transform.position == Vec2(wb.right, 0.0)


def test_grids_reset_to_unit_scale():
    _, scene = make_scene()
    scene.update(0.0)
    for grid in (scene.sub_grid, scene.main_grid, scene.axes):
        assert grid.transform.scale == Vec2(1.0, 1.0)