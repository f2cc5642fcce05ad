"""A demo scene: a movable player, a cursor marker, key indicators and grids."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, Optional, Sequence

from engine2d.color import BLACK, BLUE, GRAY, LIGHT_GRAY, ORANGE, PURPLE, RED, WHITE
from engine2d.engine import Engine, ScaleMode
from engine2d.inputs import Input
from engine2d.scene import Scene
from engine2d.shader import ShaderError
from engine2d.shapes import Grid, QuadShape
from engine2d.transform import Transform
from engine2d.vec import Vec2


def _key_transform(x: float, y: float) -> Transform:
    return Transform(Vec2(x, y), Vec2.of(0.1))


def _marker_transform(x: float, y: float) -> Transform:
    return Transform(Vec2(x, y), Vec2.of(0.125))


class DemoScene(Scene):
    """Moves a player with the movement inputs and shows which ones are pressed."""

    def __init__(self, engine: Optional[Engine] = None) -> None:
        super().__init__()
        self.engine = engine or Engine.instance()
        self.speed = 0.01
        self.up = self.down = self.left = self.right = self.sprint = False

        wb = self.engine.world_bounds

        self.w_key = QuadShape(_key_transform(wb.right + 0.18, wb.top - 0.08), WHITE)
        self.a_key = QuadShape(_key_transform(wb.right + 0.08, wb.top - 0.18), WHITE)
        self.s_key = QuadShape(_key_transform(wb.right + 0.18, wb.top - 0.18), WHITE)
        self.d_key = QuadShape(_key_transform(wb.right + 0.28, wb.top - 0.18), WHITE)
        self.shift_key = QuadShape(_key_transform(wb.right + 0.43, wb.top - 0.08), WHITE)
        self.add_child("w", self.w_key)
        self.add_child("a", self.a_key)
        self.add_child("s", self.s_key)
        self.add_child("d", self.d_key)
        self.add_child("ls", self.shift_key)

        self.cursor = QuadShape(Transform.from_scale(0.05), RED)
        self.add_child("cursor", self.cursor)

        self.player = QuadShape(Transform.from_scale(0.25), PURPLE)
        self.add_child("player", self.player)

        self.rectangle = QuadShape(Transform.from_scale(0.2375, 0.15), ORANGE)

        self.sub_grid = Grid(Transform.from_scale(wb.bottom, wb.right), LIGHT_GRAY, 0.125)
        self.main_grid = Grid(Transform.from_scale(wb.top, wb.right), GRAY, 0.5)
        self.axes = Grid(Transform.from_scale(wb.top, wb.right), WHITE, 0.0)
        self.axes.line_width = 2.0
        self.add_child("subGrid", self.sub_grid)
        self.add_child("mainGrid", self.main_grid)
        self.add_child("axes", self.axes)

        # Markers at the edges of the world, like a compass.
        self.e_top = QuadShape(_marker_transform(0.0, wb.top), RED)
        self.e_bottom = QuadShape(_marker_transform(0.0, wb.bottom), WHITE)
        self.e_left = QuadShape(_marker_transform(wb.left, 0.0), WHITE)
        self.e_right = QuadShape(_marker_transform(wb.right, 0.0), WHITE)
        self.add_child("etop", self.e_top)
        self.add_child("ebottom", self.e_bottom)
        self.add_child("eleft", self.e_left)
        self.add_child("eright", self.e_right)

    def update(self, delta: float) -> None:
        """Move the player and refresh the cursor, indicators, grids and markers."""
        step = self.speed * (2.0 if self.sprint else 1.0)
        position = self.player.transform.position
        if self.up:
            position.y += step
        if self.left:
            position.x -= step
        if self.down:
            position.y -= step
        if self.right:
            position.x += step

        wb = self.engine.world_bounds
        mouse = self.engine.mouse_pos

        self.cursor.transform = Transform(Vec2(mouse.x, mouse.y), Vec2.of(0.05))

        for key, pressed in (
            (self.w_key, self.up),
            (self.a_key, self.left),
            (self.s_key, self.down),
            (self.d_key, self.right),
            (self.shift_key, self.sprint),
        ):
            key.color = BLUE if pressed else WHITE

        self.w_key.transform = _key_transform(wb.left + 0.18, wb.top - 0.08)
        self.a_key.transform = _key_transform(wb.left + 0.07, wb.top - 0.19)
        self.s_key.transform = _key_transform(wb.left + 0.18, wb.top - 0.19)
        self.d_key.transform = _key_transform(wb.left + 0.29, wb.top - 0.19)
        self.shift_key.transform = _key_transform(wb.left + 0.40, wb.top - 0.08)

        for grid in (self.sub_grid, self.main_grid, self.axes):
            grid.transform = Transform.from_scale(1, 1)

        self.e_top.transform = _marker_transform(0.0, wb.top)
        self.e_bottom.transform = _marker_transform(0.0, wb.bottom)
        self.e_left.transform = _marker_transform(wb.left, 0.0)
        self.e_right.transform = _marker_transform(wb.right, 0.0)

        self.player.color = BLUE if self.player.transform.bounds.contains(mouse) else PURPLE

    def input(self) -> None:
        """Read the engine's inputs into movement, quit, reset and debug actions."""
        engine = self.engine
        self.up = engine.is_input_pressed("up")
        self.down = engine.is_input_pressed("down")
        self.left = engine.is_input_pressed("left")
        self.right = engine.is_input_pressed("right")
        self.sprint = engine.is_input_pressed("sprint")
        self.should_quit = engine.is_input_pressed("quit")

        if engine.is_input_pressed("reset"):
            self.player.transform.position = Vec2.zero()

        if engine.is_input_pressed("debug"):
            engine.set_window_size(170, 170)


def _default_bindings() -> Dict[str, int]:
    from pyglet.window import key

    return {
        "up": key.W,
        "down": key.S,
        "left": key.A,
        "right": key.D,
        "sprint": key.LSHIFT,
        "quit": key.ESCAPE,
        "reset": key.R,
        "debug": key.TAB,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window and run the demo scene."""
    parser = argparse.ArgumentParser(description="Run the 2D engine demo scene.")
    parser.parse_args(argv)

    engine = Engine.instance()
    engine.title = "2D Engine"
    engine.scale_mode = ScaleMode.SCALE
    try:
        engine.init()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1

    for name, code in _default_bindings().items():
        engine.add_input(Input(name, {code}))

    scene = DemoScene(engine)
    scene.background_color = BLACK
    engine.default_scene = scene

    try:
        engine.start()
    except ShaderError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())