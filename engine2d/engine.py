"""The engine: window, main loop, input state and viewport handling."""

from __future__ import annotations

import sys
import time
from enum import Enum, auto
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from engine2d.bounds import Bounds
from engine2d.inputs import Input, KeyAction, PressState
from engine2d.scene import Scene
from engine2d.shader import ShaderProgram
from engine2d.vec import Vec2

DEFAULT_VERTEX_SHADER = "../src/shaders/basic/vertex.glsl"
DEFAULT_FRAGMENT_SHADER = "../src/shaders/basic/fragment.glsl"

_KEEP_BASE_SIZE = Vec2.of(400)

Matrix4 = Tuple[float, ...]


class ScaleMode(Enum):
    """How content reacts to the window changing size."""

    SCALE = auto()  # scale content to fit, using the height as the base
    STRETCH = auto()  # stretch content to fill the window
    KEEP = auto()  # content keeps its size independent of the window


def _ortho(left: float, right: float, bottom: float, top: float) -> Matrix4:
    """A 2D orthographic projection as 16 floats in column-major order."""
    width = right - left
    height = top - bottom
    return (
        2.0 / width, 0.0, 0.0, 0.0,
        0.0, 2.0 / height, 0.0, 0.0,
        0.0, 0.0, -1.0, 0.0,
        -(right + left) / width, -(top + bottom) / height, 0.0, 1.0,
    )


class FramerateCounter:
    """Counts frames and reports the frame rate roughly once a second."""

    def __init__(self, start_time: float = 0.0) -> None:
        self.frames = 0
        self.prev_time = start_time

    def tick(self, current_time: float) -> Optional[float]:
        """Count one frame; return the frame rate once a second has passed, else None."""
        delta = current_time - self.prev_time
        self.frames += 1
        if delta >= 1.0:
            fps = self.frames / delta
            self.frames = 0
            self.prev_time = current_time
            return fps
        return None


class Engine:
    """Owns the window, runs the main loop and tracks input and viewport state."""

    _instance: ClassVar[Optional["Engine"]] = None

    def __init__(self) -> None:
        self.updates_per_frame = 1.0 / 75.0
        self.target_framerate = 0
        self.vsync = False

        self.window_size = Vec2(400, 400)
        self.aspect_ratio = self.window_size.x / self.window_size.y
        self.scale_mode = ScaleMode.STRETCH
        self.projection_matrix: Matrix4 = _ortho(-1.0, 1.0, -1.0, 1.0)
        self.vp_shader = ShaderProgram(DEFAULT_VERTEX_SHADER, DEFAULT_FRAGMENT_SHADER)
        self.title = "Application"

        self.current_time = 0.0
        self.elapsed_time = 0.0
        self.accumulator = 0.0

        self.window_bounds = Bounds()
        self.world_bounds = Bounds()  # window bounds adjusted for camera movement
        self.mouse_pos = Vec2()
        self._cursor_window_pos = Vec2()

        self.window: Optional[Any] = None
        self.status = 0
        self.fps = 0.0
        self.input_map: Dict[str, Input] = {}
        self.default_scene: Optional[Scene] = None
        self.current_scene: Optional[Scene] = None
        self.window_focused = False
        self._shader_ready = False

    @classmethod
    def instance(cls) -> Engine:
        """The shared engine, created on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def update_world_bounds(self, origin_x: float = 0.0, origin_y: float = 0.0) -> None:
        """Recompute the world bounds from the window bounds and a camera origin."""
        wb = self.window_bounds
        self.world_bounds = Bounds(
            wb.left - origin_x,
            wb.right - origin_x,
            wb.top - origin_y,
            wb.bottom - origin_y,
        )

    def add_input(self, input_: Input) -> None:
        """Register an input; a name already registered keeps its first input."""
        self.input_map.setdefault(input_.name, input_)

    def is_input_pressed(self, name: str) -> bool:
        """Whether the named input is pressed or held while the window has focus.

        Raises KeyError for an unknown name.
        """
        return self.input_map[name].press_state >= PressState.PRESSED and self.window_focused

    def is_input_held(self, name: str) -> bool:
        """Whether the named input is held while the window has focus.

        Raises KeyError for an unknown name.
        """
        return self.input_map[name].press_state == PressState.HELD and self.window_focused

    def _notify_scene_input(self) -> None:
        scene = self.current_scene
        if scene is not None and scene.input_enabled:
            scene.input()

    def handle_key(self, key: int, action: int) -> None:
        """Apply a key event to every input bound to ``key``, then notify the scene."""
        for input_ in self.input_map.values():
            input_.apply(key, action)
        self._notify_scene_input()

    def handle_cursor(self, xpos: float, ypos: float) -> None:
        """Record a cursor move given in window coordinates (origin top-left)."""
        self._cursor_window_pos = Vec2(xpos, ypos)
        self.mouse_pos = Vec2.to_world(
            Vec2(xpos, ypos),
            self.window_size.x,
            self.window_size.y,
            self.window_bounds.right,
            self.window_bounds.top,
        )
        self._notify_scene_input()

    def reshape_viewport(self, width: int, height: int) -> None:
        """Recompute bounds and projection for a new framebuffer size.

        Sizes that are not positive (a minimised window) are ignored.
        """
        if width <= 0 or height <= 0:
            return
        self.aspect_ratio = width / height

        if self.scale_mode is ScaleMode.SCALE:
            bounds = Bounds(-self.aspect_ratio, self.aspect_ratio, 1.0, -1.0)
        elif self.scale_mode is ScaleMode.KEEP:
            width_ratio = width / _KEEP_BASE_SIZE.x
            height_ratio = height / _KEEP_BASE_SIZE.y
            bounds = Bounds(-width_ratio, width_ratio, height_ratio, -height_ratio)
        else:
            bounds = Bounds(-1.0, 1.0, 1.0, -1.0)

        self.window_bounds = bounds
        self.window_size = Vec2(width, height)
        self.projection_matrix = _ortho(bounds.left, bounds.right, bounds.bottom, bounds.top)

        if self.window is not None:
            from pyglet import gl

            gl.glViewport(0, 0, int(width), int(height))
        if self._shader_ready:
            self.vp_shader.set_uniform("projection_matrix", self.projection_matrix)

    def mouse_window_position(self) -> Vec2:
        """The last cursor position in window coordinates (origin top-left)."""
        return Vec2(self._cursor_window_pos.x, self._cursor_window_pos.y)

    def set_window_size(self, width: Union[Vec2, float], height: Optional[float] = None) -> None:
        """Resize the window, given a Vec2 or a width and a height."""
        if isinstance(width, Vec2):
            if height is not None:
                raise TypeError("a height cannot follow a Vec2")
            width, height = width.x, width.y
        elif height is None:
            raise TypeError("set_window_size needs a Vec2 or a width and a height")
        if self.window is None:
            raise RuntimeError("the window has not been created")
        self.window.set_size(int(width), int(height))

    def init(self) -> None:
        """Create the window and its GL context; raises RuntimeError on failure."""
        try:
            import pyglet

            window = pyglet.window.Window(
                width=int(self.window_size.x),
                height=int(self.window_size.y),
                caption=self.title,
                resizable=True,
            )
        except Exception as exc:
            self.status = -1
            raise RuntimeError(f"Failed to create window: {exc}") from exc
        self.window = window
        self.window_focused = True
        self._attach_handlers(window)

    def _attach_handlers(self, window: Any) -> None:
        from pyglet.event import EVENT_HANDLED

        def on_resize(width: int, height: int) -> bool:
            self.reshape_viewport(*window.get_framebuffer_size())
            return EVENT_HANDLED

        def on_key_press(symbol: int, modifiers: int) -> bool:
            self.handle_key(symbol, KeyAction.PRESS)
            return EVENT_HANDLED

        def on_key_release(symbol: int, modifiers: int) -> bool:
            self.handle_key(symbol, KeyAction.RELEASE)
            return EVENT_HANDLED

        def on_mouse_press(x: int, y: int, button: int, modifiers: int) -> None:
            self._notify_scene_input()

        def on_mouse_release(x: int, y: int, button: int, modifiers: int) -> None:
            self._notify_scene_input()

        def on_mouse_motion(x: int, y: int, dx: int, dy: int) -> None:
            self.handle_cursor(x, window.height - y)

        def on_mouse_drag(x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
            self.handle_cursor(x, window.height - y)

        def on_activate() -> None:
            self.window_focused = True

        def on_deactivate() -> None:
            self.window_focused = False

        window.push_handlers(
            on_resize=on_resize,
            on_key_press=on_key_press,
            on_key_release=on_key_release,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
            on_activate=on_activate,
            on_deactivate=on_deactivate,
        )

    def _wants_vsync(self) -> bool:
        return self.vsync or self.target_framerate != 0

    def start(self) -> None:
        """Run the main loop until the scene quits or the window closes."""
        window = self.window
        if window is None:
            raise RuntimeError("the window has not been created; call init() first")

        window.set_vsync(self._wants_vsync())
        self.vp_shader.create()
        self.vp_shader.use()
        self._shader_ready = True
        self.reshape_viewport(int(self.window_size.x), int(self.window_size.y))

        self.current_time = time.perf_counter()
        counter = FramerateCounter(self.current_time)

        if self.current_scene is None:
            self.current_scene = self.default_scene

        while (
            self.current_scene is not None
            and not self.current_scene.should_quit
            and not window.has_exit
        ):
            scene = self.current_scene
            new_time = time.perf_counter()
            frame_time = new_time - self.current_time
            self.current_time = new_time
            self.elapsed_time += frame_time
            self.accumulator += frame_time

            window.dispatch_events()
            # An unfocused window is throttled to the display refresh rate.
            window.set_vsync(True if not self.window_focused else self._wants_vsync())

            self.update_world_bounds()

            while self.accumulator >= self.updates_per_frame:
                if scene.update_enabled:
                    scene.update_children()
                    scene.update(frame_time)
                self.accumulator -= self.updates_per_frame

            window.switch_to()
            if scene.draw_enabled:
                scene.draw_children()
                scene.draw()
            window.flip()

            fps = counter.tick(self.current_time)
            if fps is not None:
                self.fps = fps
                print(f"fps: {fps}")

        print("Quitting...")
        self.vp_shader.delete()
        self._shader_ready = False
        window.close()
        self.window = None
        self.status = 0


def _report(message: str) -> None:
    print(message, file=sys.stderr)