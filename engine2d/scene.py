"""Scenes and the items they hold."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Type, TypeVar

from engine2d.color import RGBAColor
from engine2d.result import Result
from engine2d.transform import Transform

ItemT = TypeVar("ItemT", bound="SceneItem")

_NOT_FOUND = "Object not found"


class SceneItem:
    """Anything that can live in a scene. Draws nothing unless overridden."""

    def __init__(self, transform: Optional[Transform] = None) -> None:
        self.transform = transform
        self.scene: Optional[Scene] = None
        self.parent: Optional[SceneItem] = None

    def gl_draw(self) -> None:
        """Draw the item; the base item draws nothing."""


def _gl_clear(color: RGBAColor) -> None:
    from pyglet import gl

    gl.glClearColor(*color.rgba())
    gl.glClear(gl.GL_COLOR_BUFFER_BIT)


class Scene:
    """A named collection of items with update, draw and input hooks."""

    def __init__(self, *, clear_screen: Optional[Callable[[RGBAColor], None]] = None) -> None:
        self.children: Dict[str, SceneItem] = {}
        self.background_color = RGBAColor.from_bytes(0, 0, 0)
        self.update_enabled = True
        self.draw_enabled = True
        self.input_enabled = True
        self.should_quit = False
        self._clear_screen = clear_screen or _gl_clear

    def get_child(self, key: str, kind: Type[ItemT] = SceneItem) -> Result[Optional[ItemT]]:
        """Look up a child by name.

        A missing name gives a failed result. A child that is not an instance
        of ``kind`` gives a successful result holding None.
        """
        if key not in self.children:
            return Result.failure(_NOT_FOUND)
        child = self.children[key]
        return Result.success(child if isinstance(child, kind) else None)

    def add_child(self, name: str, child: SceneItem, layer: int = 0) -> None:
        """Add ``child`` under ``name``; an existing child of that name is kept."""
        self.children.setdefault(name, child)
        child.scene = self
        child.parent = None

    def remove_child(self, name: str) -> None:
        """Remove the child called ``name`` if there is one."""
        self.children.pop(name, None)

    def update_children(self) -> None:
        """Recompute the bounds of every child's transform."""
        for child in self.children.values():
            if child.transform is not None:
                child.transform.update_bounds()

    def update(self, delta: float) -> None:
        """Per-step hook; does nothing unless overridden."""

    def draw_children(self) -> None:
        """Clear to the background colour, then draw every child in order."""
        self._clear_screen(self.background_color)
        for child in self.children.values():
            child.gl_draw()

    def draw(self) -> None:
        """Per-frame drawing hook; does nothing unless overridden."""

    def input(self) -> None:
        """Input hook; does nothing unless overridden."""