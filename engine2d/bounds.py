"""Axis-aligned bounding rectangles."""

from __future__ import annotations

import operator
from dataclasses import astuple, dataclass
from numbers import Real
from typing import Any, Callable

from engine2d.vec import Vec2


@dataclass
class Bounds:
    """The outer edges of an object: left, right, top and bottom."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        self.left = float(self.left)
        self.right = float(self.right)
        self.top = float(self.top)
        self.bottom = float(self.bottom)

    @classmethod
    def from_point(cls, point: Vec2, size: Vec2, centered: bool = True) -> Bounds:
        """Create bounds from a point and a size.

        When ``centered`` the point is the middle of the area, otherwise it is
        the bottom-left corner.
        """
        if centered:
            return cls(
                point.x - size.x / 2,
                point.x + size.x / 2,
                point.y + size.y / 2,
                point.y - size.y / 2,
            )
        return cls(point.x, point.x + size.x, point.y + size.y, point.y)

    @classmethod
    def zero(cls) -> Bounds:
        """Return bounds with every edge at zero."""
        return cls()

    def _combine(self, other: Any, op: Callable[[float, float], float]) -> Any:
        if isinstance(other, Bounds):
            return Bounds(*map(op, astuple(self), astuple(other)))
        if isinstance(other, Real) and not isinstance(other, bool):
            return Bounds(*(op(edge, other) for edge in astuple(self)))
        return NotImplemented

    def __add__(self, other: Any) -> Bounds:
        return self._combine(other, operator.add)

    def __sub__(self, other: Any) -> Bounds:
        return self._combine(other, operator.sub)

    def __mul__(self, other: Any) -> Bounds:
        return self._combine(other, operator.mul)

    def __truediv__(self, other: Any) -> Bounds:
        return self._combine(other, operator.truediv)

    def contains(self, point: Vec2) -> bool:
        """Whether ``point`` lies within these bounds, edges included."""
        return self.left <= point.x <= self.right and self.bottom <= point.y <= self.top

    def intersects(self, other: Bounds) -> bool:
        """Whether ``other`` overlaps or touches these bounds."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top >= other.bottom
            and self.bottom <= other.top
        )