"""Two-, three- and four-component float vectors with element-wise arithmetic."""

from __future__ import annotations

import operator
from dataclasses import astuple, dataclass
from numbers import Real
from typing import Any, Callable, Iterator


def _is_scalar(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _combine(vec: Any, other: Any, op: Callable[[float, float], float]) -> Any:
    """Apply ``op`` component-wise against a vector of the same type or a scalar."""
    if isinstance(other, type(vec)):
        return type(vec)(*map(op, astuple(vec), astuple(other)))
    if _is_scalar(other):
        return type(vec)(*(op(component, other) for component in astuple(vec)))
    return NotImplemented


@dataclass
class Vec2:
    """A point or extent in 2D space."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    @classmethod
    def of(cls, xy: float) -> Vec2:
        """Create a vector with both components set to ``xy``."""
        return cls(xy, xy)

    @classmethod
    def zero(cls) -> Vec2:
        """Return the zero vector."""
        return cls()

    @classmethod
    def to_world(cls, src: Vec2, w: float, h: float, ex: float, ey: float) -> Vec2:
        """Convert a window point to world coordinates.

        ``w`` and ``h`` are the window size; ``ex`` and ``ey`` are the visible
        world extents along each axis.
        """
        return cls((src.x / w * 2 - 1) * ex, -(src.y / h * 2 - 1) * ey)

    def __add__(self, other: Any) -> Vec2:
        return _combine(self, other, operator.add)

    def __sub__(self, other: Any) -> Vec2:
        return _combine(self, other, operator.sub)

    def __mul__(self, other: Any) -> Vec2:
        return _combine(self, other, operator.mul)

    def __truediv__(self, other: Any) -> Vec2:
        return _combine(self, other, operator.truediv)


@dataclass
class Vec3:
    """A point or extent in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def of(cls, xyz: float) -> Vec3:
        """Create a vector with all components set to ``xyz``."""
        return cls(xyz, xyz, xyz)

    @classmethod
    def zero(cls) -> Vec3:
        """Return the zero vector."""
        return cls()

    def __add__(self, other: Any) -> Vec3:
        return _combine(self, other, operator.add)

    def __sub__(self, other: Any) -> Vec3:
        return _combine(self, other, operator.sub)

    def __mul__(self, other: Any) -> Vec3:
        return _combine(self, other, operator.mul)

    def __truediv__(self, other: Any) -> Vec3:
        return _combine(self, other, operator.truediv)


@dataclass
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)
        self.w = float(self.w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def of(cls, xyzw: float) -> Vec4:
        """Create a vector with all components set to ``xyzw``."""
        return cls(xyzw, xyzw, xyzw, xyzw)

    @classmethod
    def zero(cls) -> Vec4:
        """Return the zero vector."""
        return cls()

    def __add__(self, other: Any) -> Vec4:
        return _combine(self, other, operator.add)

    def __sub__(self, other: Any) -> Vec4:
        return _combine(self, other, operator.sub)

    def __mul__(self, other: Any) -> Vec4:
        return _combine(self, other, operator.mul)

    def __truediv__(self, other: Any) -> Vec4:
        return _combine(self, other, operator.truediv)