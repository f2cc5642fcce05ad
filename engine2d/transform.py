"""Position, scale and rotation of an object in 2D space."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Optional, Union

from engine2d.bounds import Bounds
from engine2d.vec import Vec2, Vec3


def _vec2_from(x: Union[Vec2, float], y: Optional[float]) -> Vec2:
    if isinstance(x, Vec2):
        if y is not None:
            raise TypeError("a second component cannot follow a Vec2")
        return Vec2(x.x, x.y)
    if not isinstance(x, Real):
        raise TypeError(f"expected a Vec2 or a number, got {type(x).__name__}")
    return Vec2(x, x if y is None else y)


@dataclass
class Transform:
    """A transformation: position, scale, rotation, origin mode and cached bounds."""

    position: Vec2 = field(default_factory=Vec2)
    scale: Vec2 = field(default_factory=Vec2)
    rotation: Vec3 = field(default_factory=Vec3)
    center_origin: bool = True
    bounds: Bounds = field(default_factory=Bounds)

    @classmethod
    def from_pos(cls, x: Union[Vec2, float], y: Optional[float] = None) -> Transform:
        """Create a transform from a position (a Vec2, one number, or x and y)."""
        return cls(position=_vec2_from(x, y))

    @classmethod
    def from_scale(cls, x: Union[Vec2, float], y: Optional[float] = None) -> Transform:
        """Create a transform from a scale (a Vec2, one number, or x and y)."""
        return cls(scale=_vec2_from(x, y))

    @classmethod
    def from_rotation(
        cls,
        x: Union[Vec3, float],
        y: Optional[float] = None,
        z: Optional[float] = None,
    ) -> Transform:
        """Create a transform from a rotation (a Vec3, one number, or x, y and z)."""
        if isinstance(x, Vec3):
            if y is not None or z is not None:
                raise TypeError("further components cannot follow a Vec3")
            return cls(rotation=Vec3(x.x, x.y, x.z))
        if not isinstance(x, Real):
            raise TypeError(f"expected a Vec3 or a number, got {type(x).__name__}")
        if y is None and z is None:
            return cls(rotation=Vec3.of(x))
        if y is None or z is None:
            raise TypeError("rotation needs one component or all three")
        return cls(rotation=Vec3(x, y, z))

    @classmethod
    def zero(cls) -> Transform:
        """Return an empty transform."""
        return cls()

    def update_bounds(self) -> None:
        """Recompute ``bounds`` from the position, scale and origin mode."""
        self.bounds = Bounds.from_point(self.position, self.scale, self.center_origin)