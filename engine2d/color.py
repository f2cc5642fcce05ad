"""RGBA colours with float channels in the range 0 to 1."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RGBAColor:
    """A colour in RGBA space, each channel a float."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    @classmethod
    def from_hex(cls, hex_value: int) -> RGBAColor:
        """Create a colour from a 32-bit value laid out as 0xRRGGBBAA."""
        if not 0 <= hex_value <= 0xFFFFFFFF:
            raise ValueError(f"colour value out of 32-bit range: {hex_value:#x}")
        return cls(
            (hex_value >> 24 & 0xFF) / 255,
            (hex_value >> 16 & 0xFF) / 255,
            (hex_value >> 8 & 0xFF) / 255,
            (hex_value & 0xFF) / 255,
        )

    @classmethod
    def from_bytes(cls, r: int, g: int, b: int, a: int = 255) -> RGBAColor:
        """Create a colour from channel values between 0 and 255."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    def rgb(self) -> tuple[float, float, float]:
        """The red, green and blue channels."""
        return (self.r, self.g, self.b)

    def rgba(self) -> tuple[float, float, float, float]:
        """The red, green, blue and alpha channels."""
        return (self.r, self.g, self.b, self.a)


RED = RGBAColor.from_hex(0xFF0000FF)
ORANGE = RGBAColor.from_hex(0xFFA500FF)
YELLOW = RGBAColor.from_hex(0xFFFF00FF)
GREEN = RGBAColor.from_hex(0x00FF00FF)
BLUE = RGBAColor.from_hex(0x518BF7FF)
PURPLE = RGBAColor.from_hex(0x9E00FFFF)
PINK = RGBAColor.from_hex(0xFF00FFFF)
WHITE = RGBAColor.from_hex(0xFFFFFFFF)
LIGHT_GRAY = RGBAColor.from_hex(0x5F5F5FFF)
GRAY = RGBAColor.from_hex(0x939393FF)
BLACK = RGBAColor.from_hex(0x4B4B4BFF)