"""A small 2D engine: vector math, bounds, transforms, colours, scenes and OpenGL shapes."""

__version__ = "1.0.0"