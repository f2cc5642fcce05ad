"""Drawable shapes: a coloured quad and a line grid."""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Tuple

from engine2d.bounds import Bounds
from engine2d.color import WHITE, RGBAColor
from engine2d.engine import DEFAULT_FRAGMENT_SHADER, DEFAULT_VERTEX_SHADER, Engine
from engine2d.scene import SceneItem
from engine2d.shader import ShaderProgram
from engine2d.transform import Transform
from engine2d.vec import Vec2

Matrix4 = Tuple[float, ...]

_FLOAT_SIZE = 4  # bytes in a GL float
_FLOATS_PER_VERTEX = 6  # x, y, r, g, b, a
_STRIDE = _FLOATS_PER_VERTEX * _FLOAT_SIZE

_QUAD_CORNERS = (Vec2(-0.5, -0.5), Vec2(0.5, -0.5), Vec2(0.5, 0.5), Vec2(-0.5, 0.5))


def _model_matrix(tx: float, ty: float, sx: float, sy: float, degrees: float) -> Matrix4:
    """Translate, then scale, then rotate about z; 16 floats in column-major order."""
    radians = math.radians(degrees)
    c, s = math.cos(radians), math.sin(radians)
    return (
        sx * c, sy * s, 0.0, 0.0,
        -sx * s, sy * c, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        tx, ty, 0.0, 1.0,
    )


def _pack_vertices(points: Sequence[Vec2], color: RGBAColor) -> List[float]:
    """Interleave each point with the colour channels."""
    return [value for point in points for value in (point.x, point.y, *color.rgba())]


def _default_shader() -> ShaderProgram:
    return ShaderProgram(DEFAULT_VERTEX_SHADER, DEFAULT_FRAGMENT_SHADER)


class Shape(SceneItem):
    """A basic 2D shape with a transform and a colour."""

    def __init__(self, transform: Optional[Transform] = None, color: RGBAColor = WHITE) -> None:
        super().__init__(transform)
        self.color = color

    def _require_transform(self) -> Transform:
        if self.transform is None:
            raise ValueError("shape has no transform")
        return self.transform


class _GLBuffers:
    """A vertex array and buffer, created on first use while a GL context is current."""

    def __init__(self) -> None:
        self.vao: Optional[Any] = None
        self.vbo: Optional[Any] = None

    @property
    def ready(self) -> bool:
        return self.vao is not None

    def create(self, size: int, data: Optional[Sequence[float]], usage: int, color_attrib: bool) -> None:
        from pyglet import gl
        from pyglet.graphics.vertexarray import VertexArray
        from pyglet.graphics.vertexbuffer import BufferObject

        vao = VertexArray()
        vbo = BufferObject(size)
        vao.bind()
        vbo.bind()
        array = (gl.GLfloat * len(data))(*data) if data is not None else None
        gl.glBufferData(gl.GL_ARRAY_BUFFER, size, array, usage)

        gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, 0)
        gl.glEnableVertexAttribArray(0)
        if color_attrib:
            gl.glVertexAttribPointer(1, 4, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, 2 * _FLOAT_SIZE)
            gl.glEnableVertexAttribArray(1)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
        vao.unbind()
        self.vao, self.vbo = vao, vbo


class QuadShape(Shape):
    """A unit square scaled, placed and rotated by its transform."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        color: RGBAColor = WHITE,
        *,
        shader: Optional[ShaderProgram] = None,
    ) -> None:
        super().__init__(transform, color)
        self.shader = shader or _default_shader()
        self._buffers = _GLBuffers()

    def model_matrix(self) -> Matrix4:
        """The model matrix; an uncentred quad is placed by its bottom-left corner."""
        t = self._require_transform()
        if t.center_origin:
            tx, ty = t.position.x, t.position.y
        else:
            tx = t.position.x - t.scale.x / 2
            ty = t.position.y - t.scale.y / 2
        return _model_matrix(tx, ty, t.scale.x, t.scale.y, t.rotation.z)

    def _ensure_gl(self) -> None:
        if self._buffers.ready:
            return
        from pyglet import gl

        self.shader.create()
        data = _pack_vertices(_QUAD_CORNERS, self.color)
        self._buffers.create(len(data) * _FLOAT_SIZE, data, gl.GL_STATIC_DRAW, color_attrib=True)

    def gl_draw(self) -> None:
        """Draw the quad with the current engine projection."""
        from pyglet import gl

        matrix = self.model_matrix()
        self._ensure_gl()
        self.shader.use()
        self.shader.set_uniform("color_vec", self.color)
        self.shader.set_uniform("trans_matrix", matrix)
        self.shader.set_uniform("projection_matrix", Engine.instance().projection_matrix)

        self._buffers.vao.bind()
        gl.glDrawArrays(gl.GL_TRIANGLE_FAN, 0, len(_QUAD_CORNERS))
        self._buffers.vao.unbind()


class Grid(Shape):
    """Grid lines every ``interval`` world units, or the two axes when the interval is not positive."""

    def __init__(
        self,
        transform: Optional[Transform] = None,
        color: RGBAColor = WHITE,
        interval: float = 0.0,
        *,
        shader: Optional[ShaderProgram] = None,
    ) -> None:
        super().__init__(transform, color)
        self.interval = float(interval)
        self.line_width = 1.0
        self.max_vertices = 4096
        self.shader = shader or _default_shader()
        self._buffers = _GLBuffers()
        self._allocated_vertices = 0

    def line_vertices(self, bounds: Bounds) -> List[Vec2]:
        """Line end points (in pairs) covering ``bounds``, at most ``max_vertices`` of them."""
        el, er, et, eb = bounds.left, bounds.right, bounds.top, bounds.bottom
        if self.interval <= 0.0:
            vertices = [Vec2(er, 0.0), Vec2(el, 0.0), Vec2(0.0, et), Vec2(0.0, eb)]
        else:
            step = self.interval
            vertices = []
            for y in range(math.ceil(eb / step), math.floor(et / step) + 1):
                vertices += [Vec2(el, y * step), Vec2(er, y * step)]
            for x in range(math.ceil(el / step), math.floor(er / step) + 1):
                vertices += [Vec2(x * step, eb), Vec2(x * step, et)]
        limit = max(self.max_vertices, 0) // 2 * 2
        return vertices[:limit]

    def model_matrix(self) -> Matrix4:
        """The model matrix; the grid is always placed by its position."""
        t = self._require_transform()
        return _model_matrix(t.position.x, t.position.y, t.scale.x, t.scale.y, t.rotation.z)

    def _ensure_gl(self) -> None:
        from pyglet import gl

        if not self._buffers.ready:
            self.shader.create()
        if not self._buffers.ready or self._allocated_vertices != self.max_vertices:
            self._buffers.create(
                max(self.max_vertices, 0) * _STRIDE, None, gl.GL_DYNAMIC_DRAW, color_attrib=False
            )
            self._allocated_vertices = self.max_vertices

    def gl_draw(self) -> None:
        """Draw the grid over the engine's current world bounds."""
        from pyglet import gl

        engine = Engine.instance()
        matrix = self.model_matrix()
        vertices = self.line_vertices(engine.world_bounds)
        self._ensure_gl()

        data = _pack_vertices(vertices, self.color)
        if data:
            self._buffers.vbo.bind()
            array = (gl.GLfloat * len(data))(*data)
            gl.glBufferSubData(gl.GL_ARRAY_BUFFER, 0, len(data) * _FLOAT_SIZE, array)

        self.shader.use()
        self.shader.set_uniform("color_vec", self.color)
        self.shader.set_uniform("trans_matrix", matrix)
        self.shader.set_uniform("projection_matrix", engine.projection_matrix)

        self._buffers.vao.bind()
        gl.glLineWidth(self.line_width)
        gl.glDrawArrays(gl.GL_LINES, 0, len(vertices))
        self._buffers.vao.unbind()