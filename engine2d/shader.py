"""Shader programs built from vertex and fragment source files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from engine2d.color import RGBAColor

PathLike = Union[str, "os.PathLike[str]"]


class ShaderError(Exception):
    """A shader could not be read, compiled, linked or used."""


def load_shader_source(path: PathLike) -> str:
    """Read the text of a shader source file."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"Failed to read shader {os.fspath(path)}: {exc}") from exc


class ShaderProgram:
    """A linked vertex and fragment shader pair."""

    def __init__(self, vertex_path: PathLike, frag_path: PathLike) -> None:
        self.vertex_path = os.fspath(vertex_path)
        self.frag_path = os.fspath(frag_path)
        self._program: Optional[Any] = None

    def create(self) -> None:
        """Read, compile and link both shaders; raises ShaderError on failure."""
        vertex_source = load_shader_source(self.vertex_path)
        frag_source = load_shader_source(self.frag_path)

        from pyglet.graphics.shader import Shader, ShaderException
        from pyglet.graphics.shader import ShaderProgram as GLProgram

        def compile_one(source: str, kind: str, path: str) -> Any:
            try:
                return Shader(source, kind)
            except ShaderException as exc:
                raise ShaderError(f"Failed to compile shader {path}\n{exc}") from exc

        vertex_shader = compile_one(vertex_source, "vertex", self.vertex_path)
        try:
            frag_shader = compile_one(frag_source, "fragment", self.frag_path)
        except ShaderError:
            vertex_shader.delete()
            raise

        try:
            program = GLProgram(vertex_shader, frag_shader)
        except ShaderException as exc:
            raise ShaderError(
                f"Failed to link shader program {self.vertex_path} and {self.frag_path}\n{exc}"
            ) from exc
        finally:
            vertex_shader.delete()
            frag_shader.delete()

        self.delete()
        self._program = program

    def _require(self) -> Any:
        if self._program is None:
            raise ShaderError("shader program has not been created")
        return self._program

    def use(self) -> None:
        """Make this the active program."""
        self._require().use()

    def set_uniform(self, name: str, value: Union[RGBAColor, Iterable[float]]) -> None:
        """Set a colour (vec4) or a 4x4 matrix (16 floats, column-major) uniform.

        Names the program does not use are ignored.
        """
        program = self._require()
        if isinstance(value, RGBAColor):
            data = value.rgba()
        else:
            data = tuple(float(component) for component in value)
            if len(data) != 16:
                raise ShaderError(f"uniform {name!r} needs 16 matrix values, got {len(data)}")
        if name in program.uniforms:
            program[name] = data

    def delete(self) -> None:
        """Release the linked program, if any."""
        if self._program is not None:
            self._program.delete()
            self._program = None