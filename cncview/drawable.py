"""Base drawable: vertex lists, a packed vertex buffer and the draw calls for it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from cncview.util import Vector3

SNAN = 65536.0
"""Marker value in a vertex's start vector meaning "not set"."""


@dataclass(frozen=True)
class VertexData:
    """One vertex: position, colour and line start (or point size) data."""

    position: Vector3 = Vector3()
    color: Vector3 = Vector3()
    start: Vector3 = Vector3()


class Primitive(enum.Enum):
    TRIANGLES = "triangles"
    LINES = "lines"
    POINTS = "points"


@dataclass(frozen=True)
class DrawCall:
    """A range of the vertex buffer drawn as one primitive type."""

    primitive: Primitive
    first: int
    count: int
    line_width: float | None = None
    texture: Any = None


class ShaderDrawable:
    """Holds triangles, lines and points and packs them into one vertex buffer."""

    def __init__(self) -> None:
        self.line_width = 1.0
        self.point_size = 1.0
        self.visible = True
        self.lines: list[VertexData] = []
        self.points: list[VertexData] = []
        self.triangles: list[VertexData] = []
        self.texture: Any = None
        self._buffer: list[VertexData] = []
        self._needs_update = True

    def update(self) -> None:
        """Mark the geometry as stale."""
        self._needs_update = True

    def needs_update_geometry(self) -> bool:
        return self._needs_update

    def update_geometry(self) -> None:
        """Regenerate vertex data and repack the buffer if update_data reports a change."""
        if self.update_data():
            self._buffer = [*self.triangles, *self.lines, *self.points]
        self._needs_update = False

    def update_data(self) -> bool:
        """Fill the vertex lists; return True when the buffer must be repacked."""
        marker = Vector3(SNAN, 0, 0)
        self.lines = [
            VertexData(Vector3(0, 0, 0), Vector3(1, 0, 0), marker),
            VertexData(Vector3(10, 0, 0), Vector3(1, 0, 0), marker),
            VertexData(Vector3(0, 0, 0), Vector3(0, 1, 0), marker),
            VertexData(Vector3(0, 10, 0), Vector3(0, 1, 0), marker),
            VertexData(Vector3(0, 0, 0), Vector3(0, 0, 1), marker),
            VertexData(Vector3(0, 0, 10), Vector3(0, 0, 1), marker),
        ]
        return True

    def vertex_data(self) -> list[VertexData]:
        """The packed buffer: triangles, then lines, then points."""
        return list(self._buffer)

    def draw_calls(self) -> list[DrawCall]:
        """The draw calls needed to render the current vertex lists."""
        if not self.visible:
            return []
        calls = []
        n_triangles = len(self.triangles)
        n_lines = len(self.lines)
        if self.triangles:
            calls.append(DrawCall(Primitive.TRIANGLES, 0, n_triangles, texture=self.texture))
        if self.lines:
            calls.append(DrawCall(Primitive.LINES, n_triangles, n_lines, line_width=self.line_width))
        if self.points:
            calls.append(DrawCall(Primitive.POINTS, n_triangles + n_lines, len(self.points)))
        return calls

    def get_sizes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_minimum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def get_maximum_extremes(self) -> Vector3:
        return Vector3(0, 0, 0)

    def vertex_count(self) -> int:
        return len(self.lines) + len(self.points) + len(self.triangles)