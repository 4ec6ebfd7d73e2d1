"""Drawable showing the coordinate origin: three axis arrows and a small square."""

from __future__ import annotations

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Vector3

_RED = Vector3(1.0, 0.0, 0.0)
_GREEN = Vector3(0.0, 1.0, 0.0)
_BLUE = Vector3(0.0, 0.0, 1.0)
_NO_START = Vector3(SNAN, SNAN, SNAN)

_ORIGIN_LINES: tuple[tuple[tuple[float, float, float], Vector3], ...] = (
    # X axis
    ((0, 0, 0), _RED), ((9, 0, 0), _RED),
    ((10, 0, 0), _RED), ((8, 0.5, 0), _RED),
    ((8, 0.5, 0), _RED), ((8, -0.5, 0), _RED),
    ((8, -0.5, 0), _RED), ((10, 0, 0), _RED),
    # Y axis
    ((0, 0, 0), _GREEN), ((0, 9, 0), _GREEN),
    ((0, 10, 0), _GREEN), ((0.5, 8, 0), _GREEN),
    ((0.5, 8, 0), _GREEN), ((-0.5, 8, 0), _GREEN),
    ((-0.5, 8, 0), _GREEN), ((0, 10, 0), _GREEN),
    # Z axis
    ((0, 0, 0), _BLUE), ((0, 0, 9), _BLUE),
    ((0, 0, 10), _BLUE), ((0.5, 0, 8), _BLUE),
    ((0.5, 0, 8), _BLUE), ((-0.5, 0, 8), _BLUE),
    ((-0.5, 0, 8), _BLUE), ((0, 0, 10), _BLUE),
    # 2x2 square around the origin
    ((1, 1, 0), _RED), ((-1, 1, 0), _RED),
    ((-1, 1, 0), _RED), ((-1, -1, 0), _RED),
    ((-1, -1, 0), _RED), ((1, -1, 0), _RED),
    ((1, -1, 0), _RED), ((1, 1, 0), _RED),
)


class OriginDrawer(ShaderDrawable):
    """Draws the X, Y and Z axes in red, green and blue."""

    def update_data(self) -> bool:
        self.lines = [
            VertexData(Vector3(*position), color, _NO_START)
            for position, color in _ORIGIN_LINES
        ]
        return True