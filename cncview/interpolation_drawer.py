"""Drawable showing an interpolated height map as a coloured wire grid."""

from __future__ import annotations

import math
from typing import Sequence

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Color, Rect, Vector3, color_to_vector, n_max, n_min

_NO_START = Vector3(SNAN, SNAN, SNAN)
_HUE_RANGE = 0.67

HeightGrid = Sequence[Sequence[float]]


class HeightMapInterpolationDrawer(ShaderDrawable):
    """Draws interpolated heights coloured from red (highest) to blue (lowest)."""

    def __init__(self) -> None:
        super().__init__()
        self.border_rect = Rect()
        self._data: HeightGrid | None = None

    @property
    def data(self) -> HeightGrid | None:
        """Interpolated heights as a sequence of rows."""
        return self._data

    @data.setter
    def data(self, value: HeightGrid | None) -> None:
        self._data = value
        self.update()

    def update_data(self) -> bool:
        self.lines = []
        grid = self._data
        if not grid:
            return True

        rows = len(grid)
        cols = len(grid[0])
        rect = self.border_rect
        step_x = rect.width / (cols - 1) if cols > 1 else 0.0
        step_y = rect.height / (rows - 1) if rows > 1 else 0.0

        low = high = grid[0][0]
        for row in grid:
            for value in row:
                low = n_min(low, value)
                high = n_max(high, value)
        span = high - low

        # A NaN height keeps the previously used colour.
        current = Vector3()

        def vertex(row: int, col: int) -> VertexData:
            nonlocal current
            height = grid[row][col]
            if not math.isnan(height) and not math.isnan(span):
                fraction = (high - height) / span if span else 0.0
                current = color_to_vector(Color.from_hsv_f(_HUE_RANGE * fraction, 1.0, 1.0))
            position = Vector3(rect.x + step_x * col, rect.y + step_y * row, height)
            return VertexData(position, current, _NO_START)

        for i in range(rows):
            for j in range(1, cols):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(vertex(i, j - 1))
                self.lines.append(vertex(i, j))

        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(vertex(i - 1, j))
                self.lines.append(vertex(i, j))

        return True