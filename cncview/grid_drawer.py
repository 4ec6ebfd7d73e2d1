"""Drawable showing the probing grid of a height map."""

from __future__ import annotations

import math
from typing import Sequence

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Rect, Vector3

_PENDING_COLOR = Vector3(1.0, 0.6, 0.0)
_PROBED_COLOR = Vector3(0.0, 0.0, 1.0)

HeightGrid = Sequence[Sequence[float]]


class HeightMapGridDrawer(ShaderDrawable):
    """Draws probed heights as points joined by grid lines.

    Cells that hold NaN have not been probed yet and are drawn as vertical
    lines from z_top down to z_bottom.
    """

    def __init__(self) -> None:
        super().__init__()
        self._grid_size: tuple[float, float] = (0.0, 0.0)
        self._border_rect = Rect()
        self._z_top = 0.0
        self._z_bottom = 0.0
        self._model: HeightGrid | None = None
        self.point_size = 4.0

    @property
    def grid_size(self) -> tuple[float, float]:
        return self._grid_size

    @grid_size.setter
    def grid_size(self, value: tuple[float, float]) -> None:
        self._grid_size = value
        self.update()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, value: Rect) -> None:
        self._border_rect = value
        self.update()

    @property
    def z_top(self) -> float:
        return self._z_top

    @z_top.setter
    def z_top(self, value: float) -> None:
        self._z_top = value
        self.update()

    @property
    def z_bottom(self) -> float:
        return self._z_bottom

    @z_bottom.setter
    def z_bottom(self, value: float) -> None:
        self._z_bottom = value
        self.update()

    @property
    def model(self) -> HeightGrid | None:
        """Heights as a sequence of rows; NaN marks a cell not yet probed."""
        return self._model

    @model.setter
    def model(self, value: HeightGrid | None) -> None:
        self._model = value
        self.update()

    def update_data(self) -> bool:
        self.lines = []
        self.points = []
        grid = self._model
        if not grid:
            return True

        start = Vector3(SNAN, SNAN, self.point_size)
        rows = len(grid)
        cols = len(grid[0])
        rect = self._border_rect
        step_x = rect.width / (cols - 1) if cols > 1 else 0.0
        step_y = rect.height / (rows - 1) if rows > 1 else 0.0

        def at(row: int, col: int, z: float) -> Vector3:
            return Vector3(rect.x + step_x * col, rect.y + step_y * row, z)

        for i, row in enumerate(grid):
            for j, height in enumerate(row):
                if math.isnan(height):
                    self.lines.append(VertexData(at(i, j, self._z_top), _PENDING_COLOR, start))
                    self.lines.append(VertexData(at(i, j, self._z_bottom), _PENDING_COLOR, start))
                else:
                    self.points.append(VertexData(at(i, j, height), _PROBED_COLOR, start))

        for i, row in enumerate(grid):
            for j in range(1, cols):
                if math.isnan(row[j]):
                    continue
                self.lines.append(VertexData(at(i, j - 1, row[j - 1]), _PROBED_COLOR, start))
                self.lines.append(VertexData(at(i, j, row[j]), _PROBED_COLOR, start))

        for j in range(cols):
            for i in range(1, rows):
                if math.isnan(grid[i][j]):
                    continue
                self.lines.append(VertexData(at(i - 1, j, grid[i - 1][j]), _PROBED_COLOR, start))
                self.lines.append(VertexData(at(i, j, grid[i][j]), _PROBED_COLOR, start))

        return True