"""Cubic and bicubic interpolation over height map grids."""

from __future__ import annotations

import math
from typing import Sequence

from cncview.util import Rect


def cubic_interpolate(p: Sequence[float], x: float) -> float:
    """Catmull-Rom interpolation between p[1] and p[2] at fraction x."""
    p0, p1, p2, p3 = p
    return p1 + 0.5 * x * (
        p2 - p0 + x * (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3 + x * (3.0 * (p1 - p2) + p3 - p0))
    )


def bicubic_interpolate(p: Sequence[Sequence[float]], x: float, y: float) -> float:
    """Interpolate a 4x4 patch at fractions x (columns) and y (rows)."""
    return cubic_interpolate([cubic_interpolate(row, x) for row in p], y)


def grid_interpolate(
    border_rect: Rect, base_points: Sequence[Sequence[float]], x: float, y: float
) -> float:
    """Interpolate a height grid spread evenly over border_rect at point (x, y).

    base_points is a sequence of rows; cells outside the grid read as zero.
    """
    rows = len(base_points)
    cols = len(base_points[0]) if rows else 0
    if rows < 2 or cols < 2:
        raise ValueError("height grid needs at least 2 rows and 2 columns")
    if border_rect.width == 0 or border_rect.height == 0:
        raise ValueError("border rectangle has no area")

    step_x = border_rect.width / (cols - 1)
    step_y = border_rect.height / (rows - 1)

    x -= border_rect.x
    y -= border_rect.y

    ix = min(math.trunc(x / step_x), cols - 2)
    iy = min(math.trunc(y / step_y), rows - 2)

    def at(row: int, col: int) -> float:
        if 0 <= row < rows and 0 <= col < cols:
            return float(base_points[row][col])
        return 0.0

    row_indices = (iy - 1 if iy > 0 else iy, iy, iy + 1, iy + 2 if iy < rows - 2 else iy + 1)
    col_indices = (ix - 1 if ix > 0 else ix, ix, ix + 1, ix + 2 if ix < cols - 2 else ix + 1)

    patch = [[at(r, c) for c in col_indices] for r in row_indices]
    return bicubic_interpolate(patch, x / step_x - ix, y / step_y - iy)