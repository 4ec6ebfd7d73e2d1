"""Drawable marking the selected point of a toolpath."""

from __future__ import annotations

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Color, Vector3, color_to_vector


class SelectionDrawer(ShaderDrawable):
    """Draws a single point at the end position of the selected segment."""

    def __init__(self) -> None:
        super().__init__()
        self.start_position = Vector3()
        self.end_position = Vector3(SNAN, SNAN, SNAN)
        self.color = Color()
        self.point_size = 6.0

    def update_data(self) -> bool:
        self.points = [
            VertexData(
                self.end_position,
                color_to_vector(self.color),
                Vector3(SNAN, SNAN, self.point_size),
            )
        ]
        return True