"""Drawable outlining the height map border rectangle."""

from __future__ import annotations

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Rect, Vector3

_BORDER_COLOR = Vector3(1.0, 0.0, 0.0)
_NO_START = Vector3(SNAN, SNAN, SNAN)


class HeightMapBorderDrawer(ShaderDrawable):
    """Draws a red rectangle at Z = 0."""

    def __init__(self) -> None:
        super().__init__()
        self._border_rect = Rect()

    @property
    def border_rect(self) -> Rect:
        return self._border_rect

    @border_rect.setter
    def border_rect(self, rect: Rect) -> None:
        self._border_rect = rect
        self.update()

    def update_data(self) -> bool:
        r = self._border_rect
        corners = [
            Vector3(r.x, r.y, 0),
            Vector3(r.x, r.bottom, 0),
            Vector3(r.right, r.bottom, 0),
            Vector3(r.right, r.y, 0),
        ]
        self.lines = [
            VertexData(position, _BORDER_COLOR, _NO_START)
            for start, end in zip(corners, corners[1:] + corners[:1])
            for position in (start, end)
        ]
        return True