"""Wireframe drawable of the milling tool."""

from __future__ import annotations

import math

from cncview.drawable import SNAN, ShaderDrawable, VertexData
from cncview.util import Color, Vector3, color_to_vector

_NO_START = Vector3(SNAN, SNAN, SNAN)
_SIDE_ARCS = 4
_CIRCLE_ARCS = 20


def normalize_angle(angle: float) -> float:
    """Bring an angle in degrees into the range 0..360."""
    while angle < 0:
        angle += 360
    while angle > 360:
        angle -= 360
    return angle


def create_circle(center: Vector3, radius: float, arcs: int, color: Vector3) -> list[VertexData]:
    """Line-segment vertices of a circle in the plane Z = center.z."""
    if arcs < 1:
        raise ValueError("a circle needs at least one arc")
    positions = [
        Vector3(
            center.x + radius * math.cos(2 * math.pi * i / arcs),
            center.y + radius * math.sin(2 * math.pi * i / arcs),
            center.z,
        )
        for i in range(arcs + 1)
    ]
    circle: list[VertexData] = []
    for i, position in enumerate(positions):
        if i > 1:
            circle.append(circle[-1])
        elif i == arcs:
            circle.append(circle[0])
        circle.append(VertexData(position, color, _NO_START))
    return circle


class ToolDrawer(ShaderDrawable):
    """Draws the tool as a cylinder with an optional conical end."""

    def __init__(self) -> None:
        super().__init__()
        self._tool_diameter = 3.0
        self._tool_length = 15.0
        self._end_length = 0.0
        self._tool_position = Vector3(0, 0, 0)
        self._rotation_angle = 0.0
        self._tool_angle = 0.0
        self.color = Color()

    @property
    def tool_diameter(self) -> float:
        return self._tool_diameter

    @tool_diameter.setter
    def tool_diameter(self, value: float) -> None:
        if self._tool_diameter != value:
            self._tool_diameter = value
            self.update()

    @property
    def tool_length(self) -> float:
        return self._tool_length

    @tool_length.setter
    def tool_length(self, value: float) -> None:
        if self._tool_length != value:
            self._tool_length = value
            self.update()

    @property
    def tool_position(self) -> Vector3:
        return self._tool_position

    @tool_position.setter
    def tool_position(self, value: Vector3) -> None:
        if self._tool_position != value:
            self._tool_position = value
            self.update()

    @property
    def rotation_angle(self) -> float:
        return self._rotation_angle

    @rotation_angle.setter
    def rotation_angle(self, value: float) -> None:
        if self._rotation_angle != value:
            self._rotation_angle = value
            self.update()

    @property
    def tool_angle(self) -> float:
        """Angle of the conical tip in degrees; 0 or 180 and above mean a flat end."""
        return self._tool_angle

    @tool_angle.setter
    def tool_angle(self, value: float) -> None:
        if self._tool_angle == value:
            return
        self._tool_angle = value
        if 0 < value < 180:
            self._end_length = self._tool_diameter / 2 / math.tan(value / 180 * math.pi / 2)
        else:
            self._end_length = 0.0
        if self._tool_length < self._end_length:
            self._tool_length = self._end_length
        self.update()

    @property
    def end_length(self) -> float:
        """Height of the conical tip."""
        return self._end_length

    def rotate(self, angle: float) -> None:
        """Turn the tool by angle degrees."""
        self.rotation_angle = normalize_angle(self._rotation_angle + angle)

    def update_data(self) -> bool:
        color = color_to_vector(self.color)
        pos = self._tool_position
        radius = self._tool_diameter / 2
        tip_z = pos.z + self._end_length
        top_z = pos.z + self._tool_length

        def vertex(x: float, y: float, z: float) -> VertexData:
            return VertexData(Vector3(x, y, z), color, _NO_START)

        lines: list[VertexData] = []
        for i in range(_SIDE_ARCS):
            angle = self._rotation_angle / 180 * math.pi + (2 * math.pi / _SIDE_ARCS) * i
            x = pos.x + radius * math.cos(angle)
            y = pos.y + radius * math.sin(angle)
            lines += [
                vertex(x, y, tip_z), vertex(x, y, top_z),          # side
                vertex(pos.x, pos.y, pos.z), vertex(x, y, tip_z),  # bottom
                vertex(pos.x, pos.y, top_z), vertex(x, y, top_z),  # top
                vertex(pos.x, pos.y, 0), vertex(x, y, 0),          # zero Z
            ]

        lines += create_circle(Vector3(pos.x, pos.y, tip_z), radius, _CIRCLE_ARCS, color)
        lines += create_circle(Vector3(pos.x, pos.y, top_z), radius, _CIRCLE_ARCS, color)
        if self._end_length == 0:
            lines += create_circle(Vector3(pos.x, pos.y, 0), radius, _CIRCLE_ARCS, color)

        self.lines = lines
        self.points = []
        return True