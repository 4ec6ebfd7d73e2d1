"""Small geometry and colour value types shared by the drawers."""

from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its origin and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range 0..1."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} component {value!r} is outside 0..1")

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from 8-bit components."""
        for value in (red, green, blue):
            if not 0 <= value <= 255:
                raise ValueError(f"component {value!r} is outside 0..255")
        return cls(red / 255.0, green / 255.0, blue / 255.0)

    @classmethod
    def from_hsv_f(cls, hue: float, saturation: float, value: float) -> Color:
        """Build a colour from HSV components in 0..1; a hue of -1 means achromatic."""
        if not (0.0 <= hue <= 1.0 or hue == -1.0):
            raise ValueError(f"hue {hue!r} is outside 0..1")
        if not 0.0 <= saturation <= 1.0:
            raise ValueError(f"saturation {saturation!r} is outside 0..1")
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"value {value!r} is outside 0..1")
        if hue == -1.0 or saturation == 0.0:
            return cls(value, value, value)
        return cls(*colorsys.hsv_to_rgb(hue, saturation, value))

    def red_f(self) -> float:
        return self.red

    def green_f(self) -> float:
        return self.green

    def blue_f(self) -> float:
        return self.blue


def n_min(v1: float, v2: float) -> float:
    """Minimum of two values, ignoring NaN unless both are NaN."""
    if math.isnan(v1):
        return v2
    if math.isnan(v2):
        return v1
    return min(v1, v2)


def n_max(v1: float, v2: float) -> float:
    """Maximum of two values, ignoring NaN unless both are NaN."""
    if math.isnan(v1):
        return v2
    if math.isnan(v2):
        return v1
    return max(v1, v2)


def color_to_vector(color: Color) -> Vector3:
    """Colour components as a vector (red, green, blue)."""
    return Vector3(color.red_f(), color.green_f(), color.blue_f())