"""Vertex geometry for drawing CNC tools, origin axes and height maps."""

__version__ = "1.1.9"

__all__ = [
    "util",
    "interpolation",
    "drawable",
    "origin_drawer",
    "border_drawer",
    "selection_drawer",
    "tool_drawer",
    "grid_drawer",
    "interpolation_drawer",
]