# cncview

`cncview` builds the vertex geometry for a CNC machine's 3D view: the
origin axes, the height-map border, the probed height-map grid, its
interpolated surface, the cutting tool and a selection marker. Each
drawer fills lists of `VertexData` (position, colour, start) and
describes how to draw them as `DrawCall`s, so any renderer can use the
result.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Drawables

Every drawer derives from `cncview.drawable.ShaderDrawable`, which holds
three vertex lists (`triangles`, `lines`, `points`) and the attributes
`line_width`, `point_size`, `visible` and `texture`.

- `update()` marks the geometry as stale; `needs_update_geometry()` tells
  whether it is.
- `update_geometry()` calls `update_data()` to fill the vertex lists and,
  when that returns `True`, packs them into one buffer.
- `vertex_data()` returns the packed buffer: triangles, then lines, then
  points.
- `draw_calls()` returns one `DrawCall` (`primitive`, `first`, `count`,
  and `line_width` or `texture` where they apply) per non-empty list, or
  nothing when the drawable is not visible.
- `vertex_count()` counts the vertices in the three lists.

The value `cncview.drawable.SNAN` (65536.0) in a vertex's `start` vector
marks a component as unset; points carry their size in `start.z`.

The drawers:

| Module | Class | Draws |
| --- | --- | --- |
| `cncview.origin_drawer` | `OriginDrawer` | X, Y, Z axis arrows (red, green, blue) and a 2×2 square |
| `cncview.border_drawer` | `HeightMapBorderDrawer` | the red outline of `border_rect` at Z = 0 |
| `cncview.selection_drawer` | `SelectionDrawer` | one point of `color` at `end_position` |
| `cncview.tool_drawer` | `ToolDrawer` | a wireframe cylinder with an optional conical tip |
| `cncview.grid_drawer` | `HeightMapGridDrawer` | probed heights as points joined by grid lines |
| `cncview.interpolation_drawer` | `HeightMapInterpolationDrawer` | an interpolated height grid, coloured by height |

```python
from cncview.util import Vector3, Color
from cncview.tool_drawer import ToolDrawer

tool = ToolDrawer()
tool.color = Color.from_rgb(255, 153, 0)
tool.tool_position = Vector3(10.0, 5.0, 2.0)
tool.tool_angle = 90          # conical tip; tool.end_length is its height
tool.rotate(45)

if tool.needs_update_geometry():
    tool.update_geometry()

for call in tool.draw_calls():
    print(call.primitive, call.first, call.count)

print(tool.vertex_count())
```

`ToolDrawer` properties (`tool_diameter`, `tool_length`, `tool_position`,
`rotation_angle`, `tool_angle`) mark the geometry stale only when their
value changes. `rotate(angle)` keeps the rotation within 0..360 degrees
(see `normalize_angle`); `create_circle(center, radius, arcs, color)`
returns the line vertices of a circle.

## Height maps

Heights are given as a sequence of rows. In `HeightMapGridDrawer.model`
a `nan` marks a point not yet probed; it is drawn as a vertical line from
`z_top` down to `z_bottom`. Grid points are spread evenly over
`border_rect`.

`HeightMapInterpolationDrawer.data` takes the interpolated grid and
colours each vertex from red (highest) to blue (lowest).

Heights between grid points come from bicubic interpolation:

```python
from cncview.util import Rect
from cncview.interpolation import grid_interpolate

heights = [
    [0.0, 0.1, 0.2],
    [0.1, 0.2, 0.3],
    [0.2, 0.3, 0.4],
]
z = grid_interpolate(Rect(0, 0, 20, 20), heights, 7.5, 12.0)
```

`grid_interpolate` raises `ValueError` for a grid smaller than 2×2 or a
rectangle with no area. `cubic_interpolate` and `bicubic_interpolate`
work directly on 4 and 4×4 sample arrays.

## Helpers

`cncview.util` provides the frozen value types `Vector3` (with
`length()`, `+` and `-`), `Rect` (with `right` and `bottom`) and `Color`
(components in 0..1, built directly, with `from_rgb` or with
`from_hsv_f`), the NaN-ignoring `n_min` / `n_max`, and `color_to_vector`.

## What it does not do

`cncview` only produces vertex data and draw descriptions. It does not
render anything, open a window, read or parse G-code files, build
toolpath geometry from a program, or talk to a machine controller.