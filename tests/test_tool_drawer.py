import math

import pytest

from cncview.drawable import SNAN
from cncview.tool_drawer import ToolDrawer, create_circle, normalize_angle
from cncview.util import Color, Vector3, color_to_vector


def _distance_xy(a, b):
    return math.hypot(a.x - b.x, a.y - b.y)


def test_defaults():
    tool = ToolDrawer()
    assert tool.tool_diameter == 3
    assert tool.tool_length == 15
    assert tool.tool_position == Vector3(0, 0, 0)
    assert tool.rotation_angle == 0
    assert tool.end_length == 0


@pytest.mark.parametrize("angle", [-725.0, -90.0, 0.0, 45.0, 360.0, 450.0, 1000.0])
def test_normalize_angle_range_and_period(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= 360
    assert (result - angle) % 360 == pytest.approx(0)


def test_normalize_angle_keeps_full_turn():
    assert normalize_angle(360.0) == 360.0


def test_create_circle_geometry():
    center = Vector3(1, 2, 3)
    color = Vector3(0.5, 0.5, 0.5)
    circle = create_circle(center, 4.0, 20, color)
    assert len(circle) == 40
    for v in circle:
        assert _distance_xy(v.position, center) == pytest.approx(4.0)
        assert v.position.z == 3
        assert v.color == color
        assert v.start == Vector3(SNAN, SNAN, SNAN)
    # consecutive segments share endpoints
    for i in range(1, len(circle) - 1, 2):
        assert circle[i] == circle[i + 1]
    assert circle[0].position.x == pytest.approx(circle[-1].position.x)
    assert circle[0].position.y == pytest.approx(circle[-1].position.y)


def test_create_circle_rejects_no_arcs():
    with pytest.raises(ValueError):
        create_circle(Vector3(), 1.0, 0, Vector3())


def test_setters_mark_geometry_stale():
    tool = ToolDrawer()
    tool.update_geometry()
    assert tool.needs_update_geometry() is False
    tool.tool_diameter = 3
    assert tool.needs_update_geometry() is False
    tool.tool_position = Vector3(1, 1, 1)
    assert tool.needs_update_geometry() is True


def test_rotate_wraps():
    tool = ToolDrawer()
    tool.rotate(400)
    assert tool.rotation_angle == pytest.approx(40)
    tool.rotate(-80)
    assert 0 <= tool.rotation_angle <= 360
    assert tool.rotation_angle == pytest.approx(320)


def test_tool_angle_extends_length():
    tool = ToolDrawer()
    tool.tool_diameter = 40
    tool.tool_angle = 10
    assert tool.end_length > 15
    assert tool.tool_length == tool.end_length


def test_flat_tool_angle_has_no_tip():
    tool = ToolDrawer()
    tool.tool_angle = 180
    assert tool.end_length == 0


def test_update_data_flat_tool():
    tool = ToolDrawer()
    tool.color = Color(1.0, 0.0, 0.0)
    assert tool.update_data() is True
    assert len(tool.lines) == 152
    assert tool.points == []
    expected = color_to_vector(tool.color)
    assert all(v.color == expected for v in tool.lines)


def test_zero_circle_only_without_tip():
    flat = ToolDrawer()
    flat.update_data()
    pointed = ToolDrawer()
    pointed.tool_angle = 90
    pointed.update_data()
    assert len(flat.lines) - len(pointed.lines) == 40
    assert all(v.position.z != 0 or v.position.x == 0 for v in pointed.lines[40:])


def test_side_lines_on_tool_radius():
    tool = ToolDrawer()
    tool.tool_position = Vector3(5, -3, 2)
    tool.rotate(30)
    tool.update_data()
    for i in range(4):
        side_bottom = tool.lines[i * 8]
        side_top = tool.lines[i * 8 + 1]
        assert _distance_xy(side_bottom.position, tool.tool_position) == pytest.approx(1.5)
        assert side_top.position.z == pytest.approx(tool.tool_position.z + tool.tool_length)
        assert tool.lines[i * 8 + 2].position == tool.tool_position