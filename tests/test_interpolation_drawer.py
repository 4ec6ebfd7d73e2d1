from cncview.drawable import SNAN
from cncview.interpolation_drawer import HeightMapInterpolationDrawer
from cncview.util import Color, Rect, Vector3, color_to_vector

NAN = float("nan")
RED = Vector3(1.0, 0.0, 0.0)


def make_drawer(data, rect=Rect(0, 0, 10, 20)):
    drawer = HeightMapInterpolationDrawer()
    drawer.border_rect = rect
    drawer.data = data
    return drawer


def test_empty_data_gives_no_lines():
    drawer = make_drawer([])
    drawer.lines = ["stale"]
    assert drawer.update_data() is True
    assert drawer.lines == []


def test_none_data_gives_no_lines():
    drawer = HeightMapInterpolationDrawer()
    assert drawer.update_data() is True
    assert drawer.vertex_count() == 0


def test_line_count_for_full_grid():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    assert len(drawer.lines) == 8


def test_positions_follow_grid():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    positions = {v.position for v in drawer.lines}
    assert positions == {
        Vector3(0, 0, 0.0),
        Vector3(10, 0, 1.0),
        Vector3(0, 20, 2.0),
        Vector3(10, 20, 3.0),
    }


def test_highest_is_red_lowest_is_blue_hue():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    by_z = {v.position.z: v.color for v in drawer.lines}
    assert by_z[3.0] == RED
    assert by_z[0.0] == color_to_vector(Color.from_hsv_f(0.67, 1.0, 1.0))


def test_start_marker_is_unset():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_data()
    assert all(v.start == Vector3(SNAN, SNAN, SNAN) for v in drawer.lines)


def test_flat_data_is_red():
    drawer = make_drawer([[5.0, 5.0], [5.0, 5.0]])
    drawer.update_data()
    assert len(drawer.lines) == 8
    assert all(v.color == RED for v in drawer.lines)


def test_nan_cells_are_skipped():
    drawer = make_drawer([[0.0, NAN], [2.0, 3.0]])
    drawer.update_data()
    assert len(drawer.lines) == 6
    ends = drawer.lines[1::2]
    assert all(v.position.z == v.position.z for v in ends)


def test_setting_data_marks_stale_but_border_does_not():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_geometry()
    assert drawer.needs_update_geometry() is False
    drawer.border_rect = Rect(1, 1, 5, 5)
    assert drawer.needs_update_geometry() is False
    new_data = [[1.0, 1.0]]
    drawer.data = new_data
    assert drawer.needs_update_geometry() is True
    assert drawer.data is new_data


def test_update_geometry_packs_lines():
    drawer = make_drawer([[0.0, 1.0], [2.0, 3.0]])
    drawer.update_geometry()
    assert drawer.vertex_data() == drawer.lines