from rastervis.model.geometry_primitives import Point
from rastervis.model.shapes import Circle, Line
from rastervis.model.state import SceneState, UpdateStatus


def test_valid_line_fields_define_a_line():
    state = SceneState()
    assert state.update_line(["0", "0", "5", "2"]) is UpdateStatus.OK
    assert state.line == Line(Point(0, 0), Point(5, 2))
    assert state.last_error is None


def test_unparsable_fields_remove_shape_and_points():
    state = SceneState()
    state.update_line(["0", "0", "5", "2"])
    state.line_points = [Point(1, 0)]

    assert state.update_line(["0", "", "5", "2"]) is UpdateStatus.ABSENT
    assert state.line is None
    assert state.line_points == []


def test_invalid_geometry_keeps_previous_shape():
    state = SceneState()
    state.update_circle(["1", "1", "3"])
    state.circle_points = [Point(1, 4)]

    assert state.update_circle(["1", "1", "-3"]) is UpdateStatus.REJECTED
    assert state.circle == Circle(Point(1, 1), 3.0)
    assert state.circle_points == []
    assert "negative" in state.last_error


def test_line_and_circle_are_independent():
    state = SceneState()
    state.update_line(["0", "0", "5", "2"])
    state.update_circle(["", "", ""])
    assert state.line is not None
    assert state.circle is None


def test_reset_drops_everything():
    state = SceneState()
    state.update_line(["0", "0", "5", "2"])
    state.update_circle(["0", "0", "2"])
    state.line_points = [Point(1, 0)]
    state.circle_points = [Point(0, 2)]

    state.reset()

    assert state == SceneState()


def test_clear_points_keeps_shapes():
    state = SceneState()
    state.update_line(["0", "0", "5", "2"])
    state.line_points = [Point(1, 0)]
    state.clear_points()
    assert state.line is not None
    assert state.line_points == []
