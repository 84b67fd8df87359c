import pytest

from transformviz.controller.interaction import InteractionController, InteractionMode, InteractionState
from transformviz.model.geometry import Point


@pytest.fixture
def controller(point_store, mapper):
    return InteractionController(point_store, mapper)


def test_press_adds_plane_point_and_starts_drawing(controller, point_store):
    assert controller.state is InteractionState.IDLE
    controller.press(300, 200)
    assert point_store.points == (Point(50.0, 50.0),)
    assert controller.state is InteractionState.DRAWING


def test_drag_appends_one_point_per_move(controller, point_store):
    controller.press(250, 250)
    moves = [(251, 250), (252, 249), (260, 240), (270, 230), (280, 220)]
    for dx, dy in moves:
        controller.move(dx, dy)
    assert len(point_store) == 6
    expected = [Point(0.0, 0.0)] + [Point(dx - 250.0, 250.0 - dy) for dx, dy in moves]
    assert list(point_store.points) == expected


def test_move_while_idle_is_ignored(controller, point_store):
    controller.move(10, 10)
    assert len(point_store) == 0


@pytest.mark.parametrize("end", ["release", "leave"])
def test_release_and_leave_end_the_stroke(controller, point_store, end):
    controller.press(100, 100)
    getattr(controller, end)()
    assert controller.state is InteractionState.IDLE
    assert len(point_store) == 1
    controller.move(120, 120)
    assert len(point_store) == 1


def test_release_while_idle_is_harmless(controller, point_store):
    controller.release()
    controller.leave()
    assert controller.state is InteractionState.IDLE
    assert len(point_store) == 0


def test_drag_outside_surface_is_accepted(controller, point_store):
    controller.press(495, 250)
    controller.move(530, 250)
    assert point_store.points[-1] == Point(280.0, 0.0)


def test_click_mode_adds_one_point_per_press(point_store, mapper):
    controller = InteractionController(point_store, mapper, mode="click")
    assert controller.mode is InteractionMode.CLICK
    controller.press(250, 250)
    assert controller.state is InteractionState.IDLE
    for _ in range(5):
        controller.move(260, 260)
    controller.release()
    controller.press(260, 240)
    assert list(point_store.points) == [Point(0.0, 0.0), Point(10.0, 10.0)]


def test_unknown_mode_rejected(point_store):
    with pytest.raises(ValueError):
        InteractionController(point_store, mode="hover")
