import pytest

from memtune.graph import GraphController
from memtune.graphview import GraphView


def make_controller(capture_min=0, capture_max=1000):
    return GraphController(GraphView(capture_min, capture_max, 400, 300))


def test_initial_snapshot_is_whole_capture():
    controller = make_controller(10, 500)
    assert controller.snapshot == (10, 500)
    assert controller.selection.is_empty
    assert controller.marker_from is None and controller.marker_to is None


def test_select_from_times_orders_and_enables_actions():
    controller = make_controller()
    assert controller.select_from_times(700, 200) == (200, 700)
    assert controller.snapshot == (200, 700)
    assert (controller.selection.min_time, controller.selection.max_time) == (200, 700)
    assert controller.zoom_to_selection_enabled is True
    assert controller.snap_to_marker_enabled is True
    assert controller.zoom_select_enabled is True


def test_selecting_whole_capture_disables_zoom_select():
    controller = make_controller()
    controller.select_from_times(0, 1000)
    assert controller.zoom_select_enabled is False


@pytest.mark.parametrize(
    "marker, expected",
    [
        (800, (200, 800)),
        (100, (100, 700)),
        (300, (300, 700)),
        (650, (200, 650)),
    ],
)
def test_marker_snap_to(marker, expected):
    controller = make_controller()
    controller.select_from_times(200, 700)
    assert controller.marker_snap_to(marker) == expected
    assert controller.snapshot == expected


def test_marker_select_from_then_to():
    controller = make_controller()
    assert controller.marker_select_from(500) is None
    assert controller.marker_from == 500
    assert controller.marker_select_to(100) == (100, 500)
    assert controller.marker_from is None
    assert controller.marker_to is None


def test_marker_select_to_then_from():
    controller = make_controller()
    assert controller.marker_select_to(300) is None
    assert controller.marker_select_from(600) == (300, 600)


def test_clear_selection_restores_capture():
    controller = make_controller()
    controller.select_from_times(200, 700)
    controller.clear_selection()
    assert controller.snapshot == (0, 1000)
    assert controller.selection.is_empty
    assert controller.zoom_to_selection_enabled is False
    assert controller.snap_to_marker_enabled is False
    assert controller.zoom_select_enabled is False


def test_pan_moves_window_and_keeps_span():
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    assert controller.pan(100) == (300, 500)
    assert (controller.view.min_time, controller.view.max_time) == (300, 500)


@pytest.mark.parametrize("delta", [5000, -5000, 999, -999])
def test_pan_stays_inside_capture(delta):
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    low, high = controller.pan(delta)
    assert 0 <= low <= high <= 1000
    assert high - low == 200


def test_pan_to_end_and_start():
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    assert controller.pan(5000)[1] == 1000
    assert controller.pan(-5000)[0] == 0


def test_pan_zero_keeps_window():
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    assert controller.pan(0) == (200, 400)


def test_scroll_to_edges():
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    assert controller.scroll_to(0, 99) == (0, 200)
    assert controller.scroll_to(99, 99) == (800, 1000)


def test_scroll_round_trip():
    controller = make_controller()
    controller.view.set_min_max_time(200, 400)
    controller.scroll_to(50, 100)
    assert controller.view.max_time - controller.view.min_time == 200
    assert abs(controller.scroll_position(100) - 50) <= 1


def test_scroll_to_rejects_zero_maximum():
    controller = make_controller()
    with pytest.raises(ValueError):
        controller.scroll_to(1, 0)


def test_scroll_position_full_window_is_zero():
    controller = make_controller()
    assert controller.scroll_position(99) == 0


def test_zoom_changed_unzoomed():
    controller = make_controller()
    assert controller.zoom_changed() is False
    assert controller.scroll_value == 0
    assert controller.scroll_enabled is False
    assert controller.zoom_out_enabled is False
    assert controller.view.zoom_reset_enabled is False


def test_zoom_changed_after_zoom_in():
    controller = make_controller()
    controller.view.zoom_in()
    assert controller.zoom_changed() is True
    assert controller.scroll_enabled is True
    assert controller.zoom_out_enabled is True
    assert controller.view.zoom_reset_enabled is True
    assert 0 <= controller.scroll_value <= controller.scroll_maximum