"""Selection, panning and scrolling on top of the memory usage graph view."""

from __future__ import annotations

from .graphview import GraphView
from .markers import GraphSelection

SCROLL_MAXIMUM = 99


class GraphController:
    """Snapshot selection, marker snapping, panning and scroll bar of a graph.

    The snapshot is the time range the statistics are computed for. It spans
    the whole capture until a range is selected.
    """

    def __init__(self, view: GraphView) -> None:
        self.view = view
        self.selection = GraphSelection()
        self.snapshot: tuple[int, int] = (view.capture_min, view.capture_max)
        self.marker_from: int | None = None
        self.marker_to: int | None = None
        self.zoom_to_selection_enabled = False
        self.snap_to_marker_enabled = False
        self.zoom_select_enabled = False
        self.zoom_out_enabled = False
        self.scroll_enabled = False
        self.scroll_maximum = SCROLL_MAXIMUM
        self.scroll_value = 0

    @property
    def _capture(self) -> tuple[int, int]:
        return self.view.capture_min, self.view.capture_max

    def _snapshot_selected(self) -> None:
        self.zoom_select_enabled = self.snapshot != self._capture

    def select_from_times(self, first: int, second: int) -> tuple[int, int]:
        """Make the range between two times, in either order, the snapshot."""
        low, high = min(first, second), max(first, second)
        self.snapshot = (low, high)
        self.selection.set_range(low, high)
        self._snapshot_selected()
        self.marker_from = None
        self.marker_to = None
        self.zoom_to_selection_enabled = True
        self.snap_to_marker_enabled = True
        return self.snapshot

    def marker_snap_to(self, marker_time: int) -> tuple[int, int]:
        """Move the nearer end of the snapshot to a marker, or extend it to reach one."""
        low, high = self.snapshot
        if marker_time > high:
            high = marker_time
        elif marker_time < low:
            low = marker_time
        elif high - marker_time < marker_time - low:
            high = marker_time
        else:
            low = marker_time
        return self.select_from_times(low, high)

    def _select_between_markers(self) -> tuple[int, int] | None:
        if self.marker_from is not None and self.marker_to is not None:
            return self.select_from_times(self.marker_from, self.marker_to)
        return None

    def marker_select_from(self, marker_time: int) -> tuple[int, int] | None:
        """Start a selection at a marker; select once both ends are chosen."""
        self.marker_from = marker_time
        return self._select_between_markers()

    def marker_select_to(self, marker_time: int) -> tuple[int, int] | None:
        """End a selection at a marker; select once both ends are chosen."""
        self.marker_to = marker_time
        return self._select_between_markers()

    def clear_selection(self) -> None:
        """Drop the selection so the snapshot spans the whole capture again."""
        self.snapshot = self._capture
        self.selection.set_range(0, 0)
        self.zoom_to_selection_enabled = False
        self.snap_to_marker_enabled = False
        self.marker_from = None
        self.marker_to = None
        self._snapshot_selected()

    def pan(self, delta: int) -> tuple[int, int]:
        """Shift the visible window by ``delta``, keeping it inside the capture."""
        view = self.view
        if delta == 0:
            return view.min_time, view.max_time
        capture_min, capture_max = self._capture
        new_min = view.min_time + delta
        new_max = view.max_time + delta
        if new_max > capture_max:
            new_min -= new_max - capture_max
        if new_min < capture_min:
            new_max += capture_min - new_min
        new_max = min(new_max, capture_max)
        new_min = max(new_min, capture_min)
        view.set_min_max_time(new_min, new_max)
        self.zoom_changed()
        return new_min, new_max

    def scroll_to(self, value: int, maximum: int) -> tuple[int, int]:
        """Place the visible window according to a scroll bar position."""
        if maximum <= 0:
            raise ValueError(f"scroll maximum must be positive: {maximum}")
        view = self.view
        capture_min, capture_max = self._capture
        visible = view.max_time - view.min_time
        spare = (capture_max - capture_min) - visible
        ratio = value / maximum
        new_min = capture_min + int(spare * ratio)
        new_max = new_min + visible
        new_min = max(new_min, capture_min)
        new_max = min(new_max, capture_max)
        view.set_min_max_time(new_min, new_max)
        self.scroll_value = value
        return new_min, new_max

    def scroll_position(self, maximum: int) -> int:
        """Scroll bar position matching the visible window, within ``[0, maximum]``."""
        view = self.view
        capture_min, capture_max = self._capture
        half_visible = (view.max_time - view.min_time) * 0.5
        span = (capture_max - half_visible) - (capture_min + half_visible)
        if span <= 0:
            return 0
        position = int(maximum * (view.min_time - capture_min) / span)
        return min(max(position, 0), maximum)

    def zoom_changed(self) -> bool:
        """Update zoom and scroll controls after the window changed; report if zoomed."""
        view = self.view
        zoomed = (view.min_time, view.max_time) != self._capture
        view.zoom_reset_enabled = zoomed
        self.zoom_out_enabled = zoomed
        self.scroll_enabled = zoomed
        self.scroll_value = self.scroll_position(self.scroll_maximum) if zoomed else 0
        return zoomed