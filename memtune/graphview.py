"""Time range, zoom and coordinate mapping of the memory usage graph."""

from __future__ import annotations

from .markers import MARGIN_BOTTOM

MARGIN_LEFT = 45
MARGIN_RIGHT = 21
MARGIN_TOP = 15

Rect = tuple[int, int, int, int]


class GraphView:
    """The visible time window over a capture and its highlight.

    Positions are scene coordinates: the scene is centred on the origin
    and is as large as the view.
    """

    def __init__(self, capture_min: int, capture_max: int, width: int, height: int) -> None:
        if capture_max < capture_min:
            raise ValueError(f"capture ends at {capture_max} before it starts at {capture_min}")
        if width < 0 or height < 0:
            raise ValueError("view size must not be negative")
        self.capture_min = capture_min
        self.capture_max = capture_max
        self.width = width
        self.height = height
        self.min_time = capture_min
        self.max_time = capture_max
        self.highlight_start: int | None = None
        self.highlight_end: int | None = None
        self.highlight_intensity = 0.0
        self.zoom_reset_enabled = False

    def draw_rect(self) -> Rect:
        """Plot area as ``(x, y, width, height)`` inside the margins."""
        half_width = self.width // 2
        half_height = self.height // 2
        left = -half_width + MARGIN_LEFT
        right = half_width - MARGIN_RIGHT
        top = -half_height + MARGIN_TOP
        bottom = half_height - MARGIN_BOTTOM
        return left, top, right - left, bottom - top

    def map_pos_to_time(self, x: float) -> int:
        """Time at horizontal position ``x``, clamped to the plot area."""
        left, _, width, _ = self.draw_rect()
        if width <= 0:
            return self.min_time
        x = min(max(x, left), left + width)
        offset = x - left
        return int(offset * (self.max_time - self.min_time) / width) + self.min_time

    def map_time_to_pos(self, time: int) -> int:
        """Horizontal position of ``time`` in the visible window."""
        left, _, width, _ = self.draw_rect()
        span = self.max_time - self.min_time
        if span == 0:
            return left
        return left + int((time - self.min_time) * width / span)

    def set_min_max_time(self, min_time: int, max_time: int) -> None:
        """Show the window from ``min_time`` to ``max_time``."""
        if max_time < min_time:
            raise ValueError(f"max time {max_time} lies before {min_time}")
        self.min_time = min_time
        self.max_time = max_time

    def highlight_time(self, time: int) -> bool:
        """Flash a single instant; times outside the capture are ignored."""
        if not self.capture_min <= time <= self.capture_max:
            return False
        self.highlight_start = self.highlight_end = time
        self.highlight_intensity = 1.0
        return True

    def highlight_range(self, first: int, second: int) -> bool:
        """Flash a range clamped to the capture; ranges outside it are ignored."""
        low, high = min(first, second), max(first, second)
        if high < self.capture_min or low > self.capture_max:
            return False
        self.highlight_start = max(low, self.capture_min)
        self.highlight_end = min(high, self.capture_max)
        self.highlight_intensity = 1.0
        return True

    def _zoom(self, time: int | None, numerator: int, denominator: int) -> tuple[int, int]:
        half_span = (self.max_time - self.min_time) // 2
        middle = (self.max_time + self.min_time) // 2 if time is None else time
        reach = half_span * numerator // denominator
        new_min, new_max = middle - reach, middle + reach
        if new_max > self.capture_max:
            new_min -= new_max - self.capture_max
        if new_min < self.capture_min:
            new_max += self.capture_min - new_min
        new_max = min(new_max, self.capture_max)
        new_min = max(new_min, self.capture_min)
        self.min_time, self.max_time = new_min, new_max
        return new_min, new_max

    def zoom_in(self, time: int | None = None) -> tuple[int, int]:
        """Narrow the window around ``time`` (the centre by default)."""
        result = self._zoom(time, 2, 3)
        self.zoom_reset_enabled = True
        return result

    def zoom_out(self, time: int | None = None) -> tuple[int, int]:
        """Widen the window around ``time`` (the centre by default)."""
        result = self._zoom(time, 3, 2)
        if result == (self.capture_min, self.capture_max):
            self.zoom_reset_enabled = False
        return result

    def zoom_reset(self) -> tuple[int, int]:
        """Show the whole capture."""
        self.min_time, self.max_time = self.capture_min, self.capture_max
        self.zoom_reset_enabled = False
        return self.min_time, self.max_time

    def zoom_select(self, snapshot_min: int, snapshot_max: int) -> tuple[int, int]:
        """Show exactly the selected snapshot range."""
        self.set_min_max_time(min(snapshot_min, snapshot_max), max(snapshot_min, snapshot_max))
        self.zoom_reset_enabled = True
        return self.min_time, self.max_time