"""Memory markers along the time axis and the selected time range."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

MARGIN_BOTTOM = 27
MARKER_WIDTH = 6

Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class MemoryMarker:
    """A named event recorded at a point in time by one thread."""

    time: int
    name: str
    color: int = 0
    thread_id: int = 0

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The ``0xRRGGBB`` colour split into components."""
        return ((self.color >> 16) & 0xFF, (self.color >> 8) & 0xFF, self.color & 0xFF)


@dataclass(frozen=True)
class MarkerToolTip:
    """Where a marker is drawn and what its tooltip says."""

    rect: Rect
    text: str
    time: int
    thread_id: int
    color: tuple[int, int, int] = (0, 0, 0)

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies on the marker, edges included."""
        x, y, width, height = self.rect
        px, py = point
        return x <= px <= x + width and y <= py <= y + height


def marker_tooltips(
    markers: Iterable[MemoryMarker],
    min_time: int,
    max_time: int,
    map_time_to_pos: Callable[[int], int],
    bottom: int,
) -> list[MarkerToolTip]:
    """Markers inside ``[min_time, max_time]`` placed below the graph's ``bottom``."""
    half = MARKER_WIDTH // 2
    tooltips = []
    for marker in markers:
        if not min_time <= marker.time <= max_time:
            continue
        x = map_time_to_pos(marker.time)
        rect = (x - half, bottom + 3, MARKER_WIDTH, MARGIN_BOTTOM - 12)
        tooltips.append(MarkerToolTip(rect, marker.name, marker.time, marker.thread_id, marker.rgb))
    return tooltips


@dataclass
class GraphSelection:
    """The selected time range of the graph; empty when both ends are equal."""

    min_time: int = 0
    max_time: int = 0

    def set_range(self, first: int, second: int) -> None:
        """Select between two times given in either order."""
        self.min_time = min(first, second)
        self.max_time = max(first, second)

    @property
    def is_empty(self) -> bool:
        return self.min_time == self.max_time

    def visible_span(self, min_time: int, max_time: int) -> tuple[int, int] | None:
        """The part of the selection within the shown range, or ``None``."""
        if self.is_empty:
            return None
        if self.max_time < min_time or self.min_time > max_time:
            return None
        return max(self.min_time, min_time), min(self.max_time, max_time)