"""Sampling of memory usage and live block counts into graph curves."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Point = tuple[int, int]


@dataclass(frozen=True)
class GraphEntry:
    """Memory usage and live block count at one point in time."""

    usage: int = 0
    num_live_blocks: int = 0


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def _curve_y(value: int, minimum: int, peak: int, top: int, bottom: int) -> int:
    span = peak - minimum if peak != minimum else peak
    if span == 0:
        return bottom - _div(bottom - top, 2)
    return bottom - _div((value - minimum) * (bottom - top), span)


class GraphCurve:
    """One sample per horizontal pixel of usage and live blocks, cached per view."""

    def __init__(self) -> None:
        self.values: list[GraphEntry] = []
        self.left = 0
        self.right = 0
        self.min_time = 0
        self.max_time = 0
        self.auto_zoom: bool | None = None
        self.min_usage = 0
        self.max_usage = 0
        self.min_live = 0
        self.max_live = 0

    def update(
        self,
        graph_at_time: Callable[[int], GraphEntry],
        min_time: int,
        max_time: int,
        left: int,
        right: int,
        auto_zoom: bool,
        global_peak_usage: int,
        global_peak_live: int,
    ) -> bool:
        """Resample the curve if the view changed; report whether it did.

        With auto zoom the vertical range follows the samples, otherwise it
        spans from zero to the capture's global peaks.
        """
        if right < left:
            raise ValueError(f"right edge {right} lies left of {left}")
        if max_time < min_time:
            raise ValueError(f"max time {max_time} lies before {min_time}")
        if (
            self.auto_zoom == auto_zoom
            and self.min_time == min_time
            and self.max_time == max_time
            and self.left == left
            and self.right == right
        ):
            return False

        start = graph_at_time(min_time)
        if auto_zoom:
            peak_usage = min_usage = start.usage
            peak_live = min_live = start.num_live_blocks
        else:
            peak_usage, min_usage = global_peak_usage, 0
            peak_live, min_live = global_peak_live, 0

        width = right - left
        values: list[GraphEntry] = []
        if width:
            delta = (max_time - min_time) / width
            time = float(min_time)
            for _ in range(width):
                entry = graph_at_time(int(time))
                values.append(entry)
                if auto_zoom:
                    peak_usage = max(entry.usage, peak_usage)
                    min_usage = min(entry.usage, min_usage)
                    peak_live = max(entry.num_live_blocks, peak_live)
                    min_live = min(entry.num_live_blocks, min_live)
                time = min(time + delta, float(max_time))

        self.values = values
        self.max_usage, self.min_usage = peak_usage, min_usage
        self.max_live, self.min_live = peak_live, min_live
        self.auto_zoom = auto_zoom
        self.min_time, self.max_time = min_time, max_time
        self.left, self.right = left, right
        return True

    def paths(self, top: int, bottom: int, start: GraphEntry) -> tuple[list[Point], list[Point]]:
        """Usage and live-block polylines between ``top`` and ``bottom``.

        Each begins at the curve's left edge with the ``start`` entry and
        has one further point per sample.
        """
        usage = [(self.left, _curve_y(start.usage, self.min_usage, self.max_usage, top, bottom))]
        live = [
            (self.left, _curve_y(start.num_live_blocks, self.min_live, self.max_live, top, bottom))
        ]
        for x, entry in enumerate(self.values, start=self.left):
            usage.append((x, _curve_y(entry.usage, self.min_usage, self.max_usage, top, bottom)))
            live.append(
                (x, _curve_y(entry.num_live_blocks, self.min_live, self.max_live, top, bottom))
            )
        return usage, live