"""Allocation size histogram: bar layout, tooltips and bin selection."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

MIN_BIN_SIZE = 8
BOOST = 60

Color = tuple[int, int, int, int]
Rect = tuple[int, int, int, int]

GLOBAL_COLOR: Color = (50, 150, 170, 138)
GLOBAL_PEAK_COLOR: Color = (50 + 60, 150 + 60, 170 + 60, 111)
SNAPSHOT_COLOR: Color = (90, 120, 90, 138)
SNAPSHOT_PEAK_COLOR: Color = (90 + 60, 120 + 60, 90 + 60, 111)


class DisplayMode(enum.Enum):
    """Which statistics the histogram shows."""

    GLOBAL = "global"
    SNAPSHOT = "snapshot"
    BOTH = "both"


class HistogramType(enum.Enum):
    """Which quantity of a bin is plotted."""

    SIZE = "size"
    OVERHEAD = "overhead"
    COUNT = "count"


@dataclass(frozen=True)
class HistogramBin:
    """Statistics of one allocation size class."""

    size: int = 0
    size_peak: int = 0
    overhead: int = 0
    overhead_peak: int = 0
    count: int = 0
    count_peak: int = 0


_FIELDS = {
    HistogramType.SIZE: ("size", "size_peak"),
    HistogramType.OVERHEAD: ("overhead", "overhead_peak"),
    HistogramType.COUNT: ("count", "count_peak"),
}


@dataclass(frozen=True)
class HistogramToolTip:
    """A drawn bar: its rectangle, tooltip text, bin and fill colour."""

    rect: Rect
    text: str
    bin: int
    color: Color = GLOBAL_COLOR

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies on the bar, edges included."""
        x, y, width, height = self.rect
        px, py = point
        return x <= px <= x + width and y <= py <= y + height


def bin_label(value: int) -> str:
    """Axis label for a bin's size, right-aligned to six characters."""
    if value < 1024:
        text = f"{value} b"
    elif value < 1024 * 1024:
        text = f"{value // 1024} Kb"
    else:
        text = f"{value // (1024 * 1024)} Mb"
    return text.rjust(6)


def bin_value(bins: Sequence[HistogramBin], kind: HistogramType, index: int, peak: bool) -> int:
    """The plotted quantity of one bin."""
    return getattr(bins[index], _FIELDS[kind][1 if peak else 0])


def max_value(bins: Sequence[HistogramBin], kind: HistogramType, use_peak: bool) -> int:
    """Largest quantity over all bins; peaks are included when asked for."""
    current, peak = _FIELDS[kind]
    result = 0
    for entry in bins:
        result = max(result, getattr(entry, current))
        if use_peak:
            result = max(result, getattr(entry, peak))
    return result


def describe_value(kind: HistogramType, value: int, peak: bool) -> str:
    """Tooltip text for a bar's value."""
    if kind is HistogramType.SIZE:
        text = "1 byte used" if value == 1 else f"{value:,} bytes used"
    elif kind is HistogramType.OVERHEAD:
        text = f"{value:,} bytes of overhead"
    else:
        text = "1 allocation" if value == 1 else f"{value:,} allocations"
    if peak:
        text += " at peak"
    return text


def boost_color(color: Color, boost: bool) -> Color:
    """Brighten a colour for highlighting, keeping its alpha."""
    if not boost:
        return color
    red, green, blue, alpha = color
    return (min(red + BOOST, 255), min(green + BOOST, 255), min(blue + BOOST, 255), alpha)


def _div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


class Histogram:
    """Lays out histogram bars and tracks hover highlight and bin clicks."""

    def __init__(self) -> None:
        self.display_mode = DisplayMode.GLOBAL
        self.type = HistogramType.SIZE
        self.show_peaks = False
        self.min_bin_size = MIN_BIN_SIZE
        self.highlight_point: tuple[float, float] = (0, 0)
        self.highlight_bin: int | None = None
        self.tooltips: list[HistogramToolTip] = []
        self.labels: list[str] = []

    def _is_highlighted(self, rect: Rect) -> bool:
        if self.highlight_bin is None:
            return False
        x, y, width, height = rect
        px, py = self.highlight_point
        return x <= px < x + width and y <= py < y + height

    def _specs(self, global_bins, snapshot_bins, thickness):
        half, quarter = _div(thickness, 2), _div(thickness, 4)
        if self.display_mode is DisplayMode.BOTH:
            g, s = "Global:\n", "Snapshot:\n"
            if self.show_peaks:
                return [
                    (global_bins, False, -half, quarter, GLOBAL_COLOR, g),
                    (global_bins, True, -half + quarter, quarter, GLOBAL_PEAK_COLOR, g),
                    (snapshot_bins, False, 0, quarter, SNAPSHOT_COLOR, s),
                    (snapshot_bins, True, quarter, quarter, SNAPSHOT_PEAK_COLOR, s),
                ]
            return [
                (global_bins, False, -half, half, GLOBAL_COLOR, g),
                (snapshot_bins, False, 0, half, SNAPSHOT_COLOR, s),
            ]
        if self.display_mode is DisplayMode.SNAPSHOT:
            bins, color, peak_color = snapshot_bins, SNAPSHOT_COLOR, SNAPSHOT_PEAK_COLOR
        else:
            bins, color, peak_color = global_bins, GLOBAL_COLOR, GLOBAL_PEAK_COLOR
        if self.show_peaks:
            return [
                (bins, False, -half, half, color, ""),
                (bins, True, 0, half, peak_color, ""),
            ]
        return [(bins, False, -half, thickness, color, "")]

    def layout(
        self,
        draw_rect: Rect,
        global_bins: Sequence[HistogramBin],
        snapshot_bins: Sequence[HistogramBin],
    ) -> list[HistogramToolTip]:
        """Compute the bars inside ``draw_rect`` given as ``(x, y, width, height)``."""
        if len(global_bins) != len(snapshot_bins):
            raise ValueError("global and snapshot statistics must have the same number of bins")
        left, top, width, height = draw_rect
        bottom = top + height
        num_bins = len(global_bins)
        delta = _div(width, num_bins + 1)
        self.labels = [bin_label(self.min_bin_size << i) for i in range(num_bins)]

        bars_per_bin = (2 if self.show_peaks else 1) * (
            2 if self.display_mode is DisplayMode.BOTH else 1
        )
        thickness = (delta & ~1) - 6
        while thickness % bars_per_bin:
            thickness -= 2

        specs = [
            (bins, peak, offset, bar_width, color, prefix, max_value(bins, self.type, peak))
            for bins, peak, offset, bar_width, color, prefix in self._specs(
                global_bins, snapshot_bins, thickness
            )
        ]

        tooltips: list[HistogramToolTip] = []
        for index in range(num_bins):
            position = left + delta * (index + 1)
            for bins, peak, offset, bar_width, color, prefix, maximum in specs:
                value = bin_value(bins, self.type, index, peak)
                bar_height = height * value // maximum if maximum else 0
                if not bar_height:
                    continue
                rect = (position + offset, bottom - bar_height, bar_width, bar_height)
                tooltips.append(
                    HistogramToolTip(
                        rect,
                        prefix + describe_value(self.type, value, peak),
                        index,
                        boost_color(color, self._is_highlighted(rect)),
                    )
                )
        self.tooltips = tooltips
        return tooltips

    def highlight(self, point: tuple[float, float], bin_index: int | None) -> None:
        """Mark the hovered point and bin; ``None`` clears the highlight."""
        self.highlight_point = point
        self.highlight_bin = bin_index

    def tooltip_at(self, point: tuple[float, float]) -> HistogramToolTip | None:
        """The first bar under ``point``, if any."""
        return next((tip for tip in self.tooltips if tip.contains(point)), None)

    def click(self, selected_bin: int | None) -> int | None:
        """New selected bin after a click given the current selection.

        Clicking the selected bin, or outside any bin, clears the selection.
        """
        if self.highlight_bin is None or self.highlight_bin == selected_bin:
            return None
        return self.highlight_bin