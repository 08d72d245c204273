"""A virtual table that shows a window of rows from a large data source."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Any

WHEEL_STEP = 120


class SortOrder(enum.Enum):
    """Direction a column is sorted in."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class Key(enum.Enum):
    """Navigation keys the table reacts to."""

    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


class Alignment(enum.Enum):
    """Horizontal alignment of a column's text."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class HeaderInfo:
    """Column titles, widths and the initial sort."""

    labels: list[str]
    sort_column: int
    sort_order: SortOrder
    widths: list[int]


@dataclass(frozen=True)
class Cell:
    """One displayed cell: text, alignment and optional foreground colour."""

    text: str
    alignment: Alignment = Alignment.LEFT
    color: tuple[int, int, int] | None = None


class TableSource(abc.ABC):
    """Supplies rows to a :class:`BigTable` on demand."""

    @abc.abstractmethod
    def header_info(self) -> HeaderInfo:
        """Column titles, widths and the current sort."""

    @abc.abstractmethod
    def row_count(self) -> int:
        """Number of rows in the source."""

    @abc.abstractmethod
    def cell(self, index: int, column: int) -> tuple[str, tuple[int, int, int] | None]:
        """Text of a cell and its colour, or ``None`` for the default colour."""

    @abc.abstractmethod
    def item(self, index: int) -> Any:
        """The object shown in row ``index``."""

    @abc.abstractmethod
    def alignment(self, column: int) -> Alignment:
        """Alignment of a column."""

    @abc.abstractmethod
    def item_index(self, item: Any) -> int:
        """Row at which ``item`` is shown in the current sort."""

    @abc.abstractmethod
    def sort_column(self, column: int, order: SortOrder) -> None:
        """Re-sort the rows by ``column``."""


class BigTable:
    """Tracks the visible window, selection and scroll bar of a large table."""

    def __init__(self, source: TableSource, viewport_rows: int) -> None:
        self.source = source
        header = source.header_info()
        self.header = header.labels
        self.column_widths = header.widths
        self.sort_column = header.sort_column
        self.sort_order = header.sort_order
        self.viewport_rows = 0
        self.first_visible = 0
        self.visible_rows = 0
        self.selected: int | None = None
        self.scroll_value = 0
        self.scroll_maximum = 0
        self.scroll_visible = False
        self.reset_view(viewport_rows)

    @property
    def column_count(self) -> int:
        return len(self.header)

    @property
    def selected_row(self) -> int | None:
        """Selected row relative to the window, if it is on screen."""
        if self.selected is None:
            return None
        row = self.selected - self.first_visible
        return row if 0 <= row < self.visible_rows else None

    def reset_view(self, viewport_rows: int | None = None) -> None:
        """Scroll to the top and clear the selection, optionally for a new viewport size."""
        if viewport_rows is not None:
            if viewport_rows < 0:
                raise ValueError(f"viewport rows must not be negative: {viewport_rows}")
            self.viewport_rows = viewport_rows
        self.first_visible = 0
        self.selected = None
        self.scroll_value = 0
        count = self.source.row_count()
        if self.viewport_rows > count:
            self.visible_rows = count
            self.scroll_visible = False
            self.scroll_maximum = 0
        else:
            self.visible_rows = self.viewport_rows
            self.scroll_visible = True
            self.scroll_maximum = count - self.viewport_rows

    def select(self, item: Any) -> None:
        """Select ``item`` and bring it into view."""
        self.selected = self.source.item_index(item)
        self.ensure_selection_visible()

    def ensure_selection_visible(self) -> None:
        """Scroll just enough for the selected row to be on screen."""
        if self.selected is not None:
            if self.selected < self.first_visible:
                self.first_visible = self.selected
            elif self.selected > self.first_visible + self.visible_rows - 1:
                self.first_visible = self.selected - self.visible_rows + 1
        self.scroll_value = self.first_visible

    def rows(self) -> list[list[Cell]]:
        """Cells of the rows currently on screen."""
        count = self.source.row_count()
        last = min(self.first_visible + self.visible_rows, count)
        result = []
        for index in range(self.first_visible, last):
            row = []
            for column in range(self.column_count):
                text, color = self.source.cell(index, column)
                row.append(Cell(text, self.source.alignment(column), color))
            result.append(row)
        return result

    def wheel(self, angle_delta: int) -> None:
        """Scroll by one row per wheel step; positive angles scroll up."""
        steps = abs(angle_delta) // WHEEL_STEP
        delta = -steps if angle_delta > 0 else steps
        count = self.source.row_count()
        if delta < 0:
            self.first_visible = max(self.first_visible + delta, 0)
        elif self.first_visible + self.visible_rows + delta < count:
            self.first_visible += delta
        else:
            self.first_visible = max(count - self.visible_rows, 0)
        self.scroll_value = self.first_visible

    def key_press(self, key: Key) -> Any:
        """Move the selection with a navigation key; return the newly selected item."""
        count = self.source.row_count()
        current = self.selected
        if key is Key.UP:
            current = 0 if current is None else max(current - 1, 0)
        elif key is Key.DOWN:
            if current is None:
                current = 0
            elif current < count - 1:
                current += 1
        elif key is Key.PAGE_UP:
            if current is None:
                current = 0
            elif current >= self.visible_rows:
                current -= self.visible_rows
            else:
                current = 0
        elif key is Key.PAGE_DOWN:
            if current is None:
                current = 0
            elif current < count - self.visible_rows - 1:
                current += self.visible_rows
            else:
                current = count - 1
        elif key is Key.HOME:
            current = 0
        elif key is Key.END:
            current = count - 1
        self.selected = current

        if current is None or not 0 <= current < count:
            return None
        item = self.source.item(current)
        if item is not None:
            self.ensure_selection_visible()
        return item

    def scroll(self, position: int) -> None:
        """Show rows starting at ``position``."""
        self.first_visible = position
        self.scroll_value = position

    def row_clicked(self, row: int | None) -> Any:
        """Select the on-screen ``row``; return its item, or ``None`` for no row."""
        if row is None:
            return None
        self.selected = row + self.first_visible
        if not 0 <= self.selected < self.source.row_count():
            return None
        return self.source.item(self.selected)

    def sort(self, column: int, order: SortOrder) -> None:
        """Re-sort the source by ``column`` and keep the selected row in view."""
        self.sort_column = column
        self.sort_order = order
        self.source.sort_column(column, order)
        self.ensure_selection_visible()