"""List of the heaps seen in a capture, with click-to-filter selection."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


def format_heap_handle(handle: int) -> str:
    """Hexadecimal form of a heap handle, such as ``"0x1f00"``."""
    if handle < 0:
        raise ValueError(f"heap handle must not be negative: {handle}")
    return f"0x{handle:x}"


@dataclass(frozen=True)
class HeapRow:
    """One heap as listed: handle text, name and the handle itself."""

    handle_text: str
    name: str
    handle: int


class HeapList:
    """Heaps by handle; clicking one filters on it, clicking it again clears."""

    def __init__(self, heaps: Mapping[int, str] | None = None) -> None:
        self.heaps: dict[int, str] = dict(heaps or {})
        self.current: int | None = None
        self.selected: int | None = None

    def rows(self) -> list[HeapRow]:
        """The heaps in the order they were given."""
        return [
            HeapRow(format_heap_handle(handle), name, handle)
            for handle, name in self.heaps.items()
        ]

    def click(self, handle: int | None) -> int | None:
        """Toggle the current heap; return the heap now filtered on, or ``None``."""
        if handle is None:
            return self.current
        if handle not in self.heaps:
            raise KeyError(handle)
        if self.current == handle:
            self.current = None
            self.selected = None
        else:
            self.current = handle
            self.selected = handle
        return self.current

    def select(self, handle: int) -> bool:
        """Mark ``handle`` as selected if it is listed; report whether it was."""
        if handle in self.heaps:
            self.selected = handle
            return True
        return False