import pytest

from memtune.heaps import HeapList, format_heap_handle

HEAPS = {0x1000: "main", 0x2000: "render", 0xABC: "audio"}


def test_format_heap_handle_is_lower_hex():
    assert format_heap_handle(0xABC) == "0xabc"
    assert format_heap_handle(0) == "0x0"


def test_format_heap_handle_round_trips():
    for handle in (1, 255, 0xDEADBEEF, 2**64 - 1):
        assert int(format_heap_handle(handle), 16) == handle


def test_negative_handle_rejected():
    with pytest.raises(ValueError):
        format_heap_handle(-1)


def test_rows_keep_order_and_names():
    rows = HeapList(HEAPS).rows()
    assert [row.handle for row in rows] == list(HEAPS)
    assert [row.name for row in rows] == list(HEAPS.values())
    assert all(row.handle_text == format_heap_handle(row.handle) for row in rows)


def test_click_toggles_filter():
    heaps = HeapList(HEAPS)
    assert heaps.click(0x2000) == 0x2000
    assert heaps.current == 0x2000
    assert heaps.click(0x2000) is None
    assert heaps.current is None


def test_click_other_heap_switches():
    heaps = HeapList(HEAPS)
    heaps.click(0x1000)
    assert heaps.click(0xABC) == 0xABC
    assert heaps.selected == 0xABC


def test_click_nothing_keeps_state():
    heaps = HeapList(HEAPS)
    heaps.click(0x1000)
    assert heaps.click(None) == 0x1000


def test_click_unknown_heap_raises():
    with pytest.raises(KeyError):
        HeapList(HEAPS).click(0x9999)


def test_select_reports_whether_listed():
    heaps = HeapList(HEAPS)
    assert heaps.select(0x1000) is True
    assert heaps.selected == 0x1000
    assert heaps.select(0x9999) is False
    assert heaps.selected == 0x1000


def test_empty_list_has_no_rows():
    assert HeapList().rows() == []