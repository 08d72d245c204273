"""Labels and grid placement for the memory usage graph."""

from __future__ import annotations

_SIZE_SUFFIXES = ("b ", "Kb", "Mb", "Gb", "Tb")


def format_size_label(size: int) -> str:
    """Short axis label for a byte count, such as ``"4Kb"``.

    The number is truncated to whole units. A size of zero yields the bare
    suffix, as no digits are written for it.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    index = 0
    while size >= 1024:
        size //= 1024
        index += 1
    if index >= len(_SIZE_SUFFIXES):
        raise ValueError("size is too large to label")
    digits = str(size) if size else ""
    return digits + _SIZE_SUFFIXES[index]


def time_in_msec(seconds: float) -> int:
    """Whole milliseconds in a time given in seconds."""
    msec = int(seconds * 1000)
    if msec < 0:
        raise ValueError(f"time must not be negative: {seconds}")
    return msec


def format_time(seconds: float) -> str:
    """Readable form of a time, such as ``"1m 2s 30ms"``."""
    total = time_in_msec(seconds)
    total, msec = divmod(total, 1000)
    total, sec = divmod(total, 60)
    hour, minute = divmod(total, 60)
    if hour:
        return f"{hour}h {minute}m {sec}s {msec}ms"
    if minute:
        return f"{minute}m {sec}s {msec}ms"
    if sec:
        return f"{sec}s {msec}ms"
    return f"0s {msec}ms"


def size_grid_lines(max_usage: int, min_usage: int, top: int, bottom: int) -> list[tuple[int, int]]:
    """Horizontal grid lines for the usage axis as ``(y, size)`` pairs.

    Sizes are powers of two, from the largest one not above ``max_usage``
    downwards; lines stop once they would come closer than ten pixels.
    """
    max_size = 8
    while max_size <= max_usage:
        max_size <<= 1
    max_size >>= 1

    if min_usage != 0:
        min_size = max_size
        while min_size >= min_usage:
            min_size >>= 1
    else:
        min_size = 8
    min_size <<= 1

    lines: list[tuple[int, int]] = []
    previous_y = -100000
    height = bottom - top
    while max_size >= min_size:
        y = bottom - (height * (max_size - min_usage)) // max_usage
        if y - previous_y < 10:
            break
        previous_y = y
        lines.append((y, max_size))
        max_size >>= 1
    return lines


def time_grid_ticks(min_msec: int, max_msec: int) -> list[tuple[int, int]]:
    """Vertical time grid lines as ``(msec, alpha)`` pairs.

    Major ticks fall on the smallest power of ten that splits the range into
    at most eleven parts; when that step is ten or more, minor ticks follow
    at a tenth of it. Major and minor alphas fade against each other.
    """
    span = max_msec - min_msec
    single = span // 11
    step = 1
    while step < single:
        step *= 10
    intensity = 255 * single // step

    ticks = [(msec, intensity // 2) for msec in _ticks(min_msec, max_msec, step)]
    if step >= 10:
        step //= 10
        alpha = (255 - intensity) // 2
        ticks.extend((msec, alpha) for msec in _ticks(min_msec, max_msec, step))
    return ticks


def _ticks(min_msec: int, max_msec: int, step: int) -> range:
    first = min_msec + step
    first -= first % step
    return range(first, max_msec, step)