PAGE_SIZE = 5


def clamp(value: int, low: int, high: int) -> int:
    if high < low:
        return low
    return max(low, min(high, value))


def step(pos: int, delta: int, count: int) -> int:
    """Move ``pos`` by ``delta`` within ``[0, count - 1]`` without wrapping."""
    return clamp(pos + delta, 0, count - 1)


def page(pos: int, direction: int, count: int, page_size: int = PAGE_SIZE) -> int:
    return step(pos, direction * page_size, count)


def scroll_anchor(cursor_row: int, visible_rows: int, margin: int = 3) -> int:
    """Topmost row to draw so the cursor stays in view.

    The cursor is kept at least ``margin`` rows above the bottom edge when
    the viewport is tall enough for that; tiny viewports just keep it
    visible.
    """
    visible_rows = max(1, visible_rows)
    margin = clamp(margin, 0, (visible_rows - 1) // 2)
    anchor = cursor_row - (visible_rows - 1 - margin)
    return clamp(anchor, 0, max(0, cursor_row))
