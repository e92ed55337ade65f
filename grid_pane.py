import curses

from modes import EditingCell, EditingHeader


def fit_col_viewport(widths, col_offset, curr_col, avail_w):
    """Return ``(col_offset, visible_cols)`` with ``curr_col`` on screen."""
    total = len(widths)
    if total == 0:
        return 0, ()

    def count_from(offset):
        used = 0
        count = 0
        for cw in widths[offset:]:
            if used + cw + 1 > avail_w:
                break
            used += cw + 1
            count += 1
        return max(1, count)

    col_offset = max(0, min(col_offset, total - 1))
    if curr_col < col_offset:
        col_offset = curr_col
    while curr_col >= col_offset + count_from(col_offset):
        col_offset += 1

    max_cols = count_from(col_offset)
    return col_offset, tuple(range(col_offset, min(total, col_offset + max_cols)))


class GridPane:
    """Paints headers, rows and the cursor. Never mutates editor state."""

    PAIR_CELL_TEXT = 1
    PAIR_CURSOR_EDIT = 2
    PAIR_HEADER_EDIT = 3
    MAX_COL_WIDTH = 40
    MIN_COL_WIDTH = 3

    def __init__(self):
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_CELL_TEXT, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_CURSOR_EDIT, curses.COLOR_BLACK, curses.COLOR_GREEN)
            curses.init_pair(self.PAIR_HEADER_EDIT, curses.COLOR_BLACK, curses.COLOR_GREEN)
        except curses.error:
            pass

        # horizontal scroll is presentation state, owned here
        self.col_offset = 0

    @staticmethod
    def visible_row_count(win) -> int:
        h, _ = win.getmaxyx()
        # header line on top, blank footer line at the bottom
        return max(1, h - 2)

    def column_widths(self, headers, rows):
        widths = []
        for c, name in enumerate(headers):
            max_len = len(name)
            for row in rows:
                max_len = max(max_len, len(row[c]))
            widths.append(max(self.MIN_COL_WIDTH, min(self.MAX_COL_WIDTH, max_len + 2)))
        return widths

    @staticmethod
    def _flatten(text: str) -> str:
        return text.replace("\r", " ").replace("\n", " ")

    def draw(self, win, view):
        win.erase()
        try:
            win.bkgd(" ", curses.color_pair(self.PAIR_CELL_TEXT))
        except curses.error:
            pass
        h, w = win.getmaxyx()

        headers = view.headers
        rows = view.rows
        mode = view.mode
        curr_row, curr_col = view.cursor

        visible_rows = self.visible_row_count(win)
        anchor = view.scroll_anchor(visible_rows)
        page = rows[anchor : anchor + visible_rows]

        widths = self.column_widths(headers, page)
        row_w = max(3, len(str(max(len(rows), 1))) + 1)
        avail_w = max(1, w - (row_w + 1))
        self.col_offset, visible_cols = fit_col_viewport(
            widths, self.col_offset, curr_col, avail_w
        )

        # header
        x = row_w + 1
        for c in visible_cols:
            eff_cw = min(widths[c], max(1, w - x - 1))
            attr = curses.A_BOLD
            text = self._flatten(headers[c])
            if isinstance(mode, EditingHeader) and mode.col == c:
                attr |= curses.color_pair(self.PAIR_HEADER_EDIT)
                text = text[-eff_cw:]
            self._put(win, 0, x, text[:eff_cw].rjust(eff_cw), eff_cw, attr)
            x += eff_cw + 1

        if not rows:
            self._put(win, 1, 0, " (no rows: o adds one)", w - 1, curses.A_DIM)
            win.refresh()
            return

        # rows
        base_attr = curses.color_pair(self.PAIR_CELL_TEXT)
        for i, row in enumerate(page):
            y = 1 + i
            if y >= h - 1:
                break
            r = anchor + i
            self._put(win, y, 0, str(r + 1).rjust(row_w), row_w, base_attr)
            x = row_w + 1
            for c in visible_cols:
                eff_cw = min(widths[c], max(1, w - x - 1))
                text = self._flatten(row[c])
                attr = base_attr
                if r == curr_row and c == curr_col:
                    if isinstance(mode, EditingCell):
                        attr = curses.color_pair(self.PAIR_CURSOR_EDIT)
                        # keep the end of the text being typed in view
                        text = text[-eff_cw:]
                    elif not isinstance(mode, EditingHeader):
                        attr = base_attr | curses.A_REVERSE
                self._put(win, y, x, text[:eff_cw].rjust(eff_cw), eff_cw, attr)
                x += eff_cw + 1

        try:
            win.hline(h - 1, 0, " ", w)
        except curses.error:
            pass

        win.refresh()

    @staticmethod
    def _put(win, y, x, text, n, attr=0):
        try:
            win.addnstr(y, x, text, max(0, n), attr)
        except curses.error:
            pass
