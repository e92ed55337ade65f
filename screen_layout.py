import curses


class ScreenLayout:
    """Grid window over a single status line at the bottom of the screen."""

    STATUS_LINES = 1

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.table_win = None
        self.status_win = None
        self.rebuild()

    def rebuild(self):
        height, width = self.stdscr.getmaxyx()
        height = max(height, self.STATUS_LINES + 1)
        width = max(width, 1)
        grid_lines = height - self.STATUS_LINES

        self.table_win = curses.newwin(grid_lines, width, 0, 0)
        self.status_win = curses.newwin(self.STATUS_LINES, width, grid_lines, 0)
        # neither window owns the hardware cursor
        for win in (self.table_win, self.status_win):
            win.leaveok(True)
