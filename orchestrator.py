import curses
import logging
import time

from grid_editor import GridEditor, Outcome
from grid_pane import GridPane
from keys import translate
from modes import mode_label
from screen_layout import ScreenLayout
from status_bar import render_status


logger = logging.getLogger(__name__)


class Orchestrator:
    """Host loop: read a key, dispatch it, redraw, until the editor stops."""

    def __init__(self, stdscr, app_state, config=None):
        config = config or {}
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.raw()
        self.stdscr.nodelay(False)
        # periodic wakeups let expired status messages disappear
        self.stdscr.timeout(100)

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.grid = GridPane()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        self.editor = GridEditor(
            self.state,
            self._set_status,
            scroll_margin=config.get("SCROLL_MARGIN", 3),
        )

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _status_context(self):
        return {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "mode": mode_label(self.editor.mode),
            "file_path": self.state.file_path,
            "shape": self.state.document.shape,
            "cursor": self.editor.cursor,
            "history_depth": len(self.state.history),
            "clipboard": self.state.clipboard.paste(),
        }

    # ---------------- UI ----------------

    def redraw(self):
        self.grid.draw(self.layout.table_win, self.editor)

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        text = render_status(self._status_context(), w)
        try:
            # writing the last cell of a window raises; stop one short
            sw.addnstr(0, 0, text, max(0, w - 1))
        except curses.error:
            pass
        sw.refresh()

    def _resize(self):
        curses.update_lines_cols()
        self.stdscr.clear()
        self.stdscr.refresh()
        self.layout.rebuild()

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        while True:
            # get_wch decodes multi-byte input into whole characters
            try:
                ch = self.stdscr.get_wch()
            except curses.error:
                # timeout with no key pressed
                self.redraw()
                continue

            if ch == curses.KEY_RESIZE:
                self._resize()
                self.redraw()
                continue

            event = translate(ch, self.editor.mode)
            if self.editor.handle(event) is Outcome.STOP:
                logger.info("quit requested, loop stopping")
                break

            self.redraw()
