import logging
from enum import Enum, auto

import navigation
from clipboard import today_iso
from keys import Key, KeyEvent
from modes import EditingCell, EditingHeader, Navigating


logger = logging.getLogger(__name__)


class Outcome(Enum):
    CONTINUE = auto()
    STOP = auto()


class GridEditor:
    """Mode/cursor state machine over the session's document.

    ``handle`` consumes one logical key event and returns an ``Outcome``;
    the host loop stops when it sees ``Outcome.STOP``. Every mutating
    action pushes exactly one undo snapshot before touching the document.
    """

    def __init__(self, state, set_status_cb=None, saver=None, today=None, scroll_margin=3):
        self.state = state
        self._set_status = set_status_cb or (lambda *_args, **_kwargs: None)
        self._saver = saver if saver is not None else state.save
        self._today = today
        self.scroll_margin = scroll_margin

        self.mode = Navigating(0, 0)

        self._nav_handlers = {
            Key.MOVE_LEFT: self._move_left,
            Key.MOVE_RIGHT: self._move_right,
            Key.MOVE_UP: self._move_up,
            Key.MOVE_DOWN: self._move_down,
            Key.PAGE_UP: self._page_up,
            Key.PAGE_DOWN: self._page_down,
            Key.JUMP_FIRST_ROW: self._jump_first_row,
            Key.JUMP_LAST_ROW: self._jump_last_row,
            Key.JUMP_FIRST_COL: self._jump_first_col,
            Key.JUMP_LAST_COL: self._jump_last_col,
            Key.UNDO: self._undo,
            Key.INSERT_ROW_AFTER: self._insert_row_after,
            Key.INSERT_ROW_BEFORE: self._insert_row_before,
            Key.DELETE_ROW: self._delete_row,
            Key.INSERT_COL_AFTER: self._insert_col_after,
            Key.INSERT_COL_BEFORE: self._insert_col_before,
            Key.DELETE_COL: self._delete_col,
            Key.EDIT_INSERT: self._edit_insert,
            Key.EDIT_REPLACE: self._edit_replace,
            Key.EDIT_HEADER: self._edit_header,
            Key.COPY: self._copy,
            Key.PASTE: self._paste,
            Key.PASTE_DATE: self._paste_date,
            Key.QUIT: self._quit,
        }

    # ---------- read accessors ----------
    @property
    def document(self):
        return self.state.document

    @property
    def headers(self) -> list[str]:
        return self.document.headers

    @property
    def rows(self) -> list[list[str]]:
        return self.document.rows

    @property
    def is_empty(self) -> bool:
        return self.document.row_count == 0

    @property
    def cursor(self) -> tuple[int, int]:
        mode = self.mode
        if isinstance(mode, EditingHeader):
            return (0, mode.col)
        return (mode.row, mode.col)

    def scroll_anchor(self, visible_rows: int) -> int:
        return navigation.scroll_anchor(self.cursor[0], visible_rows, self.scroll_margin)

    # ---------- dispatch ----------
    def handle(self, event: KeyEvent | None) -> Outcome:
        if event is None:
            return Outcome.CONTINUE

        mode = self.mode
        if isinstance(mode, Navigating):
            handler = self._nav_handlers.get(event.key)
            if handler is None:
                return Outcome.CONTINUE
            result = handler(mode.row, mode.col)
            return result if result is not None else Outcome.CONTINUE

        if isinstance(mode, EditingCell):
            self._handle_cell_edit(event, mode.row, mode.col)
        elif isinstance(mode, EditingHeader):
            self._handle_header_edit(event, mode.col)
        return Outcome.CONTINUE

    def _handle_cell_edit(self, event, row, col):
        if event.key == Key.CHAR and event.char:
            self.document.append_char(row, col, event.char)
        elif event.key == Key.BACKSPACE:
            self.document.pop_char(row, col)
        elif event.key == Key.CONFIRM:
            self.mode = Navigating(row, col)

    def _handle_header_edit(self, event, col):
        if event.key == Key.CHAR and event.char:
            self.document.append_header_char(col, event.char)
        elif event.key == Key.BACKSPACE:
            self.document.pop_header_char(col)
        elif event.key == Key.CONFIRM:
            # header editing has no row of its own
            self.mode = Navigating(0, col)

    # ---------- movement ----------
    def _move_left(self, row, col):
        self.mode = Navigating(row, navigation.step(col, -1, self.document.col_count))

    def _move_right(self, row, col):
        self.mode = Navigating(row, navigation.step(col, 1, self.document.col_count))

    def _move_up(self, row, col):
        self.mode = Navigating(navigation.step(row, -1, self.document.row_count), col)

    def _move_down(self, row, col):
        self.mode = Navigating(navigation.step(row, 1, self.document.row_count), col)

    def _page_up(self, row, col):
        self.mode = Navigating(navigation.page(row, -1, self.document.row_count), col)

    def _page_down(self, row, col):
        self.mode = Navigating(navigation.page(row, 1, self.document.row_count), col)

    def _jump_first_row(self, row, col):
        self.mode = Navigating(0, col)

    def _jump_last_row(self, row, col):
        self.mode = Navigating(max(0, self.document.row_count - 1), col)

    def _jump_first_col(self, row, col):
        self.mode = Navigating(row, 0)

    def _jump_last_col(self, row, col):
        self.mode = Navigating(row, max(0, self.document.col_count - 1))

    # ---------- undo ----------
    def _undo(self, row, col):
        if not self.state.undo():
            self._set_status("Nothing to undo", 2)
            return
        doc = self.document
        if doc.row_count <= row:
            row, col = max(0, doc.row_count - 1), 0
        if doc.col_count <= col:
            col = max(0, doc.col_count - 1)
        self.mode = Navigating(row, col)
        remaining = len(self.state.history)
        logger.debug("undo restored %s, %d snapshots left", doc.shape, remaining)
        self._set_status(f"Undone ({remaining} more)" if remaining else "Undone", 2)

    # ---------- rows ----------
    def _insert_row_after(self, row, col):
        self.state.push_undo()
        if self.is_empty:
            self.document.append_row()
            self.mode = Navigating(0, col)
        else:
            self.document.insert_row_after(row)
            self.mode = Navigating(row + 1, col)
        self._set_status("Inserted row below", 2)

    def _insert_row_before(self, row, col):
        self.state.push_undo()
        if self.is_empty:
            self.document.append_row()
        else:
            self.document.insert_row_before(row)
        self.mode = Navigating(row, col)
        self._set_status("Inserted row above", 2)

    def _delete_row(self, row, col):
        if self.is_empty:
            self._set_status("No rows", 3)
            return
        self.state.push_undo()
        self.document.delete_row(row)
        total = self.document.row_count
        self.mode = Navigating(min(row, max(0, total - 1)), col)
        logger.debug("deleted row %d, %d rows left", row, total)
        if total == 0:
            self._set_status("Deleted last row (o adds a new one)", 3)
        else:
            self._set_status("Deleted row", 2)

    # ---------- columns ----------
    def _insert_col_after(self, row, col):
        self.state.push_undo()
        self.document.insert_col_after(col)
        self.mode = Navigating(row, col + 1)
        self._set_status("Inserted column right", 2)

    def _insert_col_before(self, row, col):
        self.state.push_undo()
        self.document.insert_col_before(col)
        self.mode = Navigating(row, col)
        self._set_status("Inserted column left", 2)

    def _delete_col(self, row, col):
        if self.document.col_count <= 1:
            self._set_status("Cannot delete the last column", 3)
            return
        self.state.push_undo()
        name = self.document.headers[col]
        self.document.delete_col(col)
        self.mode = Navigating(row, min(col, self.document.col_count - 1))
        logger.debug("deleted column %d (%r)", col, name)
        self._set_status(f"Deleted column '{name}'", 3)

    # ---------- editing ----------
    def _edit_insert(self, row, col):
        if self.is_empty:
            self._set_status("No rows to edit", 3)
            return
        self.state.push_undo()
        self.mode = EditingCell(row, col)

    def _edit_replace(self, row, col):
        if self.is_empty:
            self._set_status("No rows to edit", 3)
            return
        self.state.push_undo()
        self.document.set_cell(row, col, "")
        self.mode = EditingCell(row, col)

    def _edit_header(self, row, col):
        self.state.push_undo()
        self.mode = EditingHeader(col)

    # ---------- clipboard ----------
    def _copy(self, row, col):
        if self.is_empty:
            self._set_status("No cell to copy", 3)
            return
        if self.state.clipboard.copy(self.document.cell(row, col)):
            self._set_status("Cell copied", 2)
        else:
            self._set_status("Cell copied (system clipboard failed)", 3)

    def _paste(self, row, col):
        if self.is_empty:
            self._set_status("No cell to paste into", 3)
            return
        value = self.state.clipboard.paste()
        if value is None:
            self._set_status("Clipboard empty", 2)
            return
        self.state.push_undo()
        self.document.set_cell(row, col, value)
        self._set_status("Pasted", 2)

    def _paste_date(self, row, col):
        if self.is_empty:
            self._set_status("No cell to paste into", 3)
            return
        self.state.push_undo()
        today = self._today() if self._today is not None else None
        self.document.set_cell(row, col, today_iso(today))
        self._set_status("Pasted date", 2)

    # ---------- quit ----------
    def _quit(self, row, col):
        # save errors propagate to the host loop
        self._saver()
        logger.info("quit after save, %s rows x %s cols", *self.document.shape)
        return Outcome.STOP
