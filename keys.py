import curses
from dataclasses import dataclass
from enum import Enum, auto

from modes import Navigating


class Key(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    JUMP_FIRST_ROW = auto()
    JUMP_LAST_ROW = auto()
    JUMP_FIRST_COL = auto()
    JUMP_LAST_COL = auto()
    INSERT_ROW_AFTER = auto()
    INSERT_ROW_BEFORE = auto()
    DELETE_ROW = auto()
    INSERT_COL_AFTER = auto()
    INSERT_COL_BEFORE = auto()
    DELETE_COL = auto()
    EDIT_INSERT = auto()
    EDIT_REPLACE = auto()
    EDIT_HEADER = auto()
    COPY = auto()
    PASTE = auto()
    PASTE_DATE = auto()
    UNDO = auto()
    QUIT = auto()
    CONFIRM = auto()
    BACKSPACE = auto()
    CHAR = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: Key
    char: str | None = None


ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)
ESC = 27

NAVIGATION_KEYMAP = {
    ord("h"): Key.MOVE_LEFT,
    curses.KEY_LEFT: Key.MOVE_LEFT,
    ord("l"): Key.MOVE_RIGHT,
    curses.KEY_RIGHT: Key.MOVE_RIGHT,
    ord("k"): Key.MOVE_UP,
    curses.KEY_UP: Key.MOVE_UP,
    ord("j"): Key.MOVE_DOWN,
    curses.KEY_DOWN: Key.MOVE_DOWN,
    ord("{"): Key.PAGE_UP,
    curses.KEY_PPAGE: Key.PAGE_UP,
    ord("}"): Key.PAGE_DOWN,
    curses.KEY_NPAGE: Key.PAGE_DOWN,
    ord("g"): Key.JUMP_FIRST_ROW,
    ord("G"): Key.JUMP_LAST_ROW,
    ord("I"): Key.JUMP_FIRST_COL,
    curses.KEY_HOME: Key.JUMP_FIRST_COL,
    ord("A"): Key.JUMP_LAST_COL,
    curses.KEY_END: Key.JUMP_LAST_COL,
    ord("o"): Key.INSERT_ROW_AFTER,
    ord("O"): Key.INSERT_ROW_BEFORE,
    ord("d"): Key.DELETE_ROW,
    ord("n"): Key.INSERT_COL_AFTER,
    ord("N"): Key.INSERT_COL_BEFORE,
    ord("D"): Key.DELETE_COL,
    ord("i"): Key.EDIT_INSERT,
    ord("r"): Key.EDIT_REPLACE,
    ord("H"): Key.EDIT_HEADER,
    ord("y"): Key.COPY,
    ord("p"): Key.PASTE,
    ord("."): Key.PASTE_DATE,
    ord("u"): Key.UNDO,
    ord("q"): Key.QUIT,
}
for _code in ENTER_KEYS:
    NAVIGATION_KEYMAP[_code] = Key.EDIT_INSERT


def _code_point(ch) -> int | None:
    # get_wch returns a str for characters and an int for special keys
    if isinstance(ch, str):
        return ord(ch) if len(ch) == 1 else None
    return ch


def _printable(ch) -> str | None:
    if isinstance(ch, str):
        return ch if len(ch) == 1 and ch.isprintable() else None
    # curses special keys start at KEY_MIN (0o401); anything below is a code point
    if ch < 32 or ch >= curses.KEY_MIN:
        return None
    try:
        s = chr(ch)
    except ValueError:
        return None
    return s if s.isprintable() else None


def translate(ch, mode) -> KeyEvent | None:
    """Map a ``get_wch`` result (str or key code) to a logical key event."""
    if ch is None:
        return None
    code = _code_point(ch)
    if code is None or code < 0:
        return None

    if isinstance(mode, Navigating):
        key = NAVIGATION_KEYMAP.get(code)
        return KeyEvent(key) if key is not None else None

    if code in ENTER_KEYS or code == ESC:
        return KeyEvent(Key.CONFIRM)
    if code in BACKSPACE_KEYS:
        return KeyEvent(Key.BACKSPACE)
    s = _printable(ch)
    if s is not None:
        return KeyEvent(Key.CHAR, s)
    return None
