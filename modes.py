from dataclasses import dataclass


@dataclass(frozen=True)
class Navigating:
    row: int
    col: int


@dataclass(frozen=True)
class EditingCell:
    row: int
    col: int


@dataclass(frozen=True)
class EditingHeader:
    col: int


Mode = Navigating | EditingCell | EditingHeader


def mode_label(mode) -> str:
    if isinstance(mode, EditingCell):
        return "EDIT"
    if isinstance(mode, EditingHeader):
        return "EDIT-HEADER"
    return "NAV"
