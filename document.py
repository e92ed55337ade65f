from dataclasses import dataclass


@dataclass(frozen=True)
class Snapshot:
    headers: tuple
    rows: tuple


class Document:
    """Header list plus a rectangular grid of string cells.

    Every row always has exactly ``len(headers)`` cells. Column operations
    touch the headers and every row in the same call. Callers are
    responsible for pushing an undo snapshot before mutating.
    """

    def __init__(self, headers, rows=None):
        self.headers: list[str] = [str(h) for h in headers]
        width = len(self.headers)
        self.rows: list[list[str]] = []
        for row in rows or []:
            cells = [str(v) for v in row][:width]
            cells.extend([""] * (width - len(cells)))
            self.rows.append(cells)

    @classmethod
    def empty(cls, headers):
        return cls(headers, [])

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return self.headers == other.headers and self.rows == other.rows

    def __repr__(self):
        return f"Document(headers={self.headers!r}, rows={self.rows!r})"

    # ---------- reads ----------
    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.headers)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.row_count, self.col_count)

    def cell(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            headers=tuple(self.headers),
            rows=tuple(tuple(r) for r in self.rows),
        )

    def restore(self, snap: Snapshot):
        self.headers = list(snap.headers)
        self.rows = [list(r) for r in snap.rows]

    # ---------- row operations ----------
    def _blank_row(self):
        return [""] * len(self.headers)

    def _check_row(self, idx: int):
        if not 0 <= idx < len(self.rows):
            raise IndexError(f"row {idx} out of range (0..{len(self.rows) - 1})")

    def _check_col(self, idx: int):
        if not 0 <= idx < len(self.headers):
            raise IndexError(
                f"column {idx} out of range (0..{len(self.headers) - 1})"
            )

    def insert_row_after(self, idx: int):
        self._check_row(idx)
        self.rows.insert(idx + 1, self._blank_row())

    def insert_row_before(self, idx: int):
        self._check_row(idx)
        self.rows.insert(idx, self._blank_row())

    def append_row(self):
        self.rows.append(self._blank_row())

    def delete_row(self, idx: int):
        self._check_row(idx)
        del self.rows[idx]

    # ---------- column operations ----------
    def _insert_col_at(self, pos: int):
        self.headers.insert(pos, "")
        for row in self.rows:
            row.insert(pos, "")

    def insert_col_after(self, idx: int):
        self._check_col(idx)
        self._insert_col_at(idx + 1)

    def insert_col_before(self, idx: int):
        self._check_col(idx)
        self._insert_col_at(idx)

    def delete_col(self, idx: int):
        self._check_col(idx)
        if len(self.headers) == 1:
            raise ValueError("cannot delete the only column")
        del self.headers[idx]
        for row in self.rows:
            del row[idx]

    # ---------- content ----------
    def set_cell(self, row: int, col: int, value: str):
        self._check_row(row)
        self._check_col(col)
        self.rows[row][col] = value

    def set_header(self, col: int, value: str):
        self._check_col(col)
        self.headers[col] = value

    def append_char(self, row: int, col: int, c: str):
        self.set_cell(row, col, self.rows[row][col] + c)

    def pop_char(self, row: int, col: int):
        self._check_row(row)
        self._check_col(col)
        self.rows[row][col] = self.rows[row][col][:-1]

    def append_header_char(self, col: int, c: str):
        self.set_header(col, self.headers[col] + c)

    def pop_header_char(self, col: int):
        self._check_col(col)
        self.headers[col] = self.headers[col][:-1]
