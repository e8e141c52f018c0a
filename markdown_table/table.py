"""
MarkdownTable: validated rows with auto-sized columns, rendered as pipe-delimited text.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable

from markdown_table import config
from markdown_table.exceptions import InvalidRowLength, NoRowsSpecified
from markdown_table.formatters import format_table
from markdown_table.models import RowLike, TableRow
from markdown_table.types import TableDict


def _log_table_event(event, **fields):
    """Emit structured table logs to stderr when enabled."""
    if not config.LOG_ENABLED:
        return
    fields["event"] = event
    print("[TABLE] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _validate_row_length(width, row, phase):
    if len(row) != width:
        _log_table_event("row_rejected", expected=width, actual=len(row), phase=phase)
        raise InvalidRowLength(width, len(row))


class MarkdownTable:
    """A table with an optional header row and any number of data rows.

    Every row must have the same number of cells as the header, or as the
    first data row when there is no header.

        table = MarkdownTable(["Name", "Age"], [["Jessica", 28], ["Dennis", 22]])
        print(table)
    """

    def __init__(self, header: RowLike | None = None, rows: Iterable[RowLike] = ()):
        header_row = None if header is None else TableRow.from_value(header)
        data_rows = [TableRow.from_value(r) for r in rows]

        if header_row is not None:
            width = len(header_row)
        elif data_rows:
            width = len(data_rows[0])
        else:
            raise NoRowsSpecified()

        for row in data_rows:
            _validate_row_length(width, row, "create")

        self._header = header_row
        self._rows = data_rows
        _log_table_event(
            "table_created", width=width, rows=len(data_rows), header=header_row is not None
        )

    # --- Accessors ---

    @property
    def header(self) -> TableRow | None:
        return self._header

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return tuple(self._rows)

    @property
    def width(self) -> int:
        """Established width: header length, else first row length."""
        if self._header is not None:
            return len(self._header)
        return len(self._rows[0])

    def __len__(self) -> int:
        return len(self._rows)

    # --- Mutation ---

    def add_row(self, row: RowLike) -> None:
        """Append one row. Raises InvalidRowLength and leaves the table unchanged on mismatch."""
        new_row = TableRow.from_value(row)
        _validate_row_length(self.width, new_row, "append")
        self._rows.append(new_row)
        _log_table_event("row_added", rows=len(self._rows))

    def add_rows(self, rows: Iterable[RowLike]) -> None:
        """Append several rows; nothing is appended if any of them is invalid."""
        width = self.width
        new_rows = [TableRow.from_value(r) for r in rows]
        if not new_rows:
            return
        for row in new_rows:
            _validate_row_length(width, row, "append")
        self._rows.extend(new_rows)
        _log_table_event("row_added", rows=len(self._rows))

    # --- Column widths ---

    def column_width(self, col: int) -> int | None:
        """Display width of column *col*, or None if the column does not exist."""
        if col < 0 or col >= self.width:
            return None
        content = max((row.cell_len(col) for row in self._rows), default=0)
        if self._header is not None:
            return max(content, self._header.cell_len(col))
        return content

    def column_widths(self) -> list[int]:
        return [self.column_width(c) or 0 for c in range(self.width)]

    # --- Output ---

    def render(self) -> str:
        return format_table(self._header, self._rows, self.column_widths())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"MarkdownTable(width={self.width}, rows={len(self._rows)}, "
            f"header={self._header is not None})"
        )

    def to_dict(self) -> TableDict:
        return {
            "header": None if self._header is None else list(self._header.cells),
            "rows": [list(r.cells) for r in self._rows],
            "widths": self.column_widths(),
        }
