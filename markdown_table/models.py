"""
Row model and conversion of caller values into rows.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

# A TableRow, an iterable of cells, or an object with to_table_row().
RowLike = Any


def _iter_cells(value, source):
    """Iterate the cells of a non-string iterable; raise TypeError otherwise."""
    if isinstance(value, (str, bytes, bytearray)):
        raise TypeError(
            f"Cannot build a row from {type(value).__name__}; wrap the cell in a list."
        )
    try:
        return iter(value)
    except TypeError:
        raise TypeError(
            f"Cannot build a row from {source}: expected an iterable of cells, "
            f"got {type(value).__name__}."
        ) from None


@dataclass(frozen=True)
class TableRow:
    """An ordered, immutable sequence of string cells.

    Cells are copied into a tuple and converted with ``str()`` on creation.
    """

    cells: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(str(c) for c in self.cells))

    @classmethod
    def new(cls, cells: Iterable[Any]) -> TableRow:
        return cls(cells=tuple(cells))

    @classmethod
    def from_value(cls, value: RowLike) -> TableRow:
        """Convert a row-like value into a TableRow.

        Accepts an existing TableRow, any object with a ``to_table_row()``
        method, or any non-string iterable whose items are converted with
        ``str()`` in order. A ``to_table_row()`` result is converted once: it
        must be a TableRow or an iterable of cells.
        """
        if isinstance(value, TableRow):
            return value
        hook = getattr(value, "to_table_row", None)
        if callable(hook):
            result = hook()
            if isinstance(result, TableRow):
                return result
            return cls.new(_iter_cells(result, f"{type(value).__name__}.to_table_row()"))
        return cls.new(_iter_cells(value, type(value).__name__))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, col: int) -> str:
        """Cell at index *col*. Slices are not supported; use ``cells`` instead."""
        return self.cells[operator.index(col)]

    def cell_len(self, col: int) -> int:
        return len(self.cells[col])
