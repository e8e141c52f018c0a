"""Typed shapes for dicts returned by MarkdownTable.to_dict().

Runtime values are plain dicts and lists.
"""

from __future__ import annotations

from typing import TypedDict


class TableDict(TypedDict):
    """Return type of MarkdownTable.to_dict()."""

    header: list[str] | None
    rows: list[list[str]]
    widths: list[int]
