"""
markdown-table exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class MarkdownTableError(Exception):
    """Base class for table construction and append errors."""


class InvalidRowLength(MarkdownTableError):
    """A row's cell count does not match the table's established width."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid row length, expected {expected} got {actual}.")


class NoRowsSpecified(MarkdownTableError):
    """Neither a header nor any rows were given, so no width can be established."""

    def __init__(self):
        super().__init__("Length of rows must be at least 1 when creating a table.")
