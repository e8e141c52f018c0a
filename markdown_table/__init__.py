"""markdown-table — render rows as pipe-delimited markdown tables.

Example:

    from markdown_table import MarkdownTable, TableRow

    class User:
        def __init__(self, name, age):
            self.name = name
            self.age = age

        def to_table_row(self):
            return TableRow.new([self.name, self.age])

    users = [User("Jessica", 28), User("Dennis", 22)]
    print(MarkdownTable(["Name", "Age"], users))
"""

from markdown_table.config import VERSION
from markdown_table.exceptions import InvalidRowLength, MarkdownTableError, NoRowsSpecified
from markdown_table.models import RowLike, TableRow
from markdown_table.table import MarkdownTable
from markdown_table.types import TableDict

__all__ = [
    "VERSION",
    "InvalidRowLength",
    "MarkdownTable",
    "MarkdownTableError",
    "NoRowsSpecified",
    "RowLike",
    "TableDict",
    "TableRow",
]
