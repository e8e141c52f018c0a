"""Low-level line rendering helpers (stdlib only)."""

from markdown_table import config


def _cell(text, width):
    """Wrap one left-aligned cell, padded with spaces to *width*."""
    return f"{config.CELL_OPEN}{text:<{width}}{config.CELL_CLOSE}"


def _line(cells, widths):
    """Build one table line (without the trailing newline)."""
    parts = [_cell(text, width) for text, width in zip(cells, widths)]
    return "".join(parts) + config.LINE_CLOSE


def _separator(widths):
    return _line([config.SEPARATOR_CHAR * w for w in widths], widths)


def format_table(header, rows, widths):
    """Render a table as pipe-delimited text.
    header: sequence of header cells, or None for no header/separator lines.
    rows: iterable of cell sequences, each as long as *widths*.
    widths: display width per column.
    Every line, including the last, ends with a newline."""
    lines = []
    if header is not None:
        lines.append(_line(header, widths))
        lines.append(_separator(widths))
    for row in rows:
        lines.append(_line(row, widths))
    return "".join(f"{line}\n" for line in lines)
