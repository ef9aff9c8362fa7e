"""Text splitting for extracted document content."""

from orgchart.text.splitter import (
    CELL_MARKER,
    parse_delimited,
    parse_delimited_line,
    split_cells,
    split_lines,
    split_records,
)

__all__ = [
    "CELL_MARKER",
    "parse_delimited",
    "parse_delimited_line",
    "split_cells",
    "split_lines",
    "split_records",
]
