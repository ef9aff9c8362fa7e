"""
Row and line splitting for already-extracted document text.

Everything here is total: malformed input degrades (an unterminated quote
simply runs to the end of the text) instead of raising.
"""

from __future__ import annotations

import csv
import io
import re

_NEWLINE_RE = re.compile(r"\r\n|\r|\n")

# Table-cell boundary marker used when word-processor tables are flattened
CELL_MARKER = "|"


def split_lines(text: str) -> list[str]:
    """Split text into non-blank lines.

    Leading whitespace is kept because indentation carries nesting in
    indented outlines. Trailing whitespace is removed.

    Args:
        text: Raw document text.

    Returns:
        Ordered list of non-blank lines.
    """
    if not text:
        return []
    lines = [line.rstrip() for line in _NEWLINE_RE.split(text)]
    return [line for line in lines if line.strip()]


def split_records(text: str, delimiter: str = "\n") -> list[str]:
    """Split text on a declared record delimiter.

    Args:
        text: Raw text.
        delimiter: Record delimiter. "\\n" also accepts "\\r\\n" and "\\r".

    Returns:
        Trimmed, non-empty records in source order.
    """
    if not text:
        return []
    if delimiter == "\n":
        parts = _NEWLINE_RE.split(text)
    else:
        parts = text.split(delimiter)
    return [p.strip() for p in parts if p.strip()]


def split_cells(text: str, marker: str = CELL_MARKER) -> list[list[str]]:
    """Split flattened table text into rows of cells.

    Each line is a row; cells are separated by ``marker``.

    Args:
        text: Table text such as "1 | Sales | Head | John Smith".
        marker: Cell boundary marker.

    Returns:
        List of rows; rows without any non-empty cell are dropped.
    """
    rows: list[list[str]] = []
    for line in split_records(text, "\n"):
        cells = [c.strip() for c in line.split(marker)]
        # Leading/trailing markers ("| a | b |") produce empty edge cells
        if cells and not cells[0]:
            cells = cells[1:]
        if cells and not cells[-1]:
            cells = cells[:-1]
        if any(cells):
            rows.append(cells)
    return rows


def parse_delimited(text: str, delimiter: str = ",", quote: str = '"') -> list[list[str]]:
    """Parse delimited text into rows, honoring quoted fields.

    Quoted fields may contain the delimiter and line breaks. Two quote
    characters inside a quoted field stand for one literal quote. An
    unterminated quote swallows the rest of the input into the current
    field.

    Example::

        parse_delimited('name,"say ""hi"", ok",3')
        # [["name", 'say "hi", ok', "3"]]

    Args:
        text: Delimited text (CSV by default).
        delimiter: Field delimiter.
        quote: Quote character.

    Returns:
        Rows of trimmed fields. Rows whose fields are all empty are dropped.
    """
    if not text:
        return []

    # csv rejects NUL bytes; they never carry meaning in extracted text
    reader = csv.reader(
        io.StringIO(text.replace("\0", ""), newline=""),
        delimiter=delimiter,
        quotechar=quote,
        skipinitialspace=True,
    )
    rows = []
    for record in reader:
        row = [value.strip() for value in record]
        if any(row):
            rows.append(row)
    return rows


def parse_delimited_line(line: str, delimiter: str = ",") -> list[str]:
    """Parse a single delimited line into fields."""
    rows = parse_delimited(line, delimiter=delimiter)
    return rows[0] if rows else []
