"""Tests for row and line splitting."""

from __future__ import annotations

from orgchart.text.splitter import (
    parse_delimited,
    parse_delimited_line,
    split_cells,
    split_lines,
    split_records,
)

# ===================================================================
# Lines and records
# ===================================================================


class TestSplitLines:
    """Tests for newline splitting."""

    def test_keeps_leading_whitespace(self):
        assert split_lines("Jane\n  John\n    Ann") == ["Jane", "  John", "    Ann"]

    def test_strips_trailing_whitespace(self):
        assert split_lines("Jane   \nJohn\t") == ["Jane", "John"]

    def test_drops_blank_lines(self):
        assert split_lines("Jane\n\n   \nJohn\n") == ["Jane", "John"]

    def test_mixed_line_endings(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_empty(self):
        assert split_lines("") == []


class TestSplitRecords:
    """Tests for delimiter-based record splitting."""

    def test_cell_marker(self):
        assert split_records("1 | Sales |  | John", "|") == ["1", "Sales", "John"]

    def test_newline_default(self):
        assert split_records(" a \r\n\r\n b ") == ["a", "b"]


class TestSplitCells:
    """Tests for flattened table rows."""

    def test_rows_of_cells(self):
        rows = split_cells("Code | Name\n1 | Jane Doe")
        assert rows == [["Code", "Name"], ["1", "Jane Doe"]]

    def test_edge_markers_removed(self):
        assert split_cells("| 1 | Jane Doe |") == [["1", "Jane Doe"]]

    def test_empty_rows_dropped(self):
        assert split_cells("| |\n1 | Jane") == [["1", "Jane"]]


# ===================================================================
# Delimited text
# ===================================================================


class TestParseDelimited:
    """Tests for the quote-aware CSV parser."""

    def test_quoted_delimiter_and_escaped_quote(self):
        rows = parse_delimited('name,"say ""hi"", ok",3')
        assert rows == [["name", 'say "hi", ok', "3"]]

    def test_embedded_newline(self):
        rows = parse_delimited('1,"line one\nline two"\n2,x')
        assert rows == [["1", "line one\nline two"], ["2", "x"]]

    def test_fields_trimmed(self):
        assert parse_delimited("  a , b  ,c ") == [["a", "b", "c"]]

    def test_all_empty_rows_dropped(self):
        assert parse_delimited("a,b\n,,\n\nc,d") == [["a", "b"], ["c", "d"]]

    def test_crlf(self):
        assert parse_delimited("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_unterminated_quote_runs_to_end(self):
        rows = parse_delimited('a,"b,c\nd')
        assert rows == [["a", "b,c\nd"]]

    def test_space_before_quoted_field(self):
        assert parse_delimited('1, "Sales, East", Jane') == [["1", "Sales, East", "Jane"]]

    def test_bare_carriage_returns(self):
        assert parse_delimited("a,b\rc,d") == [["a", "b"], ["c", "d"]]

    def test_other_delimiter(self):
        assert parse_delimited("a;b\tc", delimiter=";") == [["a", "b\tc"]]

    def test_empty(self):
        assert parse_delimited("") == []

    def test_single_line(self):
        assert parse_delimited_line('1,"Sales, East",Jane') == ["1", "Sales, East", "Jane"]
        assert parse_delimited_line("") == []
