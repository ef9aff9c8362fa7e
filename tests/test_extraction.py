"""Tests for the per-modality employee extractors."""

from __future__ import annotations

import pytest

from orgchart.classify.profiles import ENGLISH_PROFILE, RUSSIAN_PROFILE
from orgchart.core.config import ParserConfig
from orgchart.core.models import Modality
from orgchart.extraction import (
    CodedTableExtractor,
    ColumnMap,
    ExtractorRegistry,
    FlatTextExtractor,
    IndentedTextExtractor,
    UncodedTableExtractor,
)
from orgchart.text.splitter import parse_delimited, split_lines

# ===================================================================
# Helpers
# ===================================================================

HEADER = ["Code", "Department", "Title", "Name", "Responsibilities"]


def _coded(rows: list[list[str]], header: list[str] | None = HEADER):
    records = ([header] if header else []) + rows
    return CodedTableExtractor(profile=ENGLISH_PROFILE).extract(records)


# ===================================================================
# Column detection
# ===================================================================


class TestColumnMap:
    """Tests for header alias matching."""

    def test_exact_before_substring(self):
        columns = ColumnMap.detect(["Department name", "Name", "Title"], ENGLISH_PROFILE)
        assert columns.indices == {"department": 0, "name": 1, "title": 2}
        assert columns.header_found

    def test_substring_aliases(self, coded_csv):
        header = parse_delimited(coded_csv)[0]
        columns = ColumnMap.detect(header, ENGLISH_PROFILE)
        assert columns.indices["code"] == 0
        assert columns.indices["name"] == 3
        assert columns.indices["responsibilities"] == 4

    def test_russian_aliases(self):
        header = ["Подчиненность", "Подразделение", "Должность", "ФИО", "Функционал"]
        columns = ColumnMap.detect(header, RUSSIAN_PROFILE)
        assert columns.indices == {
            "code": 0,
            "department": 1,
            "title": 2,
            "name": 3,
            "responsibilities": 4,
        }

    def test_positional_fallback(self):
        columns = ColumnMap.detect(["1", "Sales", "Head of Sales", "John Smith"], ENGLISH_PROFILE)
        assert not columns.header_found
        assert columns.indices["code"] == 0
        assert columns.indices["name"] == 3

    def test_data_row_with_unit_keyword_is_not_header(self):
        row = ["1", "Sales Department", "Head of Sales", "John Smith", "Pipeline"]
        columns = ColumnMap.detect(row, ENGLISH_PROFILE)
        assert not columns.header_found
        assert columns.indices["title"] == 2

    def test_single_role_is_not_header(self):
        columns = ColumnMap.detect(["Sales Department", "Account Manager", "Ann Lee"], ENGLISH_PROFILE)
        assert not columns.header_found

    def test_person_name_in_unmatched_cell(self):
        columns = ColumnMap.detect(["Job Coach", "Department", "John Smith"], ENGLISH_PROFILE)
        assert not columns.header_found

    def test_two_roles_with_title(self):
        columns = ColumnMap.detect(["Department", "Position"], ENGLISH_PROFILE)
        assert columns.header_found
        assert columns.indices == {"department": 0, "title": 1}

    def test_short_row_padded(self):
        columns = ColumnMap.detect(HEADER, ENGLISH_PROFILE)
        assert columns.get(["1.1"], "name") == ""


# ===================================================================
# Tables
# ===================================================================


class TestCodedTableExtractor:
    """Tests for tables with subordination codes."""

    def test_fixture(self, coded_csv):
        employees = CodedTableExtractor().extract(parse_delimited(coded_csv))
        assert [e.parent_code for e in employees] == ["1", "1.1", "1.1.1", "1.2", "1.2.1"]
        assert [e.level for e in employees] == [1, 2, 3, 2, 3]
        assert employees[0].responsibilities == ["Strategy", "Board relations"]
        assert employees[4].responsibilities == ["Backend services, APIs"]

    def test_missing_name_is_vacancy(self, coded_csv):
        employees = CodedTableExtractor().extract(parse_delimited(coded_csv))
        vacancy = employees[3]
        assert vacancy.is_vacancy
        assert vacancy.name == "VACANCY"
        assert vacancy.display_name == "VACANCY: Head of Engineering"

    def test_vacancy_keyword_name(self):
        employees = _coded([["1", "", "Analyst", "Vacant", ""]])
        assert employees[0].is_vacancy

    def test_dash_name_is_vacancy(self):
        employees = _coded([["1", "", "Senior Engineer", "—", ""]])
        assert employees[0].is_vacancy
        assert employees[0].title == "Senior Engineer"

    def test_row_without_code(self):
        employees = _coded([["", "Sales", "Analyst", "Ann Lee", ""]])
        assert employees[0].parent_code is None
        assert employees[0].level == ENGLISH_PROFILE.default_level

    def test_trailing_dot_code(self):
        employees = _coded([["1.2.", "", "Analyst", "Ann Lee", ""]])
        assert employees[0].parent_code == "1.2"
        assert employees[0].level == 2

    def test_short_row_degrades(self):
        employees = _coded([["1.1", "Sales"]])
        assert len(employees) == 1
        assert employees[0].name == "Not specified"
        assert not employees[0].is_vacancy

    def test_empty_row_skipped(self):
        assert _coded([["1", "", "", "", "duties only"]]) == []

    def test_unrecognized_header_uses_wire_order(self):
        extractor = CodedTableExtractor()
        employees = extractor.extract([["1", "Sales", "Head of Sales", "John Smith", "Plan"]])
        assert len(employees) == 1
        assert employees[0].name == "John Smith"
        assert extractor.warnings

    def test_headerless_rows_with_unit_keyword(self):
        extractor = CodedTableExtractor()
        employees = extractor.extract([
            ["1", "Sales Department", "Head of Sales", "John Smith", "Pipeline"],
            ["1.1", "Sales Department", "Account Manager", "Ann Lee", "Key accounts"],
        ])
        assert [(e.parent_code, e.name, e.title) for e in employees] == [
            ("1", "John Smith", "Head of Sales"),
            ("1.1", "Ann Lee", "Account Manager"),
        ]
        assert "Header not recognized; using positional columns" in extractor.warnings

    def test_email_in_name_cell(self):
        employees = _coded([["1", "", "Analyst", "Ann Lee ann.lee@example.com", ""]])
        assert employees[0].name == "Ann Lee"
        assert employees[0].email == "ann.lee@example.com"

    def test_empty_input(self):
        assert CodedTableExtractor().extract([]) == []


class TestUncodedTableExtractor:
    """Tests for tables without codes."""

    def test_levels_scored_from_titles(self, uncoded_csv):
        employees = UncodedTableExtractor().extract(parse_delimited(uncoded_csv))
        assert [(e.name, e.level) for e in employees] == [
            ("John Smith", 3),
            ("Ann Lee", 8),
            ("Jane Doe", 1),
        ]
        assert all(e.parent_code is None for e in employees)

    def test_code_column_ignored(self):
        rows = [HEADER, ["1.1", "Sales", "Head of Sales", "John Smith", ""]]
        employees = UncodedTableExtractor().extract(rows)
        assert employees[0].parent_code is None
        assert employees[0].level == 3


# ===================================================================
# Indented text
# ===================================================================


class TestIndentedTextExtractor:
    """Tests for outline extraction."""

    def test_synthesized_codes(self, outline_text):
        employees = IndentedTextExtractor().extract(split_lines(outline_text))
        assert [e.parent_code for e in employees] == ["1", "1.1", "1.1.1", "1.2"]
        assert [e.level for e in employees] == [1, 2, 3, 2]

    def test_name_title_and_duties(self, outline_text):
        employees = IndentedTextExtractor().extract(split_lines(outline_text))
        john = employees[1]
        assert (john.name, john.title) == ("John Smith", "Head of Sales")
        assert john.responsibilities == ["pipeline", "forecasting"]

    def test_bullet_attaches_to_previous(self, outline_text):
        employees = IndentedTextExtractor().extract(split_lines(outline_text))
        assert employees[-1].responsibilities == ["owns the platform roadmap"]

    def test_bulleted_entry(self):
        lines = ["Jane Doe - CEO", "  - John Smith - CTO"]
        employees = IndentedTextExtractor().extract(lines)
        assert [e.name for e in employees] == ["Jane Doe", "John Smith"]
        assert employees[1].parent_code == "1.1"

    def test_title_first_swapped(self):
        employees = IndentedTextExtractor().extract(["Head of Sales - John Smith"])
        assert (employees[0].name, employees[0].title) == ("John Smith", "Head of Sales")

    def test_sibling_roots(self):
        employees = IndentedTextExtractor().extract(["Jane Doe - CEO", "Ann Lee - CFO"])
        assert [e.parent_code for e in employees] == ["1", "2"]

    def test_tabs_and_tab_width(self):
        extractor = IndentedTextExtractor(config=ParserConfig(tab_width=4))
        assert extractor.indent_depth("\tJohn") == 1
        assert extractor.indent_depth("    John") == 1
        assert extractor.indent_depth("  John") == 0

    def test_dedent_reopens_parent(self):
        lines = ["A Boss - Director", "  B Person - Manager", "    C Person - Analyst", "  D Person - Manager"]
        employees = IndentedTextExtractor().extract(lines)
        assert employees[3].parent_code == "1.2"


# ===================================================================
# Flat text
# ===================================================================


class TestFlatTextExtractor:
    """Tests for line classification and context pairing."""

    def test_slide_fixture(self, flat_lines):
        employees = FlatTextExtractor().extract(flat_lines)
        assert [(e.display_name, e.title) for e in employees] == [
            ("John Smith", "Head of Sales"),
            ("Ann Lee", "Senior Account Manager"),
            ("VACANCY: Junior Analyst", "Junior Analyst"),
        ]
        assert all(e.department == "SALES DEPARTMENT" for e in employees)
        assert [e.level for e in employees] == [3, 7, 8]

    def test_name_before_title(self):
        lines = ["John Smith", "Head of Sales", "Jane Doe", "Senior Engineer"]
        employees = FlatTextExtractor().extract(lines)
        assert [(e.name, e.title) for e in employees] == [
            ("John Smith", "Head of Sales"),
            ("Jane Doe", "Senior Engineer"),
        ]

    def test_numbered_entries(self):
        lines = [
            "1. Jane Doe - Chief Executive Officer: strategy; hiring",
            "2. John Smith - Head of Sales",
        ]
        employees = FlatTextExtractor().extract(lines)
        assert [e.name for e in employees] == ["Jane Doe", "John Smith"]
        assert employees[0].responsibilities == ["strategy", "hiring"]

    def test_bullets_attach(self):
        lines = ["Head of Sales", "John Smith", "• Regional budgets", "• Hiring plan"]
        employees = FlatTextExtractor().extract(lines)
        assert employees[0].responsibilities == ["Regional budgets", "Hiring plan"]

    def test_email_line(self):
        lines = ["Head of Sales", "John Smith", "john.smith@example.com"]
        employees = FlatTextExtractor().extract(lines)
        assert employees[0].email == "john.smith@example.com"

    def test_long_continuation(self):
        lines = ["Head of Sales", "John Smith", "Responsible for the regional sales strategy"]
        employees = FlatTextExtractor().extract(lines)
        assert employees[0].responsibilities == ["Responsible for the regional sales strategy"]

    def test_vacancy_title_on_same_line(self):
        employees = FlatTextExtractor().extract(["Vacancy: Senior Engineer"])
        assert employees[0].is_vacancy
        assert employees[0].title == "Senior Engineer"

    def test_department_from_context(self):
        lines = ["Head of Sales", "John Smith", "Sales Department"]
        employees = FlatTextExtractor().extract(lines)
        assert employees[0].department == "Sales Department"

    def test_unit_header_with_title_keyword(self):
        lines = ["ENGINEERING DEPARTMENT", "John Smith", "Senior Engineer"]
        employees = FlatTextExtractor().extract(lines)
        assert [(e.name, e.title, e.department) for e in employees] == [
            ("John Smith", "Senior Engineer", "ENGINEERING DEPARTMENT"),
        ]

    def test_slides_reset_department(self):
        slides = [
            ["SALES DEPARTMENT", "Head of Sales", "John Smith"],
            ["Senior Engineer", "Jane Doe"],
        ]
        employees = FlatTextExtractor().extract_slides(slides)
        assert [(e.name, e.department) for e in employees] == [
            ("John Smith", "SALES DEPARTMENT"),
            ("Jane Doe", ""),
        ]

    def test_russian_slide(self):
        lines = [
            "ОТДЕЛ ПРОДАЖ",
            "Начальник отдела продаж",
            "Иванов Иван Иванович",
            "Вакансия",
            "Менеджер по продажам",
        ]
        extractor = FlatTextExtractor(config=ParserConfig(language="russian"))
        employees = extractor.extract(lines)
        assert [(e.display_name, e.level) for e in employees] == [
            ("Иванов Иван Иванович", 3),
            ("ВАКАНСИЯ: Менеджер по продажам", 8),
        ]
        assert employees[0].department == "ОТДЕЛ ПРОДАЖ"

    def test_noise_ignored(self):
        assert FlatTextExtractor().extract(["12", "", "ok"]) == []


# ===================================================================
# Registry
# ===================================================================


class TestExtractorRegistry:
    """Tests for modality lookup."""

    def test_all_modalities_registered(self):
        assert set(ExtractorRegistry.available_modalities()) == {m.value for m in Modality}

    def test_get_by_name(self):
        extractor = ExtractorRegistry.get_extractor("coded_table")
        assert isinstance(extractor, CodedTableExtractor)

    def test_get_by_enum_with_profile(self):
        extractor = ExtractorRegistry.get_extractor(Modality.FLAT_TEXT, profile=RUSSIAN_PROFILE)
        assert extractor.profile is RUSSIAN_PROFILE

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown modality"):
            ExtractorRegistry.get_extractor("hologram")
