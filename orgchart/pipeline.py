"""
End-to-end structure inference.

OrgStructureParser picks the input modality, runs the matching extractor,
assembles and cleans the tree, and returns everything in a ParseResult.
Each call works on its own builder and id sequence; the parser keeps no
state between calls.

Example::

    parser = OrgStructureParser()
    result = parser.parse_text(open("staff.csv", encoding="utf-8").read())
    if result.success:
        for row in result.table():
            print(row.code, row.name, row.title)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from orgchart.classify.entities import EntityClassifier
from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.core.config import ParserConfig
from orgchart.core.errors import ParseInputError
from orgchart.core.models import Employee, Modality
from orgchart.extraction.base import ExtractorRegistry
from orgchart.extraction.flat import FlatTextExtractor
from orgchart.extraction.tabular import ColumnMap
from orgchart.hierarchy.builder import HierarchyBuilder
from orgchart.hierarchy.codes import CodeValidator, is_valid_code, normalize_code
from orgchart.hierarchy.optimizer import StructureOptimizer
from orgchart.hierarchy.projector import TableProjector, TableRow
from orgchart.hierarchy.tree import OrgNode
from orgchart.importers.json_tree import JsonTreeImporter
from orgchart.text.splitter import CELL_MARKER, parse_delimited, split_cells, split_lines

logger = logging.getLogger(__name__)

# Source-type hints from the upload layer
SOURCE_TYPES = ("spreadsheet", "presentation", "pdf", "word", "text")

_MIN_TABLE_COLUMNS = 2


@dataclass
class ParseResult:
    """
    Outcome of one parse call.

    Attributes:
        success: False when no employees were found.
        root: Root of the assembled tree, or None.
        employees: Extracted employees, in document order.
        modality: Modality the input was treated as.
        message: Human-readable summary.
        warnings: Non-fatal issues found along the way.
    """

    success: bool
    root: OrgNode | None = None
    employees: list[Employee] = field(default_factory=list)
    modality: Modality | None = None
    message: str = ""
    warnings: list[str] = field(default_factory=list)
    profile: LanguageProfile = field(default_factory=get_profile, repr=False)
    separator: str = "; "

    @property
    def employee_count(self) -> int:
        return self.root.count_employees() if self.root else 0

    @property
    def vacancy_count(self) -> int:
        return self.root.count_vacancies() if self.root else 0

    @property
    def department_count(self) -> int:
        return self.root.count_departments() if self.root else 0

    def table(self) -> list[TableRow]:
        """Project the tree into table rows."""
        return TableProjector(self.profile, self.separator).project(self.root)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "modality": self.modality.value if self.modality else None,
            "message": self.message,
            "warnings": list(self.warnings),
            "employee_count": self.employee_count,
            "vacancy_count": self.vacancy_count,
            "department_count": self.department_count,
            "root": self.root.to_dict() if self.root else None,
        }


class OrgStructureParser:
    """
    Facade over extraction, assembly, optimization and projection.

    Args:
        config: Parser configuration.
        profile: Language profile; defaults to the one named in the config.
    """

    def __init__(self, config: ParserConfig | None = None, profile: LanguageProfile | None = None) -> None:
        self.config = config or ParserConfig()
        self.profile = profile or get_profile(self.config.language)
        self.classifier = EntityClassifier(self.profile)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse_text(
        self,
        text: str,
        modality: Modality | str | None = None,
        source_type: str | None = None,
    ) -> ParseResult:
        """Parse already-extracted document text.

        Args:
            text: Document text (CSV, flattened table, outline or free text).
            modality: Force a modality instead of detecting it.
            source_type: Hint from the upload layer (see SOURCE_TYPES).

        Raises:
            ParseInputError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise ParseInputError(f"Expected document text, got {type(text).__name__}")

        chosen = Modality(modality) if modality else self.detect_modality(text, source_type)
        if chosen in (Modality.CODED_TABLE, Modality.UNCODED_TABLE):
            records: Sequence[Any] = self._table_rows(text)
        elif chosen is Modality.INDENTED_TEXT:
            records = split_lines(text)
        else:
            records = [line.strip() for line in split_lines(text)]
        return self._run(chosen, records)

    def parse_rows(
        self,
        rows: Sequence[Sequence[str]],
        modality: Modality | str | None = None,
    ) -> ParseResult:
        """Parse rows of cells (header first) from a spreadsheet reader."""
        if rows is None or isinstance(rows, str):
            raise ParseInputError("Expected a list of rows")
        table = [[str(c) if c is not None else "" for c in row] for row in rows]
        chosen = Modality(modality) if modality else self._detect_table_modality(table, force=True)
        return self._run(chosen, table)

    def parse_lines(
        self,
        lines: Sequence[str],
        modality: Modality | str | None = None,
    ) -> ParseResult:
        """Parse a list of text lines (PDF or Word paragraphs)."""
        if lines is None or isinstance(lines, str):
            raise ParseInputError("Expected a list of lines")
        return self.parse_text("\n".join(str(line) for line in lines), modality=modality)

    def parse_slides(self, slides: Sequence[Sequence[str]]) -> ParseResult:
        """Parse slide text runs; each slide is a list of runs."""
        if slides is None or isinstance(slides, str):
            raise ParseInputError("Expected a list of slides")
        extractor = FlatTextExtractor(profile=self.profile, config=self.config)
        employees = extractor.extract_slides([[str(r) for r in slide] for slide in slides])
        return self._finish(employees, Modality.FLAT_TEXT, list(extractor.warnings))

    def parse_manual(self, text: str) -> ParseResult:
        """Parse manually entered input: a JSON tree if it decodes, else text.

        Raises:
            StructureImportError: If the input is JSON but not a valid tree.
        """
        if not isinstance(text, str):
            raise ParseInputError(f"Expected text, got {type(text).__name__}")
        stripped = text.strip()
        if stripped.startswith("{"):
            try:
                data = json.loads(stripped)
            except json.JSONDecodeError:
                logger.debug("Manual input is not JSON; parsing as text")
            else:
                root = JsonTreeImporter(self.profile).load(data)
                if self.config.optimize:
                    StructureOptimizer(self.profile).optimize(root)
                return self._result(root, [], None, [])
        return self.parse_text(text)

    # ------------------------------------------------------------------
    # Modality detection
    # ------------------------------------------------------------------

    def detect_modality(self, text: str, source_type: str | None = None) -> Modality:
        """Guess how the text should be read.

        Slides and PDFs are always flat text. Otherwise a recognized header
        makes a table (coded when a code column is present), indented lines
        with name/title separators make an outline, and anything else is
        flat text.
        """
        hint = (source_type or "").lower()
        if hint and hint not in SOURCE_TYPES:
            logger.warning("Unknown source type %r; sniffing content", source_type)
        if hint in ("presentation", "pdf"):
            return Modality.FLAT_TEXT

        lines = split_lines(text)
        if not lines:
            return Modality.FLAT_TEXT

        table_modality = self._detect_table_modality(self._table_rows(text), force=hint == "spreadsheet")
        if table_modality is not None:
            return table_modality

        indented = [line for line in lines if line[0] in " \t"]
        separated = [line for line in lines if self.classifier.has_entry_separator(line)]
        if len(indented) >= 2 and len(separated) * 2 >= len(lines):
            return Modality.INDENTED_TEXT
        return Modality.FLAT_TEXT

    def _detect_table_modality(self, rows: list[list[str]], force: bool = False) -> Modality | None:
        if not rows:
            return Modality.UNCODED_TABLE if force else None
        if not force and len(rows[0]) < _MIN_TABLE_COLUMNS:
            return None
        columns = ColumnMap.detect(rows[0], self.profile)
        if columns.header_found:
            if "code" in columns.indices:
                return Modality.CODED_TABLE
            if "name" in columns.indices or "title" in columns.indices:
                return Modality.UNCODED_TABLE
        if not force:
            return None
        # Headerless spreadsheet: coded when the first column holds codes
        data = rows[1:] if columns.header_found else rows
        first_cells = [normalize_code(row[0]) if row else None for row in data]
        coded = sum(1 for c in first_cells if is_valid_code(c))
        return Modality.CODED_TABLE if data and coded * 2 > len(data) else Modality.UNCODED_TABLE

    def _table_rows(self, text: str) -> list[list[str]]:
        lines = split_lines(text)
        if not lines:
            return []
        if sum(1 for line in lines if CELL_MARKER in line) * 2 > len(lines):
            return split_cells(text)
        return parse_delimited(text, delimiter=self._sniff_delimiter(lines[0]))

    @staticmethod
    def _sniff_delimiter(header: str) -> str:
        counts = {d: header.count(d) for d in ("\t", ";", ",")}
        best = max(counts, key=lambda d: counts[d])
        return best if counts[best] else ","

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def _run(self, modality: Modality, records: Sequence[Any]) -> ParseResult:
        extractor = ExtractorRegistry.get_extractor(modality, profile=self.profile, config=self.config)
        employees = extractor.extract(records)
        return self._finish(employees, modality, list(extractor.warnings))

    def _finish(self, employees: list[Employee], modality: Modality, warnings: list[str]) -> ParseResult:
        if not employees:
            logger.info("No employees found (%s)", modality.value)
            return ParseResult(
                success=False,
                modality=modality,
                message="No employees found in the document",
                warnings=warnings,
                profile=self.profile,
                separator=self.config.responsibility_separator,
            )

        if modality is Modality.CODED_TABLE:
            for issue in CodeValidator.validate([e.parent_code for e in employees]):
                logger.warning("%s: %s", issue["type"], issue["message"])
                warnings.append(issue["message"])

        builder = HierarchyBuilder(self.profile)
        group = self.config.group_by_department and modality is Modality.FLAT_TEXT
        root = builder.build(employees, group_by_department=group)
        if self.config.optimize:
            root = StructureOptimizer(self.profile).optimize(root)
        return self._result(root, employees, modality, warnings)

    def _result(
        self,
        root: OrgNode | None,
        employees: list[Employee],
        modality: Modality | None,
        warnings: list[str],
    ) -> ParseResult:
        # Every record may have been a placeholder pruned by the optimizer
        if root is None or root.count_employees() == 0:
            logger.info("No employees left in the structure (%s)", modality.value if modality else "manual")
            return ParseResult(
                success=False,
                employees=employees,
                modality=modality,
                message="No employees found in the document",
                warnings=warnings,
                profile=self.profile,
                separator=self.config.responsibility_separator,
            )

        result = ParseResult(
            success=True,
            root=root,
            employees=employees,
            modality=modality,
            warnings=warnings,
            profile=self.profile,
            separator=self.config.responsibility_separator,
        )
        result.message = (
            f"Found {result.employee_count} employees, "
            f"{result.vacancy_count} vacancies, {result.department_count} departments"
        )
        logger.info("%s (%s)", result.message, modality.value if modality else "manual")
        return result


def parse_document(
    text: str,
    modality: Modality | str | None = None,
    source_type: str | None = None,
    config: ParserConfig | None = None,
) -> ParseResult:
    """Parse document text with a fresh OrgStructureParser."""
    return OrgStructureParser(config).parse_text(text, modality=modality, source_type=source_type)
