"""
Extractors for spreadsheet-like input.

Rows arrive already split into cells (from CSV text, or from word-processor
tables flattened with a cell marker). Columns are located by header
aliases; when the header row is not recognized the fixed wire order is used
and every row is treated as data.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from orgchart.classify.profiles import COLUMN_ROLES, LanguageProfile
from orgchart.core.models import Employee, Modality
from orgchart.extraction.base import BaseExtractor, ExtractorRegistry
from orgchart.hierarchy.codes import code_depth, is_valid_code, normalize_code

logger = logging.getLogger(__name__)


@dataclass
class ColumnMap:
    """Column index per role.

    Attributes:
        indices: Role name -> column index, for roles that were located.
        header_found: True when the first row was recognized as a header.
    """

    indices: dict[str, int] = field(default_factory=dict)
    header_found: bool = False

    @classmethod
    def detect(
        cls,
        header: Sequence[str],
        profile: LanguageProfile,
        fallback_order: Sequence[str] = ("code", "department", "title", "name", "responsibilities"),
    ) -> ColumnMap:
        """Locate columns from a header row.

        Exact alias matches are assigned first, then substring matches, so
        "Name" is not claimed by the "department" role of a "Department name"
        column. A header cell is never assigned to two roles.

        The row counts as a header only when it locates at least two columns,
        one of them "name" or "title", and does not read as data: a leading
        subordination code or a person name in an unmatched cell sends the
        table to positional columns instead.

        Args:
            header: First row of the table.
            profile: Language profile supplying the aliases.
            fallback_order: Positional roles used when nothing is recognized.
        """
        cells = [(c or "").strip().lower() for c in header]
        indices: dict[str, int] = {}
        used: set[int] = set()

        def assign(matches) -> None:
            for role in COLUMN_ROLES:
                if role in indices:
                    continue
                aliases = profile.column_aliases.get(role, ())
                for i, cell in enumerate(cells):
                    if i not in used and cell and matches(cell, aliases):
                        indices[role] = i
                        used.add(i)
                        break

        assign(lambda cell, aliases: cell in aliases)
        assign(lambda cell, aliases: any(alias in cell for alias in aliases))

        if cls._looks_like_header(header, indices, profile):
            return cls(indices=indices, header_found=True)
        return cls(indices={role: i for i, role in enumerate(fallback_order)})

    @staticmethod
    def _looks_like_header(
        header: Sequence[str],
        indices: dict[str, int],
        profile: LanguageProfile,
    ) -> bool:
        # At least two columns, one of them the person or the post
        if len(indices) < 2 or not {"name", "title"} & indices.keys():
            return False
        # A data row: "1 | Sales Department | Head of Sales | John Smith"
        if header and is_valid_code(normalize_code(header[0])):
            return False
        matched = set(indices.values())
        return not any(
            profile.person_name_re.match((cell or "").strip())
            for i, cell in enumerate(header)
            if i not in matched
        )

    def get(self, row: Sequence[str], role: str) -> str:
        """Cell value for a role; missing columns and short rows yield ""."""
        index = self.indices.get(role)
        if index is None or index >= len(row):
            return ""
        return (row[index] or "").strip()

    def to_dict(self) -> dict[str, object]:
        return {"indices": dict(self.indices), "header_found": self.header_found}


class _TableExtractor(BaseExtractor):
    """Shared row handling for coded and uncoded tables."""

    FALLBACK_ORDER: ClassVar[tuple[str, ...]] = ()
    USES_CODES: ClassVar[bool] = False

    def extract(self, records: Sequence[Sequence[str]]) -> list[Employee]:
        """Extract one employee per data row.

        Args:
            records: Rows of cells, header first.
        """
        self._reset_messages()
        rows = [list(r) for r in records if r and any((c or "").strip() for c in r)]
        if not rows:
            return []

        columns = ColumnMap.detect(rows[0], self.profile, self.FALLBACK_ORDER)
        if columns.header_found:
            rows = rows[1:]
        else:
            self._add_warning("Header not recognized; using positional columns")

        employees = []
        for row_number, row in enumerate(rows, start=1):
            employee = self._row_to_employee(row, columns)
            if employee is None:
                logger.debug("Skipping row %s: no name, title or department", row_number)
                continue
            employees.append(employee)

        logger.debug("%s extracted %s employees from %s rows",
                     self.EXTRACTOR_NAME, len(employees), len(rows))
        return employees

    def _row_to_employee(self, row: Sequence[str], columns: ColumnMap) -> Employee | None:
        name = columns.get(row, "name")
        title = columns.get(row, "title")
        department = columns.get(row, "department")
        if not (name or title or department):
            return None

        email = columns.get(row, "email") or self.classifier.extract_email(name)
        if email and email in name:
            name = name.replace(email, " ")

        code = normalize_code(columns.get(row, "code")) if self.USES_CODES else None
        level = code_depth(code) if code else None
        if self.USES_CODES and not code:
            level = self.profile.default_level

        return self._make_employee(
            name=name,
            title=title,
            department=department,
            parent_code=code,
            level=level,
            responsibilities=columns.get(row, "responsibilities"),
            email=email or None,
        )


@ExtractorRegistry.register
class CodedTableExtractor(_TableExtractor):
    """
    Tables with an explicit subordination-code column.

    The level is the code depth ("1.2.3" -> 3); rows without a code get
    the default level and no code, and end up attached at the root.
    """

    MODALITY: ClassVar[Modality] = Modality.CODED_TABLE
    EXTRACTOR_NAME: ClassVar[str] = "coded_table"
    FALLBACK_ORDER: ClassVar[tuple[str, ...]] = (
        "code", "department", "title", "name", "responsibilities",
    )
    USES_CODES: ClassVar[bool] = True


@ExtractorRegistry.register
class UncodedTableExtractor(_TableExtractor):
    """Tables without codes; the level is scored from the title."""

    MODALITY: ClassVar[Modality] = Modality.UNCODED_TABLE
    EXTRACTOR_NAME: ClassVar[str] = "uncoded_table"
    FALLBACK_ORDER: ClassVar[tuple[str, ...]] = (
        "department", "title", "name", "responsibilities",
    )
