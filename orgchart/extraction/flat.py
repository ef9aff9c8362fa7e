"""
Extractor for flat text: slide text runs, PDF text and plain Word text.

Flat text has no reliable structure. Each line is classified on its own
and names are paired with titles and departments found nearby:

    SALES DEPARTMENT
    Head of Sales
    John Smith
    Senior Account Manager Ann Lee
    Vacancy
    Junior Analyst
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from orgchart.classify.context import find_in_context
from orgchart.classify.entities import LineKind
from orgchart.core.models import Employee, Modality
from orgchart.extraction.base import BaseExtractor, ExtractorRegistry

logger = logging.getLogger(__name__)

_MIN_RUN_LENGTH = 3  # Shorter runs are slide noise (page numbers, glyphs)


@dataclass
class _ScanState:
    """Mutable state of one pass over a run of lines."""

    department: str = ""
    pending_title: str = ""
    pending_index: int = -1
    last: Employee | None = None
    consumed: set[int] = field(default_factory=set)


@ExtractorRegistry.register
class FlatTextExtractor(BaseExtractor):
    """
    Line-by-line extraction with context-window pairing.

    Per line, in order: numbered entry, bullet continuation, vacancy line,
    combined title and name, title, department, name, long continuation.
    A line that reads as both a title and a unit is a unit when the unit word
    sits at the edge the language puts it ("ENGINEERING DEPARTMENT"), unless
    it names a head ("Head of the Sales Department").
    """

    MODALITY: ClassVar[Modality] = Modality.FLAT_TEXT
    EXTRACTOR_NAME: ClassVar[str] = "flat_text"

    def extract(self, records: Sequence[str]) -> list[Employee]:
        """Extract employees from a single run of lines."""
        self._reset_messages()
        lines = [" ".join((r or "").split()) for r in records]
        employees: list[Employee] = []
        self._scan(lines, _ScanState(), employees)
        logger.debug("flat_text extracted %s employees from %s lines",
                     len(employees), len(lines))
        return employees

    def extract_slides(self, slides: Sequence[Sequence[str]]) -> list[Employee]:
        """Extract employees slide by slide.

        The current department is reset at every slide boundary, and titles
        are never paired across slides.
        """
        self._reset_messages()
        employees: list[Employee] = []
        for slide in slides:
            lines = [" ".join((r or "").split()) for r in slide]
            self._scan(lines, _ScanState(), employees)
        logger.debug("flat_text extracted %s employees from %s slides",
                     len(employees), len(slides))
        return employees

    def _scan(self, lines: list[str], state: _ScanState, employees: list[Employee]) -> None:
        classifier = self.classifier

        for i, line in enumerate(lines):
            if len(line) < _MIN_RUN_LENGTH or i in state.consumed:
                continue

            numbered = classifier.match_numbered(line)
            if numbered is not None:
                parts = classifier.parse_entry(numbered[1])
                if parts.title or classifier.is_person_name(parts.name):
                    self._emit(state, employees, parts.name, parts.title,
                               state.department, parts.responsibilities)
                    continue

            bullet = classifier.strip_bullet(line)
            if bullet is not None:
                if state.last is not None:
                    state.last.responsibilities.extend(
                        classifier.split_responsibilities(
                            bullet, self.config.min_responsibility_length
                        )
                    )
                continue

            email = classifier.extract_email(line)
            if email:
                line = " ".join(line.replace(email, " ").split())
                if not line:
                    if state.last is not None and state.last.email is None:
                        state.last.email = email
                    continue

            kind = classifier.classify(line)

            if kind is LineKind.VACANCY:
                title = self._vacancy_title(lines, i, line, state)
                self._emit(state, employees, self.profile.vacancy_label, title,
                           state.department, email=email)
            elif kind is LineKind.TITLE_AND_NAME:
                title, name = classifier.split_title_and_name(line)
                self._emit(state, employees, name, title,
                           self._department_for(lines, i, state), email=email)
            elif kind is LineKind.TITLE:
                state.pending_title = line
                state.pending_index = i
            elif kind is LineKind.DEPARTMENT:
                state.department = classifier.extract_department(line)
                state.pending_title = ""
            elif kind is LineKind.NAME:
                title = self._title_for(lines, i, state)
                self._emit(state, employees, line, title,
                           self._department_for(lines, i, state), email=email)
            elif state.last is not None and len(line) >= self.config.continuation_min_length:
                state.last.responsibilities.append(line.rstrip("."))

    def _emit(
        self,
        state: _ScanState,
        employees: list[Employee],
        name: str,
        title: str,
        department: str,
        responsibilities: list[str] | None = None,
        email: str | None = None,
    ) -> None:
        employee = self._make_employee(
            name=name,
            title=title,
            department=department,
            responsibilities=responsibilities,
            email=email,
        )
        employees.append(employee)
        state.last = employee
        state.pending_title = ""

    def _is_title_line(self, text: str) -> bool:
        return self.classifier.classify(text) is LineKind.TITLE

    def _title_for(self, lines: list[str], index: int, state: _ScanState) -> str:
        """Title for a bare name: the title line right before it, else the
        nearest free title line in the context window."""
        if state.pending_title and state.pending_index == index - 1:
            state.consumed.add(state.pending_index)
            return state.pending_title
        match = find_in_context(
            lines,
            index,
            self._is_title_line,
            window=self.config.title_window,
            include_pivot=False,
            exclude=state.consumed,
        )
        if match is None:
            return ""
        state.consumed.add(match.index)
        return match.text

    def _department_for(self, lines: list[str], index: int, state: _ScanState) -> str:
        if state.department:
            return state.department
        match = find_in_context(
            lines,
            index,
            lambda text: self.classifier.classify(text) is LineKind.DEPARTMENT,
            window=self.config.department_window,
            include_pivot=False,
        )
        return self.classifier.extract_department(match.text) if match else ""

    def _vacancy_title(self, lines: list[str], index: int, line: str, state: _ScanState) -> str:
        """Title of an open position: from the line itself ("Vacancy: Analyst"),
        else the pending title, else the context window."""
        for part in line.replace(":", " - ").split(" - "):
            part = part.strip(" ,;()")
            if part and not self.classifier.mentions_vacancy(part) and self.classifier.is_position_title(part):
                return part
        if state.pending_title:
            state.consumed.add(state.pending_index)
            return state.pending_title
        return self._title_for(lines, index, state)
