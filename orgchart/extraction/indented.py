"""
Extractor for indented outlines.

    Jane Doe - Chief Executive Officer
      John Smith - Head of Sales: pipeline; forecasting
        Ann Lee - Senior Sales Manager
      - approves regional budgets

Indentation depth becomes a synthesized dotted code ("1", "1.1", "1.1.1")
so that coded assembly reproduces the nesting exactly.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import ClassVar

from orgchart.core.models import Employee, Modality
from orgchart.extraction.base import BaseExtractor, ExtractorRegistry
from orgchart.hierarchy.codes import code_depth

logger = logging.getLogger(__name__)


@ExtractorRegistry.register
class IndentedTextExtractor(BaseExtractor):
    """
    Turns indented lines into coded employees.

    A bullet line ("- ", "•", "*") whose content is not itself an entry
    attaches as a responsibility of the previous entry; a bulleted entry
    ("- John Smith - CTO") is an ordinary entry with the marker removed.
    """

    MODALITY: ClassVar[Modality] = Modality.INDENTED_TEXT
    EXTRACTOR_NAME: ClassVar[str] = "indented_text"

    def indent_depth(self, line: str) -> int:
        """Leading whitespace (tabs expanded) divided by the tab width."""
        tab_width = max(1, self.config.tab_width)
        expanded = line.expandtabs(tab_width)
        indent = len(expanded) - len(expanded.lstrip())
        return indent // tab_width

    def extract(self, records: Sequence[str]) -> list[Employee]:
        """Extract employees from outline lines (leading whitespace intact)."""
        self._reset_messages()
        employees: list[Employee] = []
        stack: list[tuple[int, str]] = []  # (depth, code) of open ancestors
        child_counts: dict[str, int] = defaultdict(int)

        for line in records:
            content = line.strip()
            if not content:
                continue
            depth = self.indent_depth(line)

            bullet = self.classifier.strip_bullet(content)
            if bullet is not None:
                if employees and not self._looks_like_entry(bullet):
                    employees[-1].responsibilities.extend(
                        self.classifier.split_responsibilities(
                            bullet, self.config.min_responsibility_length
                        )
                    )
                    continue
                content = bullet
            if not content:
                continue

            while stack and stack[-1][0] >= depth:
                stack.pop()
            parent = stack[-1][1] if stack else ""
            child_counts[parent] += 1
            code = f"{parent}.{child_counts[parent]}" if parent else str(child_counts[parent])
            stack.append((depth, code))

            employees.append(self._entry_to_employee(content, code))

        logger.debug("indented_text extracted %s employees from %s lines",
                     len(employees), len(records))
        return employees

    def _looks_like_entry(self, text: str) -> bool:
        parts = self.classifier.parse_entry(text)
        return bool(parts.title) or self.classifier.is_person_name(parts.name)

    def _entry_to_employee(self, content: str, code: str) -> Employee:
        email = self.classifier.extract_email(content)
        if email:
            content = content.replace(email, " ")
        parts = self.classifier.parse_entry(content)
        return self._make_employee(
            name=parts.name,
            title=parts.title,
            parent_code=code,
            level=code_depth(code),
            responsibilities=parts.responsibilities,
            email=email,
        )
