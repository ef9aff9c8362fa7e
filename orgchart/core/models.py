"""
Core data models for orgchart.

Employees are the transient records produced by the extractors and consumed
by the hierarchy builder. They carry everything the builder needs to place a
person in the tree: a seniority level and, when the source encodes it, an
explicit subordination code.
"""

from __future__ import annotations

import itertools
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Default labels (English profile). Language profiles override them.
NOT_SPECIFIED = "Not specified"
VACANCY_LABEL = "VACANCY"

DEFAULT_LEVEL = 9


class Modality(str, Enum):
    """Shape of the input handed to the extractors."""

    CODED_TABLE = "coded_table"
    UNCODED_TABLE = "uncoded_table"
    INDENTED_TEXT = "indented_text"
    FLAT_TEXT = "flat_text"


class IdSequence:
    """Counter-backed node identifiers, one sequence per build.

    Example::

        ids = IdSequence()
        ids.next("emp")  # "emp-1"
        ids.next("dept")  # "dept-2"
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next(self, prefix: str = "node") -> str:
        return f"{prefix}-{next(self._counter)}"


def generate_id(prefix: str = "node") -> str:
    """Return a process-unique identifier for ad-hoc nodes."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


@dataclass
class Employee:
    """
    A person (or an open slot) found in a source document.

    Attributes:
        name: Full personal name, or the vacancy label for open positions.
        title: Job title as found in the source.
        department: Organizational unit label.
        parent_code: Subordination path of this employee (e.g. "1.2.1").
            Its prefix names the manager; None when the source has no codes.
        level: Seniority rank, 1 is the most senior.
        responsibilities: Duty bullets attached to this person.
        is_vacancy: True when a role was found but no person holds it.
        email: E-mail address found next to the person, if any.
    """

    name: str
    title: str = ""
    department: str = ""
    parent_code: str | None = None
    level: int = DEFAULT_LEVEL
    responsibilities: list[str] = field(default_factory=list)
    is_vacancy: bool = False
    email: str | None = None
    vacancy_label: str = VACANCY_LABEL

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            self.name = NOT_SPECIFIED
        if self.level is None or self.level < 1:
            self.level = DEFAULT_LEVEL

    @property
    def display_name(self) -> str:
        """Name as shown in charts and tables."""
        if self.is_vacancy:
            return f"{self.vacancy_label}: {self.title}" if self.title else self.vacancy_label
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "title": self.title,
            "department": self.department,
            "parent_code": self.parent_code,
            "level": self.level,
            "responsibilities": list(self.responsibilities),
            "is_vacancy": self.is_vacancy,
            "email": self.email,
        }

    def __repr__(self) -> str:
        return (
            f"<Employee '{self.display_name}' title='{self.title[:30]}' "
            f"level={self.level} code={self.parent_code}>"
        )
