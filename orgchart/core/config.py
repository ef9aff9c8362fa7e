"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ParserConfig:
    """Configuration for the structure-inference pipeline."""

    # Pattern tables
    language: str = "english"  # Registered language profile name

    # Indented text
    tab_width: int = 2  # Leading whitespace units per nesting level

    # Context-window search
    title_window: int = 2  # Lines searched around a bare name for its title
    department_window: int = 5  # Lines searched for an enclosing department

    # Tree assembly
    group_by_department: bool = True  # Wrap flat-text employees in department nodes
    optimize: bool = True  # Run the structure optimizer after building

    # Responsibilities
    responsibility_separator: str = "; "
    min_responsibility_length: int = 3  # Shorter fragments are dropped
    continuation_min_length: int = 20  # Unclassified lines this long attach as duties

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "tab_width": self.tab_width,
            "title_window": self.title_window,
            "department_window": self.department_window,
            "group_by_department": self.group_by_department,
            "optimize": self.optimize,
            "responsibility_separator": self.responsibility_separator,
            "min_responsibility_length": self.min_responsibility_length,
            "continuation_min_length": self.continuation_min_length,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ParserConfig:
        return cls(
            language=data.get("language", "english"),
            tab_width=max(1, int(data.get("tab_width", 2))),
            title_window=data.get("title_window", 2),
            department_window=data.get("department_window", 5),
            group_by_department=data.get("group_by_department", True),
            optimize=data.get("optimize", True),
            responsibility_separator=data.get("responsibility_separator", "; "),
            min_responsibility_length=data.get("min_responsibility_length", 3),
            continuation_min_length=data.get("continuation_min_length", 20),
        )
