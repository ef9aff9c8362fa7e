"""
Table projection of an organization tree.

Rows come out depth-first, pre-order, with positional codes: "1" at the
root, then "1.1", "1.2", ... for its children. A synthetic organization
root is not emitted; its children become "1", "2", ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.hierarchy.tree import OrgNode


@dataclass
class TableRow:
    """One exported table row."""

    code: str
    level: int
    department: str
    title: str
    name: str
    responsibilities: str
    parent_name: str = ""
    is_vacancy: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "level": self.level,
            "department": self.department,
            "title": self.title,
            "name": self.name,
            "responsibilities": self.responsibilities,
            "parent_name": self.parent_name,
            "is_vacancy": self.is_vacancy,
        }


class TableProjector:
    """
    Flattens a tree into TableRows.

    Args:
        profile: Language profile supplying the root and vacancy labels.
        separator: Joiner for responsibilities.
    """

    def __init__(self, profile: LanguageProfile | None = None, separator: str = "; ") -> None:
        self.profile = profile or get_profile()
        self.separator = separator

    def is_synthetic_root(self, node: OrgNode) -> bool:
        return node.name == self.profile.root_label and not node.title and not node.is_department

    def project(self, root: OrgNode | None) -> list[TableRow]:
        """Project the tree rooted at ``root`` into rows."""
        rows: list[TableRow] = []
        if root is None:
            return rows
        if self.is_synthetic_root(root):
            for index, child in enumerate(root.children, start=1):
                self._emit(child, str(index), 1, "", rows)
        else:
            self._emit(root, "1", 1, "", rows)
        return rows

    def _emit(self, node: OrgNode, code: str, depth: int, parent_name: str, rows: list[TableRow]) -> None:
        name = node.display_name(self.profile.vacancy_label)
        rows.append(TableRow(
            code=code,
            level=depth,
            department=node.name if node.is_department else node.department,
            title=node.title,
            name=name,
            responsibilities=self.separator.join(node.responsibilities),
            parent_name=parent_name,
            is_vacancy=node.is_vacancy,
        ))
        for index, child in enumerate(node.children, start=1):
            self._emit(child, f"{code}.{index}", depth + 1, name, rows)


def project_table(
    root: OrgNode | None,
    profile: LanguageProfile | None = None,
    separator: str = "; ",
) -> list[TableRow]:
    """Project a tree with the given (or default) language profile."""
    return TableProjector(profile, separator).project(root)
