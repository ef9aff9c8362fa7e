"""
Organization tree data structure.

OrgNode is the persistent result of parsing: employees, department
groupings and, when needed, a synthetic organization root. Children are
owned exclusively by their parent and their order is meaningful.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import Any

from orgchart.core.models import VACANCY_LABEL, Employee, generate_id


@dataclass
class OrgNode:
    """
    A node in the organization tree.

    Attributes:
        id: Unique identifier within the tree.
        name: Person name, department name, or the root label.
        title: Job title (the department label for department nodes).
        department: Unit the person belongs to.
        email: Contact address, if found.
        responsibilities: Ordered duty strings.
        is_department: True for department grouping nodes.
        is_vacancy: True for open positions.
        level: Seniority level; None for synthetic and department nodes.
        code: Subordination code from the source, if any.
        children: Direct reports, in display order.
    """

    id: str
    name: str
    title: str = ""
    department: str = ""
    email: str | None = None
    responsibilities: list[str] = field(default_factory=list)
    is_department: bool = False
    is_vacancy: bool = False
    level: int | None = None
    code: str | None = None
    children: list[OrgNode] = field(default_factory=list)

    @classmethod
    def from_employee(cls, employee: Employee, node_id: str) -> OrgNode:
        """Create a leaf node for an extracted employee."""
        return cls(
            id=node_id,
            name=employee.name,
            title=employee.title,
            department=employee.department,
            email=employee.email,
            responsibilities=list(employee.responsibilities),
            is_vacancy=employee.is_vacancy,
            level=employee.level,
            code=employee.parent_code,
        )

    def add_child(self, child: OrgNode) -> None:
        """Append a direct report."""
        self.children.append(child)

    def absorb(self, other: OrgNode) -> None:
        """Take over every attribute of ``other``, children included."""
        for f in fields(self):
            setattr(self, f.name, getattr(other, f.name))

    def display_name(self, vacancy_label: str = VACANCY_LABEL) -> str:
        """Name as shown in charts: "<label>: <title>" for vacancies."""
        if self.is_vacancy:
            return f"{vacancy_label}: {self.title}" if self.title else vacancy_label
        return self.name

    def walk(self) -> Iterator[OrgNode]:
        """Yield this node and all descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def descendant_count(self) -> int:
        """Count all descendants (children, grandchildren, etc.)."""
        count = len(self.children)
        for child in self.children:
            count += child.descendant_count
        return count

    @property
    def depth_of_subtree(self) -> int:
        """Number of levels in this subtree (a leaf has 1)."""
        if not self.children:
            return 1
        return 1 + max(child.depth_of_subtree for child in self.children)

    def count_employees(self) -> int:
        """Count person and vacancy nodes (departments and synthetic roots excluded)."""
        return sum(1 for node in self.walk() if not node.is_department and node.level is not None)

    def count_vacancies(self) -> int:
        return sum(1 for node in self.walk() if node.is_vacancy)

    def count_departments(self) -> int:
        return sum(1 for node in self.walk() if node.is_department)

    def find(self, node_id: str) -> OrgNode | None:
        """Find a node by id."""
        for node in self.walk():
            if node.id == node_id:
                return node
        return None

    def to_dict(self, include_children: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary for JSON export.

        Args:
            include_children: If True, recursively include children
        """
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "department": self.department,
            "email": self.email,
            "responsibilities": list(self.responsibilities),
            "is_department": self.is_department,
            "is_vacancy": self.is_vacancy,
            "level": self.level,
            "code": self.code,
        }
        if include_children:
            result["children"] = [child.to_dict(True) for child in self.children]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrgNode:
        """Reconstruct from a dictionary produced by to_dict(); missing ids are generated."""
        node = cls(
            id=data.get("id") or generate_id("node"),
            name=data.get("name", ""),
            title=data.get("title", ""),
            department=data.get("department", ""),
            email=data.get("email"),
            responsibilities=list(data.get("responsibilities", [])),
            is_department=data.get("is_department", False),
            is_vacancy=data.get("is_vacancy", False),
            level=data.get("level"),
            code=data.get("code"),
        )
        for child_data in data.get("children", []):
            node.add_child(cls.from_dict(child_data))
        return node

    def __repr__(self) -> str:
        """String representation for debugging."""
        kind = "dept" if self.is_department else f"level={self.level}"
        return f"<OrgNode {self.id} '{self.name[:40]}' {kind} children={len(self.children)}>"
