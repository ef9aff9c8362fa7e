"""
Hierarchy builder.

Turns the flat employee list into a single-rooted tree. Two strategies:

- coded assembly, when the source carries subordination codes;
- level-bucketed assembly, when only title seniority is known.

Flat text can additionally be grouped by department first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.core.models import Employee, IdSequence
from orgchart.hierarchy.codes import ancestor_codes
from orgchart.hierarchy.tree import OrgNode

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """
    Builds organization trees from employees.

    Node ids come from one IdSequence per builder, so two builds of the same
    input produce the same ids.

    Args:
        profile: Language profile supplying the root and department labels.
        ids: Id sequence; a fresh one is created when omitted.
    """

    def __init__(self, profile: LanguageProfile | None = None, ids: IdSequence | None = None) -> None:
        self.profile = profile or get_profile()
        self.ids = ids or IdSequence()

    def build(
        self,
        employees: Sequence[Employee],
        group_by_department: bool = False,
    ) -> OrgNode | None:
        """Build a tree with the strategy the input supports.

        Coded assembly when any employee has a code; otherwise department
        grouping (if requested and any department is known), otherwise
        level-bucketed assembly.

        Returns:
            The root node, or None for empty input.
        """
        if not employees:
            return None
        if any(e.parent_code for e in employees):
            return self.build_coded(employees)
        if group_by_department and any(e.department for e in employees):
            return self.build_grouped(employees)
        return self.build_by_level(employees)

    def build_coded(self, employees: Sequence[Employee]) -> OrgNode | None:
        """Assemble by subordination codes.

        Every employee is registered first; the first holder of a code owns
        it and later holders of the same code become its children. Each
        employee then attaches to the nearest registered ancestor code
        ("1.3.2" falls back to "1" when "1.3" is absent). Employees without
        a code or without any registered ancestor become roots.
        """
        slots: dict[str, OrgNode] = {}
        entries: list[tuple[str | None, OrgNode]] = []
        for employee in employees:
            node = self._employee_node(employee)
            code = employee.parent_code
            entries.append((code, node))
            if code and code not in slots:
                slots[code] = node

        roots: list[OrgNode] = []
        for code, node in entries:
            if not code:
                roots.append(node)
                continue
            slot = slots[code]
            if slot is not node:
                slot.add_child(node)
                continue
            parent = next((slots[a] for a in ancestor_codes(code) if a in slots), None)
            if parent is None:
                roots.append(node)
            else:
                parent.add_child(node)

        logger.debug("Coded assembly: %s employees, %s roots", len(entries), len(roots))
        return self._wrap_roots(roots)

    def build_by_level(self, employees: Sequence[Employee]) -> OrgNode | None:
        """Assemble by level buckets with proportional distribution."""
        return self._wrap_roots(self._level_forest(employees))

    def build_grouped(self, employees: Sequence[Employee]) -> OrgNode | None:
        """Group by department, then assemble each group by level.

        Departments keep first-seen order; employees without a department
        are assembled after them.
        """
        groups: dict[str, tuple[str, list[Employee]]] = {}
        ungrouped: list[Employee] = []
        for employee in employees:
            label = employee.department.strip()
            if not label:
                ungrouped.append(employee)
                continue
            key = label.casefold()
            if key not in groups:
                groups[key] = (label, [])
            groups[key][1].append(employee)

        roots: list[OrgNode] = []
        for label, members in groups.values():
            department = OrgNode(
                id=self.ids.next("dept"),
                name=label,
                title=self.profile.department_label,
                department=label,
                is_department=True,
            )
            for node in self._level_forest(members):
                department.add_child(node)
            roots.append(department)
        roots.extend(self._level_forest(ungrouped))

        logger.debug("Grouped assembly: %s departments, %s ungrouped employees",
                     len(groups), len(ungrouped))
        return self._wrap_roots(roots)

    def _level_forest(self, employees: Sequence[Employee]) -> list[OrgNode]:
        """Level-bucketed forest; returns the top bucket's nodes.

        Member j of each later bucket attaches to member
        min(j * parents // children, parents - 1) of the previous bucket.
        Document order, not reporting lines, decides placement.
        """
        buckets: dict[int, list[OrgNode]] = {}
        for employee in employees:
            buckets.setdefault(employee.level, []).append(self._employee_node(employee))

        top: list[OrgNode] = []
        previous: list[OrgNode] = []
        for level in sorted(buckets):
            current = buckets[level]
            if not previous:
                top = current
            else:
                for j, node in enumerate(current):
                    index = min(j * len(previous) // len(current), len(previous) - 1)
                    previous[index].add_child(node)
            previous = current
        return top

    def _employee_node(self, employee: Employee) -> OrgNode:
        return OrgNode.from_employee(employee, self.ids.next("emp"))

    def _wrap_roots(self, roots: list[OrgNode]) -> OrgNode | None:
        """One root is the result; several share a synthetic root."""
        if not roots:
            return None
        if len(roots) == 1:
            return roots[0]
        root = OrgNode(id=self.ids.next("root"), name=self.profile.root_label)
        for node in roots:
            root.add_child(node)
        return root


def build_hierarchy(
    employees: Sequence[Employee],
    profile: LanguageProfile | None = None,
    group_by_department: bool = False,
) -> OrgNode | None:
    """Build a tree with a fresh HierarchyBuilder."""
    return HierarchyBuilder(profile).build(employees, group_by_department=group_by_department)
