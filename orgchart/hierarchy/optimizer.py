"""
Structure optimizer.

Cleans an assembled tree bottom-up. At every node, after its children have
been optimized:

1. children with an empty or placeholder name are removed and their own
   children spliced in at the same position;
2. sibling departments with the same name are merged;
3. an unnamed, untitled wrapper with a single child becomes that child;
4. children are sorted: departments, then level, then name.

Running the optimizer twice gives the same tree as running it once.
"""

from __future__ import annotations

import logging

from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.hierarchy.tree import OrgNode

logger = logging.getLogger(__name__)


class StructureOptimizer:
    """
    In-place tree clean-up.

    Args:
        profile: Language profile supplying the placeholder and root
            labels and the name collation.
    """

    def __init__(self, profile: LanguageProfile | None = None) -> None:
        self.profile = profile or get_profile()

    def optimize(self, root: OrgNode | None) -> OrgNode | None:
        """Optimize the tree rooted at ``root`` and return it."""
        if root is None:
            return None
        before = root.descendant_count
        self._optimize(root)
        logger.debug("Optimized tree: %s -> %s descendants", before, root.descendant_count)
        return root

    def _optimize(self, node: OrgNode) -> None:
        for child in node.children:
            self._optimize(child)
        node.children = self.prune(node.children)
        node.children = self.merge_departments(node.children)
        self._collapse(node)
        node.children.sort(key=self.sort_key)

    def is_placeholder(self, node: OrgNode) -> bool:
        name = node.name.strip()
        return not name or name == self.profile.not_specified

    def prune(self, children: list[OrgNode]) -> list[OrgNode]:
        """Drop placeholder nodes, splicing their children in their place."""
        result: list[OrgNode] = []
        for child in children:
            if self.is_placeholder(child):
                result.extend(child.children)
            else:
                result.append(child)
        return result

    def merge_departments(self, children: list[OrgNode]) -> list[OrgNode]:
        """Merge sibling departments whose trimmed names match case-insensitively.

        The first department is kept; later ones hand over their children
        in order and disappear. Merged departments are re-optimized so that
        duplicates nested inside them merge too.
        """
        result: list[OrgNode] = []
        kept: dict[str, OrgNode] = {}
        merged: dict[str, OrgNode] = {}
        for child in children:
            if child.is_department:
                key = child.name.strip().casefold()
                existing = kept.get(key)
                if existing is not None:
                    existing.children.extend(child.children)
                    merged[key] = existing
                    continue
                kept[key] = child
            result.append(child)

        for department in merged.values():
            self._optimize(department)
        return result

    def _collapse(self, node: OrgNode) -> None:
        if node.is_department or node.title or len(node.children) != 1:
            return
        name = node.name.strip()
        if name and name != self.profile.root_label:
            return
        node.absorb(node.children[0])

    def sort_key(self, node: OrgNode) -> tuple:
        """Departments first, then ascending level (missing last), then name."""
        return (
            not node.is_department,
            node.level is None,
            node.level or 0,
            self.profile.collation_key(node.name),
        )


def optimize_structure(root: OrgNode | None, profile: LanguageProfile | None = None) -> OrgNode | None:
    """Optimize a tree with the given (or default) language profile."""
    return StructureOptimizer(profile).optimize(root)
