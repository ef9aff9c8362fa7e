"""Tree assembly, clean-up and table projection."""

from orgchart.hierarchy.builder import HierarchyBuilder, build_hierarchy
from orgchart.hierarchy.codes import (
    CodeValidator,
    ancestor_codes,
    code_depth,
    is_valid_code,
    normalize_code,
    parent_code_of,
)
from orgchart.hierarchy.optimizer import StructureOptimizer, optimize_structure
from orgchart.hierarchy.projector import TableProjector, TableRow, project_table
from orgchart.hierarchy.tree import OrgNode

__all__ = [
    "CodeValidator",
    "HierarchyBuilder",
    "OrgNode",
    "StructureOptimizer",
    "TableProjector",
    "TableRow",
    "ancestor_codes",
    "build_hierarchy",
    "code_depth",
    "is_valid_code",
    "normalize_code",
    "optimize_structure",
    "parent_code_of",
    "project_table",
]
