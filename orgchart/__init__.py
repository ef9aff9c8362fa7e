"""
orgchart - heuristic organizational-structure inference.

Turns loosely structured staff lists, outlines and slide text into a
management hierarchy and an exportable table.
"""

from orgchart.core import Employee, Modality, OrgChartError, ParserConfig
from orgchart.hierarchy import OrgNode, TableRow, build_hierarchy, optimize_structure, project_table
from orgchart.pipeline import OrgStructureParser, ParseResult, parse_document

__version__ = "0.1.0"

__all__ = [
    "Employee",
    "Modality",
    "OrgChartError",
    "OrgNode",
    "OrgStructureParser",
    "ParseResult",
    "ParserConfig",
    "TableRow",
    "build_hierarchy",
    "optimize_structure",
    "parse_document",
    "project_table",
]
