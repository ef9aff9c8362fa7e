"""
JSON exporter.

Exports the nested tree with summary counts, suitable for diagram
front-ends or re-import.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import ClassVar

from orgchart.exporters.base import BaseExporter, ExporterRegistry
from orgchart.hierarchy.tree import OrgNode

SCHEMA_VERSION = "1.0"


@ExporterRegistry.register
class JSONExporter(BaseExporter):
    """Export the tree as a JSON document."""

    EXPORTER_NAME: ClassVar[str] = "json"
    FILE_EXTENSION: ClassVar[str] = ".json"

    def render(self, root: OrgNode | None) -> str:
        export_data = {
            "version": SCHEMA_VERSION,
            "exported_at": datetime.now().isoformat(),
            "exporter": "orgchart",
            "language": self.profile.name,
            "statistics": {
                "employees": root.count_employees() if root else 0,
                "vacancies": root.count_vacancies() if root else 0,
                "departments": root.count_departments() if root else 0,
            },
            "root": root.to_dict() if root else None,
        }
        return json.dumps(export_data, indent=2, ensure_ascii=False)
