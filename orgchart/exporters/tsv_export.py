"""
TSV exporter for pasting into spreadsheets.

Tabs and line breaks inside values are folded to single spaces, so every
node is exactly one line.
"""

from __future__ import annotations

import re
from typing import ClassVar

from orgchart.exporters.base import TABLE_COLUMNS, BaseExporter, ExporterRegistry
from orgchart.hierarchy.tree import OrgNode

_BREAKS_RE = re.compile(r"[\t\r\n]+")


@ExporterRegistry.register
class TSVExporter(BaseExporter):
    """Export the projected table as tab-separated values."""

    EXPORTER_NAME: ClassVar[str] = "tsv"
    FILE_EXTENSION: ClassVar[str] = ".tsv"

    def render(self, root: OrgNode | None) -> str:
        lines = ["\t".join(TABLE_COLUMNS)]
        for row in self._rows(root):
            values = row.to_dict()
            lines.append("\t".join(self._fold(values[column]) for column in TABLE_COLUMNS))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _fold(value: object) -> str:
        return _BREAKS_RE.sub(" ", str(value)).strip()
