"""
CSV exporter.

Spreadsheet-friendly table: UTF-8 with a byte-order mark so that Excel
detects the encoding, every field quoted.
"""

from __future__ import annotations

import csv
import io
from typing import ClassVar

from orgchart.exporters.base import TABLE_COLUMNS, BaseExporter, ExporterRegistry
from orgchart.hierarchy.tree import OrgNode

BOM = "\ufeff"


@ExporterRegistry.register
class CSVExporter(BaseExporter):
    """Export the projected table as CSV, one row per node."""

    EXPORTER_NAME: ClassVar[str] = "csv"
    FILE_EXTENSION: ClassVar[str] = ".csv"

    def render(self, root: OrgNode | None) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=TABLE_COLUMNS,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
            extrasaction="ignore",
        )
        writer.writeheader()
        for row in self._rows(root):
            writer.writerow(row.to_dict())
        return BOM + buffer.getvalue()
