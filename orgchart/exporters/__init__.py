"""Export formats for orgchart."""

from orgchart.exporters.base import TABLE_COLUMNS, BaseExporter, ExporterRegistry
from orgchart.exporters.csv_export import CSVExporter
from orgchart.exporters.json_export import SCHEMA_VERSION, JSONExporter
from orgchart.exporters.tsv_export import TSVExporter

__all__ = [
    "BaseExporter",
    "CSVExporter",
    "ExporterRegistry",
    "JSONExporter",
    "SCHEMA_VERSION",
    "TABLE_COLUMNS",
    "TSVExporter",
]
