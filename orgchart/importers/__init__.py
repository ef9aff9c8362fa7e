"""Importers for structures edited outside orgchart."""

from orgchart.importers.json_tree import JsonTreeImporter, NodeModel, import_json_tree

__all__ = ["JsonTreeImporter", "NodeModel", "import_json_tree"]
