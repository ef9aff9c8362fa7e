"""Tests for importing user-edited JSON trees."""

from __future__ import annotations

import json

import pytest

from orgchart.classify.profiles import RUSSIAN_PROFILE
from orgchart.core.errors import StructureImportError
from orgchart.exporters import JSONExporter
from orgchart.importers import JsonTreeImporter, import_json_tree

# ===================================================================
# Helpers
# ===================================================================

FRONTEND_TREE = {
    "name": "Jane Doe",
    "position": "Chief Executive Officer",
    "children": [
        {
            "name": "Sales",
            "isDepartment": True,
            "children": [
                {"name": "John Smith", "position": "Head of Sales", "responsibilities": "Revenue; Hiring"},
                {"name": "VACANCY", "position": "Account Manager", "isVacancy": True, "level": 8},
            ],
        }
    ],
}


# ===================================================================
# Successful imports
# ===================================================================


class TestJsonTreeImporter:
    """Tests for accepted documents."""

    def test_camel_case_keys(self):
        root = import_json_tree(FRONTEND_TREE)
        sales = root.children[0]
        assert root.title == "Chief Executive Officer"
        assert sales.is_department
        assert sales.children[1].is_vacancy

    def test_levels_scored_when_missing(self):
        root = import_json_tree(FRONTEND_TREE)
        sales = root.children[0]
        assert root.level == 1
        assert sales.level is None
        assert sales.children[0].level == 3
        assert sales.children[1].level == 8

    def test_responsibilities_string_split(self):
        root = import_json_tree(FRONTEND_TREE)
        assert root.children[0].children[0].responsibilities == ["Revenue", "Hiring"]

    def test_ids_assigned(self):
        root = import_json_tree(FRONTEND_TREE)
        assert [n.id for n in root.walk()] == ["emp-1", "dept-2", "emp-3", "emp-4"]

    def test_string_input(self):
        root = import_json_tree(json.dumps(FRONTEND_TREE))
        assert root.name == "Jane Doe"

    def test_exporter_envelope(self):
        original = import_json_tree(FRONTEND_TREE)
        document = JSONExporter().render(original)
        reimported = import_json_tree(document)
        assert reimported.to_dict() == original.to_dict()

    def test_synthetic_root_keeps_no_level(self):
        root = import_json_tree({"name": "Organization", "children": [{"name": "Ann Lee"}]})
        assert root.level is None
        assert root.children[0].level == 9

    def test_null_fields_and_numeric_code(self):
        root = import_json_tree({"name": "Ann Lee", "title": None, "code": 1, "unknown": "x"})
        assert root.title == ""
        assert root.code == "1"

    def test_profile_scoring(self):
        root = JsonTreeImporter(RUSSIAN_PROFILE).load({"name": "Иванов Иван", "position": "Начальник отдела"})
        assert root.level == 3


# ===================================================================
# Rejected documents
# ===================================================================


class TestJsonTreeImportErrors:
    """Tests for documents that do not describe a tree."""

    def test_invalid_json(self):
        with pytest.raises(StructureImportError, match="not valid JSON") as exc_info:
            import_json_tree('{"name": ')
        assert exc_info.value.details

    def test_not_an_object(self):
        with pytest.raises(StructureImportError) as exc_info:
            import_json_tree("[1, 2]")
        assert exc_info.value.to_dict() == {
            "error": "Structure must be a JSON object",
            "details": "Got list",
        }

    def test_children_not_a_list(self):
        with pytest.raises(StructureImportError, match="Invalid organization structure"):
            import_json_tree({"name": "Jane Doe", "children": "John Smith"})

    def test_level_below_one(self):
        with pytest.raises(StructureImportError) as exc_info:
            import_json_tree({"name": "Jane Doe", "level": 0})
        assert "level" in exc_info.value.details
