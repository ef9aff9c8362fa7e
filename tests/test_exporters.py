"""Tests for the CSV, TSV and JSON exporters."""

from __future__ import annotations

import json

import pytest

from orgchart.classify.profiles import RUSSIAN_PROFILE
from orgchart.exporters import (
    SCHEMA_VERSION,
    CSVExporter,
    ExporterRegistry,
    JSONExporter,
    TSVExporter,
)
from orgchart.exporters.csv_export import BOM
from orgchart.hierarchy.tree import OrgNode

# ===================================================================
# Helpers
# ===================================================================


def _tree() -> OrgNode:
    ann = OrgNode(
        id="emp-3",
        name="Ann Lee",
        title='Senior "Key" Account Manager',
        department="Sales",
        responsibilities=["Key accounts", "Renewals\nand upsell"],
        level=7,
    )
    sales = OrgNode(id="dept-2", name="Sales", title="Department", is_department=True, children=[ann])
    vacancy = OrgNode(id="emp-4", name="VACANCY", title="Head of Engineering", is_vacancy=True, level=3)
    return OrgNode(
        id="emp-1",
        name="Jane Doe",
        title="Chief Executive Officer",
        level=1,
        children=[sales, vacancy],
    )


# ===================================================================
# CSV
# ===================================================================


class TestCSVExporter:
    """Tests for the spreadsheet-friendly CSV output."""

    def test_bom_and_header(self):
        output = CSVExporter().render(_tree())
        assert output.startswith(BOM)
        header = output[len(BOM):].split("\n", 1)[0]
        assert header == '"code","department","title","name","responsibilities","level"'

    def test_rows(self):
        lines = CSVExporter().render(_tree())[len(BOM):].split("\n")
        assert lines[1] == '"1","","Chief Executive Officer","Jane Doe","","1"'
        assert lines[2] == '"1.1","Sales","Department","Sales","","2"'
        assert '"1.2","","Head of Engineering","VACANCY: Head of Engineering","","2"' in lines

    def test_quotes_doubled(self):
        output = CSVExporter().render(_tree())
        assert '"Senior ""Key"" Account Manager"' in output

    def test_empty_tree(self):
        output = CSVExporter().render(None)
        assert output == BOM + '"code","department","title","name","responsibilities","level"\n'


# ===================================================================
# TSV
# ===================================================================


class TestTSVExporter:
    """Tests for tab-separated output."""

    def test_one_line_per_node(self):
        lines = TSVExporter().render(_tree()).rstrip("\n").split("\n")
        assert len(lines) == 5
        assert lines[0] == "code\tdepartment\ttitle\tname\tresponsibilities\tlevel"

    def test_breaks_folded(self):
        lines = TSVExporter().render(_tree()).split("\n")
        ann = lines[3].split("\t")
        assert ann[0] == "1.1.1"
        assert ann[4] == "Key accounts; Renewals and upsell"
        assert ann[5] == "3"

    def test_separator(self):
        output = TSVExporter(separator=" | ").render(_tree())
        assert "Key accounts | Renewals and upsell" in output


# ===================================================================
# JSON
# ===================================================================


class TestJSONExporter:
    """Tests for the nested JSON document."""

    def test_envelope(self):
        data = json.loads(JSONExporter().render(_tree()))
        assert data["version"] == SCHEMA_VERSION
        assert data["exporter"] == "orgchart"
        assert data["language"] == "english"
        assert data["statistics"] == {"employees": 3, "vacancies": 1, "departments": 1}

    def test_nested_root(self):
        data = json.loads(JSONExporter().render(_tree()))
        root = data["root"]
        assert root["name"] == "Jane Doe"
        assert root["children"][0]["is_department"] is True
        assert root["children"][0]["children"][0]["responsibilities"] == ["Key accounts", "Renewals\nand upsell"]

    def test_non_ascii_kept(self):
        root = OrgNode(id="emp-1", name="Иванов Иван", title="Начальник отдела", level=3)
        output = JSONExporter(profile=RUSSIAN_PROFILE).render(root)
        assert "Иванов Иван" in output
        assert json.loads(output)["language"] == "russian"

    def test_empty_tree(self):
        data = json.loads(JSONExporter().render(None))
        assert data["root"] is None
        assert data["statistics"]["employees"] == 0


# ===================================================================
# Files and registry
# ===================================================================


class TestExport:
    """Tests for writing files."""

    def test_extension_forced(self, tmp_path):
        path = CSVExporter().export(_tree(), tmp_path / "structure.txt")
        assert path.suffix == ".csv"
        assert path.read_text(encoding="utf-8").startswith(BOM)

    def test_extension_kept(self, tmp_path):
        path = JSONExporter().export(_tree(), tmp_path / "structure.JSON")
        assert path.name == "structure.JSON"

    def test_registry_export(self, tmp_path):
        path = ExporterRegistry.export(_tree(), tmp_path / "out", "tsv")
        assert path.name == "out.tsv"
        assert path.exists()


class TestExporterRegistry:
    """Tests for exporter lookup."""

    def test_available(self):
        assert set(ExporterRegistry.available_exporters()) >= {"csv", "tsv", "json"}

    def test_get_exporter(self):
        assert isinstance(ExporterRegistry.get_exporter("csv"), CSVExporter)
        assert ExporterRegistry.get_exporter("docx") is None

    def test_render(self):
        assert ExporterRegistry.render(_tree(), "tsv").startswith("code\t")

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown export format: docx"):
            ExporterRegistry.render(_tree(), "docx")
