"""
Tests for the document entry points, configuration and the CLIs.
"""

import json

import openpyxl
import pytest
from pydantic import ValidationError

from dto.config import ParseConfig
from dto.output import DocumentResult
from dto.table import ContentType
from parser import main, parse_html, parse_html_file, parse_tables
from utils.html import load_document
from visualize_grid import visualize

SAMPLE_HTML = """<!DOCTYPE html>
<html>
<body>
  <table style="color: red">
    <caption>Sales</caption>
    <thead><tr><th>Region</th><th>Q1</th><th>Q2</th></tr></thead>
    <tbody>
      <tr><td rowspan="2">North</td><td double>1,200</td><td formula>=B2*2</td></tr>
      <tr><td>true</td><td><a href="mailto:sales@example.com">mail</a></td></tr>
    </tbody>
  </table>
  <p>between</p>
  <table><tr><td colspan="2"><img src="chart.png"></td></tr></table>
  <table><tr><td>3.5</td><td>plain</td></tr></table>
</body>
</html>
"""


class TestParseTables:
    """Test suite for parse_tables / parse_html."""

    def test_all_tables_in_document_order(self):
        tables = parse_html(SAMPLE_HTML)
        assert len(tables) == 3
        assert tables[0].caption == "Sales"
        assert tables[1].rows[0].cells[0].content_type == ContentType.IMAGE
        assert tables[2].rows[0].cells[0].content_type == ContentType.DOUBLE

    def test_sample_table_contents(self):
        sales = parse_html(SAMPLE_HTML)[0]
        header, north, second = sales.rows
        assert all(td.is_header for td in header.cells)
        assert [td.content for td in north.cells] == ["North", "1200", "B2*2"]
        assert north.cells[2].is_formula
        assert [td.col for td in second.cells] == [1, 2]
        assert second.cells[0].content_type == ContentType.BOOLEAN
        assert second.cells[1].content_type == ContentType.LINK_EMAIL

    def test_parallel_matches_sequential(self):
        root = load_document(SAMPLE_HTML)
        sequential = parse_tables(root, ParseConfig(compute_auto_width=True))
        parallel = parse_tables(root, ParseConfig(compute_auto_width=True, max_workers=4))
        assert parallel == sequential

    def test_resolution_is_idempotent(self):
        root = load_document(SAMPLE_HTML)
        assert parse_tables(root) == parse_tables(root)

    def test_document_without_tables(self):
        assert parse_html("<p>nothing here</p>") == []

    def test_bytes_input(self):
        tables = parse_html("<table><tr><td>héllo</td></tr></table>".encode("utf-8"))
        assert tables[0].rows[0].cells[0].content == "héllo"


class TestParseHtmlFile:
    """File loading errors propagate."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "doc.html"
        path.write_text(SAMPLE_HTML, encoding="utf-8")
        assert len(parse_html_file(path)) == 3

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_html_file(tmp_path / "missing.html")


class TestParseConfig:
    """Test suite for ParseConfig."""

    def test_defaults(self):
        config = ParseConfig()
        assert config.compute_auto_width is False
        assert config.max_workers == 1

    def test_invalid_workers(self):
        with pytest.raises(ValidationError):
            ParseConfig(max_workers=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("COMPUTE_AUTO_WIDTH", "Yes")
        monkeypatch.setenv("PARSE_MAX_WORKERS", "3")
        config = ParseConfig.from_env()
        assert config.compute_auto_width is True
        assert config.max_workers == 3

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("COMPUTE_AUTO_WIDTH", raising=False)
        monkeypatch.delenv("PARSE_MAX_WORKERS", raising=False)
        assert ParseConfig.from_env() == ParseConfig()


class TestCli:
    """End-to-end runs of the command-line tools."""

    def test_writes_json(self, tmp_path):
        html_path = tmp_path / "report.html"
        html_path.write_text(SAMPLE_HTML, encoding="utf-8")
        out_path = tmp_path / "out.json"

        main([str(html_path), "-o", str(out_path), "--auto-width", "--workers", "2"])

        data = json.loads(out_path.read_text(encoding="utf-8"))
        assert data["file_name"] == "report.html"
        assert len(data["tables"]) == 3
        first_row = data["tables"][0]["rows"][0]
        assert first_row["col_widths"] == {"0": 6, "1": 2, "2": 2}
        # exclude_none drops unset optional fields
        assert "link" not in first_row["cells"][0]

        result = DocumentResult.model_validate_json(out_path.read_text(encoding="utf-8"))
        assert result.tables == parse_html(SAMPLE_HTML, ParseConfig(compute_auto_width=True))

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nope.html")])
        assert exc_info.value.code == 1

    def test_visualize_grid(self, tmp_path):
        html_path = tmp_path / "report.html"
        html_path.write_text(SAMPLE_HTML, encoding="utf-8")
        json_path = tmp_path / "report.json"
        xlsx_path = tmp_path / "report.xlsx"
        main([str(html_path), "-o", str(json_path)])

        visualize(str(json_path), str(xlsx_path))

        wb = openpyxl.load_workbook(xlsx_path)
        assert wb.sheetnames == ["1 Sales", "Table 2", "Table 3", "_Type Legend"]
        ws = wb["1 Sales"]
        assert ws["A1"].value == "Region"
        assert ws["A2"].value == "North"
        assert ws["C2"].value == "=B2*2"
        assert ws["B3"].value == "true"
        assert "A2:A3" in {str(r) for r in ws.merged_cells.ranges}
        assert "A1:B1" in {str(r) for r in wb["Table 2"].merged_cells.ranges}
