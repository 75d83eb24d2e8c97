"""
Shared fixtures: small helpers that turn an HTML snippet into elements
or resolved tables.
"""

import pytest

from dto.config import ParseConfig
from extractors.table import TableExtractor
from utils.html import load_document


@pytest.fixture
def cell():
    """Return the first ``<td>``/``<th>`` of a one-cell HTML snippet."""

    def _cell(td_html: str):
        root = load_document(f"<table><tr>{td_html}</tr></table>")
        cells = root.first("tr").children()
        return cells[0]

    return _cell


@pytest.fixture
def resolve():
    """Resolve the first ``<table>`` of an HTML snippet."""

    def _resolve(html: str, config: ParseConfig = None):
        root = load_document(html)
        return TableExtractor(config).extract(root.first("table"))

    return _resolve
