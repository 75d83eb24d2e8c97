"""
Grid Visualizer — renders the parser's JSON output into a workbook so the
resolved grid can be checked by eye: one sheet per table, every cell at
its absolute coordinate, spans merged, cells colored by content type.

Usage:
    python visualize_grid.py <parser_output.json> [-o <output.xlsx>]
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path
from typing import Dict, Optional

import openpyxl
from openpyxl.comments import Comment
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dto.output import DocumentResult
from dto.table import ContentType, Table, Td

logger = logging.getLogger(__name__)

# ── Pastel fill / border per content type (ARGB hex, no leading #) ───
_TYPE_COLORS: Dict[ContentType, str] = {
    ContentType.TEXT: "FFFFFFFF",  # white
    ContentType.DOUBLE: "FFB3E5FC",  # light blue
    ContentType.BOOLEAN: "FFC8E6C9",  # light green
    ContentType.LINK_URL: "FFFFF9C4",  # light yellow
    ContentType.LINK_EMAIL: "FFFFCCBC",  # light orange
    ContentType.IMAGE: "FFE1BEE7",  # light purple
    ContentType.DROP_DOWN_LIST: "FFB2DFDB",  # light teal
}
_FORMULA_COLOR = "FFF8BBD0"  # light pink
_HEADER_FONT = Font(bold=True)
_LABEL_FONT = Font(bold=True, size=9, color="FF000000")
_BORDER_COLOR = "FF455A64"  # blue grey 700

# Characters Excel rejects in sheet titles
_INVALID_TITLE_RE = re.compile(r"[\[\]:*?/\\]")


# ── Helpers ──────────────────────────────────────────────────────────


def _make_border(color: str) -> Border:
    """Create a thin border with the given ARGB color on all four sides."""
    side = Side(style="thin", color=color)
    return Border(left=side, right=side, top=side, bottom=side)


def _sheet_title(table: Table, index: int) -> str:
    title = _INVALID_TITLE_RE.sub(" ", table.caption or "").strip()
    prefix = f"{index + 1} "
    return (prefix + title)[:31] if title else f"Table {index + 1}"


def _fill_for(td: Td) -> PatternFill:
    argb = _FORMULA_COLOR if td.is_formula else _TYPE_COLORS[td.content_type]
    return PatternFill(start_color=argb, end_color=argb, fill_type="solid")


def _cell_value(td: Td) -> Optional[str]:
    if td.content_type == ContentType.IMAGE:
        return f"[image] {td.file}" if td.file else "[image]"
    if td.is_formula and td.content:
        return f"={td.content}"
    return td.content


def _render_table(ws: Worksheet, table: Table) -> None:
    border = _make_border(_BORDER_COLOR)

    for tr in table.rows:
        sheet_row = tr.index + 1
        if tr.height is not None:
            ws.row_dimensions[sheet_row].height = tr.height
        if not tr.visible:
            ws.row_dimensions[sheet_row].hidden = True

        for td in tr.cells:
            cell = ws.cell(row=td.row + 1, column=td.col + 1, value=_cell_value(td))
            cell.fill = _fill_for(td)
            cell.border = border
            if td.is_header:
                cell.font = _HEADER_FONT

            details = [td.content_type.value]
            if td.is_formula:
                details.append("formula")
            if td.link is not None:
                details.append(f"link: {td.link}")
            if td.fonts:
                details.append(f"{len(td.fonts)} font run(s)")
            cell.comment = Comment(" | ".join(details), "grid-visualizer")

            if td.merge_range:
                ws.merge_cells(td.merge_range)

    for col, width in table.column_widths().items():
        ws.column_dimensions[get_column_letter(col + 1)].width = width


# ── Core logic ───────────────────────────────────────────────────────


def visualize(json_path: str, output_path: str) -> None:
    """Read the parser JSON, render each table on its own sheet and save."""
    with open(json_path, "r", encoding="utf-8") as f:
        result = DocumentResult.model_validate_json(f.read())

    wb = openpyxl.Workbook()
    default_sheet = wb.active

    if not result.tables:
        logger.warning("JSON contains no tables")

    for index, table in enumerate(result.tables):
        title = _sheet_title(table, index)
        ws = wb.create_sheet(title=title)
        _render_table(ws, table)
        logger.info(
            "  %s: %d row(s), %d cell(s)",
            title,
            len(table.rows),
            sum(len(tr.cells) for tr in table.rows),
        )

    # Remove the default empty sheet created by openpyxl
    if default_sheet is not None and len(wb.sheetnames) > 1:
        wb.remove(default_sheet)

    # ── Add a legend sheet ───────────────────────────────────────────
    ws_legend = wb.create_sheet("_Type Legend")
    ws_legend.cell(row=1, column=1, value="Content type").font = _LABEL_FONT
    ws_legend.cell(row=1, column=2, value="Color").font = _LABEL_FONT
    ws_legend.column_dimensions["A"].width = 18

    legend = [(t.value, argb) for t, argb in _TYPE_COLORS.items()]
    legend.append(("formula", _FORMULA_COLOR))
    for row_idx, (label, argb) in enumerate(legend, start=2):
        ws_legend.cell(row=row_idx, column=1, value=label)
        ws_legend.cell(row=row_idx, column=2, value="").fill = PatternFill(
            start_color=argb, end_color=argb, fill_type="solid"
        )

    wb.save(output_path)
    logger.info("Grid workbook saved to: %s", output_path)


# ── CLI ──────────────────────────────────────────────────────────────


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Render the resolved table grid from the parser JSON into a workbook.",
    )
    parser.add_argument(
        "json_file",
        help="Path to the parser output JSON",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output .xlsx path (default: <json_stem>_grid.xlsx)",
    )
    args = parser.parse_args()

    output_path = args.output or f"{Path(args.json_file).stem}_grid.xlsx"
    visualize(args.json_file, output_path)


if __name__ == "__main__":
    main()
