"""
TableExtractor — resolves one ``<table>`` element into a ``Table``.

Pipeline per table:
  1. Table style and caption.
  2. Rows in document order (nested tables excluded).  Each row's style
     is the row-group style (memoised per thead/tbody/tfoot) with the
     row's own declarations on top.
  3. Cells of each row in document order:
       - content via ``ContentExtractor``
       - cascaded style (links without an own style get the link style)
       - absolute column via ``OccupancyTracker``; row spans claim their
         columns in the rows below
       - column widths (auto width and/or explicit ``width`` style)

Rows depend on claims made by earlier rows, so they are never processed
out of order.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from dto.config import ParseConfig
from dto.table import ContentType, Table, Td, Tr
from extractors.content import ContentExtractor
from extractors.occupancy import OccupancyTracker
from utils.element import Element
from utils.html import plain_text
from utils.style import PropertyMap, StyleCache, StyleCascade, mix_style, parse_style
from utils.units import parse_length, parse_span, string_width

logger = logging.getLogger(__name__)

CELL_TAGS = ("td", "th")

DEFAULT_LINK_STYLE: Dict[str, str] = {
    "color": "blue",
    "text-decoration": "underline",
}


class TableExtractor:
    """
    Usage::

        extractor = TableExtractor(ParseConfig(compute_auto_width=True))
        table = extractor.extract(table_element)

    *style_cache* is handed to the ``StyleCascade``; leave it ``None`` to
    get a fresh cache for every ``extract`` call.  A supplied cache should
    not outlive the document its tables come from.
    """

    def __init__(
        self,
        config: Optional[ParseConfig] = None,
        content_extractor: Optional[ContentExtractor] = None,
        style_cache: Optional[StyleCache] = None,
    ):
        self.config = config or ParseConfig()
        self._content = content_extractor or ContentExtractor()
        self._style_cache = style_cache

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    @staticmethod
    def _row_elements(table_element: Element) -> List[Element]:
        """``<tr>`` elements that belong to this table, not to a nested one."""
        rows: List[Element] = []
        for tr in table_element.find_all("tr"):
            owner = tr.closest("table")
            if owner is not None and owner.key == table_element.key:
                rows.append(tr)
        return rows

    def _extract_row(
        self,
        index: int,
        tr_element: Element,
        table_element: Element,
        table_style: PropertyMap,
        cascade: StyleCascade,
        tracker: OccupancyTracker,
    ) -> Tr:
        parent = tr_element.parent
        if parent is None or parent.key == table_element.key:
            upper_style = table_style
        else:
            upper_style = cascade.resolve_ancestor(parent, table_style)

        tr_style = cascade.resolve(tr_element, upper_style)
        cells, col_widths = self._extract_cells(index, tr_element, tr_style, tracker)

        return Tr(
            index=index,
            height=parse_length(tr_style.get("height")),
            visible=tr_style.get("visibility") != "hidden",
            cells=cells,
            col_widths=col_widths,
        )

    # ------------------------------------------------------------------
    # Cells
    # ------------------------------------------------------------------

    def _extract_cells(
        self,
        row: int,
        tr_element: Element,
        tr_style: Mapping[str, str],
        tracker: OccupancyTracker,
    ) -> Tuple[List[Td], Dict[int, int]]:
        cells: List[Td] = []
        col_widths: Dict[int, int] = {}

        # logical position, ignoring columns taken by row spans from above
        cursor = 0
        for td_element in tr_element.children():
            if td_element.tag not in CELL_TAGS:
                continue

            content = self._content.extract(td_element)

            own_style = parse_style(td_element)
            if not own_style and ContentType.is_link(content.content_type):
                own_style = DEFAULT_LINK_STYLE

            col_span = parse_span(td_element.attr("colspan"))
            row_span = parse_span(td_element.attr("rowspan"))

            col = tracker.resolve_column(row, cursor)
            if col != cursor:
                logger.debug("Row %d: cell shifted from column %d to %d by row spans", row, cursor, col)
            tracker.claim(row, col, row_span, col_span)
            cursor += col_span

            td = Td(
                row=row,
                col=col,
                col_span=col_span,
                row_span=row_span,
                content_type=content.content_type,
                content=content.content,
                link=content.link,
                file=content.file,
                fonts=content.fonts,
                style=mix_style(tr_style, own_style),
                is_header=td_element.tag == "th",
                is_formula=content.is_formula,
            )
            cells.append(td)
            self._record_width(td, col_widths)

        return cells, col_widths

    def _record_width(self, td: Td, col_widths: Dict[int, int]) -> None:
        if self.config.compute_auto_width:
            width = string_width(td.content)
            # spread over the spanned columns, rounding up
            per_col = -(-width // td.col_span)
            for col in range(td.col, td.col_bound + 1):
                if per_col > col_widths.get(col, -1):
                    col_widths[col] = per_col

        explicit = parse_length(td.style.get("width"))
        if explicit is not None and explicit >= 0:
            col_widths[td.col] = explicit

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, table_element: Element) -> Table:
        cascade = StyleCascade({} if self._style_cache is None else self._style_cache)
        tracker = OccupancyTracker()
        table_style = parse_style(table_element)

        caption_element = table_element.first("caption")
        caption = plain_text(caption_element) if caption_element is not None else None

        rows = [
            self._extract_row(index, tr_element, table_element, table_style, cascade, tracker)
            for index, tr_element in enumerate(self._row_elements(table_element))
        ]

        logger.debug(
            "Resolved table: %d row(s), %d cell(s)",
            len(rows),
            sum(len(tr.cells) for tr in rows),
        )
        return Table(caption=caption, rows=rows)
