"""
ContentExtractor — classifies a single cell element.

Pipeline:
  1. Embedded detectors (image, link) — a match ends classification.
  2. Read the plain text and any rich-text runs (``<span>`` markers).
  3. Blank text stops here as TEXT.
  4. Text detectors (override attributes, boolean, number) in order.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from detection import EMBEDDED_DETECTORS, TEXT_DETECTORS
from detection.base import ContentDetector
from dto.cell_content import CellContent
from dto.table import Font
from utils.element import Element
from utils.html import plain_text
from utils.style import parse_style

logger = logging.getLogger(__name__)


def _is_nested_run(span: Element, cell: Element) -> bool:
    """True if *span* sits inside another ``<span>`` of the same cell."""
    node = span.parent
    while node is not None and node.key != cell.key:
        if node.tag == "span":
            return True
        node = node.parent
    return False


class ContentExtractor:
    """
    Usage::

        extractor = ContentExtractor()
        content = extractor.extract(td_element)
    """

    def __init__(
        self,
        embedded_detectors: Optional[Sequence[ContentDetector]] = None,
        text_detectors: Optional[Sequence[ContentDetector]] = None,
    ):
        self._embedded = list(embedded_detectors if embedded_detectors is not None else EMBEDDED_DETECTORS)
        self._text = list(text_detectors if text_detectors is not None else TEXT_DETECTORS)

    # ------------------------------------------------------------------
    # Rich text
    # ------------------------------------------------------------------

    @staticmethod
    def _read_runs(element: Element) -> Optional[List[Font]]:
        """
        Build font runs from the cell's ``<span>`` markers.

        Returns ``None`` when the cell has no spans at all.  Run offsets are
        cumulative over the runs themselves; unstyled runs advance the
        offset but are not recorded.
        """
        spans = element.find_all("span")
        if not spans:
            return None

        runs = [s for s in spans if not _is_nested_run(s, element)]
        if len(runs) < len(spans):
            logger.warning(
                "Cell has %d nested <span> run(s); only the %d outermost are used",
                len(spans) - len(runs),
                len(runs),
            )

        fonts: List[Font] = []
        start = 0
        for span in runs:
            end = start + len(plain_text(span))
            style = parse_style(span)
            if style:
                fonts.append(Font(start_index=start, end_index=end, style=style))
            start = end
        return fonts

    def _read_text(self, element: Element) -> Tuple[str, Optional[List[Font]]]:
        return plain_text(element), self._read_runs(element)

    # ------------------------------------------------------------------
    # Detection dispatch
    # ------------------------------------------------------------------

    @staticmethod
    def _run_detection(
        detectors: Sequence[ContentDetector],
        element: Element,
        content: CellContent,
    ) -> bool:
        for detector in detectors:
            if detector.detect(element, content):
                return True
        return False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(self, element: Element) -> CellContent:
        content = CellContent()

        if self._run_detection(self._embedded, element, content):
            return content

        content.content, content.fonts = self._read_text(element)
        if content.is_blank:
            return content

        self._run_detection(self._text, element, content)
        return content
