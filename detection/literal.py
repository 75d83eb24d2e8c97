"""
Detectors that infer a type from the cell text itself.

Last in the chain: they only run when no override attribute claimed the
cell.  Text that looks numeric but misses the pattern is left as TEXT.
"""

from __future__ import annotations

from detection.base import ContentDetector
from detection.constants import DOUBLE_PATTERN, FALSE, TRUE
from dto.cell_content import CellContent
from dto.table import ContentType
from utils.element import Element


class BooleanDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        # case-sensitive on purpose: "True" stays text
        if content.content not in (TRUE, FALSE):
            return False
        content.content_type = ContentType.BOOLEAN
        return True


class NumberDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        if content.content is None or not DOUBLE_PATTERN.fullmatch(content.content):
            return False
        content.content_type = ContentType.DOUBLE
        return True
