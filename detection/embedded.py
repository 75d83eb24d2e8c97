"""
Detectors for content embedded as child elements: images and hyperlinks.

These run before any text is extracted; a cell holding an ``<img>`` or an
``<a>`` is classified by that element alone and the rest of the cell is
ignored.
"""

from __future__ import annotations

from pathlib import Path

from detection.base import ContentDetector
from detection.constants import MAILTO
from dto.cell_content import CellContent
from dto.table import ContentType
from utils.element import Element
from utils.html import plain_text


class ImageDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        img = element.first("img")
        if img is None:
            return False
        src = (img.attr("src") or "").strip()
        content.content_type = ContentType.IMAGE
        content.file = Path(src) if src else None
        return True


class LinkDetector(ContentDetector):

    def detect(self, element: Element, content: CellContent) -> bool:
        a = element.first("a")
        if a is None:
            return False
        href = (a.attr("href") or "").strip()
        content.content = plain_text(a)
        content.link = href
        content.content_type = (
            ContentType.LINK_EMAIL if href.startswith(MAILTO) else ContentType.LINK_URL
        )
        return True
